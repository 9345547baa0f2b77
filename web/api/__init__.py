"""API views and schemas."""
