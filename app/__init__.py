"""FAQ filter application - models, repositories and services."""
