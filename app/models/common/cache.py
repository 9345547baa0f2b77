"""Markup cache table - durable tier of the markup cache."""

MARKUP_CACHE_DDL = """
CREATE TABLE IF NOT EXISTS markup_cache (
    key VARCHAR PRIMARY KEY,
    html VARCHAR NOT NULL,
    inserted_at TIMESTAMP NOT NULL,
    expires_at TIMESTAMP NOT NULL
)
"""
