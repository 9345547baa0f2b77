"""HTTP surface for the FAQ filter."""

from web.http.app import create_app

__all__ = ["create_app"]
