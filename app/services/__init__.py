"""Services package - service class exports."""

from app.services.faq import MarkupBuilder, MarkupCache, SchemaBuilder, WidgetRenderer

__all__ = [
    "MarkupBuilder",
    "MarkupCache",
    "SchemaBuilder",
    "WidgetRenderer",
]
