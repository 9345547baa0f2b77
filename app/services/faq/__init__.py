"""FAQ services - markup, schema, cache and widget rendering."""

from app.services.faq.assets import Asset, AssetPlan, plan_assets
from app.services.faq.cache import CacheTier, MarkupCache, cache_key
from app.services.faq.markup import EMPTY_MESSAGE, INSTANCE_PLACEHOLDER, MarkupBuilder, bind_instance
from app.services.faq.schema import SchemaBuilder, plain_text
from app.services.faq.widget import CategoryOption, RenderedWidget, WidgetRenderer

__all__ = [
    # Markup
    "MarkupBuilder",
    "bind_instance",
    "EMPTY_MESSAGE",
    "INSTANCE_PLACEHOLDER",
    # Schema
    "SchemaBuilder",
    "plain_text",
    # Cache
    "MarkupCache",
    "CacheTier",
    "cache_key",
    # Widget
    "WidgetRenderer",
    "RenderedWidget",
    "CategoryOption",
    # Assets
    "Asset",
    "AssetPlan",
    "plan_assets",
]
