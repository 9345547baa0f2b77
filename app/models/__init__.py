"""Models package - DDL and entities for all domains."""

from app.models.common import MARKUP_CACHE_DDL, BaseEntity
from app.models.faq import (
    ALL,
    FAQ_CATEGORY_DDL,
    FAQ_CATEGORY_LINK_DDL,
    FAQ_DDL,
    FAQ_INDEXES,
    Category,
    FaqEntry,
    Selection,
)

ALL_DDL = [
    # FAQ content
    FAQ_DDL,
    FAQ_CATEGORY_DDL,
    FAQ_CATEGORY_LINK_DDL,
    *FAQ_INDEXES,
    # Common
    MARKUP_CACHE_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "MARKUP_CACHE_DDL",
    # FAQ
    "FAQ_DDL",
    "FAQ_CATEGORY_DDL",
    "FAQ_CATEGORY_LINK_DDL",
    "FAQ_INDEXES",
    "FaqEntry",
    "Category",
    "Selection",
    "ALL",
    # All DDL
    "ALL_DDL",
]
