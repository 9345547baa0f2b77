"""FAQ domain models - content tables, entities and selection."""

from app.models.faq.entities import Category, FaqEntry
from app.models.faq.selection import ALL, INT_MAX, Selection, absint, intval
from app.models.faq.tables import (
    FAQ_CATEGORY_DDL,
    FAQ_CATEGORY_LINK_DDL,
    FAQ_DDL,
    FAQ_INDEXES,
)

__all__ = [
    "FAQ_DDL",
    "FAQ_CATEGORY_DDL",
    "FAQ_CATEGORY_LINK_DDL",
    "FAQ_INDEXES",
    "FaqEntry",
    "Category",
    "Selection",
    "ALL",
    "INT_MAX",
    "absint",
    "intval",
]
