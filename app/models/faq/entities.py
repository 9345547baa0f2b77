"""FAQ domain entities - immutable snapshots of stored content."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity


@dataclass(frozen=True)
class FaqEntry(BaseEntity):
    """One published FAQ item."""

    id: int
    question: str
    answer_html: str
    order: int = 0
    category_ids: frozenset[int] = field(default_factory=frozenset)

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.order, self.id)


@dataclass(frozen=True)
class Category(BaseEntity):
    """FAQ category (taxonomy term)."""

    id: int
    name: str
