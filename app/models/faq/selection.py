"""Category selection - the filter value a visitor has chosen."""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from app.models.faq.entities import Category

ALL = "all"
INT_MAX = 2**63 - 1
INT_MIN = -INT_MAX - 1

_LEADING_INT = re.compile(r"\s*([-+]?)(\d+)")


def intval(raw: str | int | None) -> int:
    """Leading signed integer of ``raw``, 0 when there is none.

    Values outside the 64-bit range saturate, however many digits they carry.
    """
    if isinstance(raw, int):
        return max(INT_MIN, min(raw, INT_MAX))
    match = _LEADING_INT.match(raw or "")
    if not match:
        return 0
    sign, digits = match.group(1), match.group(2).lstrip("0") or "0"
    if len(digits) > len(str(INT_MAX)):
        return INT_MIN if sign == "-" else INT_MAX
    value = int(digits)
    return max(INT_MIN, -value) if sign == "-" else min(value, INT_MAX)


def absint(raw: str | int | None) -> int:
    """Non-negative :func:`intval`."""
    return min(abs(intval(raw)), INT_MAX)


@dataclass(frozen=True)
class Selection:
    """Either ``All`` (category_id is None) or one category id.

    Category id 0 is what unparseable input turns into; no stored category
    can have it, so it always renders the empty placeholder.
    """

    category_id: int | None = None

    @classmethod
    def all(cls) -> "Selection":
        return cls(None)

    @classmethod
    def category(cls, category_id: int) -> "Selection":
        return cls(absint(category_id))

    @classmethod
    def parse(cls, raw: str | int | None) -> "Selection":
        """``"all"`` maps to All, anything else to its absint category id."""
        if raw is None or (isinstance(raw, str) and raw.strip() == ALL):
            return cls.all()
        return cls.category(absint(raw))

    @property
    def is_all(self) -> bool:
        return self.category_id is None

    @property
    def is_queryable(self) -> bool:
        """False for ids that cannot exist in storage."""
        return self.is_all or self.category_id > 0

    @property
    def key(self) -> str:
        return ALL if self.is_all else str(self.category_id)

    def resolve(self, categories: Iterable[Category]) -> "Selection":
        """Collapse to All unless the category is one of ``categories``."""
        if self.is_all:
            return self
        if any(c.id == self.category_id for c in categories):
            return self
        return self.all()

    def __str__(self) -> str:
        return self.key
