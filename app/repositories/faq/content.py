"""FAQ content repository - published entries and their categories."""

from loguru import logger

from app.models.faq import Category, FaqEntry, Selection
from app.repositories.base import BaseRepository

_ENTRY_QUERY = """
SELECT f.id, f.question, f.answer_html, f.menu_order,
       list(l.category_id) FILTER (WHERE l.category_id IS NOT NULL)
FROM faq f
LEFT JOIN faq_category_link l ON l.faq_id = f.id
WHERE f.status = 'publish' {where}
GROUP BY f.id, f.question, f.answer_html, f.menu_order
ORDER BY f.menu_order ASC, f.id ASC
{limit}
"""

# DuckDB rejects LIMIT values from 2**62 upwards
MAX_LIMIT = 2**31 - 1


def _row_to_entry(row: tuple) -> FaqEntry:
    return FaqEntry(
        id=row[0],
        question=row[1],
        answer_html=row[2],
        order=row[3],
        category_ids=frozenset(row[4] or ()),
    )


class FaqRepository(BaseRepository):
    """Repository for FAQ entries and categories."""

    def get_entries(self, selection: Selection, limit: int | None = None) -> list[FaqEntry]:
        """Published entries matching ``selection``, by order then id."""
        if not selection.is_queryable:
            return []

        where, params = "", []
        if not selection.is_all:
            where = "AND f.id IN (SELECT faq_id FROM faq_category_link WHERE category_id = ?)"
            params.append(selection.category_id)

        limit_sql = f"LIMIT {min(int(limit), MAX_LIMIT)}" if limit is not None else ""

        rows = self.fetchall(_ENTRY_QUERY.format(where=where, limit=limit_sql), params)
        logger.debug("get_entries({}): {} entries", selection, len(rows))
        return [_row_to_entry(r) for r in rows]

    def get_categories(self) -> list[Category]:
        """Categories holding at least one published entry, by name."""
        rows = self.fetchall(
            """
            SELECT DISTINCT c.id, c.name FROM faq_category c
            JOIN faq_category_link l ON l.category_id = c.id
            JOIN faq f ON f.id = l.faq_id
            WHERE f.status = 'publish'
            ORDER BY c.name, c.id
            """
        )
        return [Category(id=r[0], name=r[1]) for r in rows]

    def save_category(self, category: Category) -> None:
        self._ensure_writable("save category")
        self.execute(
            "INSERT OR REPLACE INTO faq_category (id, name) VALUES (?, ?)",
            [category.id, category.name],
        )

    def save_entry(self, entry: FaqEntry, status: str = "publish") -> None:
        """Insert or replace an entry together with its category links."""
        self._ensure_writable("save entry")
        self.execute(
            """
            INSERT OR REPLACE INTO faq (id, question, answer_html, menu_order, status)
            VALUES (?, ?, ?, ?, ?)
            """,
            [entry.id, entry.question, entry.answer_html, entry.order, status],
        )
        self.execute("DELETE FROM faq_category_link WHERE faq_id = ?", [entry.id])
        for category_id in sorted(entry.category_ids):
            self.execute(
                "INSERT INTO faq_category_link (faq_id, category_id) VALUES (?, ?)",
                [entry.id, category_id],
            )
        logger.debug("Saved FAQ {} ({})", entry.id, status)
