"""FAQPage structured data (JSON-LD) over the whole FAQ set."""

import json
import re
from typing import Any

from bs4 import BeautifulSoup
from loguru import logger

from app.models.faq import Selection
from app.repositories.faq import FaqRepository

_WHITESPACE = re.compile(r"\s+")


def plain_text(html: str) -> str:
    """Strip tags (and script/style bodies), collapse whitespace."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    return _WHITESPACE.sub(" ", soup.get_text()).strip()


class SchemaBuilder:
    """Builds the FAQPage document embedded once per page render.

    Always reads the unfiltered entry set, so the document never depends on
    the category a visitor has selected.
    """

    def __init__(self, repo: FaqRepository):
        self._repo = repo

    def build(self, max_entries: int) -> dict[str, Any] | None:
        """FAQPage document, or None when no entry has both question and answer text."""
        limit = max(1, int(max_entries))
        main_entity = []

        for entry in self._repo.get_entries(Selection.all(), limit=limit):
            question = _WHITESPACE.sub(" ", entry.question).strip()
            answer = plain_text(entry.answer_html)
            if not question or not answer:
                continue
            main_entity.append(
                {
                    "@type": "Question",
                    "name": question,
                    "acceptedAnswer": {"@type": "Answer", "text": answer},
                }
            )

        if not main_entity:
            logger.debug("No FAQ entries for schema")
            return None

        return {
            "@context": "https://schema.org",
            "@type": "FAQPage",
            "mainEntity": main_entity,
        }

    @staticmethod
    def to_json(document: dict[str, Any]) -> str:
        """Pretty JSON safe to place inside a <script> element."""
        return json.dumps(document, ensure_ascii=False, indent=4).replace("</", "<\\/")
