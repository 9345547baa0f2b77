"""Accordion markup for a list of FAQ entries."""

from collections.abc import Iterable

from jinja2 import Environment
from loguru import logger

from app.models.faq import FaqEntry, Selection
from app.repositories.faq import FaqRepository
from app.services.faq.templates import get_environment

# Stands in for the widget instance id inside cached, instance-neutral markup.
INSTANCE_PLACEHOLDER = "__FAQ_INSTANCE__"

EMPTY_MESSAGE = "No FAQs found."


def bind_instance(html: str, instance_id: str) -> str:
    """Give instance-neutral markup its concrete instance id."""
    return html.replace(INSTANCE_PLACEHOLDER, instance_id)


class MarkupBuilder:
    """Renders FAQ entries as an accessible accordion."""

    def __init__(self, repo: FaqRepository, env: Environment | None = None):
        self._repo = repo
        self._env = env or get_environment()

    def build(self, selection: Selection, instance_id: str = INSTANCE_PLACEHOLDER) -> str:
        """Markup for all published entries matching ``selection``."""
        entries = self._repo.get_entries(selection)
        logger.info("Building markup for selection={} ({} entries)", selection, len(entries))
        return self.render(entries, instance_id)

    def render(self, entries: Iterable[FaqEntry], instance_id: str = INSTANCE_PLACEHOLDER) -> str:
        ordered = sorted(entries, key=lambda e: e.sort_key)
        if not ordered:
            return self.empty()
        return self._env.get_template("faq/accordion.html").render(
            entries=ordered,
            instance_id=instance_id,
        )

    def empty(self) -> str:
        """The single placeholder element shown instead of an empty list."""
        return self._env.get_template("faq/empty.html").render(message=EMPTY_MESSAGE)
