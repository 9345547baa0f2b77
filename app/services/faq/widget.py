"""FAQ filter widget - first render of the whole element."""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass

from jinja2 import Environment
from loguru import logger

from app.models.common import BaseEntity
from app.models.faq import ALL, Category, Selection, intval
from app.repositories.faq import FaqRepository
from app.services.faq.assets import AssetPlan
from app.services.faq.cache import MarkupCache
from app.services.faq.schema import SchemaBuilder
from app.services.faq.templates import get_environment
from settings import SCHEMA_MAX

ALL_LABEL = "All"


@dataclass(frozen=True)
class CategoryOption(BaseEntity):
    """One entry of the category dropdown."""

    value: str
    label: str


@dataclass(frozen=True)
class RenderedWidget:
    """Output of one render step; ``rendered`` feeds the asset decision."""

    instance_id: str
    html: str
    rendered: bool = True


def new_instance_id() -> str:
    return f"faq-{uuid.uuid4()}"


class WidgetRenderer:
    """Renders the selector, status region, results and schema block."""

    def __init__(
        self,
        repo: FaqRepository,
        cache: MarkupCache,
        schema: SchemaBuilder,
        env: Environment | None = None,
    ):
        self._repo = repo
        self._cache = cache
        self._schema = schema
        self._env = env or get_environment()

    def category_choices(self, categories: Iterable[Category] | None = None) -> list[CategoryOption]:
        """``All`` followed by every category that has entries."""
        if categories is None:
            categories = self._repo.get_categories()
        options = [CategoryOption(value=ALL, label=ALL_LABEL)]
        options.extend(CategoryOption(value=str(c.id), label=c.name) for c in categories)
        return options

    def render(
        self,
        locale: str,
        heading: str = "",
        default_term: str = ALL,
        schema_max: str | int = SCHEMA_MAX,
        instance_id: str | None = None,
    ) -> RenderedWidget:
        instance_id = instance_id or new_instance_id()
        categories = self._repo.get_categories()

        selection = Selection.parse(default_term).resolve(categories)
        if selection.key != str(default_term).strip():
            logger.debug("Default term {!r} not available, using All", default_term)

        title = ALL_LABEL
        for category in categories:
            if category.id == selection.category_id:
                title = category.name

        document = self._schema.build(max(1, intval(schema_max)))
        schema_json = SchemaBuilder.to_json(document) if document else ""

        html = self._env.get_template("faq/widget.html").render(
            instance_id=instance_id,
            heading=heading,
            selection=selection,
            options=self.category_choices(categories),
            title=title,
            results=self._cache.markup_for(selection, locale, instance_id),
            schema_json=schema_json,
        )
        logger.info("Rendered FAQ widget {} (selection={})", instance_id, selection)
        return RenderedWidget(instance_id=instance_id, html=html)

    def compose_page(
        self,
        widgets: Iterable[RenderedWidget],
        assets: AssetPlan,
        lang: str = "en",
        title: str = "FAQ",
    ) -> str:
        """Full HTML page around already rendered widgets."""
        return self._env.get_template("faq/page.html").render(
            widgets=list(widgets),
            assets=assets,
            lang=lang,
            title=title,
        )
