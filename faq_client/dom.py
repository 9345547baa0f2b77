"""Widget document model - the rendered markup a controller operates on."""

import json
import re
from collections.abc import Set

from bs4 import BeautifulSoup, Tag

ROOT_CLASS = "faq-filter"
TOGGLE_SELECTOR = "button.faq-accordion__toggle"
ALL_LABEL = "All"

_CONFIG = re.compile(r"window\.FAQ_FILTER\s*=\s*(\{.*?\})\s*;", re.S)


def toggle_ids(container: Tag) -> list[str]:
    """Ids of every toggle button inside ``container``, in document order."""
    return [btn["id"] for btn in container.select(TOGGLE_SELECTOR) if btn.get("id")]


def unbound_toggles(container: Tag, bound: Set[str]) -> list[str]:
    """Toggle ids in ``container`` that are not in ``bound`` yet."""
    return [toggle_id for toggle_id in toggle_ids(container) if toggle_id not in bound]


def read_config(page_html: str) -> dict | None:
    """The ``window.FAQ_FILTER`` config a page carries, if any."""
    match = _CONFIG.search(page_html)
    if not match:
        return None
    config = json.loads(match.group(1))
    if not config.get("ajaxUrl"):
        return None
    return config


class WidgetDom:
    """One widget root inside a parsed page."""

    def __init__(self, root: Tag):
        self.root = root

    @classmethod
    def from_html(cls, html: str) -> "WidgetDom":
        widgets = cls.find_all(BeautifulSoup(html, "html.parser"))
        if not widgets:
            raise ValueError("No FAQ filter widget in markup")
        return widgets[0]

    @classmethod
    def find_all(cls, document: BeautifulSoup) -> list["WidgetDom"]:
        return [cls(root) for root in document.find_all("div", class_=ROOT_CLASS)]

    def _find(self, class_: str) -> Tag | None:
        return self.root.find(class_=class_)

    @property
    def instance_id(self) -> str | None:
        return self.root.get("id")

    @property
    def select(self) -> Tag | None:
        return self._find("faq-filter__select")

    @property
    def is_complete(self) -> bool:
        """Selector, title and results region are all present."""
        return (
            self.select is not None
            and self._find("faq-filter__title") is not None
            and self.results is not None
        )

    @property
    def options(self) -> dict[str, str]:
        """Selector options, value to label."""
        if self.select is None:
            return {}
        return {o.get("value", ""): o.get_text(strip=True) for o in self.select.find_all("option")}

    def label_for(self, value: str) -> str:
        return self.options.get(value) or ALL_LABEL

    def choose(self, value: str) -> None:
        """Mark ``value`` as the selected option."""
        for option in self.select.find_all("option"):
            if option.get("value") == value:
                option["selected"] = ""
            elif option.has_attr("selected"):
                del option["selected"]

    @property
    def title(self) -> str:
        return self._find("faq-filter__title").get_text(strip=True)

    @title.setter
    def title(self, text: str) -> None:
        self._find("faq-filter__title").string = text

    @property
    def status(self) -> str:
        el = self._find("faq-filter__status")
        return el.get_text() if el is not None else ""

    @status.setter
    def status(self, text: str) -> None:
        el = self._find("faq-filter__status")
        if el is not None:
            el.string = text

    @property
    def results(self) -> Tag | None:
        return self.root.find(attrs={"data-results": True})

    @property
    def results_html(self) -> str:
        return self.results.decode_contents()

    @results_html.setter
    def results_html(self, html: str) -> None:
        self.results.clear()
        self.results.append(BeautifulSoup(html, "html.parser"))

    def _toggle_and_panel(self, toggle_id: str) -> tuple[Tag | None, Tag | None]:
        btn = self.results.find("button", id=toggle_id)
        if btn is None or not btn.get("aria-controls"):
            return btn, None
        return btn, self.root.find(id=btn["aria-controls"])

    def is_expanded(self, toggle_id: str) -> bool:
        btn, _ = self._toggle_and_panel(toggle_id)
        return btn is not None and btn.get("aria-expanded") == "true"

    def is_panel_hidden(self, toggle_id: str) -> bool:
        _, panel = self._toggle_and_panel(toggle_id)
        return panel is None or panel.has_attr("hidden")

    def toggle(self, toggle_id: str) -> bool:
        """Flip one item between collapsed and expanded; returns the new state."""
        btn, panel = self._toggle_and_panel(toggle_id)
        if btn is None or panel is None:
            return False

        if btn.get("aria-expanded") == "true":
            btn["aria-expanded"] = "false"
            panel["hidden"] = ""
            return False

        btn["aria-expanded"] = "true"
        del panel["hidden"]
        return True
