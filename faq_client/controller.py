"""Client controller - category switching, response cache and accordion state.

Each widget instance moves IDLE -> LOADING -> IDLE on success, or
IDLE -> LOADING -> ERROR on failure. ERROR needs no reset: the next selection
change starts a new fetch as usual. A failure never touches the results that
are already displayed.
"""

from dataclasses import dataclass
from enum import StrEnum

from bs4 import BeautifulSoup
from loguru import logger

from faq_client.dom import WidgetDom, read_config, unbound_toggles
from faq_client.errors import FilterFetchError
from faq_client.filter import FilterClient

LOADING_MESSAGE = "Loading…"
FAILURE_MESSAGE = "Could not load FAQs. Please try again."
UNKNOWN_INSTANCE = "faq-unknown"


class WidgetState(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


@dataclass(frozen=True)
class ClientConfig:
    """What the page hands to the script: endpoint and request token."""

    ajax_url: str
    nonce: str


class ResponseCache:
    """Markup fetched during one page view, keyed by instance and term."""

    def __init__(self):
        self._store: dict[str, str] = {}

    @staticmethod
    def _key(instance_id: str, term: str) -> str:
        return f"{instance_id}::{term}"

    def get(self, instance_id: str, term: str) -> str | None:
        return self._store.get(self._key(instance_id, term))

    def set(self, instance_id: str, term: str, html: str) -> None:
        self._store[self._key(instance_id, term)] = html

    def __len__(self) -> int:
        return len(self._store)


class ClientController:
    """Drives one widget instance."""

    def __init__(
        self,
        dom: WidgetDom,
        client: FilterClient,
        config: ClientConfig,
        cache: ResponseCache | None = None,
    ):
        self.dom = dom
        self.state = WidgetState.IDLE
        self.bound: set[str] = set()
        self._client = client
        self._config = config
        self._cache = cache if cache is not None else ResponseCache()
        self.bind_accordion()

    @property
    def instance_id(self) -> str:
        return self.dom.instance_id or UNKNOWN_INSTANCE

    def bind_accordion(self) -> list[str]:
        """Register toggles not bound yet; returns the newly bound ids."""
        fresh = unbound_toggles(self.dom.results, self.bound)
        self.bound.update(fresh)
        return fresh

    def toggle(self, toggle_id: str) -> bool:
        """Activate a bound toggle; returns whether its item is now expanded."""
        if toggle_id not in self.bound:
            return self.dom.is_expanded(toggle_id)
        return self.dom.toggle(toggle_id)

    def _swap(self, html: str) -> None:
        self.dom.results_html = html
        self.bind_accordion()

    async def select(self, term: str) -> WidgetState:
        """Handle a category change on the selector."""
        self.dom.choose(term)
        self.dom.title = self.dom.label_for(term)

        cached = self._cache.get(self.instance_id, term)
        if cached is not None:
            self._swap(cached)
            self.dom.status = ""
            self.state = WidgetState.IDLE
            return self.state

        self.state = WidgetState.LOADING
        self.dom.status = LOADING_MESSAGE
        try:
            html = await self._client.get_faqs(
                self._config.nonce,
                term,
                self.instance_id,
                ajax_url=self._config.ajax_url,
            )
        except FilterFetchError as e:
            logger.warning("FAQ fetch failed for {} (term={}): {}", self.instance_id, term, e)
            self.dom.status = FAILURE_MESSAGE
            self.state = WidgetState.ERROR
            return self.state

        self._cache.set(self.instance_id, term, html)
        self._swap(html)
        self.dom.status = ""
        self.state = WidgetState.IDLE
        return self.state


def init_all(page_html: str, client: FilterClient) -> tuple[BeautifulSoup, list[ClientController]]:
    """Controllers for every widget on a page, sharing one response cache.

    Returns no controllers when the page carries no client config.
    """
    document = BeautifulSoup(page_html, "html.parser")
    raw = read_config(page_html)
    if raw is None:
        logger.debug("No FAQ filter config on page")
        return document, []

    config = ClientConfig(ajax_url=raw["ajaxUrl"], nonce=raw.get("nonce", ""))
    cache = ResponseCache()
    controllers = [
        ClientController(dom, client, config, cache)
        for dom in WidgetDom.find_all(document)
        if dom.is_complete
    ]
    logger.info("Initialized {} FAQ filter widget(s)", len(controllers))
    return document, controllers
