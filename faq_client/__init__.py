"""FAQ filter client package."""

from faq_client.base import BaseClient
from faq_client.controller import (
    ClientConfig,
    ClientController,
    ResponseCache,
    WidgetState,
    init_all,
)
from faq_client.dom import WidgetDom, read_config, toggle_ids, unbound_toggles
from faq_client.errors import FilterFetchError, MalformedResponseError, NetworkError
from faq_client.filter import FilterClient, extract_html

__all__ = [
    # Base
    "BaseClient",
    # Clients
    "FilterClient",
    "extract_html",
    # Controller
    "ClientController",
    "ClientConfig",
    "ResponseCache",
    "WidgetState",
    "init_all",
    # DOM
    "WidgetDom",
    "read_config",
    "toggle_ids",
    "unbound_toggles",
    # Errors
    "FilterFetchError",
    "MalformedResponseError",
    "NetworkError",
]
