"""FAQ filter API."""

from web.api.faq.views import get_categories, handle_filter_request, render_page, resolve_locale

__all__ = [
    "handle_filter_request",
    "get_categories",
    "render_page",
    "resolve_locale",
]
