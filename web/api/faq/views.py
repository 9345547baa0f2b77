"""FAQ API views - thin layer over services."""

from app.container import container
from app.models.faq import ALL, Selection
from app.services.faq import plan_assets
from settings import AJAX_ACTION, DEFAULT_LOCALE, SCHEMA_MAX, SUPPORTED_LOCALES
from web.api.errors import AuthorizationError, validate_action

from .schemas import CategoriesResponse, CategoryItem, FilterData, FilterRequest, FilterResponse


def resolve_locale(accept_language: str | None) -> str:
    """First supported locale named in an Accept-Language header."""
    for part in (accept_language or "").split(","):
        tag = part.split(";")[0].strip().replace("-", "_")
        if not tag:
            continue
        for locale in SUPPORTED_LOCALES:
            if locale.lower() == tag.lower():
                return locale
        for locale in SUPPORTED_LOCALES:
            if locale.lower().split("_")[0] == tag.lower():
                return locale
    return DEFAULT_LOCALE


def handle_filter_request(request: FilterRequest, locale: str = DEFAULT_LOCALE) -> FilterResponse:
    """Markup for the posted category; raises AuthorizationError on a bad token."""
    validate_action(request.action)
    if not container.tokens.verify(request.nonce, AJAX_ACTION):
        raise AuthorizationError()

    selection = Selection.parse(request.term)
    html = container.markup_cache.markup_for(selection, locale, request.instance_id)

    return FilterResponse(data=FilterData(html=html))


def get_categories() -> CategoriesResponse:
    """Options for the category selector."""
    items = [CategoryItem(**option.to_dict()) for option in container.widget.category_choices()]
    return CategoriesResponse(items=items)


def render_page(
    ajax_url: str,
    locale: str = DEFAULT_LOCALE,
    heading: str = "",
    default_term: str = ALL,
    schema_max: str | int = SCHEMA_MAX,
) -> str:
    """Page with one widget and whatever assets it needs."""
    widget = container.widget.render(
        locale,
        heading=heading,
        default_term=default_term,
        schema_max=schema_max,
    )
    assets = plan_assets([widget.rendered], container.tokens, ajax_url)
    return container.widget.compose_page([widget], assets, lang=locale.split("_")[0])
