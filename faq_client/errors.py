"""Client-side fetch failures. Both kinds are recoverable."""


class FilterFetchError(Exception):
    """Markup could not be fetched; the widget keeps its current results."""


class NetworkError(FilterFetchError):
    """Transport error or server error after retries."""


class MalformedResponseError(FilterFetchError):
    """Response was not ``{success: true, data: {html: str}}``."""
