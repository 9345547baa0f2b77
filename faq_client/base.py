"""Base HTTP client with retry logic."""

from typing import Any

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from settings import API_BASE_URL, API_RETRIES, API_TIMEOUT


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class BaseClient:
    """Base async HTTP client with exponential backoff."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = API_TIMEOUT,
        attempts: int = API_RETRIES,
        wait: wait_base | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url
        self._timeout = timeout
        self._attempts = max(1, attempts)
        self._wait = wait or wait_exponential(multiplier=1, min=1, max=10)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self.request_count = 0
        logger.info("{}: base_url={}, attempts={}", self.__class__.__name__, base_url, self._attempts)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.info("Total API requests: {}", self.request_count)
        if self._client:
            await self._client.aclose()

    async def _post_form(self, path: str, data: dict[str, str]) -> Any:
        """POST form data with retry logic; returns the decoded JSON body."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._attempts),
            wait=self._wait,
            retry=retry_if_exception(_is_retryable_error),
            reraise=True,
        ):
            with attempt:
                self.request_count += 1
                resp = await self._client.post(path, data=data)
                if resp.status_code >= 500:
                    resp.raise_for_status()
                return resp.json()
