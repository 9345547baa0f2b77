"""In-process cache tier - fast, lost on restart."""

import threading
import time
from collections.abc import Callable

from loguru import logger


class MemoryCache:
    """Dict-backed TTL cache shared by all request threads."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._store: dict[str, tuple[float, str]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            item = self._store.get(key)
            if item is None:
                return None
            expires_at, html = item
            if expires_at <= self._clock():
                del self._store[key]
                return None
        logger.debug("Memory cache hit: {}", key)
        return html

    def set(self, key: str, html: str, ttl: int) -> None:
        with self._lock:
            self._store[key] = (self._clock() + ttl, html)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
