"""Markup cache repository - durable cache tier."""

import time
from collections.abc import Callable
from datetime import datetime, timezone

from loguru import logger

from app.repositories.base import BaseRepository


def _to_timestamp(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, timezone.utc).replace(tzinfo=None)


class CacheRepository(BaseRepository):
    """Durable markup cache stored in DuckDB; survives process restarts."""

    def __init__(self, read_only: bool = False, clock: Callable[[], float] = time.time):
        super().__init__(read_only)
        self._clock = clock

    def get(self, key: str) -> str | None:
        """Load an unexpired payload."""
        row = self.fetchone(
            "SELECT html FROM markup_cache WHERE key = ? AND expires_at > ?",
            [key, _to_timestamp(self._clock())],
        )
        if row:
            logger.debug("Durable cache hit: {}", key)
            return row[0]
        return None

    def set(self, key: str, html: str, ttl: int) -> None:
        """Save payload; concurrent writers of the same key: last one wins."""
        self._ensure_writable("write cache")
        now = self._clock()
        self.execute(
            """
            INSERT OR REPLACE INTO markup_cache (key, html, inserted_at, expires_at)
            VALUES (?, ?, ?, ?)
            """,
            [key, html, _to_timestamp(now), _to_timestamp(now + ttl)],
        )
        logger.debug("Durable cache saved: {} (ttl={}s)", key, ttl)

    def purge_expired(self) -> int:
        """Delete expired rows, return how many were removed."""
        self._ensure_writable("purge cache")
        cutoff = [_to_timestamp(self._clock())]
        count = self.fetchone("SELECT COUNT(*) FROM markup_cache WHERE expires_at <= ?", cutoff)[0]
        self.execute("DELETE FROM markup_cache WHERE expires_at <= ?", cutoff)
        if count:
            logger.info("Purged {} expired cache rows", count)
        return count

    def clear(self) -> None:
        """Clear the whole durable tier."""
        self._ensure_writable("clear cache")
        self.execute("DELETE FROM markup_cache")
        logger.info("Durable cache cleared")
