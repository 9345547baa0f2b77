"""Two-tier markup cache.

Lookup order is fast tier, then durable tier, then a fresh build. A durable
hit is copied back into the fast tier so later reads stay in process memory.
There is no invalidation on content change: entries live for the TTL, and
bumping the version tag moves every key to a new namespace at once.
"""

import hashlib
from collections.abc import Iterable
from typing import Protocol

import duckdb
from loguru import logger

from app.models.faq import Selection
from app.services.faq.markup import MarkupBuilder, bind_instance
from settings import CACHE_TTL, CACHE_VERSION


class CacheTier(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, html: str, ttl: int) -> None: ...


def cache_key(version: str, selection: Selection, locale: str) -> str:
    """Deterministic key for one version/selection/locale combination."""
    digest = hashlib.md5(f"{version}|{selection.key}|{locale}".encode()).hexdigest()
    return f"faq_markup_{digest}"


class MarkupCache:
    """Markup for a selection, served from cache or built on demand."""

    def __init__(
        self,
        builder: MarkupBuilder,
        fast: CacheTier,
        durable: CacheTier,
        version: str = CACHE_VERSION,
        ttl: int = CACHE_TTL,
    ):
        self._builder = builder
        self._fast = fast
        self._durable = durable
        self.version = version
        self.ttl = ttl

    def key_for(self, selection: Selection, locale: str) -> str:
        return cache_key(self.version, selection, locale)

    def get(self, key: str) -> str | None:
        html = self._fast.get(key)
        if html is not None:
            return html

        try:
            html = self._durable.get(key)
        except duckdb.Error as e:
            logger.warning("Durable cache read failed for {}: {}", key, e)
            return None

        if html is not None:
            self.resync(key, html)
        return html

    def resync(self, key: str, html: str) -> None:
        """Copy a durable-tier payload back into the fast tier."""
        self._fast.set(key, html, self.ttl)
        logger.debug("Fast tier resynced: {}", key)

    def set(self, key: str, html: str) -> None:
        self._fast.set(key, html, self.ttl)
        try:
            self._durable.set(key, html, self.ttl)
        except duckdb.Error as e:
            logger.warning("Durable cache write failed for {}: {}", key, e)

    def get_or_build(self, selection: Selection, locale: str) -> str:
        """Instance-neutral markup for ``selection`` in ``locale``; never raises on lookup errors."""
        key = self.key_for(selection, locale)
        cached = self.get(key)
        if cached is not None:
            return cached

        logger.debug("Markup cache miss: selection={}, locale={}", selection, locale)
        try:
            html = self._builder.build(selection)
        except duckdb.Error:
            logger.exception("FAQ lookup failed for selection={}", selection)
            return self._builder.empty()

        self.set(key, html)
        return html

    def markup_for(self, selection: Selection, locale: str, instance_id: str) -> str:
        """Cached markup with ids bound to one widget instance."""
        return bind_instance(self.get_or_build(selection, locale), instance_id)

    def warm(self, selections: Iterable[Selection], locale: str) -> int:
        """Build missing payloads ahead of traffic, return how many were built."""
        built = 0
        for selection in selections:
            if self.get(self.key_for(selection, locale)) is None:
                self.get_or_build(selection, locale)
                built += 1
        logger.info("Cache warm for {}: {} built", locale, built)
        return built
