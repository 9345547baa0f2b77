"""Dependency Injection container - initialized at app startup."""

from app.repositories.common import CacheRepository, MemoryCache
from app.repositories.faq import FaqRepository
from app.security import TokenSigner
from app.services.faq import MarkupBuilder, MarkupCache, SchemaBuilder, WidgetRenderer


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Repositories (singletons)
        self.faq_repo = FaqRepository()
        self._memory_cache = MemoryCache()
        self.cache_repo = CacheRepository(read_only=False)

        # Services (with injected repos)
        self.markup_builder = MarkupBuilder(repo=self.faq_repo)
        self.schema_builder = SchemaBuilder(repo=self.faq_repo)
        self.markup_cache = MarkupCache(
            builder=self.markup_builder,
            fast=self._memory_cache,
            durable=self.cache_repo,
        )
        self.widget = WidgetRenderer(
            repo=self.faq_repo,
            cache=self.markup_cache,
            schema=self.schema_builder,
        )
        self.tokens = TokenSigner()

        self._initialized = True

    def reset(self) -> None:
        """Drop all singletons so the next init() rebuilds them."""
        self._initialized = False


# Global container instance
container = Container()
