"""Shared repositories - the two markup cache tiers."""

from app.repositories.common.cache import CacheRepository
from app.repositories.common.memory import MemoryCache

__all__ = [
    "CacheRepository",
    "MemoryCache",
]
