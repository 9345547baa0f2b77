"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.common import CacheRepository, MemoryCache
from app.repositories.db import (
    close_db,
    configure_db,
    get_db,
    init_tables,
    reconnect_db,
)
from app.repositories.faq import FaqRepository

__all__ = [
    # DB
    "get_db",
    "close_db",
    "configure_db",
    "reconnect_db",
    "init_tables",
    # Base
    "BaseRepository",
    # Common
    "CacheRepository",
    "MemoryCache",
    # FAQ
    "FaqRepository",
]
