"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db


class BaseRepository:
    """Base repository with common query helpers."""

    def __init__(self, read_only: bool = True):
        self._read_only = read_only
        logger.debug("{} initialized (read_only={})", self.__class__.__name__, read_only)

    @property
    def _db(self) -> duckdb.DuckDBPyConnection:
        return get_db()

    def _ensure_writable(self, operation: str) -> None:
        if self._read_only:
            raise RuntimeError(f"Cannot {operation} in read-only mode")

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()
