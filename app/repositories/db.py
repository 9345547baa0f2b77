"""DuckDB connection management."""

import threading

import duckdb
from loguru import logger

import settings
from app.models import ALL_DDL

_lock = threading.Lock()
_root: duckdb.DuckDBPyConnection | None = None
_local = threading.local()
_generation = 0


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


def configure_db(path: str) -> None:
    """Point the module at another database file (``:memory:`` in tests)."""
    close_db()
    settings.DB_PATH = path


def _get_root() -> duckdb.DuckDBPyConnection:
    global _root
    with _lock:
        if _root is None:
            _root = duckdb.connect(settings.DB_PATH)
            init_tables(_root)
            logger.debug("DB connected: {}", settings.DB_PATH)
        return _root


def get_db() -> duckdb.DuckDBPyConnection:
    """Get this thread's cursor on the shared database."""
    if getattr(_local, "generation", None) != _generation or _local.conn is None:
        _local.conn = _get_root().cursor()
        _local.generation = _generation
    return _local.conn


def close_db() -> None:
    """Close the shared connection; thread cursors reopen lazily."""
    global _root, _generation
    with _lock:
        if _root is not None:
            _root.close()
            _root = None
            logger.debug("DB connection closed")
        _generation += 1


def reconnect_db() -> duckdb.DuckDBPyConnection:
    """Force reconnect."""
    close_db()
    return get_db()
