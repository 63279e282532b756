"""Base repository class."""

from collections.abc import Callable, Sequence
from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db


class BaseRepository:
    """Base repository with common functionality.

    Repositories share the thread-local connection unless one is passed in,
    which is how the seed loader runs them on its own write connection.
    """

    def __init__(self, read_only: bool = True, conn: duckdb.DuckDBPyConnection | None = None):
        self._db = conn if conn is not None else get_db(read_only)
        self._read_only = read_only and conn is None
        self._cache: dict[str, Any] = {}
        logger.debug("{} initialized", self.__class__.__name__)

    def clear_cache(self) -> None:
        """Clear in-memory cache."""
        self._cache.clear()
        logger.debug("Cache cleared")

    def _cached(self, key: str, fn: Callable[[], Any]) -> Any:
        """Get from cache or compute."""
        if key not in self._cache:
            self._cache[key] = fn()
            logger.debug("Cache miss: {}", key)
        return self._cache[key]

    def _require_writable(self) -> None:
        if self._read_only:
            raise RuntimeError(f"{self.__class__.__name__} is read-only")

    def execute(self, query: str, params: Sequence | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, list(params))
        return self._db.execute(query)

    def fetchall(self, query: str, params: Sequence | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: Sequence | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()
