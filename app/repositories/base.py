"""Base repository class."""

import json
from datetime import datetime, timezone
from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db


def to_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to a naive TIMESTAMP read from the DB."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_db_timestamp(value: datetime | None) -> datetime | None:
    """Naive UTC datetime for a TIMESTAMP column."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def load_json(value: Any) -> Any:
    """Decode a JSON column value (DuckDB returns JSON as text)."""
    if value is None:
        return None
    if isinstance(value, str):
        return json.loads(value)
    return value


class BaseRepository:
    """Base repository with common functionality.

    Repositories hold no result caches: every call reads the store again.
    """

    def __init__(self, read_only: bool = True, conn: duckdb.DuckDBPyConnection | None = None):
        self._db = conn if conn is not None else get_db(read_only)
        self._read_only = read_only
        logger.debug("{} initialized", self.__class__.__name__)

    def _check_writable(self) -> None:
        if self._read_only:
            raise RuntimeError(f"{self.__class__.__name__} is read-only")

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
