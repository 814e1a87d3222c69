"""DuckDB connections for the vote store."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

import settings
from app.models import ALL_DDL

_local = threading.local()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Create store tables and indexes (every statement is IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables ready")


def _connect(read_only: bool) -> duckdb.DuckDBPyConnection:
    """Open settings.DB_PATH, creating an empty store first when the file is missing."""
    if not Path(settings.DB_PATH).exists():
        logger.warning("DB not found: {}. Creating empty DB.", settings.DB_PATH)
        with duckdb.connect(settings.DB_PATH) as conn:
            init_tables(conn)

    conn = duckdb.connect(settings.DB_PATH, read_only=read_only)
    if not read_only:
        init_tables(conn)
    logger.debug("DB connected: {} (read_only={})", settings.DB_PATH, read_only)
    return conn


def get_db(read_only: bool = True) -> duckdb.DuckDBPyConnection:
    """Connection shared by the repositories of the current thread."""
    if getattr(_local, "conn", None) is None:
        _local.conn = _connect(read_only)
    return _local.conn


def get_write_connection() -> duckdb.DuckDBPyConnection:
    """Separate writable connection for loads and precompute; the caller closes it."""
    return _connect(read_only=False)
