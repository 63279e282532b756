"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

_local = threading.local()


def db_exists(path: str | None = None) -> bool:
    """Check if database file exists."""
    return Path(path or DB_PATH).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Create missing tables (idempotent - every DDL uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables ensured ({} tables)", len(ALL_DDL))


def _ensure_db_exists(path: str) -> None:
    """Create DB with tables if it doesn't exist."""
    if not db_exists(path):
        logger.warning("DB not found: {}. Creating empty DB.", path)
        conn = duckdb.connect(path)
        init_tables(conn)
        conn.close()


def get_db(read_only: bool = True) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection."""
    if getattr(_local, "conn", None) is None:
        _ensure_db_exists(DB_PATH)
        _local.conn = duckdb.connect(DB_PATH, read_only=read_only)
        logger.debug("DB connected: {} (read_only={})", DB_PATH, read_only)
    return _local.conn


def get_write_connection(path: str | None = None) -> duckdb.DuckDBPyConnection:
    """Get a writable connection with all tables in place (for seeding)."""
    path = path or DB_PATH
    conn = duckdb.connect(path)
    init_tables(conn)
    return conn
