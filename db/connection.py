"""
db/connection.py
----------------
Manages the single SQLite connection shared by all handlers.
The connection is opened once at startup and reused for every request.
"""

import sqlite3

from config import SQLITE_PATH
from utils.logger import get_logger

logger = get_logger(__name__)

_conn: sqlite3.Connection | None = None


def init_connection(path: str = SQLITE_PATH) -> sqlite3.Connection:
    """
    Open the database file (created on first use).

    Args:
        path: Filesystem path of the SQLite database, or ":memory:".

    Returns:
        The process-wide sqlite3 connection.
    """
    global _conn
    if _conn is not None:
        return _conn
    _conn = sqlite3.connect(path)
    _conn.row_factory = sqlite3.Row
    logger.info(f"SQLite database opened at {path}.")
    return _conn


def get_connection() -> sqlite3.Connection:
    """
    Get the shared connection.

    Raises:
        RuntimeError: If the connection has not been initialized.
    """
    if _conn is None:
        raise RuntimeError("Database not initialized. Call init_connection() first.")
    return _conn


def close_connection() -> None:
    """Close the shared connection."""
    global _conn
    if _conn is not None:
        _conn.close()
        _conn = None
        logger.info("SQLite connection closed.")
