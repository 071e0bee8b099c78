"""
SQLite database integration.

This module provides functions for resolving the database location
(``get_database_path``), opening the shared connection
(``get_connection``) and creating the ``users`` table on application
start (``init_db``).  The table is created idempotently; there is no
migration machinery because the schema has a single version.

The connection is opened once per process by the application factory
and shared by all requests through :class:`UserRepository`, which
serializes access to it.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

from .config import settings

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"

USERS_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    email TEXT PRIMARY KEY,
    first_name TEXT NOT NULL,
    last_name TEXT NOT NULL
);
"""


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    ``database_url`` defaults to ``settings.database_url``.  Absolute
    paths and ``:memory:`` are returned as is; relative paths are
    resolved against the project root (the directory containing the
    ``user_records_api`` package).
    """
    db_url = database_url or settings.database_url
    if db_url == MEMORY_DATABASE or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(database_url: Optional[str] = None) -> sqlite3.Connection:
    """Open and return a SQLite connection.

    The connection uses a row factory to access columns by name.  It is
    created with ``check_same_thread=False`` because it is opened once at
    startup and then used by every request; callers must serialize
    access (see ``UserRepository``).
    """
    db_path = get_database_path(database_url)
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Create the ``users`` table if it does not exist yet."""
    conn.executescript(USERS_SCHEMA)
    conn.commit()
    logger.info("Database schema initialised")
