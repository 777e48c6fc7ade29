"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``, ``get_cursor``) and for applying migrations on
application start (``init_db``).  Applied migration versions are
stored in the ``migrations`` table and new migrations are executed in
order.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings


# Relative database and log paths are resolved against this directory.
BASE_DIR = Path(__file__).resolve().parent.parent.parent  # contact_directory_api/

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: contact table
    (
        1,
        """
        -- AUTOINCREMENT keeps identifiers of deleted rows from being reissued.
        CREATE TABLE IF NOT EXISTS contact (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            phone TEXT,
            email TEXT,
            address1 TEXT,
            address2 TEXT,
            address3 TEXT,
            postal_code TEXT,
            note TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
    # Migration 2: name index used by the search and duplicate lookups
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_contact_name ON contact(name COLLATE NOCASE);
        """,
    ),
]


def get_database_path(db_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    ``db_url`` defaults to ``settings.database_url``.  Absolute paths
    are used as is; relative paths are resolved against
    ``BASE_DIR``.
    """
    db_url = db_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    return str((BASE_DIR / db_url).resolve())


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.
    """
    conn = sqlite3.connect(get_database_path(db_path))
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor, commit on success and always close the connection."""
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(db_path: Optional[str] = None) -> int:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies every migration in
    ``MIGRATIONS`` with a higher version.  Returns the schema version
    after migrating.
    """
    with get_cursor(db_path) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
    return current_version
