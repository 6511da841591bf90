"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), applying migrations on application start
(``init_db``) and a cursor context manager.  Members, portfolios and
comments live in three tables; uniqueness of member usernames and
portfolio titles is enforced by ``UNIQUE`` constraints so that
concurrent writers cannot both succeed.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings


logger = logging.getLogger(__name__)


# Largest value an SQLite INTEGER column can hold.
MAX_ID = 2**63 - 1

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS members (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL UNIQUE,
            email TEXT NOT NULL,
            password TEXT NOT NULL,
            about TEXT,
            location TEXT,
            website TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS portfolios (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL UNIQUE,
            description TEXT NOT NULL,
            image TEXT NOT NULL,
            category TEXT NOT NULL,
            price REAL NOT NULL,
            member_id INTEGER NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(member_id) REFERENCES members(id)
        );

        CREATE TABLE IF NOT EXISTS comments (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            portfolio_id INTEGER NOT NULL,
            post_by_id INTEGER NOT NULL,
            post_by_username TEXT NOT NULL,
            posted TIMESTAMP NOT NULL,
            text TEXT NOT NULL,
            FOREIGN KEY(portfolio_id) REFERENCES portfolios(id),
            FOREIGN KEY(post_by_id) REFERENCES members(id)
        );
        """,
    ),
    # Migration 2: indices for the owner and detail lookups
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_portfolios_member_id ON portfolios(member_id);
        CREATE INDEX IF NOT EXISTS idx_portfolios_category_price ON portfolios(category, price);
        CREATE INDEX IF NOT EXISTS idx_comments_portfolio_id ON comments(portfolio_id);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the package root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # artfolio_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be read by
    name.  Foreign key enforcement is switched on for the lifetime of
    the connection; SQLite leaves it off by default.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def is_unique_violation(exc: sqlite3.IntegrityError) -> bool:
    """Tell a ``UNIQUE`` failure apart from other integrity errors."""
    return "UNIQUE constraint failed" in str(exc)


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, reads the
    current schema version and applies every entry of ``MIGRATIONS``
    with a higher version.  New migrations are appended to that list
    with an incremented version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
