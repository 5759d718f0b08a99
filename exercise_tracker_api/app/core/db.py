"""
SQLite-backed document store.

This module owns the single process-wide connection used by every
request.  ``init_db`` opens it (creating the ``users`` and ``exercises``
collections if needed) when the application starts and ``close_db``
releases it at shutdown.  Services obtain it through
``get_connection`` and run their statements inside ``get_cursor``,
which commits on success and converts any ``sqlite3.Error`` into a
``StorageError``.

Record identifiers are assigned here rather than by SQLite so that they
have the familiar 24 hex digit document-id shape: a 4 byte creation
timestamp, 5 random bytes and a 3 byte counter.
"""

import itertools
import logging
import os
import sqlite3
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings
from .errors import StorageError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    username TEXT NOT NULL CHECK (length(username) > 0)
);

-- user_id is a plain reference: no FOREIGN KEY, nothing cascades.
CREATE TABLE IF NOT EXISTS exercises (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    description TEXT NOT NULL CHECK (length(description) > 0),
    duration NUMERIC NOT NULL,
    date TIMESTAMP NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_exercises_user_id ON exercises(user_id);
"""

_connection: Optional[sqlite3.Connection] = None

_process_random = os.urandom(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))


def new_object_id() -> str:
    """Return a fresh 24 character hexadecimal record identifier."""
    timestamp = int(time.time()).to_bytes(4, "big")
    counter = (next(_counter) & 0xFFFFFF).to_bytes(3, "big")
    return (timestamp + _process_random + counter).hex()


def get_database_path() -> str:
    """Compute the SQLite database location from ``settings.database_url``.

    ``sqlite:///`` prefixes are stripped.  Relative paths are resolved
    against the project root; ``:memory:`` is passed through.
    """
    db_url = settings.database_url
    if db_url.startswith("sqlite:///"):
        db_url = db_url[len("sqlite:///"):]
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def connect() -> sqlite3.Connection:
    """Open the shared connection if it is not open yet and return it."""
    global _connection
    if _connection is None:
        db_path = get_database_path()
        try:
            conn = sqlite3.connect(db_path, check_same_thread=False)
        except sqlite3.Error as exc:
            logger.exception("Could not open database %s", db_path)
            raise StorageError(f"Could not open database {db_path}") from exc
        conn.row_factory = sqlite3.Row
        _connection = conn
        logger.info("Database connected: %s", db_path)
    return _connection


def get_connection() -> sqlite3.Connection:
    """Return the shared connection opened by ``init_db``."""
    if _connection is None:
        raise StorageError("Database connection is not initialised")
    return _connection


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor on the shared connection.

    Commits when the block finishes and rolls back when it raises.
    Errors reported by SQLite, and integers too large for it to bind,
    surface as ``StorageError``.
    """
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    except (sqlite3.Error, OverflowError) as exc:
        conn.rollback()
        raise StorageError(str(exc)) from exc
    except Exception:
        conn.rollback()
        raise


def init_db() -> None:
    """Open the shared connection and create the collections."""
    conn = connect()
    try:
        conn.executescript(SCHEMA)
    except sqlite3.Error as exc:
        logger.exception("Could not create schema")
        raise StorageError(str(exc)) from exc


def close_db() -> None:
    """Close the shared connection; a no-op when it is not open."""
    global _connection
    if _connection is not None:
        _connection.close()
        _connection = None
        logger.info("Database connection closed")
