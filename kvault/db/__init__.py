"""Database module for kvault.

This module provides the Core API for database operations.
A ``Database`` owns the SQLite connection for the lifetime of the app and
hands out ``Core`` units of work; each entity type gets an encapsulated
operations class reached through a Core property.

ARCHITECTURE:
- Database is built once at startup and injected into the services
- One connection shared by all request threads, guarded by a re-entrant lock
- Core is always used as a context manager: the lock is held for the
  duration of the block, which commits on success and rolls back on error

    with database.core() as core:
        if core.user.get_by_username("alice") is None:
            core.user.create(...)
        core.entry.create("k1", "v1")

Uniqueness (usernames, emails, keys) is enforced by the schema's constraints,
so a unit of work that loses a race fails with sqlite3.IntegrityError instead
of silently writing a duplicate.
"""

import logging
import sqlite3
import threading
from pathlib import Path
from typing import TYPE_CHECKING

from ..exceptions import DatabaseError
from ..schema import SCHEMA_PATH

if TYPE_CHECKING:
    from .entry import EntryOperations
    from .user import UserOperations

logger = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"


class Core:
    """
    Database unit of work with entity operations.

    Provides access to entity operations through properties. Must be
    entered as a context manager; see ``Database.core()``.
    """

    def __init__(self, connection: sqlite3.Connection, lock: threading.RLock):
        """Initialize Core with a database connection.

        Args:
            connection: SQLite connection with row_factory set to sqlite3.Row
            lock: Lock serializing access to the shared connection
        """
        self._conn = connection
        self._lock = lock
        self._user_ops = None
        self._entry_ops = None

    @property
    def user(self) -> "UserOperations":
        """User (credential store) operations.

        Lazy-loaded to avoid circular import issues.
        Operations are created on first access and cached.
        """
        if self._user_ops is None:
            from .user import UserOperations
            self._user_ops = UserOperations(self._conn)
        return self._user_ops

    @property
    def entry(self) -> "EntryOperations":
        """Key-value entry (data store) operations.

        Lazy-loaded to avoid circular import issues.
        Operations are created on first access and cached.
        """
        if self._entry_ops is None:
            from .entry import EntryOperations
            self._entry_ops = EntryOperations(self._conn)
        return self._entry_ops

    def __enter__(self) -> "Core":
        self._lock.acquire()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager, committing or rolling back transaction."""
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                self._conn.rollback()
        finally:
            self._lock.release()


def _create_connection(database_path: str) -> sqlite3.Connection:
    """Create the shared database connection.

    Returns:
        SQLite connection with row_factory set to sqlite3.Row
        and foreign keys enabled.
    """
    if database_path != MEMORY_DATABASE:
        Path(database_path).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(database_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


class Database:
    """Owner of the SQLite connection backing both stores.

    With the default ``:memory:`` path the data lives only as long as this
    object, so every process start begins with empty stores.
    """

    def __init__(self, database_path: str = MEMORY_DATABASE):
        self.database_path = database_path
        self._conn = _create_connection(database_path)
        self._lock = threading.RLock()

    def core(self) -> Core:
        """
        Get a database Core for one unit of work.

        Examples:
            >>> with database.core() as core:
            ...     row = core.entry.get("k1")
        """
        return Core(self._conn, self._lock)

    def init_schema(self) -> None:
        """Apply schema.sql if the database is not already initialized."""
        with self._lock:
            cursor = self._conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name='_schema_metadata'"
            )
            if cursor.fetchone():
                logger.debug(f"Database already initialized: {self.database_path}")
                return

            with open(SCHEMA_PATH, "r") as f:
                schema_sql = f.read()
            try:
                self._conn.executescript(schema_sql)
                self._conn.commit()
            except sqlite3.Error as e:
                raise DatabaseError(
                    "Failed to apply database schema",
                    {"database_path": self.database_path, "reason": str(e)}
                )

    def get_schema_version(self) -> str:
        """Get current schema version from _schema_metadata table."""
        with self._lock:
            row = self._conn.execute(
                "SELECT value FROM _schema_metadata WHERE key = 'version'"
            ).fetchone()
        return row[0] if row else "unknown"

    def close(self) -> None:
        with self._lock:
            self._conn.close()
