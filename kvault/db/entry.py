"""Key-value entry (data store) operations.

IMPORT CONVENTION:
- Core accesses these through core.entry property
- NO direct import needed when using Core API

Keys are global; entries are not scoped to the user that wrote them.
"""

import sqlite3

from ..utils import isodatetime


class EntryOperations:
    """Key-value entry operations.

    Mutations report whether a row was touched instead of raising, so the
    caller decides which error applies.
    """

    def __init__(self, conn: sqlite3.Connection):
        """Initialize entry operations with a database connection.

        Args:
            conn: SQLite connection with row_factory set to sqlite3.Row
        """
        self._conn = conn

    def get(self, key: str) -> sqlite3.Row | None:
        """Get entry by key, or None if absent."""
        return self._conn.execute(
            "SELECT key, value, created_at, updated_at FROM data WHERE key = ?",
            (key,)
        ).fetchone()

    def create(self, key: str, value: str) -> None:
        """Insert a new entry.

        The existence check is the primary-key constraint itself, so two
        concurrent inserts of one key cannot both succeed.

        Raises:
            sqlite3.IntegrityError: If key already exists
        """
        now = isodatetime.now()
        self._conn.execute(
            """INSERT INTO data (key, value, created_at, updated_at)
               VALUES (?, ?, ?, ?)""",
            (key, value, now, now)
        )

    def update(self, key: str, value: str) -> bool:
        """Overwrite the value of an existing entry.

        Returns:
            True if the entry existed and was updated
        """
        cursor = self._conn.execute(
            "UPDATE data SET value = ?, updated_at = ? WHERE key = ?",
            (value, isodatetime.now(), key)
        )
        return cursor.rowcount > 0

    def delete(self, key: str) -> bool:
        """Remove an entry.

        Returns:
            True if the entry existed and was deleted
        """
        cursor = self._conn.execute(
            "DELETE FROM data WHERE key = ?",
            (key,)
        )
        return cursor.rowcount > 0
