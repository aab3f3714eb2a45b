"""User (credential store) operations.

IMPORT CONVENTION:
- Core accesses these through core.user property
- NO direct import needed when using Core API

ID GENERATION POLICY:
User IDs are assigned by SQLite (INTEGER PRIMARY KEY AUTOINCREMENT) and
never reused, so a token issued for a user cannot resolve to another one.
"""

import sqlite3

from ..utils import isodatetime


class UserOperations:
    """User record operations.

    Lookups return ``sqlite3.Row`` or None; mapping to the User schema
    happens in the auth service.
    """

    def __init__(self, conn: sqlite3.Connection):
        """Initialize user operations with a database connection.

        Args:
            conn: SQLite connection with row_factory set to sqlite3.Row
        """
        self._conn = conn

    def get_by_id(self, user_id: int) -> sqlite3.Row | None:
        return self._conn.execute(
            "SELECT * FROM users WHERE id = ?",
            (user_id,)
        ).fetchone()

    def get_by_username(self, username: str) -> sqlite3.Row | None:
        return self._conn.execute(
            "SELECT * FROM users WHERE username = ?",
            (username,)
        ).fetchone()

    def get_by_email(self, email: str) -> sqlite3.Row | None:
        return self._conn.execute(
            "SELECT * FROM users WHERE email = ?",
            (email,)
        ).fetchone()

    def create(
        self,
        username: str,
        email: str,
        password_hash: str,
        full_name: str,
        age: int | None = None,
        gender: str | None = None
    ) -> int:
        """Insert a user record.

        Args:
            username: Unique username
            email: Unique email address
            password_hash: Bcrypt hash of the password (never plaintext)
            full_name: Display name
            age: Optional age
            gender: Optional gender

        Returns:
            The auto-generated user ID

        Raises:
            sqlite3.IntegrityError: If username or email already exists
        """
        now = isodatetime.now()
        cursor = self._conn.execute(
            """INSERT INTO users
               (username, email, password, full_name, age, gender, created_at, updated_at)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
            (username, email, password_hash, full_name, age, gender, now, now)
        )
        return cursor.lastrowid
