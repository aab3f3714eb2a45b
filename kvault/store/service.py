"""Key-value CRUD service.

Every operation assumes the caller already passed the bearer token guard.
Keys are global: the authenticated user is not part of the lookup.
"""

import logging
import sqlite3

from ..db import Database
from ..exceptions import KeyExistsError, KeyNotFoundError, ValidationError
from .schemas import DataEntry

logger = logging.getLogger(__name__)


class DataService:
    """Store, retrieve, update and delete string values by key."""

    def __init__(self, database: Database):
        self._database = database

    def store(self, key: str | None, value: str | None) -> None:
        """
        Create a new entry.

        Raises:
            ValidationError: If key or value is missing or empty, or the key
                cannot be addressed as /api/data/<key>
            KeyExistsError: If the key already exists
        """
        if not key or not value:
            raise ValidationError(
                "Invalid request. Please provide both key and value."
            )
        # Keys must stay addressable as /api/data/<key>
        if key.startswith("/") or "//" in key:
            raise ValidationError(
                "Invalid request. Key must not start with '/' or contain '//'.",
                {"key": key}
            )

        try:
            with self._database.core() as core:
                core.entry.create(key, value)
        except sqlite3.IntegrityError:
            raise KeyExistsError(details={"key": key})

        logger.info(f"Stored key {key!r}")

    def retrieve(self, key: str) -> DataEntry:
        """
        Look up the value stored under a key.

        Raises:
            KeyNotFoundError: If the key does not exist
        """
        with self._database.core() as core:
            row = core.entry.get(key)

        if row is None:
            raise KeyNotFoundError(details={"key": key})
        return DataEntry(key=row["key"], value=row["value"])

    def update(self, key: str, value: str | None) -> None:
        """
        Overwrite the value of an existing entry. Never creates one.

        Raises:
            ValidationError: If value is missing or empty
            KeyNotFoundError: If the key does not exist
        """
        if not value:
            raise ValidationError(
                "Invalid request. Please provide the value to update."
            )

        with self._database.core() as core:
            updated = core.entry.update(key, value)

        if not updated:
            raise KeyNotFoundError(details={"key": key})
        logger.info(f"Updated key {key!r}")

    def delete(self, key: str) -> None:
        """
        Remove an entry.

        Raises:
            KeyNotFoundError: If the key does not exist
        """
        with self._database.core() as core:
            deleted = core.entry.delete(key)

        if not deleted:
            raise KeyNotFoundError(details={"key": key})
        logger.info(f"Deleted key {key!r}")
