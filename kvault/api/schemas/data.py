"""Key-value entry schemas.

As with the auth schemas, ``key`` and ``value`` are optional at the schema
level; the data service decides when their absence is an error.
"""

from pydantic import BaseModel


class DataCreate(BaseModel):
    """Schema for storing a new entry."""

    key: str | None = None
    value: str | None = None


class DataUpdate(BaseModel):
    """Schema for updating an entry's value (key comes from the URL)."""

    value: str | None = None
