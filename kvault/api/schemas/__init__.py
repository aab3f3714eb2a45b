"""Pydantic schemas for API validation.

Data schemas are defined here. Auth schemas are imported from the auth
module for use in API endpoints.
"""

# Re-export auth schemas for convenience in API endpoints
from kvault.auth.schemas import (
    RegisterRequest,
    TokenPayload,
    TokenRequest,
    TokenResponse,
    User,
)

# Re-export the stored entry schema from kvault.store
from kvault.store.schemas import DataEntry

from .data import DataCreate, DataUpdate

__all__ = [
    "DataCreate",
    "DataUpdate",
    # Entry schema (re-exported from kvault.store.schemas)
    "DataEntry",
    # Auth schemas (re-exported from kvault.auth.schemas)
    "RegisterRequest",
    "TokenRequest",
    "User",
    "TokenPayload",
    "TokenResponse",
]
