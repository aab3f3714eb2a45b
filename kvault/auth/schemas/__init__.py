"""Authentication Pydantic schemas for API validation."""

from .auth import (
    RegisterRequest,
    TokenPayload,
    TokenRequest,
    TokenResponse,
    User,
)

__all__ = [
    "RegisterRequest",
    "TokenRequest",
    "User",
    "TokenPayload",
    "TokenResponse",
]
