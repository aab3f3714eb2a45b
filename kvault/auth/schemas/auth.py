"""Authentication Pydantic schemas.

Request schemas keep every field optional: presence checks happen in the
auth service so that a missing field maps to the endpoint's own error code
(INVALID_REQUEST for registration, MISSING_FIELDS for token issue) rather
than to a generic schema error. Only registration type mismatches (e.g. a
non-integer age) fail schema validation.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    """Schema for user registration."""

    username: str | None = None
    email: str | None = None
    password: str | None = None
    full_name: str | None = None
    age: int | None = None
    gender: str | None = None

    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ("username", "email", "password", "full_name")

    def missing_fields(self) -> list[str]:
        """Names of required fields that are absent or empty."""
        return [name for name in self.REQUIRED_FIELDS if not getattr(self, name)]


class TokenRequest(BaseModel):
    """Schema for access token requests (login).

    Fields are untyped so that a wrong-typed username or password is
    rejected as bad credentials rather than as a malformed request.
    """

    username: Any = None
    password: Any = None


class User(BaseModel):
    """Stored user record.

    ``password`` is the bcrypt hash, never the plaintext.
    """

    id: int
    username: str
    email: str
    password: str = Field(..., description="Bcrypt password hash")
    full_name: str
    age: int | None = None
    gender: str | None = None
    created_at: str
    updated_at: str


class TokenPayload(BaseModel):
    """Claims carried by an access token."""

    # Bounded to the SQLite INTEGER range of users.id
    user_id: int = Field(..., ge=1, le=2**63 - 1)
    iat: int
    exp: int


class TokenResponse(BaseModel):
    """Data returned by the token endpoint."""

    access_token: str
    expires_in: int
