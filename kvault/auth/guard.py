"""Bearer token guard for protected endpoints.

The guard is a plain function the API layer calls before dispatching to a
protected handler. It returns an ``AuthResult`` instead of storing the user
on the request, leaving the caller to decide how to short-circuit.
"""

from dataclasses import dataclass

from ..exceptions import InvalidTokenError
from .schemas import User
from .service import AuthService


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a guard check: exactly one of user or error is set."""

    user: User | None = None
    error: InvalidTokenError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header.

    The token is the second space-separated part of the header; a header
    without one yields None.
    """
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def authorize(auth_service: AuthService, authorization: str | None) -> AuthResult:
    """Validate the bearer token in an Authorization header value."""
    try:
        user = auth_service.validate_token(extract_bearer_token(authorization))
    except InvalidTokenError as e:
        return AuthResult(error=e)
    return AuthResult(user=user)
