"""
JWT Token Service.

Issues and validates HS256 access tokens. A token carries only the user id
plus issued-at and expiry claims; nothing is stored server-side, so a token
is valid exactly as long as its signature verifies, it has not expired, and
the user it names still exists (checked by the auth service).
"""

import jwt

from ..utils import isodatetime
from .schemas import TokenPayload


def generate_access_token(
    user_id: int,
    secret_key: str,
    expires_in: int,
    algorithm: str = "HS256"
) -> str:
    """
    Generate a signed access token for a user.

    Args:
        user_id: ID of the user the token is bound to
        secret_key: Process-wide signing secret
        expires_in: Token lifetime in seconds
        algorithm: JWT signing algorithm

    Returns:
        Encoded JWT string
    """
    issued_at = isodatetime.now_unix()
    payload = {
        "user_id": user_id,
        "iat": issued_at,
        "exp": issued_at + expires_in,
    }
    return jwt.encode(payload, secret_key, algorithm=algorithm)


def validate_access_token(
    token: str,
    secret_key: str,
    algorithm: str = "HS256"
) -> TokenPayload:
    """
    Verify signature and expiry, then parse the claims.

    Args:
        token: Encoded JWT string
        secret_key: Process-wide signing secret
        algorithm: Expected signing algorithm

    Returns:
        Parsed token claims

    Raises:
        jwt.ExpiredSignatureError: If the token has expired
        jwt.InvalidTokenError: If the token is malformed, forged or lacks claims
        pydantic.ValidationError: If the claims have the wrong shape
    """
    payload = jwt.decode(
        token,
        secret_key,
        algorithms=[algorithm],
        options={"require": ["exp", "iat"]},
    )
    return TokenPayload(**payload)
