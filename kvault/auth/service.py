"""Authentication service.

Password hashing, user registration and the access token lifecycle
(issue and validate). The service receives its Database and Settings at
construction; it holds no module-level state.
"""

import logging
import sqlite3

import bcrypt
import jwt
import pydantic

from ..config import Settings
from ..db import Database
from ..exceptions import (
    EmailExistsError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingFieldsError,
    UsernameExistsError,
    ValidationError,
)
from . import token
from .schemas import RegisterRequest, TokenRequest, TokenResponse, User

logger = logging.getLogger(__name__)

# bcrypt only considers the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


# ============================================================================
# Password Hashing
# ============================================================================


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """
    Hash a password with bcrypt.

    Args:
        password: Plaintext password
        rounds: Bcrypt work factor

    Returns:
        60-character bcrypt hash string (salt included)
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))


def _row_to_user(row: sqlite3.Row) -> User:
    return User(**dict(row))


# ============================================================================
# Auth Service
# ============================================================================


class AuthService:
    """Registers users and issues/validates their access tokens."""

    def __init__(self, database: Database, settings: Settings):
        self._database = database
        self._settings = settings

    def register(self, data: RegisterRequest) -> User:
        """
        Register a new user.

        Username uniqueness is checked before email uniqueness. The password
        is hashed outside the database lock; if another registration takes
        the username or email meanwhile, the insert's unique constraint
        reports the same conflict.

        Raises:
            ValidationError: If username, email, password or full_name is missing
            UsernameExistsError: If the username is taken
            EmailExistsError: If the email is already registered
        """
        missing = data.missing_fields()
        if missing:
            raise ValidationError(
                "Invalid request. Please provide all required fields: "
                "username, email, password, full_name.",
                {"missing": missing}
            )

        with self._database.core() as core:
            self._check_unique(core, data.username, data.email)

        password_hash = hash_password(data.password, self._settings.bcrypt_work_factor)

        try:
            with self._database.core() as core:
                user_id = core.user.create(
                    username=data.username,
                    email=data.email,
                    password_hash=password_hash,
                    full_name=data.full_name,
                    age=data.age,
                    gender=data.gender
                )
                row = core.user.get_by_id(user_id)
        except sqlite3.IntegrityError as e:
            if "users.email" in str(e):
                raise EmailExistsError()
            raise UsernameExistsError()

        logger.info(f"User registered: {data.username} (id={user_id})")
        return _row_to_user(row)

    @staticmethod
    def _check_unique(core, username: str, email: str) -> None:
        if core.user.get_by_username(username) is not None:
            logger.warning(f"Registration rejected, username exists: {username}")
            raise UsernameExistsError()
        if core.user.get_by_email(email) is not None:
            logger.warning(f"Registration rejected, email exists: {email}")
            raise EmailExistsError()

    def issue_token(self, data: TokenRequest) -> TokenResponse:
        """
        Verify credentials and issue an access token.

        Unknown usernames and wrong passwords raise the same error so the
        response does not reveal which usernames exist.

        Raises:
            MissingFieldsError: If username or password is missing
            InvalidCredentialsError: If the credentials do not match a user
        """
        if not data.username or not data.password:
            raise MissingFieldsError()
        if not isinstance(data.username, str) or not isinstance(data.password, str):
            logger.warning("Token request with non-string credentials")
            raise InvalidCredentialsError()

        user = self.get_user_by_username(data.username)

        if user is None or not verify_password(data.password, user.password):
            logger.warning(f"Failed token request for username: {data.username}")
            raise InvalidCredentialsError()

        expires_in = self._settings.jwt_expiry_seconds
        access_token = token.generate_access_token(
            user.id,
            self._settings.jwt_secret_key,
            expires_in,
            self._settings.jwt_algorithm
        )

        logger.info(f"Access token issued for user {user.username}")
        return TokenResponse(access_token=access_token, expires_in=expires_in)

    def validate_token(self, token_str: str | None) -> User:
        """
        Resolve a bearer token to the user it was issued for.

        Raises:
            InvalidTokenError: 401 if no token was presented, 403 if it is
                forged, malformed, expired or names an unknown user
        """
        if not token_str:
            raise InvalidTokenError(status_code=401)

        try:
            payload = token.validate_access_token(
                token_str,
                self._settings.jwt_secret_key,
                self._settings.jwt_algorithm
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Access token expired")
            raise InvalidTokenError(status_code=403)
        except (jwt.InvalidTokenError, pydantic.ValidationError) as e:
            logger.warning(f"Invalid access token: {e}")
            raise InvalidTokenError(status_code=403)

        user = self.get_user_by_id(payload.user_id)
        if user is None:
            logger.warning(f"Access token for unknown user id {payload.user_id}")
            raise InvalidTokenError(status_code=403)
        return user

    def get_user_by_id(self, user_id: int) -> User | None:
        with self._database.core() as core:
            row = core.user.get_by_id(user_id)
        return _row_to_user(row) if row else None

    def get_user_by_username(self, username: str) -> User | None:
        with self._database.core() as core:
            row = core.user.get_by_username(username)
        return _row_to_user(row) if row else None
