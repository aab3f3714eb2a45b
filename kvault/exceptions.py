"""Custom exceptions for kvault.

Every domain error carries a stable machine-readable ``code`` and the HTTP
``status_code`` it maps to. The Flask error handlers in ``kvault.main`` turn
them into the JSON error envelope.
"""

INTERNAL_ERROR_MESSAGE = "An internal server error occurred. Please try again later."


class KVaultError(Exception):
    """Base exception for all kvault errors."""

    code = "INTERNAL_SERVER_ERROR"
    status_code = 500
    default_message = INTERNAL_ERROR_MESSAGE
    # Registration conflicts are reported as an ``errors`` list
    as_error_list = False

    def __init__(self, message: str | None = None, details: dict | None = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Render the error as a response envelope."""
        if self.as_error_list:
            return {
                "status": "error",
                "errors": [{"code": self.code, "message": self.message}],
            }
        response = {
            "status": "error",
            "code": self.code,
            "message": self.message,
        }
        if self.details and self.status_code < 500:
            response["details"] = self.details
        return response


class ValidationError(KVaultError):
    """Request data is missing or malformed."""

    code = "INVALID_REQUEST"
    status_code = 400
    default_message = "Invalid request."


class MissingFieldsError(ValidationError):
    code = "MISSING_FIELDS"
    default_message = "Missing fields. Please provide both username and password."


class ConflictError(KVaultError):
    """A uniqueness constraint would be violated."""

    code = "CONFLICT"
    status_code = 409
    default_message = "The resource already exists."


class UsernameExistsError(ConflictError):
    code = "USERNAME_EXISTS"
    default_message = (
        "The provided username is already taken. Please choose a different username."
    )
    as_error_list = True


class EmailExistsError(ConflictError):
    code = "EMAIL_EXISTS"
    default_message = (
        "The provided email is already registered. Please use a different email address."
    )
    as_error_list = True


class KeyExistsError(ConflictError):
    code = "KEY_EXISTS"
    default_message = (
        "The provided key already exists in the database. "
        "To update an existing key, use the update API."
    )


class AuthenticationError(KVaultError):
    """Credentials or token could not be verified."""

    code = "UNAUTHORIZED"
    status_code = 401
    default_message = "Authentication required."


class InvalidCredentialsError(AuthenticationError):
    code = "INVALID_CREDENTIALS"
    default_message = (
        "Invalid credentials. The provided username or password is incorrect."
    )


class InvalidTokenError(AuthenticationError):
    """Bearer token absent (401) or rejected (403)."""

    code = "INVALID_TOKEN"
    default_message = "Invalid access token provided."

    def __init__(
        self,
        message: str | None = None,
        details: dict | None = None,
        status_code: int = 403
    ):
        super().__init__(message, details)
        self.status_code = status_code


class ResourceNotFound(KVaultError):
    code = "NOT_FOUND"
    status_code = 404
    default_message = "The requested resource was not found."


class KeyNotFoundError(ResourceNotFound):
    code = "KEY_NOT_FOUND"
    default_message = "The provided key does not exist in the database."


class DatabaseError(KVaultError):
    """Persistence layer failure; reported to clients as a generic 500."""
