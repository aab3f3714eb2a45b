"""Authentication endpoints for kvault.

These endpoints handle account creation and token issue:
- POST /api/register - Register a user
- POST /api/token - Exchange username and password for an access token

Neither endpoint requires authentication.
"""

from flask import Blueprint, request

from ..auth.schemas import RegisterRequest, TokenRequest
from ..dependencies import get_services
from .responses import success
from .validation import validate_request


auth_bp = Blueprint("auth", __name__)


@auth_bp.post("/register")
@validate_request
def register(data: RegisterRequest):
    """
    Register a new user.

    Request Body (RegisterRequest):
        - username: str (required, unique)
        - email: str (required, unique)
        - password: str (required)
        - full_name: str (required)
        - age: int | None
        - gender: str | None

    Returns:
        201: Created user record
        400: INVALID_REQUEST
        409: USERNAME_EXISTS / EMAIL_EXISTS

    Example response:
    ```json
    {
        "status": "success",
        "message": "User successfully registered!",
        "data": {
            "id": 1,
            "username": "alice",
            "email": "alice@x.com",
            "password": "$2b$10$...",
            "full_name": "Alice A",
            "age": null,
            "gender": null,
            "created_at": "2026-01-01T10:30:00Z",
            "updated_at": "2026-01-01T10:30:00Z"
        }
    }
    ```
    """
    services = get_services()
    user = services.auth.register(data)

    exclude = None if services.settings.expose_password_hash else {"password"}
    return success(
        "User successfully registered!",
        user.model_dump(exclude=exclude),
        status=201
    )


@auth_bp.post("/token")
def issue_token():
    """
    Issue an access token for valid credentials.

    Request Body (TokenRequest):
        - username: str (required)
        - password: str (required)

    Any body that is not a JSON object carries no credentials and is
    answered with MISSING_FIELDS.

    Returns:
        200: {access_token, expires_in}
        400: MISSING_FIELDS
        401: INVALID_CREDENTIALS
    """
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        body = {}

    token_response = get_services().auth.issue_token(TokenRequest.model_validate(body))
    return success(
        "Access token generated successfully.",
        token_response.model_dump()
    )
