"""Key-value CRUD endpoints for kvault.

This module implements the data endpoints:
- POST   /api/data        - Store a new key
- GET    /api/data/<key>  - Retrieve a value
- PUT    /api/data/<key>  - Update a value
- DELETE /api/data/<key>  - Delete a key

Every route requires ``Authorization: Bearer <token>``. Keys are global:
any authenticated user may read or modify any entry.
"""

from flask import Blueprint, request

from ..auth import guard
from ..dependencies import get_services
from .responses import success
from .schemas import DataCreate, DataUpdate
from .validation import validate_request


data_bp = Blueprint("data", __name__)


# ============================================================================
# Authentication Guard (blueprint-level)
# ============================================================================


@data_bp.before_request
def require_token():
    """
    Reject requests without a valid bearer token before any view runs.

    Raises:
        InvalidTokenError: 401 if the header carries no token, 403 otherwise
    """
    # CORS preflight carries no credentials
    if request.method == "OPTIONS":
        return None

    result = guard.authorize(get_services().auth, request.headers.get("Authorization"))
    if not result.ok:
        raise result.error


@data_bp.post("")
@validate_request
def store_data(data: DataCreate):
    """
    Store a new key-value pair.

    Returns:
        200: Stored
        400: INVALID_REQUEST
        409: KEY_EXISTS
    """
    get_services().data.store(data.key, data.value)
    return success("Data stored successfully.")


@data_bp.get("/<path:key>")
def retrieve_data(key: str):
    """
    Retrieve the value stored under ``key``.

    Returns:
        200: {key, value}
        404: KEY_NOT_FOUND
    """
    entry = get_services().data.retrieve(key)
    return success(data=entry.model_dump())


@data_bp.put("/<path:key>")
@validate_request
def update_data(key: str, data: DataUpdate):
    """
    Overwrite the value of an existing key.

    Returns:
        200: Updated
        400: INVALID_REQUEST
        404: KEY_NOT_FOUND
    """
    get_services().data.update(key, data.value)
    return success("Data updated successfully.")


@data_bp.delete("/<path:key>")
def delete_data(key: str):
    """
    Delete a key.

    Returns:
        200: Deleted
        404: KEY_NOT_FOUND
    """
    get_services().data.delete(key)
    return success("Data deleted successfully.")
