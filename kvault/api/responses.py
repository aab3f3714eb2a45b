"""Success envelope helpers."""

from flask import jsonify


def success(message: str | None = None, data=None, status: int = 200):
    """
    Build a ``{"status": "success", ...}`` response.

    ``message`` and ``data`` are only included when given.
    """
    body = {"status": "success"}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return jsonify(body), status
