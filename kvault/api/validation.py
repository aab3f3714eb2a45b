"""Request validation decorator.

``@validate_request`` parses the JSON body into the Pydantic model named by
the view's ``data`` parameter annotation and passes it in alongside any URL
path parameters:

    @data_bp.put("/<key>")
    @validate_request
    def update_data(key: str, data: DataUpdate):
        ...

A missing or non-JSON body is treated as an empty object so that absent
fields surface as the endpoint's own domain error. Type mismatches raise
ValidationError (400 INVALID_REQUEST).
"""

import inspect
from functools import wraps
from typing import get_type_hints

import pydantic
from flask import request

from ..exceptions import ValidationError


def _find_schema(f) -> tuple[str, type[pydantic.BaseModel]]:
    hints = get_type_hints(f)
    for name in inspect.signature(f).parameters:
        hint = hints.get(name)
        if inspect.isclass(hint) and issubclass(hint, pydantic.BaseModel):
            return name, hint
    raise TypeError(f"{f.__name__} has no Pydantic model parameter to validate")


def validate_request(f):
    """Validate the request body against the view's Pydantic model parameter."""
    param_name, schema = _find_schema(f)

    @wraps(f)
    def wrapper(*args, **kwargs):
        body = request.get_json(silent=True)
        if body is None:
            body = {}
        if not isinstance(body, dict):
            raise ValidationError("Invalid request. Request body must be a JSON object.")

        try:
            kwargs[param_name] = schema.model_validate(body)
        except pydantic.ValidationError as e:
            raise ValidationError(
                "Invalid request data",
                {"errors": e.errors(include_url=False, include_context=False)}
            )

        return f(*args, **kwargs)

    return wrapper
