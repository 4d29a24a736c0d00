"""
Response body helpers shared by all API views.

The API uses two failure body shapes:

    Generic:  {"message": "<constant>"}
    Form:     {"errors": [{"message": "<text>", "field": "<field>"}, ...]}

Form entries without a field (non-field errors, store failures) omit the
"field" key.

Usage:
    from core.responses import error_response, form_errors, generic_response

    serializer = RegisterSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(error_response(form_errors(serializer.errors)), status=400)

    return Response(generic_response(RegisterAPIMessage.REGISTER_SUCCEEDED))
"""

from __future__ import annotations

from typing import Any

from rest_framework.settings import api_settings


def generic_response(message: str) -> dict[str, str]:
    """Build a {"message": ...} body."""
    return {"message": message}


def error_response(errors: list[dict[str, str]]) -> dict[str, list[dict[str, str]]]:
    """Build an {"errors": [...]} body."""
    return {"errors": errors}


def form_errors(errors: Any, field: str | None = None) -> list[dict[str, str]]:
    """
    Flatten DRF serializer errors into a list of {message, field} entries.

    Nested errors (list items, child serializers) are reported against
    their top-level field name.

    Args:
        errors: serializer.errors, or any nested part of it
        field: Top-level field the nested errors belong to

    Returns:
        List of error entries in declaration order

    Example:
        form_errors({"email": ["Enter a valid email address."]})
        # [{"message": "Enter a valid email address.", "field": "email"}]
    """
    flattened: list[dict[str, str]] = []

    if isinstance(errors, dict):
        for key, value in errors.items():
            if field:
                name = field
            elif key == api_settings.NON_FIELD_ERRORS_KEY:
                name = None
            else:
                name = str(key)
            flattened.extend(form_errors(value, name))
    elif isinstance(errors, (list, tuple)):
        for value in errors:
            flattened.extend(form_errors(value, field))
    else:
        entry = {"message": str(errors)}
        if field:
            entry["field"] = field
        flattened.append(entry)

    return flattened
