"""
API-layer exception handling.

DRF raises its own exceptions for authentication, permission and parsing
failures. By default those render as {"detail": ...}. Every failure body of
this API carries a stable "message" key instead, so this module reshapes them.

Registered in settings:
    REST_FRAMEWORK = {
        "EXCEPTION_HANDLER": "core.exceptions.api_exception_handler",
    }

Response shapes:
    {"detail": "..."}          -> {"message": "..."}
    {"field": ["msg", ...]}    -> {"errors": [{"message": "msg", "field": "field"}]}

Note:
    Expected service failures never raise; they are returned as
    core.services.ServiceResult and rendered by the views.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rest_framework.views import exception_handler

from core.responses import form_errors, generic_response

if TYPE_CHECKING:
    from typing import Any

    from rest_framework.response import Response

logger = logging.getLogger(__name__)


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """
    Convert DRF exceptions into the API's error body format.

    Args:
        exc: The raised exception
        context: DRF handler context (view, request, args, kwargs)

    Returns:
        Response with a reshaped body, or None for exceptions DRF does not
        handle (Django then returns a 500)
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, dict) and "detail" in data:
        response.data = generic_response(str(data["detail"]))
    elif isinstance(data, (dict, list)):
        response.data = {"errors": form_errors(data)}

    if response.status_code in (401, 403):
        view = context.get("view")
        logger.warning(
            f"Rejected request to {view.__class__.__name__ if view else 'unknown view'}: "
            f"{response.status_code} {response.data}"
        )

    return response
