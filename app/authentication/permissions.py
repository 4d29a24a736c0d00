"""
Permission classes for token-protected routes.

HasTokenData is the default DRF permission class. It requires that
BearerTokenAuthentication produced a TokenData for the request and
answers 401 MISSING_TOKEN otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework import permissions
from rest_framework.exceptions import NotAuthenticated

from authentication.constants import AuthorizationMessage
from authentication.tokens import TokenData

if TYPE_CHECKING:
    from rest_framework.request import Request
    from rest_framework.views import APIView


class HasTokenData(permissions.BasePermission):
    """Allows access only to requests carrying a verified bearer token."""

    def has_permission(self, request: Request, view: APIView) -> bool:
        """Reject requests that reached the view without a verified token."""
        if not isinstance(request.auth, TokenData):
            raise NotAuthenticated(AuthorizationMessage.MISSING_TOKEN)
        return True
