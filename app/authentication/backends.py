"""
Bearer token authentication for the REST API.

BearerTokenAuthentication is the default DRF authentication class. It
verifies the token in the Authorization header and exposes the caller's
identity as a typed TokenData on request.auth. request.user is a
simplejwt TokenUser built from the same token, so no database lookup
happens per request.

Header format:
    Authorization: Bearer <token>

Outcomes:
    - No Authorization header (or another scheme): not authenticated; the
      HasTokenData permission answers 401 MISSING_TOKEN
    - Malformed header or token failing verification: 401 INVALID_TOKEN,
      the view never runs
    - Valid token: (TokenUser, TokenData)

Usage in views:
    token_data: TokenData = request.auth
    result = ChatService.list_latest_chats(token_data)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.models import TokenUser

from authentication.constants import AuthorizationMessage
from authentication.tokens import InvalidTokenError, TokenData, decode_token

if TYPE_CHECKING:
    from rest_framework.request import Request

logger = logging.getLogger(__name__)


class BearerTokenAuthentication(BaseAuthentication):
    """Authenticate requests carrying a signed bearer token."""

    keyword = "Bearer"

    def authenticate(self, request: Request) -> tuple[TokenUser, TokenData] | None:
        """Verify the bearer token, if any, and return the caller's identity."""
        parts = get_authorization_header(request).split()

        if not parts or parts[0].lower() != self.keyword.lower().encode():
            return None

        if len(parts) != 2:
            raise AuthenticationFailed(AuthorizationMessage.INVALID_TOKEN)

        try:
            raw_token = parts[1].decode()
            token = decode_token(raw_token)
            token_data = TokenData.from_token(token)
        except (UnicodeError, InvalidTokenError) as exc:
            logger.info(f"Rejected bearer token: {exc}")
            raise AuthenticationFailed(AuthorizationMessage.INVALID_TOKEN) from exc

        return TokenUser(token), token_data

    def authenticate_header(self, request: Request) -> str:
        """Advertise the scheme so DRF answers 401 rather than 403."""
        return f'{self.keyword} realm="api"'
