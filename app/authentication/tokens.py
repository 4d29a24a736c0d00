"""
Token codec for bearer authentication.

Issues and verifies signed access tokens that embed the caller's identity.
Signing, expiry and claim validation are delegated to
djangorestframework-simplejwt's AccessToken (HS256 with SECRET_KEY,
lifetime from SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"]).

Claims:
    user_id:   User primary key (SIMPLE_JWT["USER_ID_CLAIM"])
    user_name: User display name at the time the token was issued

Usage:
    from authentication.tokens import issue_token, verify_token

    raw = issue_token(user)
    token_data = verify_token(raw)
    token_data.user_id, token_data.user_name
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

if TYPE_CHECKING:
    from authentication.models import User

USER_NAME_CLAIM = "user_name"


class InvalidTokenError(Exception):
    """Raised when a token is corrupt, expired, wrongly signed or lacks claims."""


@dataclass(frozen=True)
class TokenData:
    """
    Verified identity carried by a bearer token.

    Views receive it as request.auth and pass it to services explicitly.
    """

    user_id: int
    user_name: str

    @classmethod
    def from_token(cls, token: AccessToken) -> TokenData:
        """
        Build identity from a validated access token.

        Raises:
            InvalidTokenError: If the identity claims are missing or malformed
        """
        try:
            return cls(
                user_id=int(token[api_settings.USER_ID_CLAIM]),
                user_name=str(token[USER_NAME_CLAIM]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidTokenError(f"Token is missing identity claims: {exc}") from exc


def issue_token(user: User) -> str:
    """
    Issue a signed access token for a user.

    Args:
        user: Authenticated user

    Returns:
        Encoded token string
    """
    token = AccessToken.for_user(user)
    token[USER_NAME_CLAIM] = user.name
    return str(token)


def decode_token(raw: str) -> AccessToken:
    """
    Decode and validate a raw token string.

    Raises:
        InvalidTokenError: On bad signature, expiry or malformed input
    """
    try:
        return AccessToken(raw)
    except TokenError as exc:
        raise InvalidTokenError(str(exc)) from exc


def verify_token(raw: str) -> TokenData:
    """
    Verify a raw token string and return the identity it carries.

    Verifying the same valid token any number of times yields equal TokenData.

    Raises:
        InvalidTokenError: If the token cannot be trusted
    """
    return TokenData.from_token(decode_token(raw))
