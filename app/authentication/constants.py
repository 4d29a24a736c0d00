"""
Client-facing message constants for the authentication API.

Every failure body returned by the register, login and search endpoints,
and by the bearer-token gate, carries one of these values so clients can
match on them.

Import example:
    from authentication.constants import AuthorizationMessage, RegisterAPIMessage
"""

from typing import Final


class AuthFormField:
    """Request body field names used in form error entries."""

    NAME: Final[str] = "name"
    EMAIL: Final[str] = "email"
    PASSWORD: Final[str] = "password"


class RegisterAPIMessage:
    """Register route response messages."""

    REGISTER_SUCCEEDED: Final[str] = "Account successfully created."
    REGISTER_FAILED: Final[str] = "An error occurred attempting to create the account."
    EMAIL_IN_USE: Final[str] = "An account with this email already exists."


class LoginAPIMessage:
    """Login route response messages."""

    INVALID_EMAIL: Final[str] = "No account exists with this email."
    INVALID_CREDENTIALS: Final[str] = "The provided credentials are invalid."
    LOGIN_FAILED: Final[str] = "An error occurred attempting to log in."


class AuthorizationMessage:
    """Bearer-token gate and membership check messages."""

    MISSING_TOKEN: Final[str] = "An authorization token is required."
    INVALID_TOKEN: Final[str] = "The authorization token is invalid or has expired."
    UNAUTHORIZED: Final[str] = "You are not authorized to perform this action."


class SearchAPIMessage:
    """User search route response messages."""

    BLANK_NAME_SEARCH: Final[str] = 'Query param "name" is expected to have a value.'
    SEARCH_ERROR: Final[str] = "An error occurred attempting search."


# Maximum number of users returned by a name search
USER_SEARCH_LIMIT: Final[int] = 20
