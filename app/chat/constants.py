"""
Constants and configuration for the chat module.

This module centralizes:
- Client-facing messages returned by the chat routes
- Request body field names used in form error entries
- Content limits for chat names and messages

Import example:
    from chat.constants import CHAT_CONFIG, ChatAPIMessage
"""

from typing import Final


# =============================================================================
# Response Messages
# =============================================================================


class ChatAPIMessage:
    """Chat route failure messages (store errors)."""

    ERROR_CREATING_CHAT: Final[str] = "An error occurred attempting to create the chat."
    ERROR_FETCHING_CHAT: Final[str] = "An error occurred attempting to fetch chats."
    ERROR_FETCHING_CHAT_MEMBERS: Final[str] = (
        "An error occurred attempting to fetch chat members."
    )
    ERROR_SENDING_MESSAGE: Final[str] = "An error occurred attempting to send the message."


class ChatFormMessage:
    """Validation messages for chat request bodies."""

    MISSING_USERS: Final[str] = "At least one user must be added to the chat."
    UNKNOWN_USERS: Final[str] = "One or more users do not exist."
    BLANK_CHAT_NAME: Final[str] = "Chat name is required."
    BLANK_MESSAGE: Final[str] = "Message is required."


class ChatFormField:
    """Request body field names (camelCase, as sent by clients)."""

    USER_IDS: Final[str] = "userIDs"
    CHAT_NAME: Final[str] = "chatName"
    MESSAGE: Final[str] = "message"


# =============================================================================
# Content Configuration
# =============================================================================


class CHAT_CONFIG:
    """Content limits for chats and messages."""

    MAX_CHAT_NAME_LENGTH: Final[int] = 100  # Characters
    MAX_MESSAGE_LENGTH: Final[int] = 10000  # Characters
