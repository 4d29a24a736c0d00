"""
Read models returned by the chat query services.

Joined ORM rows are mapped into these immutable records before they reach
the serializers, so views never reach through relations themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MessagePreview:
    """Latest message of a chat as shown in the chat list."""

    author: str
    text: str
    created_at: datetime


@dataclass(frozen=True)
class ChatPreview:
    """A chat with its latest message."""

    id: int
    name: str
    message: MessagePreview


@dataclass(frozen=True)
class ChatMember:
    """A member of a chat."""

    id: int
    name: str


@dataclass(frozen=True)
class SentMessage:
    """A message that was just posted to a chat."""

    id: int
    author: str
    text: str
    created_at: datetime
