"""
Chat system models.

This module defines the data models for group chats:

Models:
    Chat: Named container for messages
    UserChat: Membership of a user in a chat
    Message: Text posted to a chat by a member
    MessageRecipient: Delivery receipt of a message for one membership

Design Decisions:
    - Membership rows are not unique per (user, chat); the creation flow
      stores the member list exactly as supplied
    - Messages are immutable once created
    - One MessageRecipient exists per membership of the chat at the time the
      message was created; the latest-message-per-chat query aggregates over
      a user's receipts
"""

from __future__ import annotations

from django.conf import settings
from django.db import models

from core.models import BaseModel


class Chat(BaseModel):
    """
    A chat between a group of users.

    Fields:
        name: Display name chosen by the creator
        is_group: Always True for chats created through the API

    Relationships:
        memberships: UserChat rows of this chat
        messages: Message rows of this chat
    """

    name = models.CharField(
        max_length=100,
        help_text="Display name of the chat",
    )

    is_group = models.BooleanField(
        default=True,
        help_text="Whether this is a group chat",
    )

    class Meta:
        db_table = "chat_chat"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        """Return human-readable representation."""
        return f"Chat {self.pk}: {self.name}"


class UserChat(BaseModel):
    """
    Membership of a user in a chat.

    Fields:
        user: Member
        chat: Chat the user belongs to
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="chat_memberships",
        help_text="Member of the chat",
    )

    chat = models.ForeignKey(
        Chat,
        on_delete=models.CASCADE,
        related_name="memberships",
        help_text="Chat this membership belongs to",
    )

    class Meta:
        db_table = "chat_user_chat"
        ordering = ["id"]
        indexes = [
            # Membership checks and member listing
            models.Index(fields=["chat", "user"], name="chat_userchat_chat_user_idx"),
        ]

    def __str__(self) -> str:
        """Return human-readable representation."""
        return f"UserChat: user {self.user_id} in chat {self.chat_id}"


class Message(BaseModel):
    """
    A message posted to a chat.

    Fields:
        message: Message text
        user: Author
        chat: Chat the message was posted to
    """

    message = models.TextField(
        help_text="Message text",
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="chat_messages",
        help_text="Author of the message",
    )

    chat = models.ForeignKey(
        Chat,
        on_delete=models.CASCADE,
        related_name="messages",
        help_text="Chat this message was posted to",
    )

    class Meta:
        db_table = "chat_message"
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["chat", "created_at"], name="chat_msg_chat_created_idx"),
        ]

    def __str__(self) -> str:
        """Return human-readable representation."""
        preview = self.message[:50] + "..." if len(self.message) > 50 else self.message
        return f"Message {self.pk} in chat {self.chat_id}: {preview}"


class MessageRecipient(BaseModel):
    """
    Receipt of a message for one chat membership.

    created_at of a receipt is the delivery time the latest-message query
    aggregates on.

    Fields:
        user_chat: Membership the message was delivered to
        user: Member the membership belongs to (denormalized for filtering)
        message: Delivered message
    """

    user_chat = models.ForeignKey(
        UserChat,
        on_delete=models.CASCADE,
        related_name="receipts",
        help_text="Membership this receipt belongs to",
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="message_receipts",
        help_text="Recipient of the message",
    )

    message = models.ForeignKey(
        Message,
        on_delete=models.CASCADE,
        related_name="recipients",
        help_text="Delivered message",
    )

    class Meta:
        db_table = "chat_message_recipient"
        ordering = ["-created_at", "id"]
        indexes = [
            # Latest receipt per membership of a user
            models.Index(
                fields=["user", "user_chat", "created_at"],
                name="chat_rcpt_user_chat_time_idx",
            ),
        ]

    def __str__(self) -> str:
        """Return human-readable representation."""
        return f"MessageRecipient: message {self.message_id} to user {self.user_id}"
