"""
Serializers for chat API.

This module provides serializers for the chat system:
- Request validation for chat creation and message sending
- Rendering of the read models in chat.types

Serializer Hierarchy:
    ChatCreateSerializer: Body of POST /chats/
    MessageCreateSerializer: Body of POST /chats/{id}/messages/

    ChatPreviewSerializer: Chat with its latest message
    MessagePreviewSerializer: Latest message inside a chat preview
    ChatMemberSerializer: Member id and name
    SentMessageSerializer: Message that was just posted

Design Decisions:
    - Read and write serializers are separate for clarity
    - Wire field names are camelCase; validated_data uses snake_case via source=
    - Output serializers render frozen dataclasses, not model instances
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework import serializers

from chat.constants import CHAT_CONFIG, ChatFormMessage

User = get_user_model()


# =============================================================================
# Request Serializers
# =============================================================================


class MessageCreateSerializer(serializers.Serializer):
    """
    Validate the body of POST /api/v1/chats/{id}/messages/.

    Fields:
        message: Non-blank text, at most MAX_MESSAGE_LENGTH characters
    """

    MESSAGE_ERRORS = {
        "required": ChatFormMessage.BLANK_MESSAGE,
        "blank": ChatFormMessage.BLANK_MESSAGE,
        "null": ChatFormMessage.BLANK_MESSAGE,
    }

    message = serializers.CharField(
        max_length=CHAT_CONFIG.MAX_MESSAGE_LENGTH,
        error_messages=MESSAGE_ERRORS,
    )


class ChatCreateSerializer(serializers.Serializer):
    """
    Validate the body of POST /api/v1/chats/.

    Fields:
        userIDs: Non-empty list of ids of existing users (the caller is
                 added by the service)
        chatName: Non-blank name, at most MAX_CHAT_NAME_LENGTH characters
        message: Opening message (see MessageCreateSerializer)

    Validated data keys: user_ids, chat_name, message
    """

    userIDs = serializers.ListField(
        source="user_ids",
        child=serializers.IntegerField(min_value=1),
        allow_empty=False,
        error_messages={
            "required": ChatFormMessage.MISSING_USERS,
            "empty": ChatFormMessage.MISSING_USERS,
            "null": ChatFormMessage.MISSING_USERS,
        },
    )
    chatName = serializers.CharField(
        source="chat_name",
        max_length=CHAT_CONFIG.MAX_CHAT_NAME_LENGTH,
        error_messages={
            "required": ChatFormMessage.BLANK_CHAT_NAME,
            "blank": ChatFormMessage.BLANK_CHAT_NAME,
            "null": ChatFormMessage.BLANK_CHAT_NAME,
        },
    )
    message = serializers.CharField(
        max_length=CHAT_CONFIG.MAX_MESSAGE_LENGTH,
        error_messages=MessageCreateSerializer.MESSAGE_ERRORS,
    )

    def validate_userIDs(self, value):
        """Every listed id must belong to an existing user."""
        requested = set(value)
        found = User.objects.filter(id__in=requested).count()
        if found != len(requested):
            raise serializers.ValidationError(ChatFormMessage.UNKNOWN_USERS)
        return value


# =============================================================================
# Response Serializers
# =============================================================================


class MessagePreviewSerializer(serializers.Serializer):
    """Render a chat.types.MessagePreview."""

    author = serializers.CharField(read_only=True)
    text = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)


class ChatPreviewSerializer(serializers.Serializer):
    """Render a chat.types.ChatPreview."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    message = MessagePreviewSerializer(read_only=True)


class ChatMemberSerializer(serializers.Serializer):
    """Render a chat.types.ChatMember."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)


class SentMessageSerializer(serializers.Serializer):
    """Render a chat.types.SentMessage."""

    id = serializers.IntegerField(read_only=True)
    author = serializers.CharField(read_only=True)
    text = serializers.CharField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
