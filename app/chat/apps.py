"""
Chat application configuration.

This app provides group chats with:
- Chat creation with an opening message
- Latest message per chat
- Member listing and message posting for members
"""

from django.apps import AppConfig


class ChatConfig(AppConfig):
    """Configuration for the chat application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "chat"
    verbose_name = "Chat"
