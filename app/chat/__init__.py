"""
Chat app for group messaging.

This app handles:
- Group chats and their memberships
- Messages and per-membership delivery receipts
- Latest-message-per-chat listing

Related apps:
    - authentication: User model for members, TokenData for the caller

Usage:
    from chat.services import ChatService

    result = ChatService.create_chat(
        token_data,
        user_ids=[2, 3],
        chat_name="Project Team",
        message="Hello!",
    )
    result = ChatService.list_latest_chats(token_data)
"""
