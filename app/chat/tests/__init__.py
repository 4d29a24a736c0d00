"""
Tests for chat app.

This package contains test modules for:
- test_models.py: Chat, UserChat, Message, MessageRecipient
- test_serializers.py: Request validation and rendering
- test_services.py: ChatService and MessageService
- test_views.py: API endpoint tests
"""
