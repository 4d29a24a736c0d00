"""
URL configuration for chat API.

URL Structure:
    /chats/                           GET, POST
    /chats/{id}/members/              GET
    /chats/{id}/messages/             POST

All URLs are prefixed with /api/v1/ in the main URL configuration.
"""

from django.urls import path

from chat.views import ChatListCreateView, ChatMembersView, ChatMessagesView

app_name = "chat"

urlpatterns = [
    path("chats/", ChatListCreateView.as_view(), name="chat-list"),
    path("chats/<int:chat_id>/members/", ChatMembersView.as_view(), name="chat-members"),
    path("chats/<int:chat_id>/messages/", ChatMessagesView.as_view(), name="chat-messages"),
]
