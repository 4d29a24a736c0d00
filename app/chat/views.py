"""
Views for chat API.

This module provides REST API endpoints for the chat system:
- ChatListCreateView: Latest message per chat, chat creation
- ChatMembersView: Members of a chat
- ChatMessagesView: Posting messages to a chat

URL Structure:
    /api/v1/chats/                    GET, POST
    /api/v1/chats/{id}/members/       GET
    /api/v1/chats/{id}/messages/      POST

Design Decisions:
    - Every route requires a bearer token; request.auth is the caller's
      TokenData and is passed to the services explicitly
    - Business logic lives in chat.services; views map ServiceResult error
      codes to HTTP statuses
    - Non-members get 403 whether or not the chat exists
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from chat.serializers import (
    ChatCreateSerializer,
    ChatMemberSerializer,
    ChatPreviewSerializer,
    MessageCreateSerializer,
    SentMessageSerializer,
)
from chat.services import ChatService, MessageService
from core.responses import error_response, form_errors, generic_response


def _validation_failed(serializer):
    """Render serializer errors as a 400 {"errors": [...]} response."""
    return Response(
        error_response(form_errors(serializer.errors)),
        status=status.HTTP_400_BAD_REQUEST,
    )


def _forbidden(result):
    """Render a NOT_A_MEMBER failure as a 403 {"message": ...} response."""
    return Response(generic_response(result.error), status=status.HTTP_403_FORBIDDEN)


class ChatListCreateView(APIView):
    """
    API view for the caller's chats.

    GET: Latest message of every chat the caller belongs to
    POST: Create a group chat with an opening message
    """

    @extend_schema(
        operation_id="chats_list",
        summary="List chats",
        description="Latest message of every chat the caller belongs to, newest first.",
        tags=["Chat - Chats"],
        responses={200: ChatPreviewSerializer(many=True)},
    )
    def get(self, request):
        """
        List the caller's chats.

        Returns:
            {"chats": [{"id": 1, "name": "...", "message": {"author": ..., "text": ..., "createdAt": ...}}]}
        """
        result = ChatService.list_latest_chats(request.auth)
        if not result.success:
            return Response(
                error_response([generic_response(result.error)]),
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response({"chats": ChatPreviewSerializer(result.data, many=True).data})

    @extend_schema(
        operation_id="chats_create",
        summary="Create chat",
        description="Create a group chat with the listed users and the caller.",
        tags=["Chat - Chats"],
        request=ChatCreateSerializer,
        responses={
            201: ChatPreviewSerializer,
            400: OpenApiResponse(description="Form errors"),
            500: OpenApiResponse(description="Chat could not be created"),
        },
    )
    def post(self, request):
        """
        Create a chat.

        Request body:
            {
                "userIDs": [2, 3],
                "chatName": "Project Team",
                "message": "Hello everyone!"
            }

        Returns:
            {"chat": {"id": 1, "name": "Project Team", "message": {...}}}
        """
        serializer = ChatCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return _validation_failed(serializer)

        result = ChatService.create_chat(request.auth, **serializer.validated_data)
        if not result.success:
            return Response(
                generic_response(result.error),
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {"chat": ChatPreviewSerializer(result.data).data},
            status=status.HTTP_201_CREATED,
        )


class ChatMembersView(APIView):
    """
    API view for chat members.

    GET: Members of a chat the caller belongs to
    """

    @extend_schema(
        operation_id="chats_members_list",
        summary="List chat members",
        tags=["Chat - Members"],
        responses={
            200: ChatMemberSerializer(many=True),
            403: OpenApiResponse(description="Caller is not a member"),
        },
    )
    def get(self, request, chat_id):
        """
        List the members of a chat.

        Returns:
            {"members": [{"id": 1, "name": "Ada Lovelace"}, ...]}
        """
        result = ChatService.list_members(request.auth, chat_id)
        if not result.success:
            if result.error_code == "NOT_A_MEMBER":
                return _forbidden(result)
            return Response(
                error_response([generic_response(result.error)]),
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response({"members": ChatMemberSerializer(result.data, many=True).data})


class ChatMessagesView(APIView):
    """
    API view for chat messages.

    POST: Post a message to a chat the caller belongs to
    """

    @extend_schema(
        operation_id="chats_messages_create",
        summary="Send message",
        tags=["Chat - Messages"],
        request=MessageCreateSerializer,
        responses={
            201: SentMessageSerializer,
            400: OpenApiResponse(description="Form errors"),
            403: OpenApiResponse(description="Caller is not a member"),
        },
    )
    def post(self, request, chat_id):
        """
        Send a message.

        Request body:
            {"message": "Hi!"}

        Returns:
            {"message": {"id": 7, "author": "...", "text": "Hi!", "createdAt": "..."}}
        """
        serializer = MessageCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return _validation_failed(serializer)

        result = MessageService.send_message(
            request.auth, chat_id, serializer.validated_data["message"]
        )
        if not result.success:
            if result.error_code == "NOT_A_MEMBER":
                return _forbidden(result)
            return Response(
                generic_response(result.error),
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {"message": SentMessageSerializer(result.data).data},
            status=status.HTTP_201_CREATED,
        )
