"""
Chat system service layer.

This module provides the business logic for group chats: creating chats,
listing each chat's latest message, listing members and posting messages.

Services:
    ChatService: Chat creation and chat queries
    MessageService: Posting messages to an existing chat

Design Principles:
    - Services are stateless (use class methods)
    - The caller's identity is passed in explicitly as TokenData
    - Expected failures (non-member access, store errors) return
      ServiceResult.failure() with a client-facing message
    - Writes spanning several tables run in a single transaction

Usage:
    from chat.services import ChatService, MessageService

    result = ChatService.create_chat(
        token_data,
        user_ids=[2, 3],
        chat_name="Project Team",
        message="Hello everyone!",
    )
    if result.success:
        preview = result.data  # ChatPreview

    result = ChatService.list_latest_chats(token_data)
    result = ChatService.list_members(token_data, chat_id=1)
    result = MessageService.send_message(token_data, chat_id=1, message="Hi")
"""

from __future__ import annotations

import operator
from functools import reduce
from typing import TYPE_CHECKING

from django.db import DatabaseError
from django.db.models import Max, Q

from authentication.constants import AuthorizationMessage
from chat.constants import ChatAPIMessage
from chat.models import Chat, Message, MessageRecipient, UserChat
from chat.types import ChatMember, ChatPreview, MessagePreview, SentMessage
from core.services import BaseService, ServiceResult

if TYPE_CHECKING:
    from authentication.tokens import TokenData


class ChatService(BaseService):
    """
    Service for chat creation and chat queries.

    Methods:
        create_chat: Create a group chat with an opening message
        list_latest_chats: Latest message of every chat the caller belongs to
        list_members: Members of a chat the caller belongs to
        is_member: Membership check used by the chat operations
    """

    @classmethod
    def create_chat(
        cls,
        token_data: TokenData,
        user_ids: list[int],
        chat_name: str,
        message: str,
    ) -> ServiceResult[ChatPreview]:
        """
        Create a group chat, its memberships and its opening message.

        The caller is appended to user_ids to form the member list. The list
        is used as given: a caller who also lists their own id ends up with
        two memberships.

        Implementation:
            1. Create the chat
            2. Create the opening message authored by the caller
            3. Create one UserChat per entry of the member list
            4. Create one MessageRecipient per UserChat

        All four steps run in one transaction, so a failure leaves no
        partial chat behind.

        Args:
            token_data: Caller identity
            user_ids: Validated ids of the other members
            chat_name: Validated chat name
            message: Validated opening message text

        Returns:
            ServiceResult with a ChatPreview of the new chat

        Error codes:
            CHAT_CREATE_FAILED: Store failure
        """
        member_ids = list(user_ids) + [token_data.user_id]

        try:
            with cls.atomic():
                chat = Chat.objects.create(name=chat_name, is_group=True)
                opening = Message.objects.create(
                    message=message,
                    user_id=token_data.user_id,
                    chat=chat,
                )
                memberships = UserChat.objects.bulk_create(
                    [UserChat(user_id=user_id, chat=chat) for user_id in member_ids]
                )
                MessageRecipient.objects.bulk_create(
                    [
                        MessageRecipient(
                            user_chat=membership,
                            user_id=membership.user_id,
                            message=opening,
                        )
                        for membership in memberships
                    ]
                )
        except DatabaseError as exc:
            return cls.handle_exception(
                exc,
                "create chat",
                ChatAPIMessage.ERROR_CREATING_CHAT,
                "CHAT_CREATE_FAILED",
            )

        cls.get_logger().info(
            f"Created chat {chat.id} with {len(memberships)} memberships "
            f"by user {token_data.user_id}"
        )

        return ServiceResult.success(
            ChatPreview(
                id=chat.id,
                name=chat.name,
                message=MessagePreview(
                    author=token_data.user_name,
                    text=opening.message,
                    created_at=opening.created_at,
                ),
            )
        )

    @classmethod
    def list_latest_chats(cls, token_data: TokenData) -> ServiceResult[list[ChatPreview]]:
        """
        Get the latest message of every chat the caller belongs to.

        Implementation:
            Phase 1: For each of the caller's memberships, find the newest
                     receipt time (GROUP BY user_chat, MAX(created_at)).
            Phase 2: Fetch the receipts matching those (membership, time)
                     pairs joined to their message, author and chat.

        Results are ordered newest first. Chats whose latest messages share a
        timestamp are ordered by chat id ascending.

        Args:
            token_data: Caller identity

        Returns:
            ServiceResult with a list of ChatPreview

        Error codes:
            CHAT_FETCH_FAILED: Store failure
        """
        try:
            latest = list(
                MessageRecipient.objects.filter(user_id=token_data.user_id)
                .values("user_chat")
                .annotate(latest_at=Max("created_at"))
                .order_by()
            )

            if not latest:
                return ServiceResult.success([])

            pairs = reduce(
                operator.or_,
                (
                    Q(user_chat_id=row["user_chat"], created_at=row["latest_at"])
                    for row in latest
                ),
            )

            receipts = list(
                MessageRecipient.objects.filter(pairs, user_id=token_data.user_id)
                .select_related("message__user", "user_chat__chat")
                .order_by("-created_at", "user_chat__chat_id", "id")
            )
        except DatabaseError as exc:
            return cls.handle_exception(
                exc,
                "fetch latest chats",
                ChatAPIMessage.ERROR_FETCHING_CHAT,
                "CHAT_FETCH_FAILED",
            )

        return ServiceResult.success([cls._to_preview(receipt) for receipt in receipts])

    @staticmethod
    def _to_preview(receipt: MessageRecipient) -> ChatPreview:
        """Map a joined receipt row to a ChatPreview."""
        chat = receipt.user_chat.chat
        return ChatPreview(
            id=chat.id,
            name=chat.name,
            message=MessagePreview(
                author=receipt.message.user.name,
                text=receipt.message.message,
                created_at=receipt.message.created_at,
            ),
        )

    @classmethod
    def is_member(cls, token_data: TokenData, chat_id: int) -> bool:
        """Check whether the caller holds a membership in the chat."""
        return UserChat.objects.filter(chat_id=chat_id, user_id=token_data.user_id).exists()

    @classmethod
    def list_members(
        cls,
        token_data: TokenData,
        chat_id: int,
    ) -> ServiceResult[list[ChatMember]]:
        """
        Get the members of a chat.

        Non-members are refused whether or not the chat exists.

        Args:
            token_data: Caller identity
            chat_id: Chat to list

        Returns:
            ServiceResult with a ChatMember per membership, in membership order

        Error codes:
            NOT_A_MEMBER: Caller has no membership in the chat
            MEMBERS_FETCH_FAILED: Store failure
        """
        try:
            if not cls.is_member(token_data, chat_id):
                cls.get_logger().warning(
                    f"User {token_data.user_id} refused members of chat {chat_id}"
                )
                return ServiceResult.failure(
                    AuthorizationMessage.UNAUTHORIZED, error_code="NOT_A_MEMBER"
                )

            memberships = (
                UserChat.objects.filter(chat_id=chat_id)
                .select_related("user")
                .order_by("id")
            )
            members = [
                ChatMember(id=membership.user.id, name=membership.user.name)
                for membership in memberships
            ]
        except DatabaseError as exc:
            return cls.handle_exception(
                exc,
                "fetch chat members",
                ChatAPIMessage.ERROR_FETCHING_CHAT_MEMBERS,
                "MEMBERS_FETCH_FAILED",
            )

        return ServiceResult.success(members)


class MessageService(BaseService):
    """
    Service for posting messages.

    Methods:
        send_message: Post a message to a chat the caller belongs to
    """

    @classmethod
    def send_message(
        cls,
        token_data: TokenData,
        chat_id: int,
        message: str,
    ) -> ServiceResult[SentMessage]:
        """
        Post a message and deliver it to every membership of the chat.

        Args:
            token_data: Caller identity
            chat_id: Target chat
            message: Validated message text

        Returns:
            ServiceResult with the SentMessage

        Error codes:
            NOT_A_MEMBER: Caller has no membership in the chat
            MESSAGE_SEND_FAILED: Store failure
        """
        try:
            if not ChatService.is_member(token_data, chat_id):
                cls.get_logger().warning(
                    f"User {token_data.user_id} refused posting to chat {chat_id}"
                )
                return ServiceResult.failure(
                    AuthorizationMessage.UNAUTHORIZED, error_code="NOT_A_MEMBER"
                )

            with cls.atomic():
                sent = Message.objects.create(
                    message=message,
                    user_id=token_data.user_id,
                    chat_id=chat_id,
                )
                MessageRecipient.objects.bulk_create(
                    [
                        MessageRecipient(
                            user_chat=membership,
                            user_id=membership.user_id,
                            message=sent,
                        )
                        for membership in UserChat.objects.filter(chat_id=chat_id)
                    ]
                )
        except DatabaseError as exc:
            return cls.handle_exception(
                exc,
                "send message",
                ChatAPIMessage.ERROR_SENDING_MESSAGE,
                "MESSAGE_SEND_FAILED",
            )

        cls.get_logger().info(f"User {token_data.user_id} sent message {sent.id} to chat {chat_id}")

        return ServiceResult.success(
            SentMessage(
                id=sent.id,
                author=token_data.user_name,
                text=sent.message,
                created_at=sent.created_at,
            )
        )
