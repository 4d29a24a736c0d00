"""
Tests for chat models.

Test Organization:
    - TestChatModel: Defaults and representation
    - TestUserChatModel: Membership rows
    - TestMessageModel: Message representation
    - TestMessageRecipientModel: Receipts and cascades

Dependencies:
    - pytest and pytest-django for test framework
    - Factory Boy factories
"""

from chat.models import Chat, MessageRecipient, UserChat
from chat.tests.factories import (
    ChatFactory,
    MessageFactory,
    MessageRecipientFactory,
    UserChatFactory,
)


class TestChatModel:
    """Tests for the Chat model."""

    def test_chat_defaults_to_group(self, db):
        """Chats are group chats unless stated otherwise."""
        chat = Chat.objects.create(name="Team")

        assert chat.is_group is True

    def test_str_includes_name(self, db):
        chat = ChatFactory(name="Team")

        assert str(chat) == f"Chat {chat.pk}: Team"


class TestUserChatModel:
    """Tests for the UserChat model."""

    def test_duplicate_membership_is_allowed(self, db):
        """
        The same user may hold two memberships of one chat.

        Why it matters: Chat creation stores the member list as supplied,
        so the table must accept repeated (user, chat) pairs.
        """
        membership = UserChatFactory()

        UserChat.objects.create(user=membership.user, chat=membership.chat)

        assert UserChat.objects.filter(chat=membership.chat, user=membership.user).count() == 2


class TestMessageModel:
    """Tests for the Message model."""

    def test_str_truncates_long_text(self, db):
        message = MessageFactory(message="x" * 80)

        assert str(message).endswith("x" * 50 + "...")


class TestMessageRecipientModel:
    """Tests for the MessageRecipient model."""

    def test_receipt_belongs_to_membership_user_and_chat(self, db):
        """A receipt links the membership's user to a message of the same chat."""
        receipt = MessageRecipientFactory()

        assert receipt.user_id == receipt.user_chat.user_id
        assert receipt.message.chat_id == receipt.user_chat.chat_id

    def test_deleting_chat_removes_receipts(self, db):
        """Receipts are removed with their chat."""
        receipt = MessageRecipientFactory()

        receipt.user_chat.chat.delete()

        assert not MessageRecipient.objects.exists()
