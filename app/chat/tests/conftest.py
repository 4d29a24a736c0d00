"""
Test configuration and fixtures for chat tests.

This module provides:
- User fixtures with and without chat membership
- A group chat fixture with an opening message
- Token and API client helpers for authenticated requests

Usage:
    def test_example(group_chat, member_client):
        response = member_client.get(f'/api/v1/chats/{group_chat.id}/members/')
        assert response.status_code == 200
"""

import pytest
from rest_framework.test import APIClient

from authentication.tests.factories import UserFactory
from authentication.tokens import TokenData, issue_token
from chat.tests.factories import ChatFactory, MessageFactory, UserChatFactory, deliver


def client_for(user):
    """Build an API client sending the user's bearer token."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_token(user)}")
    return client


def token_data_for(user):
    """Identity of the user as carried by its token."""
    return TokenData(user_id=user.id, user_name=user.name)


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def creator(db):
    """User who created the group chat."""
    return UserFactory(name="Ada Lovelace")


@pytest.fixture
def member(db):
    """User who was added to the group chat."""
    return UserFactory(name="Grace Hopper")


@pytest.fixture
def outsider(db):
    """User without any chat membership."""
    return UserFactory(name="Alan Turing")


@pytest.fixture
def creator_token_data(creator):
    return token_data_for(creator)


@pytest.fixture
def member_token_data(member):
    return token_data_for(member)


@pytest.fixture
def outsider_token_data(outsider):
    return token_data_for(outsider)


# =============================================================================
# Chat Fixtures
# =============================================================================


@pytest.fixture
def group_chat(creator, member):
    """
    Group chat with creator and member, holding one delivered opening message.
    """
    chat = ChatFactory(name="Project Team")
    UserChatFactory(chat=chat, user=member)
    UserChatFactory(chat=chat, user=creator)
    deliver(MessageFactory(chat=chat, user=creator, message="Hello everyone!"))
    return chat


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def api_client():
    """Unauthenticated API client."""
    return APIClient()


@pytest.fixture
def creator_client(creator):
    return client_for(creator)


@pytest.fixture
def member_client(member):
    return client_for(member)


@pytest.fixture
def outsider_client(outsider):
    return client_for(outsider)
