"""
Test configuration and fixtures for authentication tests.

This module provides:
- Reusable user fixtures
- Token fixtures for bearer authentication
- API client helpers for authenticated requests

Usage:
    def test_example(authenticated_client):
        response = authenticated_client.get('/api/v1/search/users/?name=ada')
        assert response.status_code == 200
"""

import pytest
from rest_framework.test import APIClient

from authentication.tests.factories import UserFactory
from authentication.tokens import TokenData, issue_token


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def password():
    """Plain-text password of the default user fixture."""
    return "TestPass123!"


@pytest.fixture
def user(db, password):
    """Create a basic active user with a known password."""
    return UserFactory(name="Ada Lovelace", email="ada@example.com", password=password)


@pytest.fixture
def other_user(db):
    """Create another active user."""
    return UserFactory(name="Grace Hopper", email="grace@example.com")


@pytest.fixture
def deactivated_user(db, password):
    """Create a deactivated user (is_active=False)."""
    return UserFactory(is_active=False, password=password)


# =============================================================================
# Token Fixtures
# =============================================================================


@pytest.fixture
def access_token(user):
    """Bearer token issued for the default user."""
    return issue_token(user)


@pytest.fixture
def token_data(user):
    """Identity of the default user as carried by its token."""
    return TokenData(user_id=user.id, user_name=user.name)


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def api_client():
    """Unauthenticated API client."""
    return APIClient()


@pytest.fixture
def authenticated_client(access_token):
    """API client sending the default user's bearer token."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {access_token}")
    return client
