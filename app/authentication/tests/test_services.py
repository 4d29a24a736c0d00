"""
Tests for AccountService and UserService business logic.

This module tests:
- register: Account creation, email conflicts, store failures
- login: Credential checks and token issue
- search_by_name: Name search for chat invitations

Test Organization:
    - Each service method has its own test class
    - Each test validates ONE specific behavior
    - Tests use descriptive names following the pattern: test_<scenario>_<expected_outcome>

Dependencies:
    - pytest and pytest-django for test framework
    - unittest.mock to simulate store failures
    - Factory Boy fixtures from conftest.py
"""

from unittest import mock

from django.db import DatabaseError

from authentication.constants import (
    USER_SEARCH_LIMIT,
    LoginAPIMessage,
    RegisterAPIMessage,
    SearchAPIMessage,
)
from authentication.models import User
from authentication.services import AccountService, UserService
from authentication.tests.factories import UserFactory
from authentication.tokens import verify_token


# =============================================================================
# TestRegister
# =============================================================================


class TestRegister:
    """Tests for AccountService.register()."""

    def test_register_creates_user_with_hashed_password(self, db):
        """
        Registration stores the user with a usable hashed password.

        Why it matters: This is the primary happy path for account creation.
        """
        result = AccountService.register(name="A", email="a@x.com", password="p1")

        assert result.success
        user = User.objects.get(email="a@x.com")
        assert user.name == "A"
        assert user.check_password("p1")

    def test_register_duplicate_email_is_conflict(self, db):
        """
        A second registration with the same email fails with EMAIL_IN_USE.

        Why it matters: Emails identify accounts; duplicates would make
        login ambiguous.
        """
        AccountService.register(name="A", email="a@x.com", password="p1")

        result = AccountService.register(name="B", email="a@x.com", password="p2")

        assert not result.success
        assert result.error_code == "EMAIL_IN_USE"
        assert result.errors == [{"message": RegisterAPIMessage.EMAIL_IN_USE, "field": "email"}]

    def test_register_duplicate_email_leaves_existing_user_unchanged(self, db):
        """
        A refused registration does not touch the existing account.

        Why it matters: Otherwise anyone could reset a user's name or
        password by registering their email again.
        """
        AccountService.register(name="A", email="a@x.com", password="p1")

        AccountService.register(name="B", email="a@x.com", password="p2")

        user = User.objects.get(email="a@x.com")
        assert user.name == "A"
        assert user.check_password("p1")
        assert User.objects.count() == 1

    def test_register_removes_user_when_password_save_fails(self, db):
        """
        If storing the password fails, the new row is deleted again.

        Why it matters: A half-registered account would block the email
        forever while being impossible to log into.
        """
        with mock.patch.object(User, "set_password", side_effect=DatabaseError("boom")):
            result = AccountService.register(name="A", email="a@x.com", password="p1")

        assert not result.success
        assert result.error_code == "REGISTER_FAILED"
        assert result.error == RegisterAPIMessage.REGISTER_FAILED
        assert not User.objects.filter(email="a@x.com").exists()


# =============================================================================
# TestLogin
# =============================================================================


class TestLogin:
    """Tests for AccountService.login()."""

    def test_login_returns_token_for_user(self, user, password):
        """
        Correct credentials yield a token carrying the user's identity.

        Why it matters: The token is the only credential chat routes accept.
        """
        result = AccountService.login(email=user.email, password=password)

        assert result.success
        token_data = verify_token(result.data)
        assert token_data.user_id == user.id
        assert token_data.user_name == user.name

    def test_login_unknown_email_fails(self, db):
        """Unknown emails fail with INVALID_EMAIL on the email field."""
        result = AccountService.login(email="nobody@x.com", password="p1")

        assert not result.success
        assert result.error_code == "INVALID_EMAIL"
        assert result.errors == [{"message": LoginAPIMessage.INVALID_EMAIL, "field": "email"}]

    def test_login_wrong_password_fails(self, user):
        """
        A wrong password fails with INVALID_CREDENTIALS and no token.

        Why it matters: Core authentication guarantee.
        """
        result = AccountService.login(email=user.email, password="wrong")

        assert not result.success
        assert result.error_code == "INVALID_CREDENTIALS"
        assert result.data is None

    def test_login_deactivated_user_fails(self, deactivated_user, password):
        """Deactivated accounts cannot log in."""
        result = AccountService.login(email=deactivated_user.email, password=password)

        assert not result.success
        assert result.error_code == "INVALID_CREDENTIALS"

    def test_login_store_failure_returns_login_failed(self, db):
        """Store errors degrade to LOGIN_FAILED."""
        with mock.patch.object(User.objects, "filter", side_effect=DatabaseError("down")):
            result = AccountService.login(email="a@x.com", password="p1")

        assert not result.success
        assert result.error_code == "LOGIN_FAILED"
        assert result.error == LoginAPIMessage.LOGIN_FAILED


# =============================================================================
# TestSearchByName
# =============================================================================


class TestSearchByName:
    """Tests for UserService.search_by_name()."""

    def test_search_matches_case_insensitive_substring(self, token_data, db):
        """
        Names containing the search text match regardless of case.

        Why it matters: Users search for people they want to add to a chat.
        """
        grace = UserFactory(name="Grace Hopper")
        UserFactory(name="Alan Turing")

        result = UserService.search_by_name(token_data, "HOP")

        assert result.success
        assert result.data == [grace]

    def test_search_excludes_caller(self, user, token_data):
        """The caller never appears in their own search results."""
        result = UserService.search_by_name(token_data, user.name)

        assert result.success
        assert user not in result.data

    def test_search_excludes_inactive_users(self, token_data, db):
        """Deactivated users are not offered as chat members."""
        UserFactory(name="Grace Hopper", is_active=False)

        result = UserService.search_by_name(token_data, "Grace")

        assert result.data == []

    def test_search_is_ordered_and_capped(self, token_data, db):
        """Results are ordered by name and capped at USER_SEARCH_LIMIT."""
        for index in range(USER_SEARCH_LIMIT + 5):
            UserFactory(name=f"Member {index:02d}")

        result = UserService.search_by_name(token_data, "member")

        names = [found.name for found in result.data]
        assert len(names) == USER_SEARCH_LIMIT
        assert names == sorted(names)

    def test_search_store_failure_returns_search_error(self, token_data):
        """Store errors degrade to SEARCH_ERROR."""
        with mock.patch.object(User.objects, "filter", side_effect=DatabaseError("down")):
            result = UserService.search_by_name(token_data, "ada")

        assert not result.success
        assert result.error == SearchAPIMessage.SEARCH_ERROR
