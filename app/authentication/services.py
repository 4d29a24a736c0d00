"""
Authentication service layer.

This module contains the business logic behind the public account routes
and the user search used when assembling a chat.

Services:
    AccountService: Registration and login
    UserService: User lookup by name

Usage:
    from authentication.services import AccountService

    result = AccountService.register(name="Ada", email="ada@example.com", password="pw")
    if not result.success:
        print(result.error_code)  # "EMAIL_IN_USE" / "REGISTER_FAILED"

    result = AccountService.login(email="ada@example.com", password="pw")
    if result.success:
        token = result.data
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.db import DatabaseError

from authentication.constants import (
    USER_SEARCH_LIMIT,
    AuthFormField,
    LoginAPIMessage,
    RegisterAPIMessage,
    SearchAPIMessage,
)
from authentication.models import User
from authentication.tokens import issue_token
from core.services import BaseService, ServiceResult

if TYPE_CHECKING:
    from authentication.tokens import TokenData


class AccountService(BaseService):
    """
    Service for account creation and login.

    Methods:
        register: Create a user, refusing emails already in use
        login: Check credentials and issue a bearer token
    """

    @classmethod
    def register(cls, name: str, email: str, password: str) -> ServiceResult[User]:
        """
        Register a new user.

        The user row is found-or-created by email first, so a duplicate email
        never touches the existing account. The hashed password is stored in
        a second write; if hashing or that write fails, the freshly created
        row is deleted again so no unusable account is left behind.

        Args:
            name: Display name
            email: Normalized email address
            password: Plain-text password

        Returns:
            ServiceResult with the created User

        Error codes:
            EMAIL_IN_USE: An account with this email exists
            REGISTER_FAILED: Store or hashing failure
        """
        user = None
        created = False

        try:
            user, created = User.objects.get_or_create(
                email=email,
                defaults={"name": name},
            )

            if not created:
                cls.get_logger().info(f"Registration refused, email in use: user {user.id}")
                return ServiceResult.failure(
                    RegisterAPIMessage.EMAIL_IN_USE,
                    error_code="EMAIL_IN_USE",
                    errors=[
                        {
                            "message": RegisterAPIMessage.EMAIL_IN_USE,
                            "field": AuthFormField.EMAIL,
                        }
                    ],
                )

            user.set_password(password)
            user.save(update_fields=["password"])
        except (DatabaseError, ValueError) as exc:
            if created and user is not None:
                cls._discard_user(user)
            return cls.handle_exception(
                exc,
                "register user",
                RegisterAPIMessage.REGISTER_FAILED,
                "REGISTER_FAILED",
            )

        cls.get_logger().info(f"Registered user {user.id}")
        return ServiceResult.success(user)

    @classmethod
    def _discard_user(cls, user: User) -> None:
        """Delete a half-registered user, logging if even that fails."""
        try:
            user.delete()
        except DatabaseError:
            cls.get_logger().exception(
                f"Could not remove half-registered user {user.pk}"
            )

    @classmethod
    def login(cls, email: str, password: str) -> ServiceResult[str]:
        """
        Check credentials and issue a token embedding {user_id, user_name}.

        Args:
            email: Normalized email address
            password: Plain-text password

        Returns:
            ServiceResult with the encoded token

        Error codes:
            INVALID_EMAIL: No account with this email
            INVALID_CREDENTIALS: Wrong password or inactive account
            LOGIN_FAILED: Store failure
        """
        try:
            user = User.objects.filter(email=email).first()

            if user is None:
                return ServiceResult.failure(
                    LoginAPIMessage.INVALID_EMAIL,
                    error_code="INVALID_EMAIL",
                    errors=[
                        {
                            "message": LoginAPIMessage.INVALID_EMAIL,
                            "field": AuthFormField.EMAIL,
                        }
                    ],
                )

            if not user.is_active or not user.check_password(password):
                cls.get_logger().warning(f"Rejected login for user {user.id}")
                return ServiceResult.failure(
                    LoginAPIMessage.INVALID_CREDENTIALS,
                    error_code="INVALID_CREDENTIALS",
                    errors=[{"message": LoginAPIMessage.INVALID_CREDENTIALS}],
                )
        except DatabaseError as exc:
            return cls.handle_exception(
                exc, "log in user", LoginAPIMessage.LOGIN_FAILED, "LOGIN_FAILED"
            )

        return ServiceResult.success(issue_token(user))


class UserService(BaseService):
    """
    Service for user lookups.

    Methods:
        search_by_name: Case-insensitive name search for chat invitations
    """

    @classmethod
    def search_by_name(cls, token_data: TokenData, name: str) -> ServiceResult[list[User]]:
        """
        Find users whose name contains the given text.

        The caller is excluded (they are always part of chats they create).

        Args:
            token_data: Caller identity
            name: Non-blank search text

        Returns:
            ServiceResult with at most USER_SEARCH_LIMIT users ordered by name

        Error codes:
            SEARCH_FAILED: Store failure
        """
        try:
            users = list(
                User.objects.filter(name__icontains=name.strip(), is_active=True)
                .exclude(id=token_data.user_id)
                .order_by("name", "id")[:USER_SEARCH_LIMIT]
            )
        except DatabaseError as exc:
            return cls.handle_exception(
                exc, "search users", SearchAPIMessage.SEARCH_ERROR, "SEARCH_FAILED"
            )

        return ServiceResult.success(users)
