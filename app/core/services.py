"""
Base service layer patterns for business logic encapsulation.

This module provides foundational patterns for the service layer:
- ServiceResult: Standard result wrapper for consistent success/failure handling
- BaseService: Base class with common service utilities

Service Layer Philosophy:
    Services encapsulate business logic separate from views and models.
    Views handle HTTP concerns, models handle data, services handle logic.

Pattern Comparison:
    - ServiceResult: Use for expected failures (validation, membership, store errors
      that must degrade to a stable client-facing message)
    - Exceptions: Use for bugs and anything a caller cannot act on

Usage:
    from core.services import BaseService, ServiceResult

    class ChatService(BaseService):
        @classmethod
        def create_chat(cls, token_data, user_ids, name, text) -> ServiceResult[Chat]:
            try:
                with cls.atomic():
                    chat = Chat.objects.create(name=name, is_group=True)
                    ...
            except DatabaseError as exc:
                return cls.handle_exception(
                    exc, "create chat", error="Failed to create chat", error_code="CHAT_CREATE_FAILED"
                )

            cls.get_logger().info(f"Created chat {chat.id}")
            return ServiceResult.success(chat)

    # In view
    result = ChatService.create_chat(...)
    if result.success:
        return Response(..., status=201)
    return Response(generic_response(result.error), status=500)
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from django.db import transaction

if TYPE_CHECKING:
    from collections.abc import Generator

# Generic type for ServiceResult data
T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Standard result wrapper for service operations.

    Provides consistent success/failure handling without exceptions.

    Attributes:
        success: Whether the operation succeeded
        data: Result data if successful (None if failed)
        error: Client-facing error message if failed (None if successful)
        error_code: Machine-readable error code, mapped to HTTP status by views
        errors: Field-level errors for validation failures

    Usage:
        # Success case
        return ServiceResult.success(chat)

        # Failure case
        return ServiceResult.failure(AuthorizationMessage.UNAUTHORIZED, "NOT_A_MEMBER")

        # Check result
        result = ChatService.list_members(token_data, chat_id)
        if result.success:
            members = result.data
        else:
            print(f"Error: {result.error} ({result.error_code})")
    """

    success: bool
    data: T | None = None
    error: str | None = None
    error_code: str | None = None
    errors: list[dict[str, str]] | None = field(default=None)

    @classmethod
    def success(cls, data: T) -> ServiceResult[T]:
        """
        Create a successful result.

        Args:
            data: The result data

        Returns:
            ServiceResult with success=True and data set
        """
        return cls(success=True, data=data)

    @classmethod
    def failure(
        cls,
        error: str,
        error_code: str | None = None,
        errors: list[dict[str, str]] | None = None,
    ) -> ServiceResult[T]:
        """
        Create a failed result.

        Args:
            error: Human-readable error message
            error_code: Machine-readable error code for client handling
            errors: Field-level errors as [{"message": ..., "field": ...}]

        Returns:
            ServiceResult with success=False and error details

        Example:
            return ServiceResult.failure(
                RegisterAPIMessage.EMAIL_IN_USE,
                error_code="EMAIL_IN_USE",
                errors=[{"message": RegisterAPIMessage.EMAIL_IN_USE, "field": "email"}],
            )
        """
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            errors=errors,
        )

    def __bool__(self) -> bool:
        """
        Allow using result in boolean context.

        Example:
            result = AccountService.login(email, password)
            if result:  # Same as: if result.success
                print("Logged in!")
        """
        return self.success


class BaseService:
    """
    Base class for service layer classes.

    Provides common utilities for services:
    - Logging setup per service
    - Database transaction management
    - Exception-to-result conversion with logging

    Design Notes:
        - Use @classmethod (no instance state)
        - Use ServiceResult for expected failures
        - Raise exceptions for unexpected failures
    """

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Get logger for this service.

        Returns a logger named after the service class for
        easy filtering in logs.

        Example:
            class ChatService(BaseService):
                @classmethod
                def create_chat(cls, ...):
                    cls.get_logger().info(f"Created chat {chat.id}")
        """
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    @classmethod
    @contextmanager
    def atomic(cls) -> Generator[None, None, None]:
        """
        Execute operations in a database transaction.

        All database operations within this context manager are
        wrapped in a transaction. If any operation fails, all
        changes are rolled back.

        Example:
            with cls.atomic():
                chat = Chat.objects.create(name=name)
                UserChat.objects.bulk_create(memberships)
                # If the memberships fail, the chat is rolled back too
        """
        with transaction.atomic():
            yield

    @classmethod
    def handle_exception(
        cls,
        exc: Exception,
        context: str,
        error: str,
        error_code: str,
    ) -> ServiceResult:
        """
        Log an exception and convert it into a failed ServiceResult.

        The exception (with traceback) only goes to the log; the returned
        result carries the stable client-facing message.

        Args:
            exc: The caught exception
            context: What the service was doing, for the log line
            error: Client-facing message constant
            error_code: Machine-readable error code

        Returns:
            ServiceResult failure with the given message and code

        Example:
            except DatabaseError as exc:
                return cls.handle_exception(
                    exc, "fetch latest chats", ChatAPIMessage.ERROR_FETCHING_CHAT, "CHAT_FETCH_FAILED"
                )
        """
        cls.get_logger().exception(f"Failed to {context}: {exc}")
        return ServiceResult.failure(error, error_code=error_code)
