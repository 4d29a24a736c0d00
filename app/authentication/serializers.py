"""
Serializers for the authentication API.

This module provides DRF serializers for:
- Registration (request validation)
- Login (request validation)
- User search (query validation and result rendering)

Related files:
    - views.py: Views that use these serializers
    - services.py: AccountService / UserService business logic

Security:
    - Password fields are write-only
    - Emails are normalized before lookups
"""

from rest_framework import serializers

from authentication.constants import SearchAPIMessage
from authentication.models import User


class RegisterSerializer(serializers.Serializer):
    """
    Validate the body of POST /api/v1/auth/register/.

    Uniqueness of the email is not checked here: AccountService detects it
    atomically with get_or_create and reports EMAIL_IN_USE.
    """

    name = serializers.CharField(max_length=255)
    email = serializers.EmailField(max_length=254)
    password = serializers.CharField(
        write_only=True,
        max_length=128,
        trim_whitespace=False,
        style={"input_type": "password"},
    )

    def validate_email(self, value):
        """Normalize email to lowercase."""
        return User.objects.normalize_email(value)


class LoginSerializer(serializers.Serializer):
    """Validate the body of POST /api/v1/auth/login/."""

    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        style={"input_type": "password"},
    )

    def validate_email(self, value):
        """Normalize email to lowercase."""
        return User.objects.normalize_email(value)


class TokenSerializer(serializers.Serializer):
    """Response body of a successful login."""

    token = serializers.CharField(read_only=True)


class UserSearchQuerySerializer(serializers.Serializer):
    """Validate the query string of GET /api/v1/search/users/."""

    name = serializers.CharField(
        max_length=255,
        error_messages={
            "required": SearchAPIMessage.BLANK_NAME_SEARCH,
            "blank": SearchAPIMessage.BLANK_NAME_SEARCH,
        },
    )


class UserSummarySerializer(serializers.ModelSerializer):
    """Public view of a user: id and display name only."""

    class Meta:
        model = User
        fields = ["id", "name"]
        read_only_fields = fields
