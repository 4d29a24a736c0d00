"""
Authentication models.

This module defines the account model:
- User: Email-based account with a display name

Related files:
    - managers.py: Custom user manager for email-based creation
    - services.py: AccountService registration and login logic
    - tokens.py: Bearer tokens embedding {user_id, user_name}

Security:
    - Passwords are hashed with Django's configured hasher (PBKDF2 by default)
    - Emails are unique and stored lower-cased
"""

from django.contrib.auth.models import AbstractBaseUser
from django.db import models

from authentication.managers import UserManager


class User(AbstractBaseUser):
    """
    Custom User model using email as the primary identifier.

    Fields:
        name: Display name, shown as the author of messages
        email: Primary identifier, unique, used for login
        password: Hashed password (from AbstractBaseUser)
        is_active: Whether the account may log in
        date_joined: When the account was created

    Lifecycle:
        Created by registration with an empty password, which is then set
        once. If that second step fails the row is deleted again.
    """

    name = models.CharField(
        max_length=255,
        help_text="Display name shown to other chat members",
    )

    # Primary identifier (replaces username)
    email = models.EmailField(
        unique=True,
        db_index=True,
        max_length=254,
        help_text="User's email address (primary identifier)",
    )

    is_active = models.BooleanField(
        default=True,
        help_text="Whether this user account is active.",
    )

    date_joined = models.DateTimeField(
        auto_now_add=True,
        help_text="When the user account was created",
    )

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    objects = UserManager()

    class Meta:
        verbose_name = "user"
        verbose_name_plural = "users"
        ordering = ["name", "id"]

    def __str__(self):
        """Return the user's email as string representation."""
        return self.email

    def get_full_name(self):
        """Return the display name."""
        return self.name

    def get_short_name(self):
        """Return the display name."""
        return self.name
