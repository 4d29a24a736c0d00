"""
Custom user manager for email-based accounts.

This module provides the UserManager class that handles user creation
with email as the primary identifier instead of username.

Related files:
    - models.py: User model that uses this manager

Security:
    - Passwords are hashed via set_password()
    - Email addresses are normalized (stripped, lower-cased)
"""

from django.contrib.auth.models import BaseUserManager


class UserManager(BaseUserManager):
    """
    Custom manager for User model with email-based authentication.

    Usage:
        user = User.objects.create_user(
            email='user@example.com',
            name='Ada',
            password='securepassword'
        )
    """

    use_in_migrations = True

    @classmethod
    def normalize_email(cls, email):
        """Lower-case the whole address so lookups are case-insensitive."""
        return (email or "").strip().lower()

    def create_user(self, email, name, password=None, **extra_fields):
        """
        Create and save a user with the given email, name and password.

        Args:
            email: User's email address (required)
            name: Display name shown as message author
            password: Plain-text password (unusable password if omitted)
            **extra_fields: Additional fields to set on the user

        Returns:
            User: The created user instance

        Raises:
            ValueError: If email is not provided
        """
        if not email:
            raise ValueError("The Email field must be set")

        user = self.model(email=self.normalize_email(email), name=name, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.save(using=self._db)
        return user
