"""
Authentication application configuration.

Owns the email-based User model (AUTH_USER_MODEL) and the bearer-token gate.
"""

from django.apps import AppConfig


class AuthenticationConfig(AppConfig):
    """Configuration for the authentication application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "authentication"
    verbose_name = "Authentication"
