"""
Factory Boy factories for authentication models.

Provides realistic test data generation for:
- User: Email-based account with a display name

Usage:
    from authentication.tests.factories import UserFactory

    # Create a user with default values
    user = UserFactory()

    # Create a user with a known name and password
    user = UserFactory(name="Ada Lovelace", password="secret")
"""

import factory

from authentication.models import User


class UserFactory(factory.django.DjangoModelFactory):
    """
    Factory for User model.

    Creates active users with email-based authentication.

    Examples:
        # Basic user
        user = UserFactory()

        # Inactive user (deactivated)
        user = UserFactory(is_active=False)
    """

    class Meta:
        model = User
        skip_postgeneration_save = True

    name = factory.Faker("name")
    email = factory.Sequence(lambda n: f"user{n}@example.com")
    is_active = True

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        """Override create to use UserManager.create_user()."""
        password = kwargs.pop("password", "TestPass123!")
        return model_class.objects.create_user(
            email=kwargs.pop("email"),
            name=kwargs.pop("name"),
            password=password,
            **kwargs,
        )
