"""
Tests for authentication app.

This package contains test modules for:
- test_models.py: User model and manager tests
- test_tokens.py: Token codec tests
- test_backends.py: Bearer token gate tests
- test_serializers.py: Request validation tests
- test_services.py: AccountService and UserService tests
- test_views.py: API endpoint tests
- test_integration.py: Register and login flows end to end

Usage:
    pytest authentication/tests/
    pytest authentication/tests/test_services.py
"""
