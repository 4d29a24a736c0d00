"""
Authentication application.

This app provides user accounts, password login and the bearer-token
gate used by every chat route.

Key components:
    - User model: Email-based account with a display name
    - tokens: Token codec (issue_token / verify_token / TokenData)
    - backends: BearerTokenAuthentication, the DRF authentication class
    - AccountService: Registration and login
    - UserService: User search by name

Usage:
    from authentication.models import User
    from authentication.services import AccountService
    from authentication.tokens import issue_token, verify_token
"""
