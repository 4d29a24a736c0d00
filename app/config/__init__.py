# =============================================================================
# Django Project Configuration Package
# =============================================================================
# This package contains the Django configuration for the group chat backend:
# settings, root URLs and the ASGI/WSGI applications.
# =============================================================================
