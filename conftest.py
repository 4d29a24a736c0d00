"""
Root pytest configuration for the Django project.

This module makes sure Django settings are selected before collection.
Fixtures and hooks live in app/conftest.py and in each app's tests/conftest.py.
"""

import os

# Ensure Django settings are configured before any tests run
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
