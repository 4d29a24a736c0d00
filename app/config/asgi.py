"""
ASGI config for the group chat backend.

This file exposes the ASGI callable as a module-level variable named
`application`. Uvicorn (or any ASGI server) uses it to serve HTTP requests;
each request is handled independently and I/O-bound work only blocks the
request that issued it.

For more information on this file, see:
https://docs.djangoproject.com/en/5.2/howto/deployment/asgi/
"""

import os

from django.core.asgi import get_asgi_application

# Set the default Django settings module for the ASGI application
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_asgi_application()
