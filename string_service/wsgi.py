"""
WSGI config for string_service.

The string store lives in process memory, so run a single worker process
(threads are fine).
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "string_service.settings")

application = get_wsgi_application()
