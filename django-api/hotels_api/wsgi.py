"""WSGI entry point for the hotels API project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "hotels_api.settings")

application = get_wsgi_application()
