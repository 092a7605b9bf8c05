"""
WSGI config for the Noticeboard backend.

Exposes the WSGI callable as a module-level variable named ``application``.
Production start command: gunicorn noticeboard_backend.wsgi:application --log-file -
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "noticeboard_backend.settings")

application = get_wsgi_application()
