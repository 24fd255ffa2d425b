"""Production settings for the HotelBooking project.

This module extends the base settings with production specific
configuration. Ensure that sensitive values are provided via
environment variables.
"""

from django.core.exceptions import ImproperlyConfigured  # type: ignore

from .base import *  # noqa: F401,F403

# Never run with debug enabled in production
DEBUG = False

# Allowed hosts should be defined explicitly via environment variable
ALLOWED_HOSTS = os.environ.get('DJANGO_ALLOWED_HOSTS', '').split(',')  # noqa: F405

if SECRET_KEY == 'replace-me-in-production':  # noqa: F405
    raise ImproperlyConfigured("DJANGO_SECRET_KEY must be set in production")

# Row locks on the room catalog need a backend that supports SELECT FOR UPDATE
if DATABASES['default']['ENGINE'] == 'django.db.backends.sqlite3':  # noqa: F405
    raise ImproperlyConfigured("Production requires a database with row locking (set DB_ENGINE)")
