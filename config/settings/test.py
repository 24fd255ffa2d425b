"""Test settings for the HotelBooking project.

Runs against an in-memory SQLite database and keeps log output quiet.
"""

from .base import *  # noqa: F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

LOGGING['handlers']['console']['level'] = 'WARNING'  # noqa: F405
