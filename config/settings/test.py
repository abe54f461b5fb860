"""Test settings.

Uses a file-backed SQLite database so that tests running several threads
against the booking services share one database, plus a fast password
hasher and eager Celery tasks.
"""

from .base import *  # noqa: F401,F403
from .base import BASE_DIR, DATABASES

SECRET_KEY = 'test-secret-key'

DATABASES['default'] = {
    'ENGINE': 'django.db.backends.sqlite3',
    'NAME': BASE_DIR / 'test-db.sqlite3',
    'OPTIONS': {
        'transaction_mode': 'IMMEDIATE',
        'timeout': 20,
    },
    'TEST': {
        'NAME': BASE_DIR / 'test-db.sqlite3',
    },
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}

BOOKINGS_ENFORCE_BLOCKED_DATES = True

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'
