"""Development settings for the rental marketplace.

Debug on, every host and origin allowed, SQLite by default. Do not use
these settings in production!
"""

from .base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['*']

CORS_ALLOW_ALL_ORIGINS = True

# Run Celery tasks inline unless a broker is configured
CELERY_TASK_ALWAYS_EAGER = get_env('CELERY_TASK_ALWAYS_EAGER', 'true').lower() == 'true'  # noqa: F405
