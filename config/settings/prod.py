"""Production settings for the rental marketplace.

Secrets and hosts must come from the environment; the development
fallbacks of ``base.py`` are refused here.
"""

from .base import *  # noqa: F401,F403
from .base import get_env

DEBUG = False

SECRET_KEY = get_env('DJANGO_SECRET_KEY', required=True)
# QR hand-over codes become unreadable if this key changes
ENCRYPTION_KEY = get_env('ENCRYPTION_KEY', required=True)

ALLOWED_HOSTS = get_env('DJANGO_ALLOWED_HOSTS', required=True).split(',')

CSRF_COOKIE_SECURE = True
SESSION_COOKIE_SECURE = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SECURE_HSTS_SECONDS = int(get_env('SECURE_HSTS_SECONDS', 3600))
