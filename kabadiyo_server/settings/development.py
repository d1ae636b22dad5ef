"""
Development settings for kabadiyo_server project.
"""

from decouple import config
from .base import *

DEBUG = config('DEBUG', default=True, cast=bool)

CORS_ALLOW_ALL_ORIGINS = config('CORS_ALLOW_ALL_ORIGINS', default=True, cast=bool)

# Email backend for development
EMAIL_BACKEND = config('EMAIL_BACKEND', default='django.core.mail.backends.console.EmailBackend')

# Logging for development
LOGGING['root']['level'] = config('LOG_LEVEL', default='DEBUG')
LOGGING['loggers']['apps']['level'] = config('LOG_LEVEL', default='DEBUG')
