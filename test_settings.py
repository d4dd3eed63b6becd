"""
Test settings for monitoring-core
"""

import os

from decouple import config

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

SECRET_KEY = 'test-secret-key-for-monitoring-core-tests'

DEBUG = True

ALLOWED_HOSTS = ['testserver', 'localhost']

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'monitoring_core',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'monitoring_core.middleware.MonitoringMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
]

ROOT_URLCONF = 'monitoring_core.tests.urls'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

AUTH_PASSWORD_VALIDATORS = []

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'Europe/Berlin'
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Cache configuration
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'unique-snowflake',
    },
    'monitoring': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'monitoring-tests',
    },
}

# Monitoring configuration
MONITORING = {
    'ENDPOINT': '/monitor/health',
    'CACHE_ALIAS': 'monitoring',
    'AUTHORIZER_ORDER': 'descending',
    'AUTHORIZER': {
        'token': {
            'ENABLED': True,
            'PRIORITY': 10,
            'SECRET': config('MONITORING_TOKEN_SECRET', default='test-monitoring-secret'),
            'AUTH_HEADER_NAME': 'X-MONITORING-AUTH',
        },
        'admin_user': {
            'ENABLED': True,
            'PRIORITY': -10,
        },
    },
    'PROVIDER': {
        'monitoring.middleware_status': {'ENABLED': False},
    },
}

# Logging
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'monitoring_core': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}
