# config/settings/test.py
import tempfile

from .base import *

DEBUG = False
SECRET_KEY = 'storefront-test-key'
ALLOWED_HOSTS = ['testserver', 'localhost']

# Fixed shop identity so image URLs and email recipients are predictable
APP_URL = 'https://shop.test'
ADMIN_ORDER_EMAIL = 'admin@shop.test'
DEFAULT_FROM_EMAIL = 'AndShoes <no-reply@shop.test>'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}


class DisableMigrations:
    """Build the test schema straight from the models"""

    def __contains__(self, app_label):
        return True

    def __getitem__(self, app_label):
        return None


MIGRATION_MODULES = DisableMigrations()

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'storefront-tests',
    }
}

# Product images written by tests land in a throwaway directory
MEDIA_ROOT = tempfile.mkdtemp(prefix='storefront-media-')

# Sent mail is collected in django.core.mail.outbox
EMAIL_BACKEND = 'django.core.mail.backends.locmem.EmailBackend'

# Tasks run in-process. Propagation stays off so retries and on_failure run
# the same way a worker would and the outcome is read from the result.
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = False
CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'

# Keep test output quiet
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'null': {'class': 'logging.NullHandler'},
    },
    'root': {'handlers': ['null'], 'level': 'WARNING'},
    'loggers': {
        'apps': {'handlers': ['null'], 'level': 'INFO', 'propagate': False},
        'celery': {'handlers': ['null'], 'level': 'WARNING', 'propagate': False},
    },
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}
