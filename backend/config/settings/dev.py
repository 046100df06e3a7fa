# config/settings/dev.py

from .base import *

DEBUG = True
ALLOWED_HOSTS = ['*']

# Emails are printed instead of sent; set EMAIL_BACKEND in .env to try SMTP
EMAIL_BACKEND = config('EMAIL_BACKEND', default='django.core.mail.backends.console.EmailBackend')

# Storefront services log at DEBUG locally
LOGGING['loggers']['apps']['level'] = 'DEBUG'

# Run order emails in-process when no worker is running
CELERY_TASK_ALWAYS_EAGER = config('CELERY_ALWAYS_EAGER', default=False, cast=bool)
CELERY_TASK_EAGER_PROPAGATES = True

# Swagger UI with the schema inlined
SPECTACULAR_SETTINGS.update({
    'SERVE_INCLUDE_SCHEMA': True,
    'SWAGGER_UI_SETTINGS': {
        'deepLinking': True,
        'filter': True,
    },
})
