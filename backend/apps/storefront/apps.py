# apps/storefront/apps.py

from django.apps import AppConfig


class StorefrontConfig(AppConfig):
    """Storefront app configuration"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.storefront'
    verbose_name = 'Storefront'
