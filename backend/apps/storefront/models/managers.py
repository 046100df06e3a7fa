# apps/storefront/models/managers.py

"""
Custom querysets for storefront models
"""

from django.apps import apps
from django.db import models
from django.utils import timezone


class CategoryQuerySet(models.QuerySet):
    """QuerySet for catalog categories"""

    def active(self):
        return self.filter(is_active=True)

    def roots(self):
        """Top-level categories"""
        return self.filter(parent__isnull=True)


class ProductQuerySet(models.QuerySet):
    """QuerySet for products"""

    def with_display_data(self):
        """Prefetch everything the API and emails need to render a product"""
        return self.select_related('category', 'attached_image').prefetch_related('size_stocks')

    def with_active_campaigns(self, on=None):
        """Attach running campaigns, newest first, as ``active_campaigns``"""
        campaign_model = apps.get_model('storefront', 'Campaign')
        return self.prefetch_related(models.Prefetch(
            'campaigns',
            queryset=campaign_model.objects.active(on).order_by('-created_at'),
            to_attr='active_campaigns',
        ))

    def in_stock(self):
        return self.filter(
            models.Q(stock_quantity__gt=0) |
            models.Q(size_stocks__quantity__gt=0)
        ).distinct()


class CampaignQuerySet(models.QuerySet):
    """QuerySet for discount campaigns"""

    def active(self, on=None):
        """
        Campaigns flagged active whose date window contains ``on``.
        A missing start or end date leaves that side of the window open.
        """
        on = on or timezone.localdate()
        return self.filter(is_active=True).filter(
            models.Q(start_date__isnull=True) | models.Q(start_date__lte=on),
            models.Q(end_date__isnull=True) | models.Q(end_date__gte=on),
        )

    def for_product(self, product):
        return self.filter(product=product)


class OrderQuerySet(models.QuerySet):
    """QuerySet for orders"""

    def with_product(self):
        return self.select_related('product', 'product__attached_image')

    def missing_image(self):
        """Orders created without a product image snapshot"""
        return self.filter(models.Q(product_image__isnull=True) | models.Q(product_image=''))
