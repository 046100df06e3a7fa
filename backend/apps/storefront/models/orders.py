# apps/storefront/models/orders.py

"""
Guest checkout orders
"""

import string
from decimal import Decimal

from django.db import models
from django.utils.crypto import get_random_string

from .base import TimeStampedModel
from .managers import OrderQuerySet
from ..constants import (
    ORDER_STATUS_CHOICES, ORDER_STATUS_PENDING, COUNTRY_CHOICES, PAYMENT_METHOD_CHOICES,
    ORDER_REFERENCE_PREFIX, ORDER_REFERENCE_LENGTH,
)


def generate_order_reference():
    return ORDER_REFERENCE_PREFIX + get_random_string(
        ORDER_REFERENCE_LENGTH, allowed_chars=string.ascii_uppercase + string.digits
    )


class Order(TimeStampedModel):
    """
    Historical record of a purchase. Product fields are snapshotted at
    checkout; after creation only status, notes and the lifecycle
    timestamps change.
    """

    SNAPSHOT_FIELDS = (
        'product_name', 'product_price', 'product_image',
        'product_size', 'product_color', 'quantity', 'total_amount',
    )

    unique_id = models.CharField(max_length=20, unique=True, blank=True)

    # Customer
    customer_full_name = models.CharField(max_length=255)
    customer_email = models.EmailField(max_length=255)
    customer_phone = models.CharField(max_length=20)
    customer_address = models.TextField(max_length=1000)
    customer_city = models.CharField(max_length=100)
    customer_country = models.CharField(max_length=20, choices=COUNTRY_CHOICES)

    # Informational link only; the snapshot below is authoritative
    product = models.ForeignKey(
        'storefront.Product', null=True, blank=True, on_delete=models.SET_NULL, related_name='orders'
    )

    # Product snapshot
    product_name = models.CharField(max_length=255)
    product_price = models.DecimalField(max_digits=10, decimal_places=2)
    product_image = models.CharField(max_length=500, blank=True, null=True)
    product_size = models.CharField(max_length=50, blank=True, null=True)
    product_color = models.CharField(max_length=50, blank=True, null=True)
    quantity = models.PositiveIntegerField(default=1)
    total_amount = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))

    payment_method = models.CharField(max_length=20, choices=PAYMENT_METHOD_CHOICES, default='cash')
    status = models.CharField(
        max_length=20, choices=ORDER_STATUS_CHOICES, default=ORDER_STATUS_PENDING, db_index=True
    )
    notes = models.TextField(blank=True, null=True)

    confirmed_at = models.DateTimeField(null=True, blank=True)
    shipped_at = models.DateTimeField(null=True, blank=True)
    delivered_at = models.DateTimeField(null=True, blank=True)

    objects = OrderQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.unique_id or f"Order #{self.pk or 'new'}"

    def save(self, *args, **kwargs):
        if not self.unique_id:
            self.unique_id = generate_order_reference()
        super().save(*args, **kwargs)

    @property
    def country_label(self):
        return dict(COUNTRY_CHOICES).get(self.customer_country, (self.customer_country or '').capitalize())
