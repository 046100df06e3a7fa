# apps/storefront/models/catalog.py

"""
Catalog models: categories, products, size stock and discount campaigns
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from django.utils.text import slugify

from .base import TimeStampedModel
from .managers import CategoryQuerySet, ProductQuerySet, CampaignQuerySet
from ..constants import (
    GENDER_CHOICES, LOW_STOCK_THRESHOLD,
    STOCK_STATUS_OUT, STOCK_STATUS_LOW, STOCK_STATUS_IN,
)


class Category(TimeStampedModel):
    """Hierarchical product category"""

    name = models.CharField(max_length=255, db_index=True)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField(blank=True)
    parent = models.ForeignKey(
        'self', null=True, blank=True, on_delete=models.SET_NULL, related_name='children'
    )
    sort_order = models.IntegerField(default=0, db_index=True)
    is_active = models.BooleanField(default=True, db_index=True)

    objects = CategoryQuerySet.as_manager()

    class Meta:
        ordering = ['sort_order', 'name']
        verbose_name_plural = 'categories'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)


class Product(TimeStampedModel):
    """
    Mutable source of truth for catalog data. Orders copy what they need
    from here at checkout and never read it back for pricing.
    """

    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.00'))]
    )
    # Legacy single image path, kept for products created before media uploads
    image = models.CharField(max_length=500, blank=True, null=True)
    stock_quantity = models.PositiveIntegerField(default=0)
    foot_numbers = models.CharField(max_length=255, blank=True)
    color = models.CharField(max_length=255, blank=True)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, default='unisex', db_index=True)
    category = models.ForeignKey(
        Category, null=True, blank=True, on_delete=models.SET_NULL, related_name='products'
    )

    objects = ProductQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    @property
    def has_size_stock(self):
        return self.size_stocks.exists()

    @property
    def attached_image_url(self):
        """URL of the uploaded media image, or None when the product has none"""
        try:
            attachment = self.attached_image
        except ProductImage.DoesNotExist:
            return None
        return attachment.url

    def size_stock_table(self):
        """Size -> {quantity, stock_status} mapping used by the checkout page"""
        return {
            stock.size: {'quantity': stock.quantity, 'stock_status': stock.stock_status}
            for stock in self.size_stocks.all()
        }


class ProductImage(TimeStampedModel):
    """Uploaded media image attached to a product (at most one)"""

    product = models.OneToOneField(Product, on_delete=models.CASCADE, related_name='attached_image')
    file = models.FileField(upload_to='products/')

    def __str__(self):
        return f"Image for {self.product_id}"

    @property
    def url(self):
        if not self.file:
            return None
        return self.file.url


class ProductSizeStock(TimeStampedModel):
    """Per-size stock quantity for a product"""

    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='size_stocks')
    size = models.CharField(max_length=50)
    quantity = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['size']
        constraints = [
            models.UniqueConstraint(fields=['product', 'size'], name='unique_product_size_stock'),
        ]

    def __str__(self):
        return f"{self.product_id} / {self.size}: {self.quantity}"

    @property
    def stock_status(self):
        if self.quantity == 0:
            return STOCK_STATUS_OUT
        if self.quantity <= LOW_STOCK_THRESHOLD:
            return STOCK_STATUS_LOW
        return STOCK_STATUS_IN


class Campaign(TimeStampedModel):
    """Time-boxed discount price for a single product"""

    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True, null=True)
    price = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal('0.00'))]
    )
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='campaigns')
    start_date = models.DateField(null=True, blank=True, db_index=True)
    end_date = models.DateField(null=True, blank=True, db_index=True)
    banner_image = models.CharField(max_length=500, blank=True, null=True)
    banner_color = models.CharField(max_length=20, blank=True, null=True)
    is_active = models.BooleanField(default=True)

    objects = CampaignQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['start_date', 'end_date'], name='active_campaigns_idx'),
        ]

    def __str__(self):
        return self.name

    def is_running(self, on=None):
        on = on or timezone.localdate()
        if not self.is_active:
            return False
        if self.start_date and self.start_date > on:
            return False
        if self.end_date and self.end_date < on:
            return False
        return True

    @property
    def discount_percentage(self):
        regular = self.product.price
        if not regular:
            return Decimal('0.00')
        return round((regular - self.price) / regular * 100, 2)
