# apps/storefront/models/__init__.py

from .base import TimeStampedModel
from .catalog import Category, Product, ProductImage, ProductSizeStock, Campaign
from .orders import Order, generate_order_reference

__all__ = [
    'TimeStampedModel',
    'Category', 'Product', 'ProductImage', 'ProductSizeStock', 'Campaign',
    'Order', 'generate_order_reference',
]
