# apps/storefront/tests/factories/__init__.py
from .catalog import *
from .orders import *

__all__ = [
    # Catalog factories
    'CategoryFactory', 'ProductFactory', 'ProductImageFactory',
    'ProductSizeStockFactory', 'CampaignFactory',

    # Order factories
    'OrderFactory',
]
