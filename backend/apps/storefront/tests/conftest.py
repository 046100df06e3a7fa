# apps/storefront/tests/conftest.py
import pytest
from decimal import Decimal
from unittest.mock import Mock

from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from rest_framework.test import APIClient

from ..services import ImageUrlNormalizer, OrderService, StorefrontConfig
from .factories import *

TEST_BASE_URL = 'https://shop.test'


@pytest.fixture
def storefront_config():
    """Configuration pointing at the test shop."""
    return StorefrontConfig(
        base_url=TEST_BASE_URL,
        admin_email='admin@shop.test',
        from_email='orders@shop.test',
    )


@pytest.fixture
def normalizer(storefront_config):
    """Image URL normalizer bound to the test base URL."""
    return ImageUrlNormalizer(storefront_config)


@pytest.fixture
def task_queue():
    """Stand-in task queue recording submissions."""
    return Mock()


@pytest.fixture
def order_service(task_queue):
    """Order service wired to the recording task queue."""
    return OrderService(task_queue=task_queue)


@pytest.fixture
def api_client():
    """Create API client."""
    return APIClient()


@pytest.fixture
def product():
    """Product without per-size stock."""
    return ProductFactory(price=Decimal('100.00'), stock_quantity=5, image='products/classic.jpg')


@pytest.fixture
def sized_product():
    """Product stocked per size."""
    product = ProductFactory(price=Decimal('120.00'), stock_quantity=0)
    ProductSizeStockFactory(product=product, size='41', quantity=3)
    ProductSizeStockFactory(product=product, size='42', quantity=0)
    return product


@pytest.fixture
def order(product):
    """Pending order for the plain product."""
    return OrderFactory(
        product=product,
        customer_email='jane@example.com',
        product_image='products/classic.jpg',
    )


@pytest.fixture
def stored_image():
    """Image file saved in public storage, removed afterwards."""
    name = default_storage.save('products/stored.jpg', ContentFile(b'\xff\xd8\xff\xe0 fake jpeg'))
    yield name
    default_storage.delete(name)


@pytest.fixture
def checkout_data():
    """Valid checkout payload, minus the product."""
    return {
        'customer_full_name': 'Jane Doe',
        'customer_email': 'jane@example.com',
        'customer_phone': '+355691234567',
        'customer_address': 'Rruga e Durresit 12',
        'customer_city': 'Tirana',
        'customer_country': 'albania',
        'quantity': 1,
        'product_price': '100.00',
    }
