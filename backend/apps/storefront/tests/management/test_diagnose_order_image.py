# apps/storefront/tests/management/test_diagnose_order_image.py
import pytest
from io import StringIO
from django.core.management import call_command
from django.core.management.base import CommandError

from ..factories import *


@pytest.mark.django_db
class TestDiagnoseOrderImageCommand:
    """Test the diagnose_order_image management command."""

    def test_reports_every_source(self):
        attachment = ProductImageFactory(product__image='products/legacy.jpg')
        order = OrderFactory(product=attachment.product, product_image=None)
        out = StringIO()

        call_command('diagnose_order_image', order_id=order.id, stdout=out)

        output = out.getvalue()
        assert f"ORDER_ID: {order.id}" in output
        assert 'ORDER_SNAPSHOT (orders.product_image): NULL' in output
        assert 'PRODUCT.image column: products/legacy.jpg' in output
        assert f"RESOLVED (for order): https://shop.test{attachment.file.url}" in output

    def test_defaults_to_latest_order(self, order):
        out = StringIO()

        call_command('diagnose_order_image', stdout=out)

        assert order.unique_id in out.getvalue()

    def test_unknown_order(self):
        with pytest.raises(CommandError):
            call_command('diagnose_order_image', order_id=424242)
