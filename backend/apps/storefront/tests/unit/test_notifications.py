# apps/storefront/tests/unit/test_notifications.py
import pytest
from smtplib import SMTPException
from unittest.mock import Mock

from ...exceptions import PermanentNotificationError
from ...services import (
    OrderAdminAlertNotifier, OrderEmailBuilder, OrderPlacedNotifier, OrderStatusUpdateNotifier, StorefrontConfig,
)
from ...services.notifications import STATUS_UPDATE_CONTENT, status_update_content
from ..factories import *


@pytest.fixture
def builder(storefront_config, normalizer):
    return OrderEmailBuilder(storefront_config, normalizer)


@pytest.fixture
def mailer():
    return Mock()


def make_store(order):
    store = Mock()
    store.get_with_product.return_value = order
    return store


class TestStatusContent:
    """Per-status copy used in status update emails."""

    @pytest.mark.parametrize('status', ['confirmed', 'processing', 'shipped', 'delivered', 'cancelled'])
    def test_every_customer_facing_status_has_copy(self, status):
        content = status_update_content(status)

        assert content['title']
        assert content['message']

    def test_cancelled_has_no_next_steps(self):
        assert STATUS_UPDATE_CONTENT['cancelled']['next_steps'] == []

    def test_unknown_status(self):
        assert status_update_content('pending') is None


@pytest.mark.django_db
class TestOrderEmailBuilder:
    """Rendering and inline images."""

    def test_status_update_message(self, builder, order):
        message = builder.status_update(order, 'pending', 'confirmed')

        assert message.to == ['jane@example.com']
        assert message.from_email == 'orders@shop.test'
        assert message.subject == f"Order #{order.unique_id} status update: Confirmed"
        assert STATUS_UPDATE_CONTENT['confirmed']['message'] in message.body
        assert 'Pending -> Confirmed' in message.body
        assert 'https://shop.test/storage/products/classic.jpg' in message.body

    def test_html_alternative_uses_image_url_without_stored_file(self, builder, order):
        message = builder.status_update(order, 'pending', 'shipped')
        html, mimetype = message.alternatives[0]

        assert mimetype == 'text/html'
        assert 'src="https://shop.test/storage/products/classic.jpg"' in html
        assert not message.attachments

    def test_stored_image_is_embedded_inline(self, builder, stored_image):
        order = OrderFactory(product_image=stored_image)

        message = builder.status_update(order, 'pending', 'confirmed')
        html, _ = message.alternatives[0]
        inline = message.attachments[0]
        cid = inline['Content-ID'].strip('<>')

        assert message.mixed_subtype == 'related'
        assert inline.get_content_type() == 'image/jpeg'
        assert cid.startswith(f"product-{order.id}-")
        assert f'src="cid:{cid}"' in html

    def test_storage_paths_precedence(self, builder):
        attachment = ProductImageFactory(product__image='/storage/products/legacy.jpg')
        order = OrderFactory(product=attachment.product, product_image='https://cdn.example.com/a.jpg')

        assert builder.storage_paths_for(order) == [attachment.file.name, 'products/legacy.jpg']

    def test_storage_paths_without_product(self, builder):
        order = OrderFactory(product=None, product_image='products/a.jpg')

        assert builder.storage_paths_for(order) == ['products/a.jpg']

    def test_admin_alert(self, builder, order):
        message = builder.admin_alert(order)

        assert message.to == ['admin@shop.test']
        assert order.customer_email in message.body
        assert f"https://shop.test/admin/storefront/order/{order.id}/change/" in message.body


@pytest.mark.django_db
class TestOrderStatusUpdateNotifier:
    """Status update notifications with stand-in collaborators."""

    def test_sends_to_customer(self, builder, mailer, order):
        notifier = OrderStatusUpdateNotifier(
            order.id, 'pending', 'confirmed', store=make_store(order), mailer=mailer, builder=builder,
        )

        result = notifier.handle()

        mailer.send.assert_called_once()
        message = mailer.send.call_args[0][0]
        assert message.to == [order.customer_email]
        assert result['status'] == 'sent'
        assert result['new_status'] == 'confirmed'

    def test_uses_captured_statuses_not_current(self, builder, mailer, order):
        order.status = 'delivered'
        notifier = OrderStatusUpdateNotifier(
            order.id, 'pending', 'confirmed', store=make_store(order), mailer=mailer, builder=builder,
        )

        notifier.handle()

        assert 'Pending -> Confirmed' in mailer.send.call_args[0][0].body

    def test_missing_order_is_permanent(self, builder, mailer):
        notifier = OrderStatusUpdateNotifier(
            999, 'pending', 'confirmed', store=make_store(None), mailer=mailer, builder=builder,
        )

        with pytest.raises(PermanentNotificationError):
            notifier.handle()
        mailer.send.assert_not_called()

    def test_missing_customer_email_is_permanent(self, builder, mailer, order):
        order.customer_email = ''
        notifier = OrderStatusUpdateNotifier(
            order.id, 'pending', 'confirmed', store=make_store(order), mailer=mailer, builder=builder,
        )

        with pytest.raises(PermanentNotificationError):
            notifier.handle()

    def test_transport_errors_propagate(self, builder, mailer, order):
        mailer.send.side_effect = SMTPException('connection refused')
        notifier = OrderStatusUpdateNotifier(
            order.id, 'pending', 'confirmed', store=make_store(order), mailer=mailer, builder=builder,
        )

        with pytest.raises(SMTPException):
            notifier.handle()


@pytest.mark.django_db
class TestOrderPlacedNotifier:
    """Order placed notifications."""

    def test_sends_only_customer_email(self, builder, mailer, order):
        OrderPlacedNotifier(order.id, store=make_store(order), mailer=mailer, builder=builder).handle()

        recipients = [c[0][0].to for c in mailer.send.call_args_list]
        assert recipients == [[order.customer_email]]


@pytest.mark.django_db
class TestOrderAdminAlertNotifier:
    """New order alerts for the shop admin."""

    def test_sends_admin_email(self, builder, mailer, order):
        result = OrderAdminAlertNotifier(order.id, store=make_store(order), mailer=mailer, builder=builder).handle()

        assert mailer.send.call_args[0][0].to == ['admin@shop.test']
        assert result['admin_email'] == 'admin@shop.test'

    def test_skips_when_admin_email_not_configured(self, mailer, order):
        builder = OrderEmailBuilder(StorefrontConfig(base_url='https://shop.test'))

        result = OrderAdminAlertNotifier(order.id, store=make_store(order), mailer=mailer, builder=builder).handle()

        assert result['status'] == 'skipped'
        mailer.send.assert_not_called()

    def test_does_not_need_customer_email(self, builder, mailer, order):
        order.customer_email = ''

        OrderAdminAlertNotifier(order.id, store=make_store(order), mailer=mailer, builder=builder).handle()

        mailer.send.assert_called_once()
