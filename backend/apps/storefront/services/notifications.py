"""
Transactional order emails: order placed (customer), new order alert (admin)
and status updates (customer).

Notifiers are built from plain task arguments, reload what they need through
an OrderStore and send through a Mailer, so the Celery tasks stay thin.
"""

import logging
import mimetypes
from email.mime.image import MIMEImage
from smtplib import SMTPException
from typing import Dict, List, Optional

from django.core.files.storage import default_storage
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils.crypto import get_random_string

from .config import StorefrontConfig
from .image_urls import ABSOLUTE_URL_RE, ImageUrlNormalizer
from .ports import DjangoMailer, DjangoOrderStore, Mailer, OrderStore
from ..constants import STORAGE_URL_PREFIX
from ..exceptions import PermanentNotificationError

logger = logging.getLogger(__name__)

# Errors raised by the mail transport; these are the only ones worth retrying
MAIL_TRANSPORT_ERRORS = (SMTPException, OSError)


STATUS_UPDATE_CONTENT = {
    'confirmed': {
        'title': 'Great News! Your Order is Confirmed',
        'message': (
            "Thank you for your purchase! We've received your order and confirmed it. "
            "Our team is now preparing your items for shipment."
        ),
        'next_steps_title': 'What happens next?',
        'next_steps': [
            "We'll process your order within 1-2 business days",
            "You'll receive a shipping notification when your order is dispatched",
            "Track your order status anytime on our website",
        ],
    },
    'processing': {
        'title': 'Your Order is Being Processed',
        'message': (
            "We're carefully preparing your order for shipment. This includes quality checks "
            "and packaging to ensure your items arrive in perfect condition."
        ),
        'next_steps_title': 'What happens next?',
        'next_steps': [
            "Your order will be packaged and prepared for shipping",
            "You'll receive a shipping notification once it's dispatched",
            "Expected processing time: 1-2 business days",
        ],
    },
    'shipped': {
        'title': 'Your Order Has Been Shipped!',
        'message': (
            "Exciting news! Your order is on its way to you. You should receive it within "
            "the next few business days depending on your location."
        ),
        'next_steps_title': 'Delivery Information',
        'next_steps': [
            "Estimated delivery: 2-5 business days (depending on location)",
            "Make sure someone is available to receive the package",
            "Contact us if you don't receive it within the expected timeframe",
        ],
    },
    'delivered': {
        'title': 'Order Delivered Successfully!',
        'message': (
            "Your order has been delivered! We hope you love your new shoes. "
            "If you have any issues, please don't hesitate to contact us."
        ),
        'next_steps_title': 'Enjoy Your Purchase!',
        'next_steps': [
            "We hope you love your new shoes!",
            "If you have any issues, contact our support within 14 days",
            "Consider leaving a review to help other customers",
        ],
    },
    'cancelled': {
        'title': 'Order Cancelled',
        'message': (
            "Your order has been cancelled. If you didn't request this cancellation or have "
            "questions, please contact our customer service team."
        ),
        'next_steps_title': None,
        'next_steps': [],
    },
}


def status_update_content(status: str) -> Optional[Dict]:
    return STATUS_UPDATE_CONTENT.get(status)


class OrderEmailBuilder:
    """Renders order emails and embeds the product image inline when possible"""

    def __init__(self, config: Optional[StorefrontConfig] = None, normalizer: Optional[ImageUrlNormalizer] = None):
        self.config = config or StorefrontConfig.from_settings()
        self.normalizer = normalizer or ImageUrlNormalizer(self.config)

    def storage_paths_for(self, order) -> List[str]:
        """Candidate public-storage paths of the order's image, same precedence as the URL"""
        product = order.product
        attachment = getattr(product, 'attached_image', None) if product is not None else None
        candidates = [
            order.product_image,
            attachment.file.name if attachment is not None and attachment.file else None,
            product.image if product is not None else None,
        ]

        paths = []
        for raw in candidates:
            raw = (raw or '').strip()
            if not raw or ABSOLUTE_URL_RE.match(raw):
                continue
            if raw.startswith(STORAGE_URL_PREFIX):
                raw = raw[len(STORAGE_URL_PREFIX):]
            paths.append(raw.lstrip('/'))
        return paths

    def inline_image(self, order) -> Optional[MIMEImage]:
        for path in self.storage_paths_for(order):
            try:
                if not default_storage.exists(path):
                    continue
                with default_storage.open(path, 'rb') as fh:
                    data = fh.read()
            except OSError as e:
                logger.warning(f"Could not read product image {path} for inline embedding: {e}")
                continue

            mime_type, _ = mimetypes.guess_type(path)
            subtype = mime_type.split('/')[1] if mime_type and mime_type.startswith('image/') else 'jpeg'
            image = MIMEImage(data, _subtype=subtype)
            cid = f"product-{order.id}-{get_random_string(8).lower()}"
            image.add_header('Content-ID', f"<{cid}>")
            image.add_header('Content-Disposition', 'inline', filename=path.rsplit('/', 1)[-1])
            return image
        return None

    def build(self, subject: str, template: str, context: Dict, order, to: List[str]) -> EmailMultiAlternatives:
        image_url = self.normalizer.for_order(order)
        inline = self.inline_image(order)
        if inline is not None:
            image_src = f"cid:{inline['Content-ID'].strip('<>')}"
        else:
            image_src = image_url

        context = {
            **context,
            'order': order,
            'image_url': image_url,
            'image_src': image_src,
            'app_url': self.normalizer.base_url,
        }
        text_body = render_to_string(f"storefront/emails/{template}.txt", context)
        html_body = render_to_string(f"storefront/emails/{template}.html", context)

        message = EmailMultiAlternatives(
            subject=subject,
            body=text_body,
            from_email=self.config.from_email or None,
            to=to,
        )
        message.attach_alternative(html_body, 'text/html')
        if inline is not None:
            message.mixed_subtype = 'related'
            message.attach(inline)
        return message

    def status_update(self, order, previous_status: str, new_status: str) -> EmailMultiAlternatives:
        return self.build(
            subject=f"Order #{order.unique_id} status update: {new_status.capitalize()}",
            template='order_status_updated',
            context={
                'previous_status': previous_status,
                'new_status': new_status,
                'status_content': status_update_content(new_status),
            },
            order=order,
            to=[order.customer_email],
        )

    def order_placed(self, order) -> EmailMultiAlternatives:
        return self.build(
            subject=f"Order Confirmation #{order.unique_id}",
            template='order_placed',
            context={},
            order=order,
            to=[order.customer_email],
        )

    def admin_alert(self, order) -> EmailMultiAlternatives:
        return self.build(
            subject=f"New order #{order.unique_id} - {order.product_name}",
            template='order_admin',
            context={},
            order=order,
            to=[self.config.admin_email],
        )


class OrderNotifier:
    """Shared loading, logging and failure handling for order email jobs"""

    requires_customer_email = True

    def __init__(self, order_id, store: Optional[OrderStore] = None, mailer: Optional[Mailer] = None,
                 builder: Optional[OrderEmailBuilder] = None):
        self.order_id = order_id
        self.store = store or DjangoOrderStore()
        self.mailer = mailer or DjangoMailer()
        self.builder = builder or OrderEmailBuilder()
        self.order = None

    @classmethod
    def from_task_args(cls, *args, **kwargs):
        return cls(*args, **kwargs)

    def context(self) -> Dict:
        return {
            'order_id': self.order_id,
            'customer_email': self.order.customer_email if self.order else None,
        }

    def load_order(self):
        self.order = self.store.get_with_product(self.order_id)
        if self.order is None:
            raise PermanentNotificationError(f"Order {self.order_id} not found", self.context())
        if self.requires_customer_email and not self.order.customer_email:
            raise PermanentNotificationError(
                f"Order {self.order_id} has no customer email", self.context()
            )
        return self.order

    def send(self, message, description: str):
        try:
            self.mailer.send(message)
        except MAIL_TRANSPORT_ERRORS as e:
            logger.error(
                f"Failed to send {description}",
                extra={'context': {**self.context(), 'error': str(e)}},
                exc_info=True,
            )
            raise

        logger.info(
            f"{description.capitalize()} sent successfully",
            extra={'context': {**self.context(), 'recipients': message.to}},
        )

    def failed(self, exc: BaseException):
        """Final record once no more attempts will be made. Never raises."""
        logger.error(
            f"{self.__class__.__name__} failed permanently",
            extra={'context': {**self.context(), 'error': str(exc)}},
        )


class OrderStatusUpdateNotifier(OrderNotifier):
    """Emails the customer when an admin moves their order to a new status"""

    def __init__(self, order_id, previous_status: str, new_status: str, **kwargs):
        super().__init__(order_id, **kwargs)
        # Captured when the transition happened; the live order may have moved on
        self.previous_status = previous_status
        self.new_status = new_status

    def context(self) -> Dict:
        return {
            **super().context(),
            'previous_status': self.previous_status,
            'new_status': self.new_status,
        }

    def handle(self) -> Dict:
        order = self.load_order()
        message = self.builder.status_update(order, self.previous_status, self.new_status)
        self.send(message, 'order status update email')
        return {'status': 'sent', **self.context()}


class OrderPlacedNotifier(OrderNotifier):
    """Emails the customer an order confirmation"""

    def handle(self) -> Dict:
        order = self.load_order()
        self.send(self.builder.order_placed(order), 'order placed email')
        return {'status': 'sent', **self.context()}


class OrderAdminAlertNotifier(OrderNotifier):
    """Alerts the shop admin about a new order; sent by its own task"""

    requires_customer_email = False

    def context(self) -> Dict:
        return {**super().context(), 'admin_email': self.builder.config.admin_email}

    def handle(self) -> Dict:
        order = self.load_order()
        if not self.builder.config.admin_email:
            logger.warning("ADMIN_ORDER_EMAIL is not configured; skipping admin notification",
                           extra={'context': self.context()})
            return {'status': 'skipped', **self.context()}

        self.send(self.builder.admin_alert(order), 'admin order notification')
        return {'status': 'sent', **self.context()}
