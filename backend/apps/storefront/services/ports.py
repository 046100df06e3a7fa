"""
Collaborators the storefront services talk to: where orders are loaded
from, how mail leaves the process, and how background work is queued.
Services take these as constructor arguments; the Django/Celery versions
below are the defaults.
"""

from typing import Optional, Protocol

from django.core.mail import EmailMessage

from ..models import Order


class OrderStore(Protocol):
    def get_with_product(self, order_id) -> Optional[Order]:
        ...


class Mailer(Protocol):
    def send(self, message: EmailMessage) -> int:
        ...


class TaskQueue(Protocol):
    def submit_status_update(self, order_id, previous_status: str, new_status: str) -> None:
        ...

    def submit_order_placed(self, order_id) -> None:
        ...


class DjangoOrderStore:
    """Loads orders through the ORM together with their product and media"""

    def get_with_product(self, order_id) -> Optional[Order]:
        return Order.objects.with_product().filter(pk=order_id).first()


class DjangoMailer:
    """Sends through the configured Django email backend; errors propagate"""

    def send(self, message: EmailMessage) -> int:
        return message.send(fail_silently=False)


class CeleryTaskQueue:
    """Submits storefront email work to Celery"""

    def submit_status_update(self, order_id, previous_status, new_status):
        from ..tasks import send_order_status_update_email
        send_order_status_update_email.delay(order_id, previous_status, new_status)

    def submit_order_placed(self, order_id):
        from ..tasks import send_order_admin_alert_email, send_order_placed_email
        # Separate tasks so each email is retried on its own
        send_order_placed_email.delay(order_id)
        send_order_admin_alert_email.delay(order_id)
