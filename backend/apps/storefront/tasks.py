"""
Order email tasks

Mail transport errors are retried with exponential backoff up to
ORDER_EMAIL_MAX_RETRIES; once retries run out ``on_failure`` records the
permanent failure. Missing orders or customer data are recorded as permanent
failures straight away. Delivery is at-least-once: a retried or re-queued
task sends its email again.
"""

import logging

from celery import Task, shared_task
from django.conf import settings

from .exceptions import PermanentNotificationError
from .services.notifications import (
    MAIL_TRANSPORT_ERRORS, OrderAdminAlertNotifier, OrderPlacedNotifier, OrderStatusUpdateNotifier,
)

logger = logging.getLogger(__name__)


class OrderEmailTask(Task):
    """Base task for order emails; subclasses name the notifier they drive"""

    notifier_class = None

    autoretry_for = MAIL_TRANSPORT_ERRORS
    max_retries = settings.ORDER_EMAIL_MAX_RETRIES
    retry_backoff = True
    retry_backoff_max = settings.ORDER_EMAIL_RETRY_BACKOFF_MAX
    retry_jitter = True
    acks_late = True

    def on_retry(self, exc, task_id, args, kwargs, einfo):
        logger.warning(
            f"Retrying {self.name} ({self.request.retries + 1}/{self.max_retries}): {exc}",
            extra={'context': {'task_id': task_id, 'args': args}},
        )

    def on_failure(self, exc, task_id, args, kwargs, einfo):
        """Retries exhausted; nothing else will happen for this email."""
        self.notifier_class.from_task_args(*args, **kwargs).failed(exc)

    def run_notifier(self, *args, **kwargs):
        notifier = self.notifier_class.from_task_args(*args, **kwargs)
        try:
            return notifier.handle()
        except MAIL_TRANSPORT_ERRORS:
            raise
        except PermanentNotificationError as e:
            notifier.failed(e)
            return {'status': 'failed', 'error': e.message, **notifier.context()}
        except Exception as e:
            logger.exception(f"Unexpected error in {self.name}")
            notifier.failed(e)
            return {'status': 'failed', 'error': str(e), **notifier.context()}


@shared_task(base=OrderEmailTask, bind=True, notifier_class=OrderStatusUpdateNotifier)
def send_order_status_update_email(self, order_id, previous_status, new_status):
    """Email the customer that their order moved from previous_status to new_status"""
    return self.run_notifier(order_id, previous_status, new_status)


@shared_task(base=OrderEmailTask, bind=True, notifier_class=OrderPlacedNotifier)
def send_order_placed_email(self, order_id):
    """Send the customer their order confirmation"""
    return self.run_notifier(order_id)


@shared_task(base=OrderEmailTask, bind=True, notifier_class=OrderAdminAlertNotifier)
def send_order_admin_alert_email(self, order_id):
    """Alert the shop admin about a new order; retried independently of the customer email"""
    return self.run_notifier(order_id)
