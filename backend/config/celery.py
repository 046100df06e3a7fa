# backend/config/celery.py
import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

app = Celery('storefront')

# CELERY_* Django settings configure the app
app.config_from_object('django.conf:settings', namespace='CELERY')
app.autodiscover_tasks()

# Order emails go to their own queue
app.conf.task_routes = {
    'apps.storefront.tasks.send_order_status_update_email': {'queue': 'emails'},
    'apps.storefront.tasks.send_order_placed_email': {'queue': 'emails'},
    'apps.storefront.tasks.send_order_admin_alert_email': {'queue': 'emails'},
}
