from .config import StorefrontConfig
from .image_urls import ImageUrlNormalizer, ProductImageRecord
from .orders import OrderService, diff_status
from .notifications import (
    OrderEmailBuilder, OrderStatusUpdateNotifier, OrderPlacedNotifier, OrderAdminAlertNotifier,
    MAIL_TRANSPORT_ERRORS,
)
from .pricing import active_campaign_for, effective_price, campaign_fields

__all__ = [
    'StorefrontConfig',
    'ImageUrlNormalizer', 'ProductImageRecord',
    'OrderService', 'diff_status',
    'OrderEmailBuilder', 'OrderStatusUpdateNotifier', 'OrderPlacedNotifier', 'OrderAdminAlertNotifier',
    'MAIL_TRANSPORT_ERRORS',
    'active_campaign_for', 'effective_price', 'campaign_fields',
]
