from rest_framework import status
from rest_framework.exceptions import APIException


class StorefrontException(APIException):
    """Base exception for the storefront module"""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = 'An error occurred in the storefront'
    default_code = 'storefront_error'


class SizeRequiredError(StorefrontException):
    """Raised when a product tracks stock per size and no size was chosen"""
    default_detail = 'Product size is required for this product'
    default_code = 'size_required'


class SizeNotAvailableError(StorefrontException):
    """Raised when the requested size has no stock row"""
    default_detail = 'Selected size is not available'
    default_code = 'size_not_available'

    def __init__(self, requested_size=None, available_sizes=None):
        self.requested_size = requested_size
        self.available_sizes = list(available_sizes or [])
        super().__init__()


class InsufficientStockError(StorefrontException):
    """Raised when there's insufficient stock"""
    default_detail = 'Insufficient stock available'
    default_code = 'insufficient_stock'

    def __init__(self, available_stock=0, requested_quantity=0, size=None):
        self.available_stock = available_stock
        self.requested_quantity = requested_quantity
        self.size = size
        if size:
            detail = f'Insufficient stock for size {size}. Only {available_stock} available.'
        else:
            detail = f'Insufficient stock. Only {available_stock} available.'
        super().__init__(detail)


class ProductNotAvailableError(StorefrontException):
    """Raised when the ordered product disappears before its stock is reserved"""
    default_detail = 'Product is no longer available'
    default_code = 'product_not_available'


class PermanentNotificationError(Exception):
    """
    Raised inside notification tasks when the order or its customer data is
    missing. Retrying cannot fix it, so the task records it as a permanent
    failure instead of handing it to the retry policy.
    """

    def __init__(self, message, context=None):
        self.message = message
        self.context = context or {}
        super().__init__(message)
