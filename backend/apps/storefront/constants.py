# apps/storefront/constants.py

"""
Constants for the storefront module
"""

# Order status values. Any value may follow any other; no transition is rejected.
ORDER_STATUS_PENDING = 'pending'
ORDER_STATUS_CONFIRMED = 'confirmed'
ORDER_STATUS_PROCESSING = 'processing'
ORDER_STATUS_SHIPPED = 'shipped'
ORDER_STATUS_DELIVERED = 'delivered'
ORDER_STATUS_CANCELLED = 'cancelled'

ORDER_STATUS_CHOICES = [
    (ORDER_STATUS_PENDING, 'Pending'),
    (ORDER_STATUS_CONFIRMED, 'Confirmed'),
    (ORDER_STATUS_PROCESSING, 'Processing'),
    (ORDER_STATUS_SHIPPED, 'Shipped'),
    (ORDER_STATUS_DELIVERED, 'Delivered'),
    (ORDER_STATUS_CANCELLED, 'Cancelled'),
]

# Lifecycle timestamp written when an order moves into the status
ORDER_STATUS_TIMESTAMP_FIELDS = {
    ORDER_STATUS_CONFIRMED: 'confirmed_at',
    ORDER_STATUS_SHIPPED: 'shipped_at',
    ORDER_STATUS_DELIVERED: 'delivered_at',
}

# Shipping countries
COUNTRY_CHOICES = [
    ('albania', 'Albania'),
    ('kosovo', 'Kosovo'),
    ('macedonia', 'Macedonia'),
]

PAYMENT_METHOD_CHOICES = [
    ('cash', 'Cash on Delivery'),
]

GENDER_CHOICES = [
    ('male', 'Male'),
    ('female', 'Female'),
    ('unisex', 'Unisex'),
]

# Size stock thresholds
LOW_STOCK_THRESHOLD = 10

STOCK_STATUS_OUT = 'out of stock'
STOCK_STATUS_LOW = 'low stock'
STOCK_STATUS_IN = 'in stock'

# Order reference codes
ORDER_REFERENCE_PREFIX = 'ORD-'
ORDER_REFERENCE_LENGTH = 8

# Checkout limits
MAX_ORDER_QUANTITY = 100

# Pagination
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Public storage prefix for bare relative image paths
STORAGE_URL_PREFIX = '/storage/'

# Product list sort aliases sent by the storefront
PRODUCT_SORT_ALIASES = {
    'price-asc': 'price',
    'price-desc': '-price',
    'newest': '-created_at',
    'rating': '-created_at',
}
PRODUCT_SORT_FIELDS = ['name', 'price', 'stock_quantity', 'color', 'created_at']
