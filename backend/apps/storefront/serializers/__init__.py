from .products import (
    CategorySerializer, ProductSizeStockSerializer, ProductListSerializer, ProductDetailSerializer,
    CampaignSerializer,
)
from .orders import OrderSerializer, OrderCreateSerializer, OrderUpdateSerializer

__all__ = [
    'CategorySerializer', 'ProductSizeStockSerializer', 'ProductListSerializer',
    'ProductDetailSerializer', 'CampaignSerializer',
    'OrderSerializer', 'OrderCreateSerializer', 'OrderUpdateSerializer',
]
