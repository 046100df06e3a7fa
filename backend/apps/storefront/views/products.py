"""
Catalog API views
"""

from rest_framework import viewsets

from ..constants import PRODUCT_SORT_ALIASES, PRODUCT_SORT_FIELDS
from ..filters import ProductFilter
from ..models import Category, Product, Campaign
from ..serializers import (
    CategorySerializer, ProductListSerializer, ProductDetailSerializer, CampaignSerializer,
)
from ..services.image_urls import ImageUrlNormalizer


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """Storefront product listing with campaign prices and display images"""

    filterset_class = ProductFilter

    def get_queryset(self):
        queryset = Product.objects.with_display_data().with_active_campaigns()
        return queryset.order_by(self.get_ordering())

    def get_ordering(self):
        sort_by = self.request.query_params.get('sort_by', 'created_at')
        sort_order = self.request.query_params.get('sort_order', 'desc')

        if sort_by in PRODUCT_SORT_ALIASES:
            return PRODUCT_SORT_ALIASES[sort_by]
        if sort_by not in PRODUCT_SORT_FIELDS:
            return '-created_at'
        return sort_by if sort_order == 'asc' else f'-{sort_by}'

    def get_serializer_class(self):
        if self.action == 'retrieve':
            return ProductDetailSerializer
        return ProductListSerializer

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['normalizer'] = ImageUrlNormalizer()
        return context


class CategoryViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Category.objects.active()
    serializer_class = CategorySerializer
    pagination_class = None


class CampaignViewSet(viewsets.ReadOnlyModelViewSet):
    """Currently running campaigns"""

    serializer_class = CampaignSerializer
    pagination_class = None

    def get_queryset(self):
        return Campaign.objects.active().select_related('product')
