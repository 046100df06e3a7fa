"""
Catalog serializers
"""

from rest_framework import serializers

from ..models import Category, Product, ProductSizeStock, Campaign
from ..services.image_urls import ImageUrlNormalizer
from ..services.pricing import campaign_fields


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ['id', 'name', 'slug', 'description', 'parent', 'sort_order', 'is_active']


class ProductSizeStockSerializer(serializers.ModelSerializer):
    stock_status = serializers.CharField(read_only=True)

    class Meta:
        model = ProductSizeStock
        fields = ['size', 'quantity', 'stock_status']


class ProductListSerializer(serializers.ModelSerializer):
    """Product with display image and any running campaign price"""

    category = CategorySerializer(read_only=True)
    image_url = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'description', 'price', 'image', 'image_url',
            'stock_quantity', 'foot_numbers', 'color', 'gender', 'category',
            'created_at',
        ]

    def get_image_url(self, obj):
        normalizer = self.context.get('normalizer') or ImageUrlNormalizer()
        return normalizer.from_product(obj)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        campaign = campaign_fields(instance)
        if campaign:
            data['campaign_price'] = str(campaign['campaign_price'])
            data['campaign_id'] = campaign['campaign_id']
            data['campaign_name'] = campaign['campaign_name']
            end_date = campaign['campaign_end_date']
            data['campaign_end_date'] = end_date.isoformat() if end_date else None
        return data


class ProductDetailSerializer(ProductListSerializer):
    size_stocks = serializers.SerializerMethodField()

    class Meta(ProductListSerializer.Meta):
        fields = ProductListSerializer.Meta.fields + ['size_stocks']

    def get_size_stocks(self, obj):
        return obj.size_stock_table()


class CampaignSerializer(serializers.ModelSerializer):
    class Meta:
        model = Campaign
        fields = [
            'id', 'name', 'description', 'price', 'product', 'start_date', 'end_date',
            'banner_image', 'banner_color', 'is_active',
        ]

    def validate(self, attrs):
        start = attrs.get('start_date')
        end = attrs.get('end_date')
        if start and end and end < start:
            raise serializers.ValidationError({'end_date': 'End date must be on or after the start date.'})
        return attrs
