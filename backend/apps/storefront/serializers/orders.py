"""
Order serializers
"""

from decimal import Decimal

from rest_framework import serializers

from ..constants import ORDER_STATUS_CHOICES, COUNTRY_CHOICES, MAX_ORDER_QUANTITY
from ..models import Order, Product
from ..services.image_urls import ImageUrlNormalizer


class OrderSerializer(serializers.ModelSerializer):
    """Read representation of an order, including its resolved display image"""

    image_url = serializers.SerializerMethodField()
    country_label = serializers.CharField(read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'unique_id',
            'customer_full_name', 'customer_email', 'customer_phone',
            'customer_address', 'customer_city', 'customer_country', 'country_label',
            'product', 'product_name', 'product_price', 'product_image', 'image_url',
            'product_size', 'product_color', 'quantity', 'total_amount',
            'payment_method', 'status', 'notes',
            'confirmed_at', 'shipped_at', 'delivered_at', 'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def get_image_url(self, obj):
        normalizer = self.context.get('normalizer') or ImageUrlNormalizer()
        return normalizer.for_order(obj)


class OrderCreateSerializer(serializers.Serializer):
    """Guest checkout payload"""

    customer_full_name = serializers.CharField(max_length=255)
    customer_email = serializers.EmailField(max_length=255)
    customer_phone = serializers.CharField(max_length=20)
    customer_address = serializers.CharField(max_length=1000)
    customer_city = serializers.CharField(max_length=100)
    customer_country = serializers.ChoiceField(choices=COUNTRY_CHOICES)
    product_id = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all())
    product_price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal('0'))
    product_size = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    product_color = serializers.CharField(max_length=50, required=False, allow_blank=True, allow_null=True)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_ORDER_QUANTITY)
    notes = serializers.CharField(max_length=1000, required=False, allow_blank=True, allow_null=True)

    def validate_product_id(self, value):
        # The service locks the row itself; pass the id through
        return value.pk


class OrderUpdateSerializer(serializers.Serializer):
    """Admin status update; any status may follow any other"""

    status = serializers.ChoiceField(choices=ORDER_STATUS_CHOICES)
    notes = serializers.CharField(max_length=1000, required=False, allow_blank=True, allow_null=True)
