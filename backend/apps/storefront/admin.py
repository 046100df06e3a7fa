# apps/storefront/admin.py

"""
Django admin configuration for storefront models
"""

from django.contrib import admin, messages
from django.utils.html import format_html

from .models import Category, Product, ProductImage, ProductSizeStock, Campaign, Order
from .services.image_urls import ImageUrlNormalizer
from .services.orders import OrderService


class ProductSizeStockInline(admin.TabularInline):
    model = ProductSizeStock
    extra = 1
    readonly_fields = ['stock_status']


class ProductImageInline(admin.StackedInline):
    model = ProductImage
    extra = 0
    max_num = 1


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'parent', 'sort_order', 'is_active']
    list_filter = ['is_active']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'price', 'stock_quantity', 'gender', 'category', 'image_preview']
    list_filter = ['gender', 'category']
    search_fields = ['name', 'description', 'color']
    inlines = [ProductImageInline, ProductSizeStockInline]

    def image_preview(self, obj):
        url = ImageUrlNormalizer().from_product(obj)
        if not url:
            return '-'
        return format_html('<img src="{}" style="height: 40px;">', url)
    image_preview.short_description = 'Image'


@admin.register(Campaign)
class CampaignAdmin(admin.ModelAdmin):
    list_display = ['name', 'product', 'price', 'start_date', 'end_date', 'is_active']
    list_filter = ['is_active']
    search_fields = ['name', 'product__name']
    autocomplete_fields = ['product']


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = [
        'unique_id', 'customer_full_name', 'customer_email', 'product_name',
        'quantity', 'total_amount', 'status', 'customer_country', 'created_at',
    ]
    list_filter = ['status', 'customer_country', 'payment_method']
    search_fields = ['unique_id', 'customer_full_name', 'customer_email', 'product_name']
    readonly_fields = ['unique_id', 'product', *Order.SNAPSHOT_FIELDS,
                       'confirmed_at', 'shipped_at', 'delivered_at', 'created_at', 'updated_at']
    date_hierarchy = 'created_at'

    def save_model(self, request, obj, form, change):
        # Route status edits through the service so the customer gets notified
        if change and 'status' in form.changed_data:
            new_status = obj.status
            obj.status = form.initial.get('status')
            super().save_model(request, obj, form, change)
            OrderService().update_order(obj, status=new_status, notes=obj.notes)
            messages.info(request, f"Order {obj.unique_id} moved to {new_status}; customer email queued.")
            return
        super().save_model(request, obj, form, change)
