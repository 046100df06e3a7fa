# apps/storefront/tests/integration/test_api_endpoints.py
import pytest
from decimal import Decimal
from unittest.mock import patch
from django.core import mail
from django.db import connection
from django.test.utils import CaptureQueriesContext
from django.urls import reverse
from rest_framework import status
from rest_framework.settings import api_settings

from ...exceptions import ProductNotAvailableError
from ...models import Order
from ...pagination import StorefrontPagination
from ...services import OrderService
from ...services.notifications import STATUS_UPDATE_CONTENT
from ..factories import *


@pytest.mark.django_db
class TestProductAPI:
    """Test product API endpoints."""

    def test_list_products(self, api_client):
        ProductFactory.create_batch(3)

        response = api_client.get(reverse('storefront:products-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 3
        assert len(response.data['results']) == 3

    def test_list_includes_image_url_and_campaign(self, api_client):
        product = ProductFactory(price=Decimal('100.00'), image='products/hero.jpg')
        campaign = CampaignFactory(product=product, name='Summer', price=Decimal('79.90'))

        response = api_client.get(reverse('storefront:products-list'))
        item = response.data['results'][0]

        assert item['image_url'] == 'https://shop.test/storage/products/hero.jpg'
        assert item['campaign_price'] == '79.90'
        assert item['campaign_id'] == campaign.id
        assert item['campaign_name'] == 'Summer'

    def test_product_without_campaign_has_no_campaign_fields(self, api_client, product):
        response = api_client.get(reverse('storefront:products-detail', kwargs={'pk': product.id}))

        assert response.status_code == status.HTTP_200_OK
        assert 'campaign_price' not in response.data

    def test_product_detail_includes_size_stock(self, api_client, sized_product):
        response = api_client.get(reverse('storefront:products-detail', kwargs={'pk': sized_product.id}))

        assert response.data['size_stocks']['41'] == {'quantity': 3, 'stock_status': 'low stock'}

    def test_sort_and_filter(self, api_client):
        ProductFactory(name='Cheap', price=Decimal('20.00'))
        ProductFactory(name='Mid', price=Decimal('60.00'))
        ProductFactory(name='Pricey', price=Decimal('150.00'))

        response = api_client.get(
            reverse('storefront:products-list'), {'sort_by': 'price-desc', 'price_max': '100'}
        )

        assert [item['name'] for item in response.data['results']] == ['Mid', 'Cheap']


@pytest.mark.django_db
class TestOrderAPI:
    """Test order API endpoints."""

    def test_create_order(self, api_client, product, checkout_data):
        response = api_client.post(
            reverse('storefront:orders-list'), {**checkout_data, 'product_id': product.id}, format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['message'] == 'Order created successfully'
        assert response.data['order']['unique_id'].startswith('ORD-')
        assert response.data['order']['image_url'] == 'https://shop.test/storage/products/classic.jpg'
        assert Order.objects.count() == 1

    def test_create_order_validation_error(self, api_client, product, checkout_data):
        payload = {**checkout_data, 'product_id': product.id, 'customer_email': 'not-an-email', 'quantity': 0}

        response = api_client.post(reverse('storefront:orders-list'), payload, format='json')

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.data['message'] == 'Validation failed'
        assert set(response.data['errors']) == {'customer_email', 'quantity'}

    def test_create_order_unknown_size(self, api_client, sized_product, checkout_data):
        payload = {**checkout_data, 'product_id': sized_product.id, 'product_size': '39'}

        response = api_client.post(reverse('storefront:orders-list'), payload, format='json')

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.data['requested_size'] == '39'
        assert sorted(response.data['available_sizes']) == ['41', '42']

    def test_create_order_insufficient_stock(self, api_client, product, checkout_data):
        payload = {**checkout_data, 'product_id': product.id, 'quantity': 50}

        response = api_client.post(reverse('storefront:orders-list'), payload, format='json')

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.data['message'] == 'Insufficient stock. Only 5 available.'
        assert not Order.objects.exists()

    def test_create_order_product_removed_during_checkout(self, api_client, product, checkout_data):
        with patch.object(OrderService, 'create_order', side_effect=ProductNotAvailableError()):
            response = api_client.post(
                reverse('storefront:orders-list'), {**checkout_data, 'product_id': product.id}, format='json'
            )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.data['message'] == 'Product is no longer available'

    def test_update_status_sends_email(self, api_client, order, django_capture_on_commit_callbacks):
        url = reverse('storefront:orders-detail', kwargs={'pk': order.id})

        with django_capture_on_commit_callbacks(execute=True):
            response = api_client.patch(url, {'status': 'confirmed'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['order']['status'] == 'confirmed'
        assert response.data['order']['confirmed_at'] is not None
        assert len(mail.outbox) == 1
        assert mail.outbox[0].to == ['jane@example.com']
        assert STATUS_UPDATE_CONTENT['confirmed']['message'] in mail.outbox[0].body

    def test_update_notes_only_sends_nothing(self, api_client, order, django_capture_on_commit_callbacks):
        url = reverse('storefront:orders-detail', kwargs={'pk': order.id})

        with django_capture_on_commit_callbacks(execute=True):
            response = api_client.patch(url, {'status': 'pending', 'notes': 'VIP'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['order']['notes'] == 'VIP'
        assert len(mail.outbox) == 0

    def test_update_rejects_unknown_status(self, api_client, order):
        url = reverse('storefront:orders-detail', kwargs={'pk': order.id})

        response = api_client.patch(url, {'status': 'lost'}, format='json')

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_filter_orders_by_status(self, api_client):
        OrderFactory(status='pending')
        shipped = OrderFactory(status='shipped')

        response = api_client.get(reverse('storefront:orders-list'), {'status': 'shipped'})

        assert [item['id'] for item in response.data['results']] == [shipped.id]

    def test_delete_order(self, api_client, order):
        response = api_client.delete(reverse('storefront:orders-detail', kwargs={'pk': order.id}))

        assert response.status_code == status.HTTP_200_OK
        assert not Order.objects.filter(pk=order.id).exists()


class TestApiSettings:
    """Project-wide DRF settings resolve to importable classes."""

    def test_default_pagination_class(self):
        assert api_settings.DEFAULT_PAGINATION_CLASS is StorefrontPagination


@pytest.mark.django_db
class TestProductListQueries:
    """Campaign prices are loaded without a query per product."""

    def count_list_queries(self, api_client):
        with CaptureQueriesContext(connection) as queries:
            response = api_client.get(reverse('storefront:products-list'))
        assert response.status_code == status.HTTP_200_OK
        return len(queries)

    def test_query_count_does_not_grow_with_products(self, api_client):
        CampaignFactory()
        single = self.count_list_queries(api_client)

        CampaignFactory.create_batch(4)
        many = self.count_list_queries(api_client)

        assert many == single

    def test_per_page(self, api_client):
        ProductFactory.create_batch(3)

        response = api_client.get(reverse('storefront:products-list'), {'per_page': 2})

        assert response.data['count'] == 3
        assert len(response.data['results']) == 2
