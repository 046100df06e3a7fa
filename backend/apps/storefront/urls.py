# apps/storefront/urls.py

"""
URL configuration for the storefront module
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import views

app_name = 'storefront'

router = DefaultRouter()
router.register('products', views.ProductViewSet, basename='products')
router.register('categories', views.CategoryViewSet, basename='categories')
router.register('campaigns', views.CampaignViewSet, basename='campaigns')
router.register('orders', views.OrderViewSet, basename='orders')

urlpatterns = [
    path('', include(router.urls)),
]
