# config/urls.py

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path, reverse
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView
from rest_framework.decorators import api_view
from rest_framework.response import Response


@api_view(['GET'])
def api_root(request):
    """Entry point listing the storefront collections and API docs"""
    def link(name):
        return request.build_absolute_uri(reverse(name))

    return Response({
        'name': 'AndShoes storefront API',
        'products': link('storefront:products-list'),
        'categories': link('storefront:categories-list'),
        'campaigns': link('storefront:campaigns-list'),
        'orders': link('storefront:orders-list'),
        'docs': link('swagger-ui'),
        'schema': link('schema'),
    })


urlpatterns = [
    path('admin/', admin.site.urls),

    path('api/', api_root, name='api-root'),
    path('api/storefront/', include('apps.storefront.urls')),

    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]

if settings.DEBUG:
    # Uploaded product images under MEDIA_URL (/storage/)
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
