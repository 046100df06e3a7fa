"""
Order API views: guest checkout and admin order management
"""

import logging

from django.conf import settings
from rest_framework import mixins, status, viewsets
from rest_framework.response import Response

from ..exceptions import StorefrontException, SizeNotAvailableError
from ..filters import OrderFilter
from ..models import Order
from ..serializers import OrderSerializer, OrderCreateSerializer, OrderUpdateSerializer
from ..services.image_urls import ImageUrlNormalizer
from ..services.orders import OrderService

logger = logging.getLogger(__name__)


def _validation_error(errors):
    return Response(
        {'message': 'Validation failed', 'errors': errors},
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


class OrderViewSet(mixins.ListModelMixin,
                   mixins.RetrieveModelMixin,
                   mixins.DestroyModelMixin,
                   viewsets.GenericViewSet):
    """
    Create: guest checkout.
    Update: status/notes changes; a changed status queues the customer email.
    """

    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    order_service_class = OrderService

    def get_queryset(self):
        return Order.objects.with_product().order_by('-created_at')

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['normalizer'] = ImageUrlNormalizer()
        return context

    def get_order_service(self):
        return self.order_service_class()

    def create(self, request, *args, **kwargs):
        serializer = OrderCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return _validation_error(serializer.errors)

        try:
            order = self.get_order_service().create_order(serializer.validated_data)
        except SizeNotAvailableError as e:
            return Response({
                'message': str(e.detail),
                'requested_size': e.requested_size,
                'available_sizes': e.available_sizes,
            }, status=e.status_code)
        except StorefrontException as e:
            return Response({'message': str(e.detail)}, status=e.status_code)
        except Exception as e:
            logger.exception("Error creating order")
            return Response({
                'message': 'Failed to create order',
                'error': str(e) if settings.DEBUG else 'Internal server error',
            }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({
            'message': 'Order created successfully',
            'order': self.get_serializer(order).data,
        }, status=status.HTTP_201_CREATED)

    def partial_update(self, request, *args, **kwargs):
        order = self.get_object()
        serializer = OrderUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return _validation_error(serializer.errors)

        order = self.get_order_service().update_order(
            order,
            status=serializer.validated_data['status'],
            notes=serializer.validated_data.get('notes'),
        )
        return Response({
            'message': 'Order updated successfully',
            'order': self.get_serializer(order).data,
        })

    def update(self, request, *args, **kwargs):
        return self.partial_update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        super().destroy(request, *args, **kwargs)
        return Response({'message': 'Order deleted successfully'})
