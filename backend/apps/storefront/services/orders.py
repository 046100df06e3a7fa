"""
Storefront Order Service
Handles guest checkout and order status updates
"""

from decimal import Decimal
from typing import Dict, Optional, Tuple

from django.db import transaction

from .base import BaseStorefrontService
from .ports import CeleryTaskQueue, TaskQueue
from ..constants import ORDER_STATUS_TIMESTAMP_FIELDS
from ..exceptions import (
    SizeRequiredError, SizeNotAvailableError, InsufficientStockError, ProductNotAvailableError,
)
from ..models import Order, Product, ProductSizeStock


def diff_status(old: Optional[str], new: Optional[str]) -> Optional[Tuple[str, str]]:
    """``(old, new)`` when the status changed, ``None`` otherwise."""
    if old == new:
        return None
    return old, new


class OrderService(BaseStorefrontService):
    """Service for creating orders and moving them through their lifecycle"""

    def __init__(self, task_queue: Optional[TaskQueue] = None):
        super().__init__()
        self.task_queue = task_queue or CeleryTaskQueue()

    def create_order(self, data: Dict) -> Order:
        """
        Create an order from validated checkout data, reserving stock.

        Products with per-size stock rows require a size and draw down that
        row; other products draw down their total stock.
        """
        try:
            with transaction.atomic():
                try:
                    product = Product.objects.select_for_update().get(pk=data['product_id'])
                except Product.DoesNotExist:
                    raise ProductNotAvailableError()
                quantity = data['quantity']
                size = data.get('product_size') or None

                self.log_info("Order creation requested", {
                    'product_id': product.id,
                    'product_name': product.name,
                    'requested_size': size,
                    'requested_quantity': quantity,
                })

                if product.size_stocks.exists():
                    self.reserve_size_stock(product, size, quantity)
                else:
                    self.reserve_product_stock(product, quantity)

                price = Decimal(data['product_price'])
                order = Order.objects.create(
                    customer_full_name=data['customer_full_name'],
                    customer_email=data['customer_email'],
                    customer_phone=data['customer_phone'],
                    customer_address=data['customer_address'],
                    customer_city=data['customer_city'],
                    customer_country=data['customer_country'],
                    product=product,
                    product_name=product.name,
                    product_price=price,
                    product_image=product.image,
                    product_size=size,
                    product_color=data.get('product_color') or None,
                    quantity=quantity,
                    total_amount=price * quantity,
                    payment_method='cash',
                    notes=data.get('notes') or None,
                )

                transaction.on_commit(lambda: self.task_queue.submit_order_placed(order.id))

        except (SizeRequiredError, SizeNotAvailableError, InsufficientStockError, ProductNotAvailableError) as e:
            self.log_warning("Order creation rejected", {
                'product_id': data.get('product_id'),
                'reason': str(e.detail),
            })
            raise
        except Exception as e:
            self.log_error("Order creation failed", e, {'product_id': data.get('product_id')})
            raise

        self.log_info(f"Order {order.unique_id} created", {
            'order_id': order.id,
            'total_amount': str(order.total_amount),
        })
        return order

    def reserve_size_stock(self, product: Product, size: Optional[str], quantity: int):
        if not size:
            raise SizeRequiredError()

        size_stock = (
            ProductSizeStock.objects.select_for_update()
            .filter(product=product, size=size)
            .first()
        )
        if size_stock is None:
            available = list(product.size_stocks.values_list('size', flat=True))
            raise SizeNotAvailableError(requested_size=size, available_sizes=available)

        if size_stock.quantity < quantity:
            raise InsufficientStockError(
                available_stock=size_stock.quantity, requested_quantity=quantity, size=size
            )

        size_stock.quantity -= quantity
        size_stock.save(update_fields=['quantity', 'updated_at'])

    def reserve_product_stock(self, product: Product, quantity: int):
        if product.stock_quantity < quantity:
            raise InsufficientStockError(
                available_stock=product.stock_quantity, requested_quantity=quantity
            )

        product.stock_quantity -= quantity
        product.save(update_fields=['stock_quantity', 'updated_at'])

    def update_order(self, order: Order, status: str, notes: Optional[str] = None) -> Order:
        """
        Write a new status (and notes) and queue the customer notification
        when the status actually changed. Any status may follow any other.
        """
        previous_status = order.status
        transition = diff_status(previous_status, status)

        update_fields = ['status', 'notes', 'updated_at']
        order.status = status
        order.notes = notes

        timestamp_field = ORDER_STATUS_TIMESTAMP_FIELDS.get(status)
        if transition and timestamp_field:
            setattr(order, timestamp_field, self.get_current_timestamp())
            update_fields.append(timestamp_field)

        with transaction.atomic():
            order.save(update_fields=update_fields)

            if transition:
                order_id = order.id
                transaction.on_commit(
                    lambda: self.task_queue.submit_status_update(order_id, *transition)
                )

        if transition:
            self.log_info(f"Order {order.unique_id} status changed", {
                'order_id': order.id,
                'previous_status': transition[0],
                'new_status': transition[1],
            })

        return order
