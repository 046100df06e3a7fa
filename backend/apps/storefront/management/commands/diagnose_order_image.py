"""
Print every image source of an order and what each resolves to
"""

from django.core.management.base import BaseCommand, CommandError

from ...models import Order
from ...services.image_urls import ImageUrlNormalizer


class Command(BaseCommand):
    help = 'Print media URLs and normalized URLs for the latest (or given) order'

    def add_arguments(self, parser):
        parser.add_argument(
            '--order-id',
            type=int,
            help='Order to inspect (defaults to the latest order)',
        )

    def handle(self, *args, **options):
        queryset = Order.objects.with_product()
        if options.get('order_id'):
            queryset = queryset.filter(pk=options['order_id'])

        order = queryset.order_by('-created_at').first()
        if order is None:
            raise CommandError('No order found')

        normalizer = ImageUrlNormalizer()
        product = order.product

        self.stdout.write(f"ORDER_ID: {order.id} ({order.unique_id})")
        self.stdout.write(f"ORDER_SNAPSHOT (orders.product_image): {order.product_image or 'NULL'}")
        self.stdout.write(f"PRODUCT.image column: {(product.image if product else None) or 'NULL'}")
        self.stdout.write(f"MEDIA url: {(product.attached_image_url if product else None) or 'NULL'}")
        self.stdout.write(
            f"NORMALIZED (from order snapshot): {normalizer.normalize(order.product_image) or 'NULL'}"
        )
        self.stdout.write(f"NORMALIZED (from product): {normalizer.from_product(product) or 'NULL'}")
        self.stdout.write(self.style.SUCCESS(f"RESOLVED (for order): {normalizer.for_order(order) or 'NULL'}"))
