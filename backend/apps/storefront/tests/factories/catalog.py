# apps/storefront/tests/factories/catalog.py
import factory
from factory.django import DjangoModelFactory
from decimal import Decimal

from ...models import Category, Product, ProductImage, ProductSizeStock, Campaign

__all__ = [
    'CategoryFactory', 'ProductFactory', 'ProductImageFactory',
    'ProductSizeStockFactory', 'CampaignFactory',
]


class CategoryFactory(DjangoModelFactory):
    class Meta:
        model = Category

    name = factory.Sequence(lambda n: f"Category {n}")
    slug = factory.Sequence(lambda n: f"category-{n}")
    description = factory.Faker('sentence')
    sort_order = factory.Sequence(lambda n: n)
    is_active = True


class ProductFactory(DjangoModelFactory):
    class Meta:
        model = Product

    name = factory.Sequence(lambda n: f"Runner {n}")
    description = factory.Faker('text', max_nb_chars=200)
    price = Decimal('89.99')
    image = factory.Sequence(lambda n: f"products/runner-{n}.jpg")
    stock_quantity = 25
    foot_numbers = '40,41,42,43'
    color = factory.Faker('color_name')
    gender = factory.Iterator(['male', 'female', 'unisex'])
    category = factory.SubFactory(CategoryFactory)


class ProductImageFactory(DjangoModelFactory):
    class Meta:
        model = ProductImage

    product = factory.SubFactory(ProductFactory)
    file = factory.django.FileField(filename='runner.jpg', data=b'\xff\xd8\xff\xe0 fake jpeg')


class ProductSizeStockFactory(DjangoModelFactory):
    class Meta:
        model = ProductSizeStock
        django_get_or_create = ('product', 'size')

    product = factory.SubFactory(ProductFactory)
    size = factory.Iterator(['40', '41', '42', '43'])
    quantity = 20


class CampaignFactory(DjangoModelFactory):
    class Meta:
        model = Campaign

    name = factory.Sequence(lambda n: f"Campaign {n}")
    description = factory.Faker('sentence')
    product = factory.SubFactory(ProductFactory)
    price = factory.LazyAttribute(lambda obj: (obj.product.price * Decimal('0.8')).quantize(Decimal('0.01')))
    start_date = None
    end_date = None
    is_active = True
