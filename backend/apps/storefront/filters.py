import django_filters
from django.db.models import Q

from .constants import GENDER_CHOICES, ORDER_STATUS_CHOICES, COUNTRY_CHOICES, PAYMENT_METHOD_CHOICES
from .models import Product, Order, Category


class ProductFilter(django_filters.FilterSet):
    """Filter for storefront products"""

    search = django_filters.CharFilter(method='filter_search', label='Search')

    category = django_filters.ModelMultipleChoiceFilter(
        field_name='category',
        queryset=Category.objects.all(),
        label='Category'
    )

    price_min = django_filters.NumberFilter(field_name='price', lookup_expr='gte', label='Min Price')
    price_max = django_filters.NumberFilter(field_name='price', lookup_expr='lte', label='Max Price')

    color = django_filters.CharFilter(field_name='color', lookup_expr='icontains', label='Color')

    foot_numbers = django_filters.CharFilter(
        field_name='foot_numbers', lookup_expr='icontains', label='Sizes'
    )

    gender = django_filters.MultipleChoiceFilter(choices=GENDER_CHOICES, label='Gender')

    in_stock = django_filters.BooleanFilter(method='filter_in_stock', label='In Stock')

    class Meta:
        model = Product
        fields = ['category', 'gender']

    def filter_search(self, queryset, name, value):
        if not value:
            return queryset
        return queryset.filter(Q(name__icontains=value) | Q(description__icontains=value))

    def filter_in_stock(self, queryset, name, value):
        if value:
            return queryset.in_stock()
        return queryset


class OrderFilter(django_filters.FilterSet):
    """Filter for the admin order list"""

    search = django_filters.CharFilter(method='filter_search', label='Search')
    status = django_filters.ChoiceFilter(choices=ORDER_STATUS_CHOICES)
    country = django_filters.ChoiceFilter(field_name='customer_country', choices=COUNTRY_CHOICES)
    payment_method = django_filters.ChoiceFilter(choices=PAYMENT_METHOD_CHOICES)
    date_from = django_filters.DateFilter(field_name='created_at', lookup_expr='date__gte')
    date_to = django_filters.DateFilter(field_name='created_at', lookup_expr='date__lte')

    class Meta:
        model = Order
        fields = ['status', 'payment_method']

    def filter_search(self, queryset, name, value):
        if not value:
            return queryset
        return queryset.filter(
            Q(unique_id__icontains=value) |
            Q(customer_full_name__icontains=value) |
            Q(customer_email__icontains=value) |
            Q(product_name__icontains=value)
        )
