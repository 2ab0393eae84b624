import django_filters

from .models import Product


class ProductFilter(django_filters.FilterSet):
    """
    Filter for the public product listing.

    ``keyword`` is a case-insensitive match on the product name; unknown
    category/condition values yield an empty listing instead of an error.
    """

    keyword = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    category = django_filters.CharFilter(field_name="category", lookup_expr="exact")
    condition = django_filters.CharFilter(field_name="condition", lookup_expr="exact")
    seller = django_filters.UUIDFilter(field_name="seller__id")

    class Meta:
        model = Product
        fields = ["keyword", "category", "condition", "seller"]
