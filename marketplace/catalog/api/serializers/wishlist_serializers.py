from rest_framework import serializers

from .product_serializers import ProductSerializer


class WishlistAddSerializer(serializers.Serializer):
    product_id = serializers.CharField(required=False, allow_blank=True)


class WishlistSerializer(serializers.Serializer):
    products = ProductSerializer(many=True)


class WishlistCheckSerializer(serializers.Serializer):
    in_wishlist = serializers.BooleanField()
