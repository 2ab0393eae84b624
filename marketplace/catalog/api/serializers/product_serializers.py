from rest_framework import serializers

from authentication.api.serializers import UserSummarySerializer
from infrastructure.container import container
from marketplace.catalog.domain.models import Product

from .review_serializers import ReviewSerializer


class ProductSerializer(serializers.ModelSerializer):
    """Product card/detail payload. ``images`` are resolved to storage URLs."""

    seller = UserSummarySerializer(read_only=True)
    images = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "category",
            "condition",
            "price",
            "images",
            "location",
            "accepts_crypto",
            "is_sold",
            "seller",
            "buyer",
            "transaction",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_images(self, obj):
        storage = container.storage()
        return [storage.get_url(key) for key in obj.images or []]


class ProductDetailSerializer(ProductSerializer):
    reviews = ReviewSerializer(many=True, read_only=True)

    class Meta(ProductSerializer.Meta):
        fields = ProductSerializer.Meta.fields + ["reviews"]
        read_only_fields = fields


class ProductWriteSerializer(serializers.Serializer):
    """
    Multipart listing form. Field values are checked by the catalog
    validators; ``images`` are read from the uploaded files.
    """

    name = serializers.CharField(max_length=200, required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField(max_length=30, required=False, allow_blank=True)
    condition = serializers.CharField(max_length=20, required=False, allow_blank=True)
    price = serializers.CharField(max_length=20, required=False, allow_blank=True)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    images = serializers.ListField(child=serializers.ImageField(), required=False, max_length=Product.MAX_IMAGES)


class ProductListResponseSerializer(serializers.Serializer):
    products = ProductSerializer(many=True)
    page = serializers.IntegerField()
    pages = serializers.IntegerField()
    total = serializers.IntegerField()


class MarkSoldRequestSerializer(serializers.Serializer):
    buyer_id = serializers.UUIDField()
    transaction_id = serializers.UUIDField()
