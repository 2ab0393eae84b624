from rest_framework import serializers

from authentication.api.serializers import UserSummarySerializer
from marketplace.catalog.domain.models import Review


class ReviewSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)
    product_name = serializers.CharField(source="product.name", read_only=True, default=None)

    class Meta:
        model = Review
        fields = ["id", "user", "seller", "product", "product_name", "rating", "comment", "created_at", "updated_at"]
        read_only_fields = fields


class ReviewCreateSerializer(serializers.Serializer):
    product_id = serializers.CharField(required=False, allow_blank=True)
    rating = serializers.CharField(required=False, allow_blank=True)
    comment = serializers.CharField(required=False, allow_blank=True)


class SellerReviewsSerializer(serializers.Serializer):
    reviews = ReviewSerializer(many=True)
    avg_rating = serializers.FloatField()
    num_reviews = serializers.IntegerField()
