from rest_framework import serializers

from authentication.domain.models import CustomUser


class UserSummarySerializer(serializers.ModelSerializer):
    """Compact user reference embedded in products, chats, reviews and transactions."""

    class Meta:
        model = CustomUser
        fields = ("id", "name", "profile_image", "is_blockchain_verified")
        read_only_fields = fields


class PublicUserSerializer(serializers.ModelSerializer):
    """What other students may see about a user (no email, no moderation data)."""

    class Meta:
        model = CustomUser
        fields = (
            "id",
            "name",
            "department",
            "year",
            "division",
            "location",
            "is_blockchain_verified",
            "profile_image",
            "created_at",
        )
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    department = serializers.CharField(max_length=100, required=False, allow_blank=True)
    year = serializers.CharField(max_length=50, required=False, allow_blank=True)
    division = serializers.CharField(max_length=50, required=False, allow_blank=True)
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    password = serializers.CharField(
        write_only=True, required=False, allow_blank=True, min_length=6, style={"input_type": "password"}
    )
    profile_image = serializers.ImageField(required=False)
