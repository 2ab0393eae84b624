from rest_framework import serializers

from authentication.domain.models import CustomUser


class UserSerializer(serializers.ModelSerializer):
    """Full view of a user for the user themself and for admins."""

    is_admin = serializers.SerializerMethodField()

    class Meta:
        model = CustomUser
        fields = (
            "id",
            "name",
            "email",
            "department",
            "year",
            "division",
            "location",
            "role",
            "is_admin",
            "is_blockchain_verified",
            "blockchain_verification_status",
            "metamask_id",
            "profile_image",
            "is_blacklisted",
            "blacklist_reason",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields

    def get_is_admin(self, obj) -> bool:
        return obj.is_admin()


class UserRegistrationSerializer(serializers.Serializer):
    """Request body for registration. Domain rules are checked by AuthService."""

    name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6, style={"input_type": "password"})
    department = serializers.CharField(max_length=100)
    year = serializers.CharField(max_length=50)
    division = serializers.CharField(max_length=50, required=False, allow_blank=True)
    location = serializers.CharField(max_length=255)


class LoginRequestSerializer(serializers.Serializer):
    email = serializers.EmailField(help_text="College email address")
    password = serializers.CharField(write_only=True, style={"input_type": "password"})


class AuthResponseSerializer(serializers.Serializer):
    """Response for registration and login (documentation only)."""

    user = UserSerializer()
    message = serializers.CharField()
    access = serializers.CharField(help_text="JWT access token")
    refresh = serializers.CharField(help_text="JWT refresh token")


class BlockchainVerificationRequestSerializer(serializers.Serializer):
    metamask_id = serializers.CharField(help_text="15 digit wallet identifier")


class ErrorResponseSerializer(serializers.Serializer):
    detail = serializers.CharField()
