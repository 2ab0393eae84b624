from rest_framework import serializers

from authentication.api.serializers import UserSerializer
from payment_system.api.serializers import TransactionSerializer


class ReasonRequestSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True)


class DashboardStatsSerializer(serializers.Serializer):
    total_users = serializers.IntegerField()
    total_products = serializers.IntegerField()
    sold_products = serializers.IntegerField()
    active_products = serializers.IntegerField()
    transactions = serializers.IntegerField()


class NewUserSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    email = serializers.EmailField()
    created_at = serializers.DateTimeField()


class DashboardSerializer(serializers.Serializer):
    stats = DashboardStatsSerializer()
    recent_transactions = TransactionSerializer(many=True)
    new_users = NewUserSerializer(many=True)


class RejectionResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
