from rest_framework import serializers

from authentication.api.serializers import UserSummarySerializer
from payment_system.models import Transaction


class TransactionProductSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)


class TransactionSerializer(serializers.ModelSerializer):
    buyer = UserSummarySerializer(read_only=True)
    seller = UserSummarySerializer(read_only=True)
    product = TransactionProductSerializer(read_only=True)

    class Meta:
        model = Transaction
        fields = (
            "id",
            "buyer",
            "seller",
            "product",
            "amount",
            "payment_method",
            "payment_id",
            "crypto_transaction_hash",
            "status",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields


class OrderSellerSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()


class OrderProductSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    seller = OrderSellerSerializer()


class CreateOrderResponseSerializer(serializers.Serializer):
    order_id = serializers.CharField()
    amount = serializers.IntegerField(help_text="Amount in paise")
    currency = serializers.CharField()
    notes = serializers.DictField(child=serializers.CharField())
    product = OrderProductSerializer()


class PaymentResultSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField()
    transaction = TransactionSerializer()
