from rest_framework import serializers


class CreateOrderRequestSerializer(serializers.Serializer):
    product_id = serializers.CharField(help_text="Product to buy")


class VerifyPaymentRequestSerializer(serializers.Serializer):
    razorpay_order_id = serializers.CharField(help_text="Gateway order id returned by create order")
    razorpay_payment_id = serializers.CharField(help_text="Payment id returned by the checkout")
    razorpay_signature = serializers.CharField(help_text="Checkout signature")
    product_id = serializers.CharField(help_text="Product being paid for")


class CryptoPaymentRequestSerializer(serializers.Serializer):
    product_id = serializers.CharField(help_text="Product to buy")
    transaction_hash = serializers.CharField(help_text="Chain transaction hash of the transfer")
