from .request_serializers import (
    CreateOrderRequestSerializer,
    CryptoPaymentRequestSerializer,
    VerifyPaymentRequestSerializer,
)
from .response_serializers import CreateOrderResponseSerializer, PaymentResultSerializer, TransactionSerializer


__all__ = [
    "CreateOrderRequestSerializer",
    "CryptoPaymentRequestSerializer",
    "VerifyPaymentRequestSerializer",
    "CreateOrderResponseSerializer",
    "PaymentResultSerializer",
    "TransactionSerializer",
]
