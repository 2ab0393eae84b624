"""
Payment Service Abstraction Layer
==================================

Provides a unified interface for payment gateway operations.
"""

from .factory import PaymentFactory
from .interface import GatewayOrder, PaymentException, PaymentProviderInterface
from .mock_provider import MockPaymentProvider
from .razorpay_provider import RazorpayProvider

__all__ = [
    "PaymentProviderInterface",
    "GatewayOrder",
    "PaymentException",
    "RazorpayProvider",
    "MockPaymentProvider",
    "PaymentFactory",
]
