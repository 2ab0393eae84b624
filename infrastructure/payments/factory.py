"""
Payment Provider Factory
=========================

Factory pattern for creating payment provider instances based on configuration.
"""

import logging
from typing import Literal

from django.conf import settings

from .interface import PaymentProviderInterface
from .mock_provider import MockPaymentProvider
from .razorpay_provider import RazorpayProvider

logger = logging.getLogger(__name__)

PaymentBackend = Literal["razorpay", "mock"]


class PaymentFactory:
    """
    Factory for creating payment provider instances.

    Usage:
        # In settings.py
        PAYMENT_PROVIDER = 'razorpay'  # or 'mock'

        # In your code
        payment_provider = PaymentFactory.create()
    """

    @staticmethod
    def create(backend: PaymentBackend | None = None) -> PaymentProviderInterface:
        """
        Create a payment provider instance.

        Args:
            backend: 'razorpay' or 'mock'. If None, reads settings.PAYMENT_PROVIDER

        Raises:
            ValueError: If backend type is invalid
        """
        backend_type = backend or getattr(settings, "PAYMENT_PROVIDER", "razorpay")

        logger.info(f"Creating payment provider: {backend_type}")

        if backend_type == "razorpay":
            return RazorpayProvider()
        if backend_type == "mock":
            return MockPaymentProvider()
        raise ValueError(f"Invalid payment provider: {backend_type}. Must be 'razorpay' or 'mock'")
