"""
Razorpay Payment Provider
==========================

Concrete implementation of PaymentProviderInterface using the Razorpay SDK.
"""

import logging
from typing import Any, Dict

import razorpay
import requests
from django.conf import settings

from .interface import GatewayOrder, PaymentException, PaymentProviderInterface

logger = logging.getLogger(__name__)

# SDK responses with an error status, plus transport failures underneath the SDK
GATEWAY_ERRORS = (
    razorpay.errors.BadRequestError,
    razorpay.errors.GatewayError,
    razorpay.errors.ServerError,
    requests.RequestException,
)


class RazorpayProvider(PaymentProviderInterface):
    """
    Razorpay payment provider implementation.

    Configuration (in settings.py):
        RAZORPAY_KEY_ID: API key id
        RAZORPAY_KEY_SECRET: API key secret, also used for signature checks
    """

    def __init__(self, client: razorpay.Client = None):
        key_id = getattr(settings, "RAZORPAY_KEY_ID", "")
        key_secret = getattr(settings, "RAZORPAY_KEY_SECRET", "")

        if not key_id or not key_secret:
            logger.warning("RAZORPAY_KEY_ID / RAZORPAY_KEY_SECRET not configured")

        self.client = client or razorpay.Client(auth=(key_id, key_secret))

    def create_order(self, amount: int, currency: str, receipt: str, notes: Dict[str, Any]) -> GatewayOrder:
        try:
            order = self.client.order.create(
                data={
                    "amount": amount,
                    "currency": currency,
                    "receipt": receipt,
                    "notes": notes,
                }
            )
        except GATEWAY_ERRORS as e:
            logger.error(f"Razorpay order creation failed for receipt {receipt}: {e}")
            raise PaymentException(str(e)) from e

        logger.info(f"Created Razorpay order {order['id']} ({amount} {currency})")
        return self._to_gateway_order(order)

    def fetch_order(self, order_id: str) -> GatewayOrder:
        try:
            order = self.client.order.fetch(order_id)
        except GATEWAY_ERRORS as e:
            logger.error(f"Razorpay order fetch failed for {order_id}: {e}")
            raise PaymentException(str(e)) from e

        return self._to_gateway_order(order)

    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        try:
            self.client.utility.verify_payment_signature(
                {
                    "razorpay_order_id": order_id,
                    "razorpay_payment_id": payment_id,
                    "razorpay_signature": signature,
                }
            )
        except razorpay.errors.SignatureVerificationError:
            logger.warning(f"Razorpay signature mismatch for order {order_id}")
            return False
        return True

    @staticmethod
    def _to_gateway_order(order: Dict[str, Any]) -> GatewayOrder:
        notes = order.get("notes") or {}
        # Razorpay returns an empty list instead of an object when no notes were set
        if isinstance(notes, list):
            notes = {}
        return GatewayOrder(
            order_id=order["id"],
            amount=int(order["amount"]),
            currency=order.get("currency", "INR"),
            receipt=order.get("receipt") or "",
            status=order.get("status", "created"),
            notes=dict(notes),
        )
