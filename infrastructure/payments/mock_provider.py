"""
Mock Payment Provider
=====================

In-memory gateway for tests and local development. Signatures follow the
Razorpay scheme: hex HMAC-SHA256 of "<order_id>|<payment_id>" keyed with the
provider secret.
"""

import hashlib
import hmac
import logging
import uuid
from typing import Any, Dict, List, Optional

from django.conf import settings

from .interface import GatewayOrder, PaymentException, PaymentProviderInterface

logger = logging.getLogger(__name__)


class MockPaymentProvider(PaymentProviderInterface):
    """
    Mock gateway that stores orders in memory.

    Set ``fail_next`` to make the next gateway call raise PaymentException.
    """

    def __init__(self, secret: Optional[str] = None):
        self.secret = secret or getattr(settings, "RAZORPAY_KEY_SECRET", "") or "mock_secret"
        self.orders: Dict[str, GatewayOrder] = {}
        self.created_orders: List[GatewayOrder] = []
        self.fail_next = False

    def _maybe_fail(self):
        if self.fail_next:
            self.fail_next = False
            raise PaymentException("Mock gateway unavailable")

    def create_order(self, amount: int, currency: str, receipt: str, notes: Dict[str, Any]) -> GatewayOrder:
        self._maybe_fail()
        order = GatewayOrder(
            order_id=f"order_{uuid.uuid4().hex[:14]}",
            amount=amount,
            currency=currency,
            receipt=receipt,
            notes=dict(notes),
        )
        self.orders[order.order_id] = order
        self.created_orders.append(order)
        logger.info(f"Mock gateway: created order {order.order_id} for {amount} {currency}")
        return order

    def fetch_order(self, order_id: str) -> GatewayOrder:
        self._maybe_fail()
        try:
            return self.orders[order_id]
        except KeyError:
            raise PaymentException(f"The id provided does not exist: {order_id}")

    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        return hmac.compare_digest(self.sign(order_id, payment_id), signature or "")

    def sign(self, order_id: str, payment_id: str) -> str:
        """Produce the signature a real checkout would return for this order/payment pair."""
        message = f"{order_id}|{payment_id}".encode()
        return hmac.new(self.secret.encode(), message, hashlib.sha256).hexdigest()

    def clear(self):
        self.orders.clear()
        self.created_orders.clear()
        self.fail_next = False
