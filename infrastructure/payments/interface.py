"""
Payment Provider Interface
===========================

Abstract base class defining the contract for payment gateway operations.
The only facts that reach the sale flow are "order created with amount X"
and "signature valid / invalid".
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class GatewayOrder:
    """
    Represents an order created on the payment gateway.

    Attributes:
        order_id: Gateway order identifier (e.g. 'order_Nxyz...')
        amount: Amount in the smallest currency unit (paise for INR)
        currency: ISO currency code
        receipt: Merchant receipt reference
        status: Gateway order status ('created', 'attempted', 'paid')
        notes: Custom key/value data attached at creation
    """

    order_id: str
    amount: int
    currency: str
    receipt: str = ""
    status: str = "created"
    notes: Dict[str, Any] = field(default_factory=dict)

    @property
    def major_amount(self) -> float:
        """Amount converted back from the smallest currency unit."""
        return self.amount / 100


class PaymentProviderInterface(ABC):
    """
    Abstract interface for payment gateway operations.

    Concrete implementations:
        - RazorpayProvider: Razorpay orders API
        - MockPaymentProvider: In-memory gateway for tests and local development
    """

    @abstractmethod
    def create_order(self, amount: int, currency: str, receipt: str, notes: Dict[str, Any]) -> GatewayOrder:
        """
        Create a payment order.

        Args:
            amount: Amount in the smallest currency unit
            currency: ISO currency code
            receipt: Merchant receipt reference
            notes: Custom data to attach to the order

        Returns:
            GatewayOrder

        Raises:
            PaymentException: If order creation fails
        """
        pass

    @abstractmethod
    def fetch_order(self, order_id: str) -> GatewayOrder:
        """
        Retrieve an existing order.

        Raises:
            PaymentException: If retrieval fails
        """
        pass

    @abstractmethod
    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        """
        Check the signature the checkout returned for an order/payment pair.

        Returns:
            True when the signature matches, False otherwise
        """
        pass


class PaymentException(Exception):
    """Base exception for payment operations."""

    pass
