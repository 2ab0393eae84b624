"""
PaymentService - Orchestration Layer for Payments

Card rail: creates gateway orders and verifies the checkout result before
handing over to SaleService. Crypto rail: generates the payment reference
and lets SaleService run the blockchain verifier.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from django.db.models import Q

from infrastructure.payments.interface import PaymentException, PaymentProviderInterface
from marketplace.catalog.domain.services import find_product
from payment_system.domain.services.sale_service import SaleService
from payment_system.infra.observability.metrics import payment_orders_created_total
from payment_system.models import Transaction
from utils.logging_utils import sanitize_payload
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


logger = logging.getLogger(__name__)

CURRENCY = "INR"


def _now_ms() -> int:
    return int(time.time() * 1000)


class PaymentService(BaseService):
    """
    Service for orchestrating payment operations.

    Responsibilities:
    - Create gateway orders for a product
    - Verify gateway payments and complete the sale
    - Process crypto payments
    - List a user's transactions

    Dependencies:
    - PaymentProviderInterface: gateway abstraction (Razorpay / mock)
    - SaleService: sale completion state machine
    """

    def __init__(self, provider: PaymentProviderInterface, sale_service: SaleService):
        super().__init__()
        self.provider = provider
        self.sale_service = sale_service

    @BaseService.log_performance
    def create_razorpay_order(self, user, product_id) -> ServiceResult[Dict[str, Any]]:
        """
        Create a gateway order for the product price in paise.

        Returns:
            ServiceResult with ``{order_id, amount, currency, notes, product}``
        """
        product = find_product(product_id)
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
        if product.is_sold:
            return service_err(ErrorCodes.PRODUCT_ALREADY_SOLD, "Product is already sold")
        if product.seller_id == user.id:
            return service_err(ErrorCodes.CANNOT_BUY_OWN_PRODUCT, "You cannot buy your own product")

        notes = {
            "product_id": str(product.id),
            "buyer_id": str(user.id),
            "seller_id": str(product.seller_id),
        }
        try:
            order = self.provider.create_order(
                amount=int(round(product.price * 100)),
                currency=CURRENCY,
                receipt=f"receipt_order_{_now_ms()}",
                notes=notes,
            )
        except PaymentException as e:
            payment_orders_created_total.labels(status="failed").inc()
            logger.error(f"Gateway order creation failed for product {product.id}: {e}", exc_info=True)
            return service_err(ErrorCodes.PAYMENT_PROVIDER_ERROR, f"Payment initialization failed: {e}")

        payment_orders_created_total.labels(status="created").inc()
        self.logger.info(f"Gateway order {order.order_id} created for product {product.id} by {user.id}")
        return service_ok(
            {
                "order_id": order.order_id,
                "amount": order.amount,
                "currency": order.currency,
                "notes": order.notes,
                "product": {
                    "id": str(product.id),
                    "name": product.name,
                    "price": product.price,
                    "seller": {"id": str(product.seller_id), "name": product.seller.name},
                },
            }
        )

    @BaseService.log_performance
    def verify_razorpay_payment(self, user, data: Dict[str, Any]) -> ServiceResult[Transaction]:
        """
        Verify a checkout result and complete the sale.

        Args:
            data: razorpay_order_id, razorpay_payment_id, razorpay_signature, product_id
        """
        logger.debug(f"Verifying gateway payment: {sanitize_payload(data)}")

        order_id = data.get("razorpay_order_id")
        payment_id = data.get("razorpay_payment_id")
        signature = data.get("razorpay_signature")
        product_id = data.get("product_id")
        if not (order_id and payment_id and signature and product_id):
            return service_err(ErrorCodes.VALIDATION_ERROR, "Payment verification failed: Missing parameters")

        if not self.provider.verify_payment_signature(order_id, payment_id, signature):
            return service_err(ErrorCodes.INVALID_PAYMENT_SIGNATURE, "Payment verification failed: Invalid signature")

        try:
            order = self.provider.fetch_order(order_id)
        except PaymentException as e:
            logger.error(f"Could not fetch gateway order {order_id}: {e}", exc_info=True)
            return service_err(ErrorCodes.PAYMENT_PROVIDER_ERROR, f"Payment verification failed: {e}")

        if str(order.notes.get("product_id")) != str(product_id):
            return service_err(
                ErrorCodes.VALIDATION_ERROR, "Payment verification failed: Order does not belong to this product"
            )

        return self.sale_service.complete_sale(
            buyer=user,
            product_id=product_id,
            payment_method=Transaction.METHOD_RAZORPAY,
            payment_id=payment_id,
            amount=order.major_amount,
        )

    @BaseService.log_performance
    def process_crypto_payment(
        self, user, product_id, transaction_hash: Optional[str]
    ) -> ServiceResult[Transaction]:
        if not transaction_hash:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Transaction hash is required")

        return self.sale_service.complete_sale(
            buyer=user,
            product_id=product_id,
            payment_method=Transaction.METHOD_CRYPTO,
            payment_id=f"crypto_{_now_ms()}",
            crypto_transaction_hash=transaction_hash,
        )

    def get_user_transactions(self, user) -> List[Transaction]:
        """Transactions where the user is buyer or seller, newest first."""
        return list(
            Transaction.objects.filter(Q(buyer=user) | Q(seller=user))
            .select_related("product", "buyer", "seller")
            .order_by("-created_at")
        )
