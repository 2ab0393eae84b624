"""
SaleService - listing / transaction state machine.

A product moves LISTED -> SOLD exactly once. The Transaction row and the
product's sold fields are written in one database transaction with the
product row locked, so concurrent payers cannot both complete.
"""

import logging
from decimal import Decimal
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import transaction

from infrastructure.blockchain import BlockchainVerifierInterface
from infrastructure.observability.tracing import trace_function
from marketplace.catalog.domain.services import find_product
from marketplace.models import Product
from payment_system.infra.observability.metrics import (
    blockchain_verification_total,
    payment_volume_total,
    sale_completion_failures_total,
    sales_completed_total,
)
from payment_system.models import Transaction
from utils.logging_utils import mask_value
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


logger = logging.getLogger(__name__)


class SaleService(BaseService):
    """
    Completes sales for both payment rails.

    Args:
        verifier: Blockchain verifier used for crypto payments
    """

    def __init__(self, verifier: BlockchainVerifierInterface):
        super().__init__()
        self.verifier = verifier

    def _reject(self, payment_method: str, code: str, message: str) -> ServiceResult:
        sale_completion_failures_total.labels(payment_method=payment_method, reason=code).inc()
        return service_err(code, message)

    @BaseService.log_performance
    @trace_function("sale.complete")
    def complete_sale(
        self,
        buyer,
        product_id,
        payment_method: str,
        payment_id: str,
        amount: Optional[Decimal] = None,
        crypto_transaction_hash: Optional[str] = None,
    ) -> ServiceResult[Transaction]:
        """
        Record a paid purchase and mark the product sold.

        Preconditions are checked in order: product exists, not sold, buyer
        is not the seller and, for crypto, the product accepts crypto and the
        verifier accepts the transaction hash.

        Args:
            buyer: Paying user
            product_id: Product being bought
            payment_method: Transaction.METHOD_RAZORPAY or Transaction.METHOD_CRYPTO
            payment_id: Gateway payment id or generated crypto reference
            amount: Amount paid (defaults to the product price)
            crypto_transaction_hash: Chain transaction hash for crypto payments

        Returns:
            ServiceResult with the completed Transaction
        """
        product = find_product(product_id)
        if product is None:
            return self._reject(payment_method, ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
        if product.is_sold:
            return self._reject(payment_method, ErrorCodes.PRODUCT_ALREADY_SOLD, "Product is already sold")
        if product.seller_id == buyer.id:
            return self._reject(payment_method, ErrorCodes.CANNOT_BUY_OWN_PRODUCT, "You cannot buy your own product")

        if payment_method == Transaction.METHOD_CRYPTO:
            if not product.accepts_crypto:
                return self._reject(
                    payment_method,
                    ErrorCodes.CRYPTO_NOT_ACCEPTED,
                    "This product does not accept cryptocurrency payments",
                )
            verified = self.verifier.verify(
                crypto_transaction_hash, product.price, buyer.metamask_id, product.seller.metamask_id
            )
            blockchain_verification_total.labels(result="passed" if verified else "failed").inc()
            if not verified:
                return self._reject(
                    payment_method,
                    ErrorCodes.BLOCKCHAIN_VERIFICATION_FAILED,
                    "Blockchain transaction verification failed",
                )

        amount = product.price if amount is None else Decimal(str(amount))

        with transaction.atomic():
            locked = Product.objects.select_for_update().get(pk=product.pk)
            if locked.is_sold:
                # Another payment completed first
                return self._reject(payment_method, ErrorCodes.PRODUCT_ALREADY_SOLD, "Product is already sold")

            sale = Transaction.objects.create(
                buyer=buyer,
                seller_id=locked.seller_id,
                product=locked,
                amount=amount,
                payment_method=payment_method,
                payment_id=payment_id,
                crypto_transaction_hash=crypto_transaction_hash,
                status=Transaction.STATUS_COMPLETED,
            )
            locked.mark_sold(buyer, sale)

        sales_completed_total.labels(payment_method=payment_method).inc()
        payment_volume_total.labels(currency="INR", payment_method=payment_method).inc(float(amount))
        self.logger.info(
            f"Sale completed: product={locked.id} buyer={buyer.id} transaction={sale.id} "
            f"method={payment_method} payment_id={mask_value(payment_id)}"
        )
        return service_ok(sale)

    @BaseService.log_performance
    def reconcile_orphaned_sales(self, dry_run: bool = False) -> ServiceResult[dict]:
        """
        Mark products sold for completed transactions that never reached the
        product row. Products already sold by another transaction are
        reported as conflicts and left untouched.
        """
        summary = {"checked": 0, "fixed": 0, "conflicts": 0}
        orphans = (
            Transaction.objects.filter(status=Transaction.STATUS_COMPLETED)
            .select_related("product", "buyer")
            .order_by("created_at")
        )

        for sale in orphans.iterator():
            product = sale.product
            if product.transaction_id == sale.id:
                continue
            summary["checked"] += 1

            if product.is_sold:
                summary["conflicts"] += 1
                logger.error(
                    f"Transaction {sale.id} completed for product {product.id} already sold "
                    f"by transaction {product.transaction_id}"
                )
                continue

            if dry_run:
                summary["fixed"] += 1
                continue

            with transaction.atomic():
                locked = Product.objects.select_for_update().get(pk=product.pk)
                try:
                    if locked.mark_sold(sale.buyer, sale):
                        summary["fixed"] += 1
                except ValidationError:
                    summary["conflicts"] += 1
                    logger.error(f"Product {locked.id} was sold while reconciling transaction {sale.id}")

        self.logger.info(f"Sale reconciliation: {summary}")
        return service_ok(summary)
