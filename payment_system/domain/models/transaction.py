import uuid
from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models


class Transaction(models.Model):
    """
    Record of a completed purchase. Created once per successful payment;
    afterwards only ``status`` changes, along ``ALLOWED_TRANSITIONS``.
    """

    METHOD_RAZORPAY = "razorpay"
    METHOD_CRYPTO = "crypto"
    PAYMENT_METHOD_CHOICES = [
        (METHOD_RAZORPAY, "Razorpay"),
        (METHOD_CRYPTO, "Cryptocurrency"),
    ]

    STATUS_PENDING = "pending"
    STATUS_COMPLETED = "completed"
    STATUS_FAILED = "failed"
    STATUS_REFUNDED = "refunded"
    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_COMPLETED, "Completed"),
        (STATUS_FAILED, "Failed"),
        (STATUS_REFUNDED, "Refunded"),
    ]

    ALLOWED_TRANSITIONS = {
        STATUS_PENDING: {STATUS_COMPLETED, STATUS_FAILED},
        STATUS_COMPLETED: {STATUS_REFUNDED},
        STATUS_FAILED: set(),
        STATUS_REFUNDED: set(),
    }

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    buyer = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="transactions_as_buyer")
    seller = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="transactions_as_seller"
    )
    product = models.ForeignKey("marketplace.Product", on_delete=models.PROTECT, related_name="transactions")
    amount = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(Decimal("0"))])
    payment_method = models.CharField(max_length=20, choices=PAYMENT_METHOD_CHOICES)
    # Gateway payment id, or crypto_<ms> for the crypto rail
    payment_id = models.CharField(max_length=255, db_index=True)
    crypto_transaction_hash = models.CharField(max_length=255, blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PENDING)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "payment_system"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["buyer", "-created_at"], name="pay_txn_buyer_idx"),
            models.Index(fields=["seller", "-created_at"], name="pay_txn_seller_idx"),
            models.Index(fields=["product", "status"], name="pay_txn_product_status_idx"),
        ]

    def __str__(self):
        return f"{self.payment_method} {self.payment_id} ({self.status})"

    def can_transition_to(self, status: str) -> bool:
        return status in self.ALLOWED_TRANSITIONS.get(self.status, set())

    def transition_to(self, status: str):
        if not self.can_transition_to(status):
            raise ValidationError(f"Cannot move transaction from {self.status} to {status}")
        self.status = status
        self.save(update_fields=["status", "updated_at"])
