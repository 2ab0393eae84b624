import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models


class Product(models.Model):
    """A second-hand listing. ``is_sold`` only ever moves from False to True."""

    CATEGORY_CHOICES = [
        ("Stationary", "Stationary"),
        ("Books", "Books"),
        ("Electronics", "Electronics"),
        ("Project Materials", "Project Materials"),
        ("Others", "Others"),
    ]

    CONDITION_CHOICES = [
        ("New", "New"),
        ("Like New", "Like New"),
        ("Slightly Used", "Slightly Used"),
        ("Used", "Used"),
        ("Heavily Used", "Heavily Used"),
    ]

    MAX_IMAGES = 5

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField()
    seller = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="products")
    category = models.CharField(max_length=30, choices=CATEGORY_CHOICES)
    condition = models.CharField(max_length=20, choices=CONDITION_CHOICES)
    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    # Storage keys of the uploaded images
    images = models.JSONField(default=list)
    location = models.CharField(max_length=255)

    # Fixed at creation from the seller's verification state
    accepts_crypto = models.BooleanField(default=False)

    # Sale state
    is_sold = models.BooleanField(default=False)
    buyer = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name="purchases"
    )
    transaction = models.ForeignKey(
        "payment_system.Transaction", on_delete=models.SET_NULL, null=True, blank=True, related_name="+"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["is_sold", "-created_at"], name="mkt_product_sold_created_idx"),
            models.Index(fields=["category", "is_sold"], name="mkt_product_category_idx"),
            models.Index(fields=["seller", "is_sold"], name="mkt_product_seller_idx"),
            models.Index(fields=["buyer"], name="mkt_product_buyer_idx"),
        ]

    def __str__(self):
        return self.name

    def mark_sold(self, buyer, transaction) -> bool:
        """
        Set ``is_sold``, ``buyer`` and ``transaction`` in a single save.

        Repeating the call for the transaction that already sold the product
        is a no-op (returns False); any other call on a sold product raises.
        """
        if self.is_sold:
            if self.transaction_id == transaction.pk:
                return False
            raise ValidationError("Product is already sold")

        self.is_sold = True
        self.buyer = buyer
        self.transaction = transaction
        self.save(update_fields=["is_sold", "buyer", "transaction", "updated_at"])
        return True
