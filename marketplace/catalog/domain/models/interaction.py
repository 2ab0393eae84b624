from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from .catalog import Product


class Review(models.Model):
    """
    A buyer's review of a purchased product.

    One review per (user, product) is enforced by ReviewService, not by a
    database constraint. ``seller`` is copied from the product for seller
    aggregates. The product reference survives product deletion as NULL.
    """

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="reviews_written")
    seller = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="reviews_received"
    )
    product = models.ForeignKey(Product, on_delete=models.SET_NULL, null=True, related_name="reviews")
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        app_label = "marketplace"
        indexes = [
            models.Index(fields=["seller", "-created_at"], name="mkt_review_seller_idx"),
            models.Index(fields=["product", "-created_at"], name="mkt_review_product_idx"),
            models.Index(fields=["user", "product"], name="mkt_review_user_product_idx"),
        ]

    def __str__(self):
        return f"{self.user} rated {self.product_id}: {self.rating}"


class Wishlist(models.Model):
    """One per user. Sold products stay in the set and are filtered when read."""

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="wishlist")
    products = models.ManyToManyField(Product, blank=True, related_name="wishlisted_by")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "marketplace"

    def __str__(self):
        return f"Wishlist of {self.user}"
