"""
ReviewService - Product Review Management

Only the recorded buyer of a sold product may review it, once.
"""

import logging
from typing import Any, Dict, Optional

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db.models import Avg, QuerySet

from marketplace.catalog.domain.models import Review
from marketplace.catalog.domain.services.catalog_service import find_product
from marketplace.infra.observability.metrics import reviews_created_total
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


User = get_user_model()
logger = logging.getLogger(__name__)


def parse_rating(rating: Any) -> Optional[int]:
    """Whole-number rating from JSON or form input, or None. Fractions are not rounded."""
    if isinstance(rating, bool):
        return None
    if isinstance(rating, int):
        return rating
    if isinstance(rating, float) and rating.is_integer():
        return int(rating)
    if isinstance(rating, str) and rating.strip().isdecimal():
        return int(rating)
    return None


class ReviewService(BaseService):
    """
    Service for product reviews.

    Responsibilities:
    - Create review (buyer of a sold product only, one per product)
    - Seller reviews with average rating
    - Product reviews and reviews written by a user
    """

    @BaseService.log_performance
    def create_review(self, user, product_id, rating: Any, comment: Optional[str]) -> ServiceResult[Review]:
        """
        Create a review.

        Checks, in order: required fields, rating range, product exists,
        product sold, requester is the buyer, no earlier review.
        """
        if rating in (None, "") or not comment or not product_id:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please provide rating, comment and product_id")

        rating = parse_rating(rating)
        if rating is None or not 1 <= rating <= 5:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Rating must be between 1 and 5")

        product = find_product(product_id)
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
        if not product.is_sold:
            return service_err(ErrorCodes.PRODUCT_NOT_SOLD, "You can only review purchased products")
        if product.buyer_id != user.id:
            return service_err(ErrorCodes.PERMISSION_DENIED, "You can only review products you have purchased")
        if Review.objects.filter(user=user, product=product).exists():
            return service_err(ErrorCodes.DUPLICATE_REVIEW, "You have already reviewed this product")

        review = Review.objects.create(
            user=user,
            seller_id=product.seller_id,
            product=product,
            rating=rating,
            comment=comment,
        )

        reviews_created_total.labels(rating=str(rating)).inc()
        self.logger.info(f"Created review {review.id} for product {product.id} by user {user.id}")
        return service_ok(review)

    def get_seller_reviews(self, seller_id) -> ServiceResult[Dict[str, Any]]:
        """Reviews received by a seller with ``avg_rating`` and ``num_reviews``."""
        try:
            seller = User.objects.filter(pk=seller_id).first()
        except (ValidationError, ValueError):
            seller = None
        if seller is None:
            return service_err(ErrorCodes.USER_NOT_FOUND, "Seller not found")

        reviews = Review.objects.filter(seller=seller).select_related("user", "product")
        average = reviews.aggregate(avg=Avg("rating"))["avg"]
        return service_ok(
            {
                "reviews": list(reviews),
                "avg_rating": round(float(average), 2) if average is not None else 0,
                "num_reviews": reviews.count(),
            }
        )

    def get_product_reviews(self, product_id) -> QuerySet:
        try:
            reviews = Review.objects.filter(product_id=product_id)
        except (ValidationError, ValueError):
            return Review.objects.none()
        return reviews.select_related("user").order_by("-created_at")

    def get_user_reviews(self, user) -> QuerySet:
        return Review.objects.filter(user=user).select_related("seller", "product").order_by("-created_at")
