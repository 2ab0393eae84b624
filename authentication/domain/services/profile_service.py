"""
ProfileService - Profile Management Business Logic.

Own profile read/update (including the profile image upload), public seller
profiles and the purchase / sale / listing history of a user.
"""

import logging
import os
import uuid
from typing import Any, Dict, Optional

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.files.uploadedfile import UploadedFile
from django.db.models import QuerySet

from infrastructure.storage import StorageException, StorageInterface
from marketplace.models import Product, Review
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


User = get_user_model()
logger = logging.getLogger(__name__)

PUBLIC_PROFILE_PRODUCT_LIMIT = 10


class ProfileService(BaseService):
    """
    Profile management service.

    Args:
        storage: Storage backend for profile images
    """

    UPDATABLE_FIELDS = ("name", "department", "year", "division", "location")

    def __init__(self, storage: StorageInterface):
        super().__init__()
        self.storage = storage

    def get_profile(self, user) -> ServiceResult:
        fresh = User.objects.filter(pk=user.pk).first()
        if fresh is None:
            return service_err(ErrorCodes.USER_NOT_FOUND, "User not found")
        return service_ok(fresh)

    @BaseService.log_performance
    def update_profile(
        self, user, data: Dict[str, Any], profile_image: Optional[UploadedFile] = None
    ) -> ServiceResult:
        """
        Update profile fields that were provided (empty values keep the current value).

        Args:
            user: Authenticated user
            data: name, department, year, division, location, password
            profile_image: Optional uploaded image
        """
        fresh = User.objects.filter(pk=user.pk).first()
        if fresh is None:
            return service_err(ErrorCodes.USER_NOT_FOUND, "User not found")

        for field in self.UPDATABLE_FIELDS:
            value = data.get(field)
            if value:
                setattr(fresh, field, value)

        if profile_image is not None:
            extension = os.path.splitext(profile_image.name)[1].lower()
            path = f"profiles/{fresh.id}/{uuid.uuid4().hex}{extension}"
            try:
                stored = self.storage.upload(profile_image, path, profile_image.content_type)
            except StorageException as e:
                logger.error(f"Profile image upload failed for user {fresh.id}: {e}", exc_info=True)
                return service_err(ErrorCodes.STORAGE_ERROR, str(e))
            fresh.profile_image = stored.key

        if data.get("password"):
            fresh.set_password(data["password"])

        fresh.save()
        logger.info(f"Updated profile of user {fresh.id}")
        return service_ok(fresh)

    def get_public_profile(self, user_id) -> ServiceResult[Dict[str, Any]]:
        """
        Public profile of a user: the user, their newest unsold listings and
        the reviews they received as seller.
        """
        try:
            user = User.objects.filter(pk=user_id).first()
        except (ValidationError, ValueError):
            user = None
        if user is None:
            return service_err(ErrorCodes.USER_NOT_FOUND, "User not found")

        products = Product.objects.filter(seller=user, is_sold=False).order_by("-created_at")[
            :PUBLIC_PROFILE_PRODUCT_LIMIT
        ]
        reviews = (
            Review.objects.filter(seller=user).select_related("user", "product").order_by("-created_at")
        )
        return service_ok({"user": user, "products": list(products), "reviews": list(reviews)})

    def get_purchases(self, user) -> QuerySet:
        return Product.objects.filter(buyer=user, is_sold=True).select_related("seller").order_by("-updated_at")

    def get_sales(self, user) -> QuerySet:
        return Product.objects.filter(seller=user, is_sold=True).select_related("buyer").order_by("-updated_at")

    def get_listings(self, user) -> QuerySet:
        return Product.objects.filter(seller=user, is_sold=False).order_by("-created_at")
