"""
CatalogService - Product listing CRUD

Handles product browsing, listing creation with image uploads through the
storage abstraction, seller updates and deletion. Products move to sold only
through SaleService; the admin ``mark_sold`` route is the exception and is
kept for internal reconciliation.
"""

import logging
import os
import uuid
from decimal import Decimal
from typing import Any, Dict, List, Optional

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.paginator import Paginator
from django.db import transaction

from infrastructure.storage import StorageException, StorageInterface
from marketplace.catalog.domain.models import Product
from marketplace.catalog.domain.validators import validate_product_data
from marketplace.filters import ProductFilter
from marketplace.infra.observability.metrics import (
    active_listings,
    product_price,
    products_listed_total,
    products_removed_total,
)
from payment_system.models import Transaction
from utils.rbac import is_admin
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


User = get_user_model()
logger = logging.getLogger(__name__)

PAGE_SIZE = 10
EDITABLE_FIELDS = ("name", "description", "category", "condition", "price", "location")


def find_product(product_id) -> Optional[Product]:
    """Return the product or None (malformed ids count as missing)."""
    try:
        return Product.objects.select_related("seller", "buyer").get(pk=product_id)
    except (Product.DoesNotExist, ValidationError, ValueError):
        return None


class CatalogService(BaseService):
    """
    Service for managing product listings.

    Responsibilities:
    - List unsold products with keyword/category/condition filters and pagination
    - Get product details with reviews
    - Create listings (1 to 5 images, uploaded through storage)
    - Update / delete listings (seller only; admins may delete)

    Args:
        storage: Storage abstraction (injected via the container)
    """

    def __init__(self, storage: StorageInterface):
        super().__init__()
        self.storage = storage

    @BaseService.log_performance
    def list_products(self, filters: Optional[Dict[str, Any]] = None, page: int = 1) -> ServiceResult[Dict[str, Any]]:
        """
        List unsold products, newest first, ``PAGE_SIZE`` per page.

        Returns:
            ServiceResult with ``{products, page, pages, total}``
        """
        base = Product.objects.filter(is_sold=False).select_related("seller").order_by("-created_at")
        queryset = ProductFilter(data=filters or {}, queryset=base).qs

        try:
            page = max(int(page), 1)
        except (TypeError, ValueError):
            page = 1

        paginator = Paginator(queryset, PAGE_SIZE)
        page_obj = paginator.get_page(page)
        active_listings.set(base.count())

        self.logger.info(f"Listed products: total={paginator.count}, page={page_obj.number}/{paginator.num_pages}")
        return service_ok(
            {
                "products": list(page_obj.object_list),
                "page": page_obj.number,
                "pages": paginator.num_pages if paginator.count else 0,
                "total": paginator.count,
            }
        )

    def get_product(self, product_id) -> ServiceResult[Product]:
        product = find_product(product_id)
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
        return service_ok(product)

    def _upload_images(self, product_id, images: List) -> List[str]:
        keys = []
        for image in images:
            extension = os.path.splitext(image.name)[1].lower()
            path = f"products/{product_id}/{uuid.uuid4().hex}{extension}"
            stored = self.storage.upload(image, path, getattr(image, "content_type", None))
            keys.append(stored.key)
        return keys

    def _discard_images(self, keys: List[str]):
        for key in keys:
            try:
                self.storage.delete(key)
            except StorageException as e:
                self.logger.warning(f"Could not delete image {key}: {e}")

    def _check_images(self, images: Optional[List], required: bool) -> Optional[ServiceResult]:
        count = len(images or [])
        if required and count == 0:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please upload at least one image")
        if count > Product.MAX_IMAGES:
            return service_err(ErrorCodes.VALIDATION_ERROR, f"You can upload at most {Product.MAX_IMAGES} images")
        return None

    @BaseService.log_performance
    def create_product(self, user, data: Dict[str, Any], images: Optional[List] = None) -> ServiceResult[Product]:
        """
        Create a listing owned by ``user``.

        ``accepts_crypto`` is copied from the seller's blockchain verification
        at creation time and is not changed afterwards.
        """
        validation = validate_product_data(data)
        if not validation.ok:
            return service_err(ErrorCodes.VALIDATION_ERROR, validation.message)

        error = self._check_images(images, required=True)
        if error is not None:
            return error

        product_id = uuid.uuid4()
        try:
            keys = self._upload_images(product_id, images)
        except StorageException as e:
            logger.error(f"Image upload failed for new product by {user.id}: {e}", exc_info=True)
            return service_err(ErrorCodes.STORAGE_ERROR, str(e))

        product = Product.objects.create(
            id=product_id,
            seller=user,
            name=data["name"],
            description=data["description"],
            category=data["category"],
            condition=data["condition"],
            price=Decimal(str(data["price"])),
            location=data["location"],
            images=keys,
            accepts_crypto=bool(user.is_blockchain_verified),
        )

        products_listed_total.labels(accepts_crypto=str(product.accepts_crypto).lower()).inc()
        product_price.observe(float(product.price))
        self.logger.info(f"Product {product.id} listed by {user.id} with {len(keys)} image(s)")
        return service_ok(product)

    @BaseService.log_performance
    def update_product(
        self, user, product_id, data: Dict[str, Any], images: Optional[List] = None
    ) -> ServiceResult[Product]:
        """
        Update a listing. Empty values keep the current value; new images
        replace the stored set.
        """
        product = find_product(product_id)
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
        if product.seller_id != user.id:
            return service_err(ErrorCodes.NOT_PRODUCT_OWNER, "Not authorized to update this product")
        if product.is_sold:
            return service_err(ErrorCodes.PRODUCT_ALREADY_SOLD, "Cannot update a sold product")

        validation = validate_product_data(data, partial=True)
        if not validation.ok:
            return service_err(ErrorCodes.VALIDATION_ERROR, validation.message)

        error = self._check_images(images, required=False)
        if error is not None:
            return error

        for field in EDITABLE_FIELDS:
            if data.get(field) not in (None, ""):
                setattr(product, field, data[field])
        if data.get("price") not in (None, ""):
            product.price = Decimal(str(data["price"]))

        old_keys = []
        if images:
            try:
                new_keys = self._upload_images(product.id, images)
            except StorageException as e:
                logger.error(f"Image upload failed for product {product.id}: {e}", exc_info=True)
                return service_err(ErrorCodes.STORAGE_ERROR, str(e))
            old_keys, product.images = list(product.images), new_keys

        product.save()
        self._discard_images(old_keys)
        self.logger.info(f"Product {product.id} updated by {user.id}")
        return service_ok(product)

    @BaseService.log_performance
    def delete_product(self, user, product_id) -> ServiceResult[None]:
        product = find_product(product_id)
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")

        by_admin = is_admin(user)
        if product.seller_id != user.id and not by_admin:
            return service_err(ErrorCodes.NOT_PRODUCT_OWNER, "Not authorized to delete this product")
        if product.is_sold:
            return service_err(ErrorCodes.PRODUCT_ALREADY_SOLD, "Cannot delete a sold product")

        keys = list(product.images)
        product.delete()
        self._discard_images(keys)

        products_removed_total.labels(by="admin" if by_admin and product.seller_id != user.id else "seller").inc()
        self.logger.info(f"Product {product_id} removed by {user.id}")
        return service_ok(None)

    @BaseService.log_performance
    def mark_sold(self, product_id, buyer_id, transaction_id) -> ServiceResult[Product]:
        """
        Admin-only direct sale transition for an existing transaction.

        The regular purchase flow goes through SaleService.complete_sale.
        """
        if not buyer_id or not transaction_id:
            return service_err(ErrorCodes.VALIDATION_ERROR, "buyer_id and transaction_id are required")

        with transaction.atomic():
            try:
                product = Product.objects.select_for_update().get(pk=product_id)
            except (Product.DoesNotExist, ValidationError, ValueError):
                return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
            if product.is_sold:
                return service_err(ErrorCodes.PRODUCT_ALREADY_SOLD, "Product is already sold")

            buyer = User.objects.filter(pk=buyer_id).first() if _is_uuid(buyer_id) else None
            if buyer is None:
                return service_err(ErrorCodes.USER_NOT_FOUND, "Buyer not found")
            sale = Transaction.objects.filter(pk=transaction_id).first() if _is_uuid(transaction_id) else None
            if sale is None:
                return service_err(ErrorCodes.NOT_FOUND, "Transaction not found")
            if sale.product_id != product.id or sale.buyer_id != buyer.id:
                return service_err(ErrorCodes.VALIDATION_ERROR, "Transaction does not match this product and buyer")

            product.mark_sold(buyer, sale)

        self.logger.info(f"Product {product.id} marked sold to {buyer.id} (transaction {sale.id})")
        return service_ok(product)


def _is_uuid(value) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True
