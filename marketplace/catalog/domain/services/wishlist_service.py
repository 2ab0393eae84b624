"""
WishlistService - per-user saved products.

A user's wishlist is created on first add. Sold products stay in the set and
are filtered out when the wishlist is read.
"""

import logging
from typing import List

from marketplace.catalog.domain.models import Product, Wishlist
from marketplace.catalog.domain.services.catalog_service import find_product
from marketplace.infra.observability.metrics import wishlist_operations_total
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


logger = logging.getLogger(__name__)


class WishlistService(BaseService):
    @BaseService.log_performance
    def add_product(self, user, product_id) -> ServiceResult[Wishlist]:
        if not product_id:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please provide product_id")

        product = find_product(product_id)
        if product is None:
            return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
        if product.seller_id == user.id:
            return service_err(ErrorCodes.OWN_PRODUCT, "You cannot add your own product to wishlist")

        wishlist, created = Wishlist.objects.get_or_create(user=user)
        if not created and wishlist.products.filter(pk=product.pk).exists():
            return service_err(ErrorCodes.ALREADY_IN_WISHLIST, "Product already in wishlist")

        wishlist.products.add(product)
        wishlist.save(update_fields=["updated_at"])
        wishlist_operations_total.labels(operation="add").inc()
        self.logger.info(f"Product {product.id} added to wishlist of {user.id}")
        return service_ok(wishlist)

    @BaseService.log_performance
    def remove_product(self, user, product_id) -> ServiceResult[Wishlist]:
        wishlist = Wishlist.objects.filter(user=user).first()
        if wishlist is None:
            return service_err(ErrorCodes.WISHLIST_NOT_FOUND, "Wishlist not found")

        product = find_product(product_id)
        if product is None or not wishlist.products.filter(pk=product.pk).exists():
            return service_err(ErrorCodes.NOT_IN_WISHLIST, "Product not in wishlist")

        wishlist.products.remove(product)
        wishlist.save(update_fields=["updated_at"])
        wishlist_operations_total.labels(operation="remove").inc()
        self.logger.info(f"Product {product.id} removed from wishlist of {user.id}")
        return service_ok(wishlist)

    def get_products(self, user) -> List[Product]:
        """Unsold products in the user's wishlist (empty when there is none)."""
        wishlist = Wishlist.objects.filter(user=user).first()
        if wishlist is None:
            return []
        return list(wishlist.products.filter(is_sold=False).select_related("seller").order_by("-created_at"))

    def contains(self, user, product_id) -> bool:
        product = find_product(product_id)
        if product is None:
            return False
        return Wishlist.objects.filter(user=user, products=product).exists()
