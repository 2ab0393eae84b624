from .catalog_service import CatalogService, find_product
from .review_service import ReviewService
from .wishlist_service import WishlistService


__all__ = [
    "CatalogService",
    "ReviewService",
    "WishlistService",
    "find_product",
]
