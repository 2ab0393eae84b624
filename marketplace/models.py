from marketplace.catalog.domain.models import Product, Review, Wishlist


__all__ = [
    "Product",
    "Review",
    "Wishlist",
]
