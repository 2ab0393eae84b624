from .catalog import Product
from .interaction import Review, Wishlist

__all__ = [
    "Product",
    "Review",
    "Wishlist",
]
