from .product_serializers import (
    MarkSoldRequestSerializer,
    ProductDetailSerializer,
    ProductListResponseSerializer,
    ProductSerializer,
    ProductWriteSerializer,
)
from .review_serializers import ReviewCreateSerializer, ReviewSerializer, SellerReviewsSerializer
from .wishlist_serializers import WishlistAddSerializer, WishlistCheckSerializer, WishlistSerializer


__all__ = [
    "MarkSoldRequestSerializer",
    "ProductDetailSerializer",
    "ProductListResponseSerializer",
    "ProductSerializer",
    "ProductWriteSerializer",
    "ReviewCreateSerializer",
    "ReviewSerializer",
    "SellerReviewsSerializer",
    "WishlistAddSerializer",
    "WishlistCheckSerializer",
    "WishlistSerializer",
]
