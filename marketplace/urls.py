from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .catalog.api.views.product_views import ProductViewSet
from .catalog.api.views.review_views import ReviewViewSet
from .catalog.api.views.wishlist_views import WishlistAPIView, WishlistCheckAPIView, WishlistItemAPIView

router = DefaultRouter()
router.register(r"products", ProductViewSet, basename="product")
router.register(r"reviews", ReviewViewSet, basename="review")

app_name = "marketplace"

urlpatterns = [
    path("", include(router.urls)),
    path("wishlist/", WishlistAPIView.as_view(), name="wishlist"),
    path("wishlist/check/<uuid:product_id>/", WishlistCheckAPIView.as_view(), name="wishlist-check"),
    path("wishlist/<uuid:product_id>/", WishlistItemAPIView.as_view(), name="wishlist-item"),
]
