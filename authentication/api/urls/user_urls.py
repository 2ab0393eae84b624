from django.urls import path

from authentication.api.views import (
    ListingsAPIView,
    ProfileAPIView,
    PublicProfileAPIView,
    PurchasesAPIView,
    SalesAPIView,
)


urlpatterns = [
    path("profile/", ProfileAPIView.as_view(), name="profile"),
    path("purchases/", PurchasesAPIView.as_view(), name="purchases"),
    path("sales/", SalesAPIView.as_view(), name="sales"),
    path("listings/", ListingsAPIView.as_view(), name="listings"),
    path("<uuid:user_id>/", PublicProfileAPIView.as_view(), name="public_profile"),
]
