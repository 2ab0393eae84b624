from .auth_views import BlockchainVerificationAPIView, LoginAPIView, MeAPIView, RegisterAPIView
from .profile_views import (
    ListingsAPIView,
    ProfileAPIView,
    PublicProfileAPIView,
    PurchasesAPIView,
    SalesAPIView,
)


__all__ = [
    "BlockchainVerificationAPIView",
    "LoginAPIView",
    "MeAPIView",
    "RegisterAPIView",
    "ListingsAPIView",
    "ProfileAPIView",
    "PublicProfileAPIView",
    "PurchasesAPIView",
    "SalesAPIView",
]
