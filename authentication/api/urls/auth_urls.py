from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from authentication.api.views import BlockchainVerificationAPIView, LoginAPIView, MeAPIView, RegisterAPIView


urlpatterns = [
    path("register/", RegisterAPIView.as_view(), name="register"),
    path("login/", LoginAPIView.as_view(), name="login"),
    path("me/", MeAPIView.as_view(), name="me"),
    path("blockchain-verification/", BlockchainVerificationAPIView.as_view(), name="blockchain_verification"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
]
