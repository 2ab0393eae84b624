from .auth_serializers import (
    AuthResponseSerializer,
    BlockchainVerificationRequestSerializer,
    ErrorResponseSerializer,
    LoginRequestSerializer,
    UserRegistrationSerializer,
    UserSerializer,
)
from .profile_serializers import ProfileUpdateSerializer, PublicUserSerializer, UserSummarySerializer


__all__ = [
    "UserSerializer",
    "UserRegistrationSerializer",
    "LoginRequestSerializer",
    "AuthResponseSerializer",
    "BlockchainVerificationRequestSerializer",
    "ErrorResponseSerializer",
    "ProfileUpdateSerializer",
    "PublicUserSerializer",
    "UserSummarySerializer",
]
