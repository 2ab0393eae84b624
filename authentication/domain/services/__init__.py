"""
Business logic services for authentication.

Services encapsulate business rules and coordinate between
infrastructure (storage) and domain models.
"""

from .auth_service import AuthService
from .profile_service import ProfileService


__all__ = [
    "AuthService",
    "ProfileService",
]
