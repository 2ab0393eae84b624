from __future__ import annotations

from typing import Iterable

from rest_framework.permissions import SAFE_METHODS, BasePermission

from utils.rbac import has_any_role, is_blacklisted, is_blockchain_verified


class RoleRequired(BasePermission):
    """Base permission that enforces required roles after DB re-validation."""

    required_roles: Iterable[str] = ()

    def has_permission(self, request, view) -> bool:
        user = getattr(request, "user", None)
        if user is None or not getattr(user, "is_authenticated", False):
            return False

        required = tuple(self.required_roles)
        if not required:
            return True
        return has_any_role(user, required)

    def has_object_permission(self, request, view, obj) -> bool:
        return self.has_permission(request, view)


class AdminRequired(RoleRequired):
    message = "Not authorized as an admin"
    required_roles = ("admin",)


class IsNotBlacklisted(BasePermission):
    """Refuse mutating requests from blacklisted users. Reads stay allowed."""

    message = "Your account has been blacklisted. Please contact admin."

    def has_permission(self, request, view) -> bool:
        if request.method in SAFE_METHODS:
            return True
        user = getattr(request, "user", None)
        if user is None or not getattr(user, "is_authenticated", False):
            return True  # authentication permissions decide
        return not is_blacklisted(user)


class BlockchainVerifiedRequired(BasePermission):
    message = "Only blockchain verified users can perform this action"

    def has_permission(self, request, view) -> bool:
        user = getattr(request, "user", None)
        if user is None or not getattr(user, "is_authenticated", False):
            return False
        return is_blockchain_verified(user)
