"""
AdminService - moderation and verification review.

Blacklisting, blockchain verification approval/rejection and the dashboard
figures shown to marketplace administrators.
"""

import logging
from typing import Any, Dict, List

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db.models import QuerySet

from authentication.infra.observability.metrics import verification_applications_total
from marketplace.models import Product
from payment_system.models import Transaction
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


User = get_user_model()
logger = logging.getLogger(__name__)

DASHBOARD_RECENT_LIMIT = 5


class AdminService(BaseService):
    def list_users(self) -> QuerySet:
        return User.objects.all().order_by("-created_at")

    def get_user(self, user_id) -> ServiceResult:
        try:
            user = User.objects.filter(pk=user_id).first()
        except (ValidationError, ValueError):
            user = None
        if user is None:
            return service_err(ErrorCodes.USER_NOT_FOUND, "User not found")
        return service_ok(user)

    @BaseService.log_performance
    def blacklist_user(self, admin, user_id, reason) -> ServiceResult:
        if not reason:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please provide a reason for blacklisting")

        result = self.get_user(user_id)
        if not result.ok:
            return result
        user = result.value
        if user.is_admin():
            return service_err(ErrorCodes.CANNOT_BLACKLIST_ADMIN, "Cannot blacklist an admin")

        user.is_blacklisted = True
        user.blacklist_reason = reason
        user.save(update_fields=["is_blacklisted", "blacklist_reason", "updated_at"])
        self.logger.info(f"User {user.id} blacklisted by admin {admin.id}")
        return service_ok(user)

    @BaseService.log_performance
    def unblacklist_user(self, admin, user_id) -> ServiceResult:
        result = self.get_user(user_id)
        if not result.ok:
            return result
        user = result.value

        user.is_blacklisted = False
        user.blacklist_reason = ""
        user.save(update_fields=["is_blacklisted", "blacklist_reason", "updated_at"])
        self.logger.info(f"User {user.id} removed from blacklist by admin {admin.id}")
        return service_ok(user)

    def _pending_user(self, user_id) -> ServiceResult:
        result = self.get_user(user_id)
        if not result.ok:
            return result
        if result.value.blockchain_verification_status != User.VERIFICATION_PENDING:
            return service_err(
                ErrorCodes.VERIFICATION_NOT_PENDING, "User has not applied for blockchain verification"
            )
        return result

    @BaseService.log_performance
    def approve_verification(self, admin, user_id) -> ServiceResult:
        result = self._pending_user(user_id)
        if not result.ok:
            return result
        user = result.value

        user.blockchain_verification_status = User.VERIFICATION_APPROVED
        user.is_blockchain_verified = True
        user.save(update_fields=["blockchain_verification_status", "is_blockchain_verified", "updated_at"])
        verification_applications_total.labels(status="approved").inc()
        self.logger.info(f"Blockchain verification of {user.id} approved by admin {admin.id}")
        return service_ok(user)

    @BaseService.log_performance
    def reject_verification(self, admin, user_id, reason) -> ServiceResult:
        """Reject a pending application. ``is_blockchain_verified`` is left as is."""
        if not reason:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Please provide a reason for rejection")

        result = self._pending_user(user_id)
        if not result.ok:
            return result
        user = result.value

        user.blockchain_verification_status = User.VERIFICATION_REJECTED
        user.save(update_fields=["blockchain_verification_status", "updated_at"])
        verification_applications_total.labels(status="rejected").inc()
        self.logger.info(f"Blockchain verification of {user.id} rejected by admin {admin.id}: {reason}")
        return service_ok(user)

    def pending_verifications(self) -> QuerySet:
        return User.objects.filter(blockchain_verification_status=User.VERIFICATION_PENDING).order_by("created_at")

    def list_transactions(self) -> QuerySet:
        return Transaction.objects.select_related("buyer", "seller", "product").order_by("-created_at")

    def dashboard(self) -> Dict[str, Any]:
        recent_transactions: List[Transaction] = list(self.list_transactions()[:DASHBOARD_RECENT_LIMIT])
        new_users: List = list(User.objects.order_by("-created_at")[:DASHBOARD_RECENT_LIMIT])
        return {
            "stats": {
                "total_users": User.objects.count(),
                "total_products": Product.objects.count(),
                "sold_products": Product.objects.filter(is_sold=True).count(),
                "active_products": Product.objects.filter(is_sold=False).count(),
                "transactions": Transaction.objects.count(),
            },
            "recent_transactions": recent_transactions,
            "new_users": new_users,
        }
