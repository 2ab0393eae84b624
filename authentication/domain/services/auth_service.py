"""
AuthService - Core Authentication Business Logic.

Registration restricted to the college email domain, login with JWT issue,
and the user side of blockchain verification.
"""

import logging
from typing import Any, Dict

from django.contrib.auth import get_user_model
from django.db import IntegrityError

from authentication.api.serializers.jwt_serializers import CustomRefreshToken
from authentication.domain.validators import validate_registration, validate_wallet_id
from authentication.infra.observability.metrics import (
    login_duration,
    login_failed,
    login_total,
    registration_failed,
    registration_total,
    verification_applications_total,
)
from utils.logging_utils import mask_value
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


User = get_user_model()
logger = logging.getLogger(__name__)

BLACKLISTED_MESSAGE = "Your account has been blacklisted. Please contact admin."


class AuthService(BaseService):
    """
    Authentication service encapsulating all auth business logic.

    Handles registration, login and blockchain verification applications.
    """

    REGISTRATION_FIELDS = ("name", "department", "year", "division", "location")

    @staticmethod
    def issue_tokens(user) -> Dict[str, str]:
        refresh = CustomRefreshToken.for_user(user)
        return {"access": str(refresh.access_token), "refresh": str(refresh)}

    @BaseService.log_performance
    def register(self, data: Dict[str, Any]) -> ServiceResult[Dict[str, Any]]:
        """
        Register a new user.

        Returns:
            ServiceResult with {"user", "access", "refresh"}
        """
        validation = validate_registration(data)
        if not validation.ok:
            registration_failed.labels(reason="validation_error").inc()
            registration_total.labels(status="failed").inc()
            return service_err(ErrorCodes.VALIDATION_ERROR, validation.message)

        email = data["email"].strip().lower()
        if User.objects.filter(email=email).exists():
            registration_failed.labels(reason="email_exists").inc()
            registration_total.labels(status="failed").inc()
            return service_err(ErrorCodes.USER_ALREADY_EXISTS, "User already exists")

        fields = {key: (data.get(key) or "").strip() for key in self.REGISTRATION_FIELDS}
        try:
            user = User.objects.create_user(email=email, password=data["password"], **fields)
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            registration_total.labels(status="failed").inc()
            return service_err(ErrorCodes.USER_ALREADY_EXISTS, "User already exists")

        registration_total.labels(status="success").inc()
        logger.info(f"Registered user {user.id} ({mask_value(email)})")
        return service_ok({"user": user, **self.issue_tokens(user)})

    @BaseService.log_performance
    def login(self, email: str, password: str) -> ServiceResult[Dict[str, Any]]:
        """
        Authenticate user with email/password.

        Blacklisted users are refused even with correct credentials.

        Returns:
            ServiceResult with {"user", "access", "refresh"}
        """
        with login_duration.time():
            if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
                login_failed.labels(reason="missing_fields").inc()
                login_total.labels(status="failed").inc()
                return service_err(ErrorCodes.INVALID_CREDENTIALS, "Invalid email or password")

            user = User.objects.filter(email=email.strip().lower()).first()
            if user is None or not user.check_password(password):
                login_failed.labels(reason="invalid_credentials").inc()
                login_total.labels(status="failed").inc()
                return service_err(ErrorCodes.INVALID_CREDENTIALS, "Invalid email or password")

            if user.is_blacklisted:
                login_failed.labels(reason="blacklisted").inc()
                login_total.labels(status="failed").inc()
                logger.warning(f"Blacklisted user {user.id} attempted to log in")
                return service_err(ErrorCodes.USER_BLACKLISTED, BLACKLISTED_MESSAGE)

            login_total.labels(status="success").inc()
            return service_ok({"user": user, **self.issue_tokens(user)})

    def get_me(self, user) -> ServiceResult:
        fresh = User.objects.filter(pk=user.pk).first()
        if fresh is None:
            return service_err(ErrorCodes.USER_NOT_FOUND, "User not found")
        return service_ok(fresh)

    @BaseService.log_performance
    def apply_blockchain_verification(self, user, metamask_id: str) -> ServiceResult:
        """
        Request blockchain verification with a 15-digit wallet id.

        Allowed only from the not_applied and rejected states; moves the user to pending.
        """
        validation = validate_wallet_id(metamask_id)
        if not validation.ok:
            verification_applications_total.labels(status="rejected_input").inc()
            return service_err(ErrorCodes.VALIDATION_ERROR, validation.message)

        fresh = User.objects.filter(pk=user.pk).first()
        if fresh is None:
            return service_err(ErrorCodes.USER_NOT_FOUND, "User not found")

        if not fresh.can_apply_for_verification():
            verification_applications_total.labels(status="not_eligible").inc()
            return service_err(
                ErrorCodes.VERIFICATION_ALREADY_APPLIED,
                f"You have already applied for verification (Status: {fresh.blockchain_verification_status})",
            )

        fresh.metamask_id = metamask_id
        fresh.blockchain_verification_status = User.VERIFICATION_PENDING
        fresh.save(update_fields=["metamask_id", "blockchain_verification_status", "updated_at"])

        verification_applications_total.labels(status="submitted").inc()
        logger.info(f"User {fresh.id} applied for blockchain verification with wallet {mask_value(metamask_id)}")
        return service_ok(fresh)
