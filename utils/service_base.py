"""
Base classes and utilities for the service layer.

This module provides the ServiceResult pattern and the BaseService class shared
by every app (authentication, marketplace, chat, payment_system, backoffice).

Guidelines
- Return structured results instead of raising for expected outcomes.
- Reserve exceptions for truly exceptional/unrecoverable scenarios.
"""

import logging
import time
from dataclasses import dataclass
from functools import wraps
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    A result type that encapsulates success or failure from service operations.

    Attributes:
        ok: True if operation succeeded, False otherwise
        value: The success value (present if ok=True)
        error: Error code (present if ok=False), one of ErrorCodes
        error_detail: Human-readable error message (present if ok=False)

    Examples:
        >>> result = service_ok(product)
        >>> if result.ok:
        ...     return Response(ProductSerializer(result.value).data, 200)
        >>> return error_response(result)
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_detail: Optional[str] = None


def service_ok(value: T = None) -> ServiceResult[T]:
    """
    Create a successful ServiceResult.

    Example:
        >>> return service_ok(product)
    """
    return ServiceResult(ok=True, value=value)


def service_err(error: str, error_detail: str = "") -> ServiceResult:
    """
    Create a failed ServiceResult.

    Args:
        error: Error code (e.g., ErrorCodes.PRODUCT_NOT_FOUND)
        error_detail: Human-readable error message

    Example:
        >>> return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")
    """
    return ServiceResult(ok=False, error=error, error_detail=error_detail or error)


class BaseService:
    """
    Base class for all services providing common functionality.

    Provides:
    - Logging with class name
    - Performance timing decorator

    Usage:
        class WishlistService(BaseService):
            @BaseService.log_performance
            def add_product(self, user, product_id):
                self.logger.info(f"Adding {product_id} to wishlist of {user.id}")
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """
        Decorator to log performance of service methods.

        Logs execution time, failed results and any exception that escapes.
        """

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                self.logger.debug(f"{method_name} started")
                result = func(self, *args, **kwargs)
                elapsed_time = (time.time() - start_time) * 1000  # ms

                if isinstance(result, ServiceResult):
                    if result.ok:
                        self.logger.info(f"{method_name} completed successfully in {elapsed_time:.2f}ms")
                    else:
                        self.logger.warning(
                            f"{method_name} failed with error '{result.error}' in {elapsed_time:.2f}ms"
                        )
                else:
                    self.logger.info(f"{method_name} completed in {elapsed_time:.2f}ms")

                return result

            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

        return wrapper


class ErrorCodes:
    """Standard error codes used across services."""

    # Generic
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"

    # Users
    USER_NOT_FOUND = "user_not_found"
    USER_ALREADY_EXISTS = "user_already_exists"
    INVALID_CREDENTIALS = "invalid_credentials"
    USER_BLACKLISTED = "user_blacklisted"
    CANNOT_BLACKLIST_ADMIN = "cannot_blacklist_admin"
    VERIFICATION_ALREADY_APPLIED = "verification_already_applied"
    VERIFICATION_NOT_PENDING = "verification_not_pending"

    # Products
    PRODUCT_NOT_FOUND = "product_not_found"
    PRODUCT_ALREADY_SOLD = "product_already_sold"
    CANNOT_BUY_OWN_PRODUCT = "cannot_buy_own_product"

    # Reviews
    PRODUCT_NOT_SOLD = "product_not_sold"
    DUPLICATE_REVIEW = "duplicate_review"

    # Wishlist
    WISHLIST_NOT_FOUND = "wishlist_not_found"
    ALREADY_IN_WISHLIST = "already_in_wishlist"
    NOT_IN_WISHLIST = "not_in_wishlist"
    OWN_PRODUCT = "own_product"

    # Chat
    CHAT_NOT_FOUND = "chat_not_found"
    NOT_CHAT_PARTICIPANT = "not_chat_participant"

    # Payments
    CRYPTO_NOT_ACCEPTED = "crypto_not_accepted"
    BLOCKCHAIN_VERIFICATION_FAILED = "blockchain_verification_failed"
    INVALID_PAYMENT_SIGNATURE = "invalid_payment_signature"
    PAYMENT_PROVIDER_ERROR = "payment_provider_error"

    # Permission errors
    PERMISSION_DENIED = "permission_denied"
    NOT_PRODUCT_OWNER = "not_product_owner"

    # Internal errors
    STORAGE_ERROR = "storage_error"
