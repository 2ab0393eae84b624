"""
Mapping of service error codes to HTTP responses.

Every view returns ``{"detail": <message>}`` with the status below when a
service call fails.
"""

from rest_framework import status
from rest_framework.response import Response

from utils.service_base import ErrorCodes, ServiceResult

ERROR_STATUS_MAP = {
    ErrorCodes.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.USER_ALREADY_EXISTS: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.CANNOT_BLACKLIST_ADMIN: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.VERIFICATION_ALREADY_APPLIED: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.VERIFICATION_NOT_PENDING: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.CANNOT_BUY_OWN_PRODUCT: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.PRODUCT_NOT_SOLD: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.NOT_IN_WISHLIST: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.OWN_PRODUCT: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.CRYPTO_NOT_ACCEPTED: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.BLOCKCHAIN_VERIFICATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.INVALID_PAYMENT_SIGNATURE: status.HTTP_400_BAD_REQUEST,
    ErrorCodes.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCodes.USER_BLACKLISTED: status.HTTP_403_FORBIDDEN,
    ErrorCodes.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCodes.NOT_PRODUCT_OWNER: status.HTTP_403_FORBIDDEN,
    ErrorCodes.NOT_CHAT_PARTICIPANT: status.HTTP_403_FORBIDDEN,
    ErrorCodes.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.WISHLIST_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.CHAT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCodes.PRODUCT_ALREADY_SOLD: status.HTTP_409_CONFLICT,
    ErrorCodes.DUPLICATE_REVIEW: status.HTTP_409_CONFLICT,
    ErrorCodes.ALREADY_IN_WISHLIST: status.HTTP_409_CONFLICT,
}


def status_for_error(error_code: str) -> int:
    """Return the HTTP status for a service error code (500 when unknown)."""
    return ERROR_STATUS_MAP.get(error_code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def error_response(result: ServiceResult) -> Response:
    return Response({"detail": result.error_detail}, status=status_for_error(result.error))
