import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from authentication.api.serializers import ErrorResponseSerializer
from authentication.permissions import BlockchainVerifiedRequired, IsNotBlacklisted
from infrastructure.container import container
from payment_system.api.serializers import (
    CreateOrderRequestSerializer,
    CreateOrderResponseSerializer,
    CryptoPaymentRequestSerializer,
    PaymentResultSerializer,
    TransactionSerializer,
    VerifyPaymentRequestSerializer,
)
from payment_system.domain.services.payment_service import PaymentService
from utils.api_responses import error_response


logger = logging.getLogger(__name__)


def get_payment_service() -> PaymentService:
    return container.payment_service()


def _payment_result(sale, message):
    return {"success": True, "message": message, "transaction": TransactionSerializer(sale).data}


@extend_schema(
    summary="Create a gateway order for a product",
    request=CreateOrderRequestSerializer,
    responses={
        200: CreateOrderResponseSerializer,
        400: OpenApiResponse(response=ErrorResponseSerializer, description="Own product"),
        404: ErrorResponseSerializer,
        409: OpenApiResponse(response=ErrorResponseSerializer, description="Product already sold"),
        500: OpenApiResponse(response=ErrorResponseSerializer, description="Gateway failure"),
    },
    tags=["Payments"],
)
@api_view(["POST"])
@permission_classes([IsAuthenticated, IsNotBlacklisted])
def create_razorpay_order(request):
    result = get_payment_service().create_razorpay_order(request.user, request.data.get("product_id"))
    if not result.ok:
        return error_response(result)
    return Response(CreateOrderResponseSerializer(result.value).data, status=status.HTTP_200_OK)


@extend_schema(
    summary="Verify a gateway payment and complete the purchase",
    request=VerifyPaymentRequestSerializer,
    responses={
        200: PaymentResultSerializer,
        400: OpenApiResponse(response=ErrorResponseSerializer, description="Missing fields or invalid signature"),
        404: ErrorResponseSerializer,
        409: OpenApiResponse(response=ErrorResponseSerializer, description="Product already sold"),
        500: OpenApiResponse(response=ErrorResponseSerializer, description="Gateway failure"),
    },
    tags=["Payments"],
)
@api_view(["POST"])
@permission_classes([IsAuthenticated, IsNotBlacklisted])
def verify_razorpay_payment(request):
    result = get_payment_service().verify_razorpay_payment(request.user, request.data)
    if not result.ok:
        return error_response(result)
    return Response(_payment_result(result.value, "Payment successful"), status=status.HTTP_200_OK)


@extend_schema(
    summary="Pay with cryptocurrency (blockchain verified users)",
    request=CryptoPaymentRequestSerializer,
    responses={
        200: PaymentResultSerializer,
        400: OpenApiResponse(
            response=ErrorResponseSerializer, description="Missing hash, crypto not accepted or verification failed"
        ),
        403: OpenApiResponse(response=ErrorResponseSerializer, description="Not blockchain verified"),
        404: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    tags=["Payments"],
)
@api_view(["POST"])
@permission_classes([IsAuthenticated, IsNotBlacklisted, BlockchainVerifiedRequired])
def process_crypto_payment(request):
    result = get_payment_service().process_crypto_payment(
        request.user, request.data.get("product_id"), request.data.get("transaction_hash")
    )
    if not result.ok:
        return error_response(result)
    return Response(_payment_result(result.value, "Crypto payment successful"), status=status.HTTP_200_OK)


@extend_schema(
    summary="My transactions as buyer or seller",
    responses={200: TransactionSerializer(many=True)},
    tags=["Payments"],
)
@api_view(["GET"])
@permission_classes([IsAuthenticated])
def user_transactions(request):
    transactions = get_payment_service().get_user_transactions(request.user)
    return Response(TransactionSerializer(transactions, many=True).data)
