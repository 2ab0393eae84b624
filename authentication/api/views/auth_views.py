from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import (
    AuthResponseSerializer,
    BlockchainVerificationRequestSerializer,
    ErrorResponseSerializer,
    LoginRequestSerializer,
    UserRegistrationSerializer,
    UserSerializer,
)
from authentication.domain.services.auth_service import AuthService
from authentication.permissions import IsNotBlacklisted
from infrastructure.container import container
from utils.api_responses import error_response


def get_auth_service() -> AuthService:
    return container.auth_service()


def _auth_payload(result_value, message):
    return {
        "message": message,
        "access": result_value["access"],
        "refresh": result_value["refresh"],
        "user": UserSerializer(result_value["user"]).data,
    }


class RegisterAPIView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="auth_register",
        summary="Register with a college email",
        request=UserRegistrationSerializer,
        responses={
            201: AuthResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data or user exists"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = get_auth_service().register(serializer.validated_data)
        if not result.ok:
            return error_response(result)

        return Response(_auth_payload(result.value, "Registration successful"), status=status.HTTP_201_CREATED)


class LoginAPIView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        operation_id="auth_login",
        summary="Login with email and password",
        description="Blacklisted accounts are refused with 403 even with valid credentials.",
        request=LoginRequestSerializer,
        responses={
            200: AuthResponseSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid credentials"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Account blacklisted"),
        },
        tags=["Authentication"],
    )
    def post(self, request):
        serializer = LoginRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = get_auth_service().login(serializer.validated_data["email"], serializer.validated_data["password"])
        if not result.ok:
            return error_response(result)

        return Response(_auth_payload(result.value, "Login successful"), status=status.HTTP_200_OK)


class MeAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(operation_id="auth_me", responses={200: UserSerializer}, tags=["Authentication"])
    def get(self, request):
        result = get_auth_service().get_me(request.user)
        if not result.ok:
            return error_response(result)
        return Response(UserSerializer(result.value).data)


class BlockchainVerificationAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated, IsNotBlacklisted]

    @extend_schema(
        operation_id="auth_blockchain_verification",
        summary="Apply for blockchain verification",
        description="Allowed when the current status is `not_applied` or `rejected`.",
        request=BlockchainVerificationRequestSerializer,
        responses={200: UserSerializer, 400: ErrorResponseSerializer},
        tags=["Authentication"],
    )
    def post(self, request):
        result = get_auth_service().apply_blockchain_verification(request.user, request.data.get("metamask_id"))
        if not result.ok:
            return error_response(result)

        return Response(
            {
                "message": "Blockchain verification requested successfully",
                "blockchain_verification_status": result.value.blockchain_verification_status,
            },
            status=status.HTTP_200_OK,
        )
