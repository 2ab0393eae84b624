from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import ErrorResponseSerializer, UserSerializer
from authentication.permissions import AdminRequired
from backoffice.api.serializers import DashboardSerializer, ReasonRequestSerializer, RejectionResponseSerializer
from backoffice.domain.services.admin_service import AdminService
from infrastructure.container import container
from payment_system.api.serializers import TransactionSerializer
from utils.api_responses import error_response


def get_admin_service() -> AdminService:
    return container.admin_service()


class AdminAPIView(APIView):
    """Base view: 401 when unauthenticated, 403 for non-admins."""

    permission_classes = [IsAuthenticated, AdminRequired]


class UserListAPIView(AdminAPIView):
    @extend_schema(summary="All users, newest first", responses={200: UserSerializer(many=True)}, tags=["Admin"])
    def get(self, request):
        return Response(UserSerializer(get_admin_service().list_users(), many=True).data)


class UserDetailAPIView(AdminAPIView):
    @extend_schema(summary="User details", responses={200: UserSerializer, 404: ErrorResponseSerializer}, tags=["Admin"])
    def get(self, request, user_id):
        result = get_admin_service().get_user(user_id)
        if not result.ok:
            return error_response(result)
        return Response(UserSerializer(result.value).data)


class BlacklistAPIView(AdminAPIView):
    @extend_schema(
        summary="Blacklist a user",
        request=ReasonRequestSerializer,
        responses={
            200: UserSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Missing reason or target is admin"),
            404: ErrorResponseSerializer,
        },
        tags=["Admin"],
    )
    def put(self, request, user_id):
        result = get_admin_service().blacklist_user(request.user, user_id, request.data.get("reason"))
        if not result.ok:
            return error_response(result)
        return Response(UserSerializer(result.value).data)


class UnblacklistAPIView(AdminAPIView):
    @extend_schema(
        summary="Remove a user from the blacklist",
        request=None,
        responses={200: UserSerializer, 404: ErrorResponseSerializer},
        tags=["Admin"],
    )
    def put(self, request, user_id):
        result = get_admin_service().unblacklist_user(request.user, user_id)
        if not result.ok:
            return error_response(result)
        return Response(UserSerializer(result.value).data)


class ApproveVerificationAPIView(AdminAPIView):
    @extend_schema(
        summary="Approve a pending blockchain verification",
        request=None,
        responses={200: UserSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        tags=["Admin"],
    )
    def put(self, request, user_id):
        result = get_admin_service().approve_verification(request.user, user_id)
        if not result.ok:
            return error_response(result)
        return Response(UserSerializer(result.value).data)


class RejectVerificationAPIView(AdminAPIView):
    @extend_schema(
        summary="Reject a pending blockchain verification",
        request=ReasonRequestSerializer,
        responses={200: RejectionResponseSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        tags=["Admin"],
    )
    def put(self, request, user_id):
        reason = request.data.get("reason")
        result = get_admin_service().reject_verification(request.user, user_id, reason)
        if not result.ok:
            return error_response(result)
        return Response(
            {
                "message": f"Blockchain verification rejected: {reason}",
                "user": UserSerializer(result.value).data,
            }
        )


class PendingVerificationsAPIView(AdminAPIView):
    @extend_schema(
        summary="Users waiting for blockchain verification",
        responses={200: UserSerializer(many=True)},
        tags=["Admin"],
    )
    def get(self, request):
        return Response(UserSerializer(get_admin_service().pending_verifications(), many=True).data)


class TransactionListAPIView(AdminAPIView):
    @extend_schema(summary="All transactions", responses={200: TransactionSerializer(many=True)}, tags=["Admin"])
    def get(self, request):
        return Response(TransactionSerializer(get_admin_service().list_transactions(), many=True).data)


class DashboardAPIView(AdminAPIView):
    @extend_schema(summary="Marketplace totals and recent activity", responses={200: DashboardSerializer}, tags=["Admin"])
    def get(self, request):
        return Response(DashboardSerializer(get_admin_service().dashboard()).data, status=status.HTTP_200_OK)
