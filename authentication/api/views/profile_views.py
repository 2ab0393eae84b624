from drf_spectacular.utils import OpenApiResponse, extend_schema, inline_serializer
from rest_framework import permissions, serializers, status
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import (
    ErrorResponseSerializer,
    ProfileUpdateSerializer,
    PublicUserSerializer,
    UserSerializer,
)
from authentication.domain.services.profile_service import ProfileService
from authentication.permissions import IsNotBlacklisted
from infrastructure.container import container
from marketplace.catalog.api.serializers import ProductSerializer, ReviewSerializer
from utils.api_responses import error_response


def get_profile_service() -> ProfileService:
    return container.profile_service()


class ProfileAPIView(APIView):
    """
    Own profile: read and update.
    """

    permission_classes = [permissions.IsAuthenticated, IsNotBlacklisted]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    @extend_schema(
        operation_id="profile_get_own",
        summary="Get own profile",
        responses={200: UserSerializer},
        tags=["Profile"],
    )
    def get(self, request):
        result = get_profile_service().get_profile(request.user)
        if not result.ok:
            return error_response(result)
        return Response(UserSerializer(result.value).data)

    @extend_schema(
        operation_id="profile_update",
        summary="Update own profile",
        description="""
        Update profile fields. Empty values keep the current value.

        Send `multipart/form-data` with a `profile_image` file to replace the profile picture.
        """,
        request={"multipart/form-data": ProfileUpdateSerializer, "application/json": ProfileUpdateSerializer},
        responses={
            200: OpenApiResponse(response=UserSerializer, description="Profile updated"),
            400: OpenApiResponse(description="Validation error"),
        },
        tags=["Profile"],
    )
    def put(self, request):
        serializer = ProfileUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = dict(serializer.validated_data)
        profile_image = data.pop("profile_image", None)
        result = get_profile_service().update_profile(request.user, data, profile_image=profile_image)
        if not result.ok:
            return error_response(result)
        return Response(UserSerializer(result.value).data, status=status.HTTP_200_OK)


class PurchasesAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(summary="Products I bought", responses={200: ProductSerializer(many=True)}, tags=["Profile"])
    def get(self, request):
        products = get_profile_service().get_purchases(request.user)
        return Response(ProductSerializer(products, many=True).data)


class SalesAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(summary="My sold products", responses={200: ProductSerializer(many=True)}, tags=["Profile"])
    def get(self, request):
        products = get_profile_service().get_sales(request.user)
        return Response(ProductSerializer(products, many=True).data)


class ListingsAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(summary="My unsold listings", responses={200: ProductSerializer(many=True)}, tags=["Profile"])
    def get(self, request):
        products = get_profile_service().get_listings(request.user)
        return Response(ProductSerializer(products, many=True).data)


class PublicProfileAPIView(APIView):
    """
    Public profile of another user: no email, newest unsold listings and
    reviews received as seller.
    """

    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(
        operation_id="profile_public_view",
        summary="View public user profile",
        responses={
            200: inline_serializer(
                name="PublicProfileResponse",
                fields={
                    "user": PublicUserSerializer(),
                    "products": ProductSerializer(many=True),
                    "reviews": ReviewSerializer(many=True),
                },
            ),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="User not found"),
        },
        tags=["Profile"],
    )
    def get(self, request, user_id):
        result = get_profile_service().get_public_profile(user_id)
        if not result.ok:
            return error_response(result)

        return Response(
            {
                "user": PublicUserSerializer(result.value["user"]).data,
                "products": ProductSerializer(result.value["products"], many=True).data,
                "reviews": ReviewSerializer(result.value["reviews"], many=True).data,
            }
        )
