from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import ErrorResponseSerializer
from authentication.permissions import IsNotBlacklisted
from infrastructure.container import container
from marketplace.catalog.api.serializers import (
    ProductSerializer,
    WishlistAddSerializer,
    WishlistCheckSerializer,
    WishlistSerializer,
)
from utils.api_responses import error_response


def get_wishlist_service():
    return container.wishlist_service()


def _wishlist_payload(user):
    return {"products": ProductSerializer(get_wishlist_service().get_products(user), many=True).data}


class WishlistAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated, IsNotBlacklisted]

    @extend_schema(summary="My wishlist (unsold products)", responses={200: WishlistSerializer}, tags=["Wishlist"])
    def get(self, request):
        return Response(_wishlist_payload(request.user), status=status.HTTP_200_OK)

    @extend_schema(
        summary="Add a product to my wishlist",
        request=WishlistAddSerializer,
        responses={
            201: WishlistSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Already in wishlist"),
        },
        tags=["Wishlist"],
    )
    def post(self, request):
        result = get_wishlist_service().add_product(request.user, request.data.get("product_id"))
        if not result.ok:
            return error_response(result)
        return Response(_wishlist_payload(request.user), status=status.HTTP_201_CREATED)


class WishlistItemAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated, IsNotBlacklisted]

    @extend_schema(
        summary="Remove a product from my wishlist",
        responses={200: WishlistSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        tags=["Wishlist"],
    )
    def delete(self, request, product_id):
        result = get_wishlist_service().remove_product(request.user, product_id)
        if not result.ok:
            return error_response(result)
        return Response(_wishlist_payload(request.user), status=status.HTTP_200_OK)


class WishlistCheckAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(summary="Is the product in my wishlist", responses={200: WishlistCheckSerializer}, tags=["Wishlist"])
    def get(self, request, product_id):
        return Response(
            {"in_wishlist": get_wishlist_service().contains(request.user, product_id)}, status=status.HTTP_200_OK
        )
