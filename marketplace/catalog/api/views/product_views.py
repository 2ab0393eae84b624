import logging

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from authentication.api.serializers import ErrorResponseSerializer
from authentication.permissions import AdminRequired, IsNotBlacklisted
from infrastructure.container import container
from marketplace.catalog.api.serializers import (
    MarkSoldRequestSerializer,
    ProductDetailSerializer,
    ProductListResponseSerializer,
    ProductSerializer,
    ProductWriteSerializer,
)
from marketplace.catalog.domain.services import CatalogService
from utils.api_responses import error_response


logger = logging.getLogger(__name__)

LIST_FILTERS = ("keyword", "category", "condition")


class ProductViewSet(viewsets.ViewSet):
    """Product listings: public browsing, seller CRUD and the admin mark-sold route."""

    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get_service(self) -> CatalogService:
        return container.catalog_service()

    def get_permissions(self):
        if self.action in ("list", "retrieve"):
            return [AllowAny()]
        if self.action == "mark_sold":
            return [IsAuthenticated(), AdminRequired()]
        return [IsAuthenticated(), IsNotBlacklisted()]

    @extend_schema(
        summary="List unsold products",
        parameters=[
            OpenApiParameter("keyword", str, description="Case-insensitive match on the product name"),
            OpenApiParameter("category", str),
            OpenApiParameter("condition", str),
            OpenApiParameter("page", int),
        ],
        responses={200: ProductListResponseSerializer},
        tags=["Products"],
    )
    def list(self, request):
        filters = {key: request.query_params[key] for key in LIST_FILTERS if request.query_params.get(key)}
        result = self.get_service().list_products(filters, page=request.query_params.get("page", 1))
        if not result.ok:
            return error_response(result)

        data = dict(result.value)
        data["products"] = ProductSerializer(data["products"], many=True).data
        return Response(data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Product details with seller and reviews",
        responses={200: ProductDetailSerializer, 404: ErrorResponseSerializer},
        tags=["Products"],
    )
    def retrieve(self, request, pk=None):
        result = self.get_service().get_product(pk)
        if not result.ok:
            return error_response(result)
        return Response(ProductDetailSerializer(result.value).data, status=status.HTTP_200_OK)

    def _form(self, request):
        serializer = ProductWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = {key: value for key, value in serializer.validated_data.items() if key != "images"}
        return data, request.FILES.getlist("images")

    @extend_schema(
        summary="Create a listing",
        description="Multipart form with 1 to 5 `images` files.",
        request={"multipart/form-data": ProductWriteSerializer},
        responses={201: ProductSerializer, 400: ErrorResponseSerializer},
        tags=["Products"],
    )
    def create(self, request):
        data, images = self._form(request)
        result = self.get_service().create_product(request.user, data, images)
        if not result.ok:
            return error_response(result)
        return Response(ProductSerializer(result.value).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Update a listing",
        description="Only the seller may update an unsold listing. Uploaded images replace the current ones.",
        request={"multipart/form-data": ProductWriteSerializer},
        responses={
            200: ProductSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Product already sold"),
        },
        tags=["Products"],
    )
    def update(self, request, pk=None):
        data, images = self._form(request)
        result = self.get_service().update_product(request.user, pk, data, images)
        if not result.ok:
            return error_response(result)
        return Response(ProductSerializer(result.value).data, status=status.HTTP_200_OK)

    def partial_update(self, request, pk=None):
        return self.update(request, pk)

    @extend_schema(
        summary="Remove a listing",
        responses={200: OpenApiResponse(description="Product removed"), 403: ErrorResponseSerializer},
        tags=["Products"],
    )
    def destroy(self, request, pk=None):
        result = self.get_service().delete_product(request.user, pk)
        if not result.ok:
            return error_response(result)
        return Response({"message": "Product removed"}, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Mark a product sold (admin)",
        request=MarkSoldRequestSerializer,
        responses={200: ProductSerializer, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=["Products"],
    )
    @action(detail=True, methods=["put"], url_path="mark-sold")
    def mark_sold(self, request, pk=None):
        result = self.get_service().mark_sold(
            pk, request.data.get("buyer_id"), request.data.get("transaction_id")
        )
        if not result.ok:
            return error_response(result)
        return Response(ProductSerializer(result.value).data, status=status.HTTP_200_OK)
