from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from authentication.api.serializers import ErrorResponseSerializer
from authentication.permissions import IsNotBlacklisted
from infrastructure.container import container
from marketplace.catalog.api.serializers import ReviewCreateSerializer, ReviewSerializer, SellerReviewsSerializer
from marketplace.catalog.domain.services import ReviewService
from utils.api_responses import error_response


class ReviewViewSet(viewsets.ViewSet):
    def get_service(self) -> ReviewService:
        return container.review_service()

    def get_permissions(self):
        if self.action in ("seller", "product"):
            return [AllowAny()]
        return [IsAuthenticated(), IsNotBlacklisted()]

    @extend_schema(
        summary="Review a purchased product",
        request=ReviewCreateSerializer,
        responses={
            201: ReviewSerializer,
            400: ErrorResponseSerializer,
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Requester is not the buyer"),
            404: ErrorResponseSerializer,
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Already reviewed"),
        },
        tags=["Reviews"],
    )
    def create(self, request):
        result = self.get_service().create_review(
            request.user,
            request.data.get("product_id"),
            request.data.get("rating"),
            request.data.get("comment"),
        )
        if not result.ok:
            return error_response(result)
        return Response(ReviewSerializer(result.value).data, status=status.HTTP_201_CREATED)

    @extend_schema(summary="Reviews received by a seller", responses={200: SellerReviewsSerializer}, tags=["Reviews"])
    @action(detail=False, methods=["get"], url_path=r"seller/(?P<seller_id>[^/.]+)")
    def seller(self, request, seller_id=None):
        result = self.get_service().get_seller_reviews(seller_id)
        if not result.ok:
            return error_response(result)

        data = dict(result.value)
        data["reviews"] = ReviewSerializer(data["reviews"], many=True).data
        return Response(data, status=status.HTTP_200_OK)

    @extend_schema(summary="Reviews of a product", responses={200: ReviewSerializer(many=True)}, tags=["Reviews"])
    @action(detail=False, methods=["get"], url_path=r"product/(?P<product_id>[0-9a-f-]+)")
    def product(self, request, product_id=None):
        reviews = self.get_service().get_product_reviews(product_id)
        return Response(ReviewSerializer(reviews, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(summary="Reviews written by me", responses={200: ReviewSerializer(many=True)}, tags=["Reviews"])
    @action(detail=False, methods=["get"], url_path="user")
    def user(self, request):
        reviews = self.get_service().get_user_reviews(request.user)
        return Response(ReviewSerializer(reviews, many=True).data, status=status.HTTP_200_OK)
