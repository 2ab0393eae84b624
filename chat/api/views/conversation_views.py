from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from authentication.api.serializers import ErrorResponseSerializer
from authentication.permissions import IsNotBlacklisted
from chat.api.serializers import AccessChatSerializer, ChatSerializer, MessageSerializer, SendMessageSerializer
from chat.domain.services.chat_service import ChatService
from infrastructure.container import container
from utils.api_responses import error_response


class ChatViewSet(viewsets.ViewSet):
    """
    Conversations between two users. Clients poll for new messages.
    """

    permission_classes = [permissions.IsAuthenticated, IsNotBlacklisted]

    def get_service(self) -> ChatService:
        return container.chat_service()

    @extend_schema(summary="My active chats", responses={200: ChatSerializer(many=True)}, tags=["Chat"])
    def list(self, request):
        chats = self.get_service().fetch_chats(request.user)
        return Response(ChatSerializer(chats, many=True, context={"request": request}).data)

    @extend_schema(
        summary="Find or create a chat with another user",
        request=AccessChatSerializer,
        responses={
            200: OpenApiResponse(response=ChatSerializer, description="Existing chat"),
            201: OpenApiResponse(response=ChatSerializer, description="Chat created"),
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=["Chat"],
    )
    def create(self, request):
        result = self.get_service().access_chat(
            request.user, request.data.get("user_id"), request.data.get("product_id") or None
        )
        if not result.ok:
            return error_response(result)

        chat, created = result.value
        return Response(
            ChatSerializer(chat, context={"request": request}).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )

    @extend_schema(
        summary="Send a message",
        request=SendMessageSerializer,
        responses={
            201: MessageSerializer,
            400: ErrorResponseSerializer,
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Not a participant"),
            404: ErrorResponseSerializer,
        },
        tags=["Chat"],
    )
    @action(detail=False, methods=["post"], url_path="message")
    def message(self, request):
        result = self.get_service().send_message(request.user, request.data.get("chat_id"), request.data.get("content"))
        if not result.ok:
            return error_response(result)
        return Response(MessageSerializer(result.value).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Messages of a chat (marks incoming messages read)",
        responses={200: MessageSerializer(many=True), 403: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        tags=["Chat"],
    )
    @action(detail=True, methods=["get"])
    def messages(self, request, pk=None):
        result = self.get_service().get_messages(request.user, pk)
        if not result.ok:
            return error_response(result)
        return Response(MessageSerializer(result.value, many=True).data)
