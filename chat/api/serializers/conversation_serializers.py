from rest_framework import serializers

from authentication.api.serializers import UserSummarySerializer
from chat.domain.models import Chat, Message


class MessageSerializer(serializers.ModelSerializer):
    sender = UserSummarySerializer(read_only=True)

    class Meta:
        model = Message
        fields = ("id", "chat", "sender", "content", "is_read", "read_at", "created_at")
        read_only_fields = fields


class ChatProductSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    is_sold = serializers.BooleanField()


class ChatSerializer(serializers.ModelSerializer):
    participants = UserSummarySerializer(many=True, read_only=True)
    product = ChatProductSerializer(read_only=True)
    last_message = MessageSerializer(read_only=True)
    unread_count = serializers.SerializerMethodField()

    class Meta:
        model = Chat
        fields = (
            "id",
            "participants",
            "product",
            "last_message",
            "unread_count",
            "is_active",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields

    def get_unread_count(self, obj) -> int:
        request = self.context.get("request")
        if request and request.user.is_authenticated:
            return obj.messages.exclude(sender=request.user).filter(is_read=False).count()
        return 0


class AccessChatSerializer(serializers.Serializer):
    user_id = serializers.CharField(required=False, allow_blank=True)
    product_id = serializers.CharField(required=False, allow_blank=True)


class SendMessageSerializer(serializers.Serializer):
    chat_id = serializers.CharField(required=False, allow_blank=True)
    content = serializers.CharField(required=False, allow_blank=True)
