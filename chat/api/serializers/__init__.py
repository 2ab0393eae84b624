from .conversation_serializers import AccessChatSerializer, ChatSerializer, MessageSerializer, SendMessageSerializer


__all__ = ["AccessChatSerializer", "ChatSerializer", "MessageSerializer", "SendMessageSerializer"]
