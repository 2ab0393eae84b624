from chat.domain.models import Chat, Message


__all__ = ["Chat", "Message"]
