"""
ChatService - buyer/seller conversations.

Chats are found or created per unordered participant pair and product.
Messages are persisted and read by polling; nothing is pushed.
"""

import logging
from typing import List, Tuple

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import Q
from django.utils import timezone

from chat.domain.models import Chat, Message
from marketplace.catalog.domain.services import find_product
from utils.service_base import BaseService, ErrorCodes, ServiceResult, service_err, service_ok


User = get_user_model()
logger = logging.getLogger(__name__)


def _find_user(user_id):
    try:
        return User.objects.filter(pk=user_id).first()
    except (ValidationError, ValueError):
        return None


class ChatService(BaseService):
    @BaseService.log_performance
    def access_chat(self, user, other_user_id, product_id=None) -> ServiceResult[Tuple[Chat, bool]]:
        """
        Find or create the chat between ``user`` and ``other_user_id`` about
        ``product_id`` (no product id means the pair's product-less chat).

        Returns:
            ServiceResult with ``(chat, created)``
        """
        if not other_user_id:
            return service_err(ErrorCodes.VALIDATION_ERROR, "user_id param not sent with request")

        other = _find_user(other_user_id)
        if other is None:
            return service_err(ErrorCodes.USER_NOT_FOUND, "User not found")
        if other.pk == user.pk:
            return service_err(ErrorCodes.VALIDATION_ERROR, "You cannot start a chat with yourself")

        product = None
        if product_id:
            product = find_product(product_id)
            if product is None:
                return service_err(ErrorCodes.PRODUCT_NOT_FOUND, "Product not found")

        user1, user2 = Chat.normalize_pair(user, other)
        with transaction.atomic():
            # First contacts for the same pair queue on the participant rows
            list(User.objects.select_for_update().filter(pk__in=[user1.pk, user2.pk]).order_by("pk"))
            chat = self._existing_chat(user1, user2, product)
            if chat is not None:
                return service_ok((chat, False))
            try:
                with transaction.atomic():
                    chat = Chat.create_between([user, other], product=product)
            except IntegrityError:
                chat = self._existing_chat(user1, user2, product)
                if chat is None:
                    raise
                return service_ok((chat, False))

        self.logger.info(f"Chat {chat.id} created between {user.id} and {other.id}")
        return service_ok((chat, True))

    @staticmethod
    def _existing_chat(user1, user2, product):
        return Chat.objects.filter(user1=user1, user2=user2, product=product).order_by("created_at").first()

    def fetch_chats(self, user) -> List[Chat]:
        """Active chats of the user, most recently updated first."""
        return list(
            Chat.objects.filter(Q(user1=user) | Q(user2=user), is_active=True)
            .select_related("user1", "user2", "product", "last_message", "last_message__sender")
            .order_by("-updated_at")
        )

    def _participant_chat(self, user, chat_id) -> ServiceResult[Chat]:
        try:
            chat = Chat.objects.select_related("user1", "user2").filter(pk=chat_id).first()
        except (ValidationError, ValueError):
            chat = None
        if chat is None:
            return service_err(ErrorCodes.CHAT_NOT_FOUND, "Chat not found")
        if not chat.has_user(user):
            return service_err(ErrorCodes.NOT_CHAT_PARTICIPANT, "You are not a participant in this chat")
        return service_ok(chat)

    @BaseService.log_performance
    def send_message(self, user, chat_id, content) -> ServiceResult[Message]:
        if not content or not chat_id:
            return service_err(ErrorCodes.VALIDATION_ERROR, "Invalid data passed into request")

        result = self._participant_chat(user, chat_id)
        if not result.ok:
            return result

        message = Message.objects.create(chat=result.value, sender=user, content=content)
        self.logger.info(f"Message {message.id} sent in chat {chat_id} by {user.id}")
        return service_ok(message)

    @BaseService.log_performance
    def get_messages(self, user, chat_id) -> ServiceResult[List[Message]]:
        """
        Messages of a chat, oldest first. Unread messages from the other
        participant are marked read.
        """
        result = self._participant_chat(user, chat_id)
        if not result.ok:
            return result

        chat = result.value
        marked = (
            Message.objects.filter(chat=chat, is_read=False)
            .exclude(sender=user)
            .update(is_read=True, read_at=timezone.now())
        )
        if marked:
            self.logger.debug(f"Marked {marked} message(s) read in chat {chat.id} for {user.id}")

        messages = Message.objects.filter(chat=chat).select_related("sender").order_by("created_at")
        return service_ok(list(messages))
