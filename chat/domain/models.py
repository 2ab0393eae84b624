import uuid

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone


class Chat(models.Model):
    """
    Conversation between exactly two users, optionally about a product.

    Participants are stored order-normalized (``user1.pk < user2.pk`` as
    strings) so a pair maps to a single row per product.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user1 = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="chats_as_user1")
    user2 = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="chats_as_user2")
    product = models.ForeignKey(
        "marketplace.Product", on_delete=models.SET_NULL, null=True, blank=True, related_name="chats"
    )
    last_message = models.ForeignKey("Message", null=True, blank=True, on_delete=models.SET_NULL, related_name="+")
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "chat"
        ordering = ["-updated_at"]
        indexes = [
            models.Index(fields=["-updated_at"], name="chat_updated_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["user1", "user2", "product"], name="chat_unique_pair_product"),
        ]

    def clean(self):
        if self.user1_id is not None and self.user1_id == self.user2_id:
            raise ValidationError("A chat needs two different participants")

    def save(self, *args, **kwargs):
        self.clean()
        if str(self.user1_id) > str(self.user2_id):
            self.user1, self.user2 = self.user2, self.user1
        super().save(*args, **kwargs)

    @staticmethod
    def normalize_pair(first, second):
        return (first, second) if str(first.pk) < str(second.pk) else (second, first)

    @classmethod
    def create_between(cls, participants, product=None) -> "Chat":
        """Create a chat; anything but two distinct participants raises ValidationError."""
        participants = list(participants)
        if len(participants) != 2:
            raise ValidationError("A chat must have exactly two participants")
        first, second = participants
        if first.pk == second.pk:
            raise ValidationError("A chat needs two different participants")
        user1, user2 = cls.normalize_pair(first, second)
        return cls.objects.create(user1=user1, user2=user2, product=product)

    @property
    def participants(self):
        return [self.user1, self.user2]

    def has_user(self, user) -> bool:
        return user.pk in (self.user1_id, self.user2_id)

    def get_other_user(self, current_user):
        return self.user2 if self.user1_id == current_user.pk else self.user1

    def __str__(self):
        return f"Chat between {self.user1_id} and {self.user2_id}"


class Message(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    chat = models.ForeignKey(Chat, on_delete=models.CASCADE, related_name="messages")
    sender = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="sent_messages")
    content = models.TextField()
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        app_label = "chat"
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["chat", "created_at"], name="chat_msg_created_idx"),
            models.Index(fields=["chat", "is_read"], name="chat_msg_read_idx"),
        ]

    def clean(self):
        if not self.content:
            raise ValidationError("Message content is required")
        if not self.chat.has_user(self.sender):
            raise ValidationError("Sender must be part of the chat")

    def save(self, *args, **kwargs):
        self.clean()
        is_new = self._state.adding
        super().save(*args, **kwargs)

        # Chat keeps a pointer to its newest message
        if is_new:
            self.chat.last_message = self
            self.chat.save(update_fields=["last_message", "updated_at"])

    def mark_as_read(self):
        if not self.is_read:
            self.is_read = True
            self.read_at = timezone.now()
            self.save(update_fields=["is_read", "read_at"])

    def __str__(self):
        preview = self.content[:50] + "..." if len(self.content) > 50 else self.content
        return f"{self.sender_id}: {preview}"
