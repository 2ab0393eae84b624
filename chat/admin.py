from django.contrib import admin

from .models import Chat, Message


@admin.register(Chat)
class ChatAdmin(admin.ModelAdmin):
    list_display = ("id", "user1", "user2", "product", "is_active", "updated_at")
    list_filter = ("is_active", "created_at")
    search_fields = ("user1__email", "user1__name", "user2__email", "user2__name")
    readonly_fields = ("last_message", "created_at", "updated_at")


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("id", "chat", "sender", "created_at", "is_read")
    list_filter = ("is_read", "created_at")
    search_fields = ("sender__email", "content")
    readonly_fields = ("created_at", "read_at")
