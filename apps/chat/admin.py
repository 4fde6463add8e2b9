"""Admin registration for chat messages."""

from __future__ import annotations

from django.contrib import admin

from .models import ChatMessage


@admin.register(ChatMessage)
class ChatMessageAdmin(admin.ModelAdmin):
    list_display = ("chat_id", "from_user", "to_user", "message_type", "status", "created_at")
    list_filter = ("message_type", "status")
    search_fields = ("chat_id", "from_user__email", "to_user__email")
    readonly_fields = ("created_at",)
