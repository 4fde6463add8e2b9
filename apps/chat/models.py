"""Chat domain models.

Messages between two users share a ``chat_id`` derived from the sorted
pair of user ids, so both sides resolve the same conversation.
"""

from __future__ import annotations

import uuid

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class ChatMessage(models.Model):
    """Represents a single message in a conversation."""

    class MessageType(models.IntegerChoices):
        TEXT = 1, _("Text")
        OFFER_REQUEST = 2, _("Offer request")

    class Status(models.IntegerChoices):
        SENT = 1, _("Sent")
        READ = 2, _("Read")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    chat_id = models.CharField(max_length=80, db_index=True)
    from_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_messages",
    )
    to_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="received_messages",
    )
    message_content = models.TextField()
    message_type = models.PositiveSmallIntegerField(
        choices=MessageType.choices,
        default=MessageType.TEXT,
    )
    status = models.PositiveSmallIntegerField(choices=Status.choices, default=Status.SENT)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Message")
        verbose_name_plural = _("Messages")
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["chat_id", "created_at"], name="chat_message_chat_idx"),
            models.Index(fields=["to_user", "status"], name="chat_message_inbox_idx"),
        ]

    def __str__(self) -> str:
        preview = self.message_content[:50] + "..." if len(self.message_content) > 50 else self.message_content
        return f"Message from {self.from_user_id} at {self.created_at}: {preview}"
