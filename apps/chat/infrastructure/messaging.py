"""Messaging backed by the ChatMessage table.

The message is written in the caller's transaction, so a booking that
rolls back takes its system message with it.
"""

from __future__ import annotations

import logging
from uuid import UUID

from apps.chat.domain import Messaging, SystemMessageType, chat_id_for
from apps.chat.models import ChatMessage

logger = logging.getLogger(__name__)


class DjangoMessaging(Messaging):
    def emit_system_message(
        self,
        from_user_id: UUID,
        to_user_id: UUID,
        request_id: UUID,
        message_type: SystemMessageType,
    ) -> None:
        message = ChatMessage.objects.create(
            chat_id=chat_id_for(from_user_id, to_user_id),
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            message_content=str(request_id),
            message_type=int(message_type),
            status=ChatMessage.Status.SENT,
        )
        logger.info(f"System message {message.id} ({message_type.name}) for request {request_id}")
