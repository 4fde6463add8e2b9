"""Tests for system chat messages."""

from __future__ import annotations

from uuid import uuid4

from django.test import TestCase

from apps.chat.domain import SystemMessageType, chat_id_for
from apps.chat.infrastructure.messaging import DjangoMessaging
from apps.chat.models import ChatMessage
from apps.users.models import CustomUser


class ChatIdTests(TestCase):
    def test_same_chat_from_both_sides(self) -> None:
        first, second = uuid4(), uuid4()
        self.assertEqual(chat_id_for(first, second), chat_id_for(second, first))
        self.assertNotEqual(chat_id_for(first, second), chat_id_for(first, uuid4()))


class DjangoMessagingTests(TestCase):
    def test_offer_request_message(self) -> None:
        lessee = CustomUser.objects.create_user(email="lessee@example.com")
        lessor = CustomUser.objects.create_user(email="lessor@example.com")
        request_id = uuid4()

        DjangoMessaging().emit_system_message(lessee.id, lessor.id, request_id, SystemMessageType.OFFER_REQUEST)

        message = ChatMessage.objects.get()
        self.assertEqual(message.chat_id, chat_id_for(lessor.id, lessee.id))
        self.assertEqual(message.message_content, str(request_id))
        self.assertEqual(message.message_type, ChatMessage.MessageType.OFFER_REQUEST)
        self.assertEqual(message.status, ChatMessage.Status.SENT)
