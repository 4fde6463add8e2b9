from apps.chat.domain.messaging import Messaging, SystemMessageType, chat_id_for

__all__ = ["Messaging", "SystemMessageType", "chat_id_for"]
