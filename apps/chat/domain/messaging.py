"""Messaging collaborator interface."""

from abc import ABC, abstractmethod
from enum import IntEnum
from uuid import UUID


class SystemMessageType(IntEnum):
    """Message types emitted by the platform rather than typed by a user."""

    OFFER_REQUEST = 2


def chat_id_for(first_user_id: UUID, second_user_id: UUID) -> str:
    """A chat between two users is identified by their sorted ids."""
    return "".join(sorted([str(first_user_id), str(second_user_id)]))


class Messaging(ABC):
    """Interface for emitting system chat messages."""

    @abstractmethod
    def emit_system_message(
        self,
        from_user_id: UUID,
        to_user_id: UUID,
        request_id: UUID,
        message_type: SystemMessageType,
    ) -> None:
        """
        Post a system message carrying the request id into the chat of
        the two users. Failures propagate to the caller.
        """
        ...
