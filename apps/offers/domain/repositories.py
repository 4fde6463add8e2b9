"""
Store interfaces (repository pattern) for the offers context.

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from apps.offers.domain.entities import BlockedInterval, Offer


class OfferRepository(ABC):
    """Interface for offer persistence operations."""

    @abstractmethod
    def get(self, offer_id: UUID, lock: bool = False) -> Offer | None:
        """
        Return an offer by ID (deleted ones included), or None if not found.

        With lock=True the offer row stays exclusively locked until the
        surrounding unit of work ends. All booking, acceptance and
        calendar changes of one offer take this lock first.
        """
        ...

    @abstractmethod
    def save(self, offer: Offer) -> Offer:
        """Insert or update an offer."""
        ...


class IntervalRepository(ABC):
    """Interface for blocked interval persistence operations."""

    @abstractmethod
    def list_for_offer(self, offer_id: UUID) -> list[BlockedInterval]:
        """Return all intervals of an offer ordered by from_date."""
        ...

    @abstractmethod
    def insert(self, interval: BlockedInterval) -> BlockedInterval:
        ...

    @abstractmethod
    def delete_for_actor(self, offer_id: UUID, is_lessor: bool) -> int:
        """Delete the intervals with the given actor flag, returning how many."""
        ...

    @abstractmethod
    def delete_for_offer(self, offer_id: UUID) -> int:
        """Delete every interval of an offer, returning how many."""
        ...
