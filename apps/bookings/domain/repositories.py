"""
Store interfaces (repository pattern) for the bookings context.

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from apps.bookings.domain.entities import ActorRole, OfferRequest, RequestStatus


@dataclass(frozen=True)
class RequestFilters:
    """Listing filters; None means no restriction"""
    status: RequestStatus | None = None
    role: ActorRole | None = None
    offer_id: UUID | None = None


class RequestRepository(ABC):
    """Interface for request persistence operations."""

    @abstractmethod
    def get(self, request_id: UUID, lock: bool = False) -> OfferRequest | None:
        """Return a request by ID, or None if not found."""
        ...

    @abstractmethod
    def save(self, request: OfferRequest) -> OfferRequest:
        """Insert or update a request."""
        ...

    @abstractmethod
    def list_by_user(self, user_id: UUID, filters: RequestFilters) -> list[OfferRequest]:
        """
        Return requests where the user is lessee or lessor of the offer,
        newest first, narrowed by the filters.
        """
        ...

    @abstractmethod
    def list_open_created_before(self, cutoff: datetime) -> list[OfferRequest]:
        """Return OPEN requests created before the cutoff, oldest first."""
        ...

    @abstractmethod
    def exists_for_offer(self, lessee_id: UUID, offer_id: UUID) -> bool:
        """Check whether the user ever requested the offer (any status)."""
        ...

    @abstractmethod
    def exists_between(self, lessee_id: UUID, lessor_id: UUID) -> bool:
        """Check whether the lessee ever requested any offer of the lessor."""
        ...
