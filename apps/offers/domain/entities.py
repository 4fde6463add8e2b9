"""
Offer Domain Entities

- Offer: an item for rent with its lessor and rating aggregate
- BlockedInterval: days during which an offer cannot be booked
"""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from shared.domain.base import Entity
from shared.domain.value_objects import DateRange, RatingAggregate


@dataclass(frozen=True, eq=False, kw_only=True)
class Offer(Entity):
    """
    Offer as seen by the booking and rating use cases

    Key invariants:
    - price is positive
    - a deleted offer is read-only and cannot be booked or rated
    """

    lessor_id: UUID
    title: str
    price: Decimal
    description: str = ''
    category_id: int | None = None
    rating: RatingAggregate = field(default_factory=RatingAggregate)
    is_deleted: bool = False

    def __post_init__(self):
        if self.price is None or self.price <= 0:
            raise ValueError("Offer price must be positive")

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.lessor_id == user_id

    def __str__(self):
        return f"Offer {self.title} ({self.id})"


@dataclass(frozen=True, eq=False, kw_only=True)
class BlockedInterval(Entity):
    """
    Blocked date interval of an offer

    is_lessor distinguishes a manual block declared by the lessor from a
    block created by an accepted booking.
    """

    offer_id: UUID
    dates: DateRange
    is_lessor: bool
    reason: str = ''

    def overlaps_with(self, dates: DateRange) -> bool:
        return self.dates.overlaps_with(dates)
