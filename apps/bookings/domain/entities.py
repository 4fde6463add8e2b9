"""
Booking Domain Entities

Core business entities for the booking domain:
- OfferRequest: a lessee's request to rent an offer, the lifecycle aggregate
- RequestStatus: FSM states for the request lifecycle
- ActorRole: the side an actor plays in a given request
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum
from uuid import UUID

from shared.domain.base import Entity
from shared.domain.value_objects import DateRange

# Token left on a request once the item came back
QR_CODE_NULL = '00000000'


class RequestStatus(IntEnum):
    """
    Request Status Finite State Machine

    State transitions:
    - OPEN -> ACCEPTED_BY_LESSOR (lessor accepts, dates get blocked)
    - OPEN -> REJECTED_BY_LESSOR (lessor declines)
    - OPEN -> CANCELED_BY_LESSEE (lessee withdraws)
    - OPEN -> TIMED_OUT (nobody answered in time, system sweep)
    - ACCEPTED_BY_LESSOR -> ITEM_LENT_TO_LESSEE (hand-over, QR code scanned)
    - ITEM_LENT_TO_LESSEE -> ITEM_RETURNED_TO_LESSOR (return, QR code scanned)

    CANCELED_BY_LESSOR is reserved and cannot be reached yet.
    """
    OPEN = 1
    ACCEPTED_BY_LESSOR = 2
    REJECTED_BY_LESSOR = 3
    ITEM_LENT_TO_LESSEE = 4
    ITEM_RETURNED_TO_LESSOR = 5
    CANCELED_BY_LESSOR = 6
    CANCELED_BY_LESSEE = 7
    TIMED_OUT = 8

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES


TERMINAL_STATUSES = frozenset({
    RequestStatus.REJECTED_BY_LESSOR,
    RequestStatus.ITEM_RETURNED_TO_LESSOR,
    RequestStatus.CANCELED_BY_LESSEE,
    RequestStatus.TIMED_OUT,
})


class ActorRole(Enum):
    """Side of a request an actor is on"""
    LESSOR = 'lessor'
    LESSEE = 'lessee'


@dataclass(frozen=True, eq=False, kw_only=True)
class OfferRequest(Entity):
    """
    Offer Request Aggregate Root

    One booking lifecycle between a lessee and an offer. Instances are
    immutable: every transition returns a new OfferRequest.

    Key invariants:
    - lessee is never the lessor of the offer
    - qr_code is None until acceptance, then a live token, then QR_CODE_NULL
    - each side has its own "has new update" flag
    """

    lessee_id: UUID
    offer_id: UUID
    lessor_id: UUID
    dates: DateRange
    status: RequestStatus = RequestStatus.OPEN
    message: str = ''
    qr_code: str | None = None
    lessor_has_update: bool = True
    lessee_has_update: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self):
        if self.lessee_id == self.lessor_id:
            raise ValueError("Lessee cannot be the lessor of the offer")

    def role_of(self, user_id: UUID) -> ActorRole | None:
        """Return which side the user is on, or None for outsiders"""
        if user_id == self.lessor_id:
            return ActorRole.LESSOR
        if user_id == self.lessee_id:
            return ActorRole.LESSEE
        return None

    def has_update_for(self, role: ActorRole) -> bool:
        if role is ActorRole.LESSOR:
            return self.lessor_has_update
        if role is ActorRole.LESSEE:
            return self.lessee_has_update
        return False

    def mark_seen(self, role: ActorRole) -> 'OfferRequest':
        """Clear the update flag of the reading side"""
        if role is ActorRole.LESSOR:
            return self.evolve(lessor_has_update=False)
        if role is ActorRole.LESSEE:
            return self.evolve(lessee_has_update=False)
        return self

    def visible_qr_code(self, role: ActorRole | None) -> str | None:
        """
        Token as shown to a reader of the request

        The lessee shows the hand-over code to the lessor while the
        request is accepted; the lessor shows the return code to the
        lessee while the item is lent. Nobody else ever sees a token.
        """
        if self.status == RequestStatus.ACCEPTED_BY_LESSOR and role is ActorRole.LESSEE:
            return self.qr_code
        if self.status == RequestStatus.ITEM_LENT_TO_LESSEE and role is ActorRole.LESSOR:
            return self.qr_code
        return None

    def sanitized(self) -> 'OfferRequest':
        """Copy without the token, for transition responses"""
        return self.evolve(qr_code=None)

    def __str__(self):
        return f"Request {self.id} ({self.status.name})"

    def __repr__(self):
        return (
            f"OfferRequest(id={self.id}, offer_id={self.offer_id}, "
            f"status={self.status.name}, dates={self.dates})"
        )
