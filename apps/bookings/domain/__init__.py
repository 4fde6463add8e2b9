from apps.bookings.domain.entities import (
    QR_CODE_NULL,
    TERMINAL_STATUSES,
    ActorRole,
    OfferRequest,
    RequestStatus,
)
from apps.bookings.domain.repositories import RequestFilters, RequestRepository
from apps.bookings.domain.state_machine import (
    TRANSITIONS,
    RequestLifecycle,
    TransitionOutcome,
    issue_qr_code,
)

__all__ = [
    "QR_CODE_NULL",
    "TERMINAL_STATUSES",
    "TRANSITIONS",
    "ActorRole",
    "OfferRequest",
    "RequestFilters",
    "RequestLifecycle",
    "RequestRepository",
    "RequestStatus",
    "TransitionOutcome",
    "issue_qr_code",
]
