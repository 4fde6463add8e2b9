"""
Request Lifecycle State Machine

Encodes which status changes are legal, who may trigger each one, the QR
code guard protecting the physical hand-over and return, and the calendar
block an acceptance requires. The machine is pure: it returns new
OfferRequest values and leaves persistence and calendar writes to the
command handlers.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable
from uuid import UUID
import hmac
import logging
import secrets

from apps.bookings.domain.entities import QR_CODE_NULL, ActorRole, OfferRequest, RequestStatus
from shared.domain.errors import ForbiddenError, IllegalTransitionError
from shared.domain.value_objects import DateRange

logger = logging.getLogger(__name__)


class QrGuard:
    """What a transition demands of the request's current token"""
    NO_CODE = 'no_code'            # no token issued yet
    MATCHING_CODE = 'matching'     # presented token equals the live one


class QrEffect:
    """What a transition does to the token"""
    KEEP = 'keep'
    ISSUE = 'issue'                # fresh token
    RETIRE = 'retire'              # sentinel QR_CODE_NULL


@dataclass(frozen=True)
class Transition:
    source: RequestStatus
    target: RequestStatus
    actor: ActorRole
    guard: str
    effect: str = QrEffect.KEEP
    blocks_dates: bool = False


TRANSITIONS: dict[tuple[RequestStatus, RequestStatus], Transition] = {
    (t.source, t.target): t for t in (
        Transition(
            RequestStatus.OPEN, RequestStatus.ACCEPTED_BY_LESSOR,
            ActorRole.LESSOR, QrGuard.NO_CODE, QrEffect.ISSUE, blocks_dates=True,
        ),
        Transition(
            RequestStatus.OPEN, RequestStatus.REJECTED_BY_LESSOR,
            ActorRole.LESSOR, QrGuard.NO_CODE,
        ),
        Transition(
            RequestStatus.OPEN, RequestStatus.CANCELED_BY_LESSEE,
            ActorRole.LESSEE, QrGuard.NO_CODE,
        ),
        Transition(
            RequestStatus.ACCEPTED_BY_LESSOR, RequestStatus.ITEM_LENT_TO_LESSEE,
            ActorRole.LESSOR, QrGuard.MATCHING_CODE, QrEffect.ISSUE,
        ),
        Transition(
            RequestStatus.ITEM_LENT_TO_LESSEE, RequestStatus.ITEM_RETURNED_TO_LESSOR,
            ActorRole.LESSEE, QrGuard.MATCHING_CODE, QrEffect.RETIRE,
        ),
    )
}


def issue_qr_code() -> str:
    """Generate an 8 character hand-over token, never the sentinel"""
    while True:
        token = secrets.token_hex(4).upper()
        if token != QR_CODE_NULL:
            return token


@dataclass(frozen=True)
class TransitionOutcome:
    """
    Result of applying a transition

    request is the new value to persist; blocked_dates is set when the
    calendar must gain a lessee-tagged interval.
    """
    request: OfferRequest
    blocked_dates: DateRange | None = None


class RequestLifecycle:
    """
    Pure state machine over OfferRequest values

    Usage:
        lifecycle = RequestLifecycle()
        request = lifecycle.open(lessee_id=..., offer_id=..., lessor_id=..., dates=...)
        outcome = lifecycle.apply(request, actor_id=lessor_id,
                                  desired=RequestStatus.ACCEPTED_BY_LESSOR)
        if outcome.blocked_dates:
            calendar.add_interval(...)
    """

    def __init__(
        self,
        token_factory: Callable[[], str] = issue_qr_code,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._token_factory = token_factory
        self._clock = clock

    def open(
        self,
        *,
        lessee_id: UUID,
        offer_id: UUID,
        lessor_id: UUID,
        dates: DateRange,
        message: str = '',
    ) -> OfferRequest:
        """Create a request in the initial OPEN state"""
        if lessee_id == lessor_id:
            raise ForbiddenError("Lessors cannot book their own offer")

        now = self._clock()
        return OfferRequest(
            lessee_id=lessee_id,
            offer_id=offer_id,
            lessor_id=lessor_id,
            dates=dates,
            status=RequestStatus.OPEN,
            message=message or '',
            qr_code=None,
            lessor_has_update=True,
            lessee_has_update=False,
            created_at=now,
            updated_at=now,
        )

    def apply(
        self,
        request: OfferRequest,
        *,
        actor_id: UUID,
        desired: RequestStatus,
        presented_code: str | None = None,
    ) -> TransitionOutcome:
        """
        Move the request to the desired status on behalf of an actor

        Raises:
            ForbiddenError: If the actor is neither lessor nor lessee
            IllegalTransitionError: If the pair (current, desired) is not in
                the table, the actor plays the wrong side, or the QR guard
                fails. A replay of an applied transition fails the same way.
        """
        role = request.role_of(actor_id)
        if role is None:
            raise ForbiddenError("Only the lessor and the lessee can handle this request")

        if desired == RequestStatus.CANCELED_BY_LESSOR:
            raise IllegalTransitionError(request.status.name, desired.name, "not supported yet")

        transition = TRANSITIONS.get((request.status, desired))
        if transition is None:
            raise IllegalTransitionError(request.status.name, desired.name)

        if transition.actor is not role:
            raise IllegalTransitionError(
                request.status.name, desired.name,
                f"only the {transition.actor.value} may do this",
            )

        self._check_guard(request, transition, presented_code)

        updated = request.evolve(
            status=transition.target,
            qr_code=self._next_code(request, transition),
            updated_at=self._clock(),
            # The other side has news, the actor has just seen the result
            lessor_has_update=role is not ActorRole.LESSOR,
            lessee_has_update=role is not ActorRole.LESSEE,
        )

        logger.info(
            f"Request {request.id}: {request.status.name} -> {transition.target.name} "
            f"by {role.value} {actor_id}"
        )
        return TransitionOutcome(
            request=updated,
            blocked_dates=request.dates if transition.blocks_dates else None,
        )

    def time_out(
        self,
        request: OfferRequest,
        *,
        threshold: timedelta,
        now: datetime | None = None,
    ) -> OfferRequest:
        """
        Close an OPEN request nobody answered within the threshold

        Raises:
            IllegalTransitionError: If the request is not OPEN or not old enough
        """
        if request.status != RequestStatus.OPEN:
            raise IllegalTransitionError(request.status.name, RequestStatus.TIMED_OUT.name)

        now = now or self._clock()
        if request.created_at is None or now - request.created_at <= threshold:
            raise IllegalTransitionError(
                request.status.name, RequestStatus.TIMED_OUT.name, "threshold not reached",
            )

        logger.info(f"Request {request.id}: OPEN -> TIMED_OUT")
        return request.evolve(
            status=RequestStatus.TIMED_OUT,
            updated_at=now,
            lessor_has_update=True,
            lessee_has_update=True,
        )

    def _check_guard(self, request: OfferRequest, transition: Transition, presented_code: str | None):
        if transition.guard == QrGuard.NO_CODE:
            if request.qr_code:
                raise IllegalTransitionError(
                    request.status.name, transition.target.name, "a QR code was already issued",
                )
            return

        live_code = request.qr_code
        if not live_code or live_code == QR_CODE_NULL:
            raise IllegalTransitionError(
                request.status.name, transition.target.name, "no QR code issued",
            )
        if not presented_code or not hmac.compare_digest(
            presented_code.strip().upper().encode(), live_code.encode()
        ):
            raise IllegalTransitionError(
                request.status.name, transition.target.name, "QR code does not match",
            )

    def _next_code(self, request: OfferRequest, transition: Transition) -> str | None:
        if transition.effect == QrEffect.ISSUE:
            token = self._token_factory()
            while token == request.qr_code:
                token = self._token_factory()
            return token
        if transition.effect == QrEffect.RETIRE:
            return QR_CODE_NULL
        return request.qr_code
