"""
Booking Command Handlers

These are the use cases of the booking orchestrator. Each one runs inside
a unit of work holding the offer row lock, so that reading the calendar,
deciding and writing happen as one step per offer.

Commands:
- BookOfferCommand: Lessee asks to rent an offer for a range of days
- HandleRequestCommand: Lessor or lessee moves a request along its lifecycle
- TimeOutRequestsCommand: Close OPEN requests nobody answered in time
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable
from uuid import UUID
import logging

from apps.bookings.domain import OfferRequest, RequestLifecycle, RequestRepository, RequestStatus
from apps.chat.domain import Messaging, SystemMessageType
from apps.offers.domain import AvailabilityCalendar, OfferRepository
from apps.users.domain import ActorSession, SessionValidator
from shared.application.uow import AbstractUnitOfWork
from shared.domain.errors import (
    ConflictError,
    DatesUnavailableError,
    ErrorCode,
    ForbiddenError,
    IllegalTransitionError,
    NotFoundError,
)
from shared.domain.value_objects import DateRange

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class BookOfferCommand:
    """
    Command to request an offer

    from_date/to_date may carry a time of day; only the calendar day counts.
    """
    session: ActorSession | None
    offer_id: UUID
    from_date: date | datetime | None
    to_date: date | datetime | None
    message: str = ''


@dataclass
class HandleRequestCommand:
    """Command to move a request to the desired status"""
    session: ActorSession | None
    request_id: UUID
    desired_status: RequestStatus
    qr_code: str | None = None


@dataclass
class TimeOutRequestsCommand:
    """Command for the periodic sweep of unanswered requests"""
    now: datetime
    threshold: timedelta


# ===== Command Handlers =====

class BookOfferHandler:
    """
    Handler for BookOffer command

    Steps:
    1. Validate the session
    2. Lock the offer row, reject missing/deleted offers and the lessor
    3. Parse the dates, reject past days
    4. Reject any overlap with the offer's blocked intervals
    5. Persist the OPEN request and the chat system message together

    Booking does not block dates; only acceptance does.
    """

    def __init__(
        self,
        sessions: SessionValidator,
        offers: OfferRepository,
        requests: RequestRepository,
        calendar: AvailabilityCalendar,
        messaging: Messaging,
        lifecycle: RequestLifecycle,
        uow: Callable[[], AbstractUnitOfWork],
        today: Callable[[], date] = date.today,
    ):
        self.sessions = sessions
        self.offers = offers
        self.requests = requests
        self.calendar = calendar
        self.messaging = messaging
        self.lifecycle = lifecycle
        self.uow = uow
        self.today = today

    def handle(self, command: BookOfferCommand) -> OfferRequest:
        """
        Handle booking

        Returns: The created request, without a QR code

        Raises:
            UnauthorizedError: Session missing or invalid
            NotFoundError: Offer unknown or deleted
            ForbiddenError: The actor is the offer's lessor
            BadRequestError: Dates missing, inverted, in the past or unavailable
        """
        actor = self.sessions.validate(command.session)

        with self.uow():
            offer = self.offers.get(command.offer_id, lock=True)
            if offer is None or offer.is_deleted:
                raise NotFoundError("Offer", command.offer_id)
            if offer.is_owned_by(actor.user_id):
                raise ForbiddenError("Lessors cannot book their own offer")

            dates = DateRange(command.from_date, command.to_date)
            dates.ensure_not_in_past(self.today())

            if self.calendar.overlaps(offer.id, dates.from_date, dates.to_date):
                logger.info(f"Offer {offer.id} is not available for {dates}")
                raise DatesUnavailableError()

            request = self.lifecycle.open(
                lessee_id=actor.user_id,
                offer_id=offer.id,
                lessor_id=offer.lessor_id,
                dates=dates,
                message=command.message,
            )
            self.requests.save(request)
            self.messaging.emit_system_message(
                from_user_id=actor.user_id,
                to_user_id=offer.lessor_id,
                request_id=request.id,
                message_type=SystemMessageType.OFFER_REQUEST,
            )

        logger.info(f"Request {request.id} opened by {actor.user_id} for offer {offer.id}, {dates}")
        return request.sanitized()


class HandleRequestHandler:
    """
    Handler for HandleRequest command

    The offer row is locked before the request row, the same order the
    booking handler uses, so acceptance and booking of one offer never
    interleave.
    """

    def __init__(
        self,
        sessions: SessionValidator,
        offers: OfferRepository,
        requests: RequestRepository,
        calendar: AvailabilityCalendar,
        lifecycle: RequestLifecycle,
        uow: Callable[[], AbstractUnitOfWork],
    ):
        self.sessions = sessions
        self.offers = offers
        self.requests = requests
        self.calendar = calendar
        self.lifecycle = lifecycle
        self.uow = uow

    def handle(self, command: HandleRequestCommand) -> OfferRequest:
        """
        Handle a status change

        Returns: The updated request, without a QR code

        Raises:
            UnauthorizedError: Session missing or invalid
            NotFoundError: Request unknown, or its offer deleted (acceptance only)
            ForbiddenError: Actor is not a party of the request
            IllegalTransitionError: Transition not allowed or QR code mismatch
            ConflictError: Dates taken in the meantime (acceptance only)
        """
        actor = self.sessions.validate(command.session)

        with self.uow():
            found = self.requests.get(command.request_id)
            if found is None:
                raise NotFoundError("Request", command.request_id)

            offer = self.offers.get(found.offer_id, lock=True)
            if offer is None:
                raise NotFoundError("Offer", found.offer_id)
            request = self.requests.get(command.request_id, lock=True)

            try:
                outcome = self.lifecycle.apply(
                    request,
                    actor_id=actor.user_id,
                    desired=command.desired_status,
                    presented_code=command.qr_code,
                )
            except IllegalTransitionError as exc:
                logger.warning(f"Refused transition on request {request.id} by {actor.user_id}: {exc}")
                raise

            if outcome.blocked_dates is not None:
                # A deleted offer keeps its history but takes no new bookings
                if offer.is_deleted:
                    raise NotFoundError("Offer", offer.id)
                dates = outcome.blocked_dates
                if self.calendar.overlaps(request.offer_id, dates.from_date, dates.to_date):
                    raise ConflictError(
                        f"Dates {dates} are no longer available",
                        code=ErrorCode.DATES_UNAVAILABLE,
                    )
                self.calendar.add_interval(
                    request.offer_id,
                    dates.from_date,
                    dates.to_date,
                    is_lessor=False,
                    reason=f"Request {request.id}",
                )

            self.requests.save(outcome.request)

        logger.info(f"Request {request.id} is now {outcome.request.status.name}")
        return outcome.request.sanitized()


class TimeOutRequestsHandler:
    """
    Handler for the timeout sweep

    Every candidate is closed in its own unit of work under its offer's
    lock. A request that moved on in the meantime is skipped; storage
    failures propagate.
    """

    def __init__(
        self,
        offers: OfferRepository,
        requests: RequestRepository,
        lifecycle: RequestLifecycle,
        uow: Callable[[], AbstractUnitOfWork],
    ):
        self.offers = offers
        self.requests = requests
        self.lifecycle = lifecycle
        self.uow = uow

    def handle(self, command: TimeOutRequestsCommand) -> list[UUID]:
        """Return the ids of the requests that were timed out"""
        cutoff = command.now - command.threshold
        timed_out = []

        for candidate in self.requests.list_open_created_before(cutoff):
            try:
                with self.uow():
                    self.offers.get(candidate.offer_id, lock=True)
                    request = self.requests.get(candidate.id, lock=True)
                    if request is None:
                        continue
                    self.requests.save(self.lifecycle.time_out(
                        request, threshold=command.threshold, now=command.now,
                    ))
            except IllegalTransitionError as exc:
                logger.info(f"Skipped timeout of request {candidate.id}: {exc}")
                continue
            timed_out.append(candidate.id)

        if timed_out:
            logger.info(f"Timed out {len(timed_out)} request(s)")
        return timed_out
