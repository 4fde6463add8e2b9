"""
Offer use cases

- create_offer: lessor publishes an item
- delete_offer: soft delete, clearing the calendar
- replace_blocked_dates: lessor swaps their manual blocks for a new set
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable
from uuid import UUID
import logging

from apps.offers.domain import AvailabilityCalendar, BlockedInterval, Offer, OfferRepository
from apps.users.domain import ActorSession, SessionValidator
from shared.application.uow import AbstractUnitOfWork
from shared.domain.errors import BadRequestError, ConflictError, ErrorCode, ForbiddenError, NotFoundError
from shared.domain.value_objects import DateRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlockedDates:
    """A manual block as submitted by the lessor"""
    dates: DateRange
    reason: str = ''


@dataclass
class CreateOfferCommand:
    session: ActorSession | None
    title: str
    price: Decimal
    description: str = ''
    category_id: int | None = None
    blocked_dates: list[BlockedDates] = field(default_factory=list)


class OfferService:
    """Offer lifecycle and the lessor's side of the calendar"""

    def __init__(
        self,
        sessions: SessionValidator,
        offers: OfferRepository,
        calendar: AvailabilityCalendar,
        uow: Callable[[], AbstractUnitOfWork],
    ):
        self.sessions = sessions
        self.offers = offers
        self.calendar = calendar
        self.uow = uow

    def get_offer(self, offer_id: UUID) -> tuple[Offer, list[BlockedInterval]]:
        """
        Return a live offer and its blocked intervals.

        Raises:
            NotFoundError: If the offer does not exist or was deleted.
        """
        offer = self.offers.get(offer_id)
        if offer is None or offer.is_deleted:
            raise NotFoundError("Offer", offer_id)
        return offer, self.calendar.intervals(offer_id)

    def create_offer(self, command: CreateOfferCommand) -> Offer:
        actor = self.sessions.validate(command.session)
        if command.price is None or command.price <= 0:
            raise BadRequestError("Price must be greater than zero")

        with self.uow():
            offer = self.offers.save(Offer(
                lessor_id=actor.user_id,
                title=command.title,
                description=command.description,
                price=command.price,
                category_id=command.category_id,
            ))
            self._block(offer.id, command.blocked_dates)

        logger.info(f"Offer {offer.id} created by {actor.user_id}")
        return offer

    def delete_offer(self, session: ActorSession | None, offer_id: UUID) -> None:
        actor = self.sessions.validate(session)

        with self.uow():
            offer = self._load_owned(offer_id, actor.user_id)
            self.offers.save(offer.evolve(is_deleted=True))
            removed = self.calendar.clear(offer_id)

        logger.info(f"Offer {offer_id} deleted by {actor.user_id}, {removed} interval(s) released")

    def replace_blocked_dates(
        self,
        session: ActorSession | None,
        offer_id: UUID,
        blocked_dates: list[BlockedDates],
    ) -> list[BlockedInterval]:
        """
        Replace the lessor's manual blocks of an offer.

        Blocks created by accepted bookings stay; a new manual block may
        not overlap them (ConflictError) nor another block of the same set.
        """
        actor = self.sessions.validate(session)

        with self.uow():
            self._load_owned(offer_id, actor.user_id)
            self.calendar.remove_intervals_for_actor(offer_id, is_lessor=True)
            self._block(offer_id, blocked_dates)
            intervals = self.calendar.intervals(offer_id)

        return intervals

    def _load_owned(self, offer_id: UUID, user_id: UUID) -> Offer:
        offer = self.offers.get(offer_id, lock=True)
        if offer is None or offer.is_deleted:
            raise NotFoundError("Offer", offer_id)
        if not offer.is_owned_by(user_id):
            raise ForbiddenError("Only the lessor can change this offer")
        return offer

    def _block(self, offer_id: UUID, blocked_dates: list[BlockedDates]) -> None:
        for blocked in blocked_dates:
            if self.calendar.overlaps(offer_id, blocked.dates.from_date, blocked.dates.to_date):
                raise ConflictError(
                    f"Blocked dates {blocked.dates} overlap existing blocked dates",
                    code=ErrorCode.DATES_UNAVAILABLE,
                )
            self.calendar.add_interval(
                offer_id,
                blocked.dates.from_date,
                blocked.dates.to_date,
                is_lessor=True,
                reason=blocked.reason,
            )
