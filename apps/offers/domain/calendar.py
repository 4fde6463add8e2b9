"""
Availability Calendar

Owns the blocked date intervals of every offer. All interval mutations go
through this class. It does not lock: callers that must check and then
write (bookings, acceptance, replacing manual blocks) hold the offer lock
from OfferRepository.get(offer_id, lock=True) for the whole sequence.
"""

from datetime import date, datetime
from typing import Callable
from uuid import UUID
import logging

from apps.offers.domain.entities import BlockedInterval
from apps.offers.domain.repositories import IntervalRepository
from shared.domain.value_objects import DateRange

logger = logging.getLogger(__name__)


class AvailabilityCalendar:
    """
    Blocked interval bookkeeping per offer

    Usage:
        with DjangoUnitOfWork():
            offer_repo.get(offer_id, lock=True)
            if not calendar.overlaps(offer_id, from_date, to_date):
                calendar.add_interval(offer_id, from_date, to_date, is_lessor=False)
    """

    def __init__(self, intervals: IntervalRepository, today: Callable[[], date] = date.today):
        self._intervals = intervals
        self._today = today

    def add_interval(
        self,
        offer_id: UUID,
        from_date: date | datetime,
        to_date: date | datetime,
        is_lessor: bool,
        reason: str | None = None,
    ) -> UUID:
        """
        Register a blocked interval

        Dates are normalized to whole days.

        Raises:
            InvalidRangeError: If from_date is after to_date
            PastDateError: If either endpoint precedes today
        """
        dates = DateRange(from_date, to_date)
        dates.ensure_not_in_past(self._today())

        interval = self._intervals.insert(BlockedInterval(
            offer_id=offer_id,
            dates=dates,
            is_lessor=is_lessor,
            reason=reason or '',
        ))
        logger.info(
            f"Blocked {dates} for offer {offer_id} "
            f"({'lessor' if is_lessor else 'booking'})"
        )
        return interval.id

    def overlaps(self, offer_id: UUID, from_date: date | datetime, to_date: date | datetime) -> bool:
        """
        Check whether the candidate range shares a day with any interval
        of the offer, lessor- and lessee-tagged alike.
        """
        candidate = DateRange(from_date, to_date)
        return any(
            interval.overlaps_with(candidate)
            for interval in self._intervals.list_for_offer(offer_id)
        )

    def intervals(self, offer_id: UUID) -> list[BlockedInterval]:
        return self._intervals.list_for_offer(offer_id)

    def remove_intervals_for_actor(self, offer_id: UUID, is_lessor: bool) -> int:
        """Remove all intervals of the offer carrying the given actor flag"""
        removed = self._intervals.delete_for_actor(offer_id, is_lessor)
        logger.info(
            f"Removed {removed} {'lessor' if is_lessor else 'booking'} "
            f"interval(s) from offer {offer_id}"
        )
        return removed

    def clear(self, offer_id: UUID) -> int:
        """Remove every interval of the offer (offer deletion)"""
        return self._intervals.delete_for_offer(offer_id)
