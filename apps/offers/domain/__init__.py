from apps.offers.domain.calendar import AvailabilityCalendar
from apps.offers.domain.entities import BlockedInterval, Offer
from apps.offers.domain.repositories import IntervalRepository, OfferRepository

__all__ = [
    "AvailabilityCalendar",
    "BlockedInterval",
    "IntervalRepository",
    "Offer",
    "OfferRepository",
]
