"""Wiring of the offers use cases to their Django implementations."""

from __future__ import annotations

from django.utils import timezone  # type: ignore

from apps.offers.application.services import OfferService
from apps.offers.domain import AvailabilityCalendar
from apps.offers.infrastructure.repositories import DjangoIntervalRepository, DjangoOfferRepository
from apps.users.infrastructure.repositories import DjangoSessionValidator
from shared.application.uow import DjangoUnitOfWork


def availability_calendar() -> AvailabilityCalendar:
    return AvailabilityCalendar(DjangoIntervalRepository(), today=timezone.localdate)


def offer_service() -> OfferService:
    return OfferService(
        sessions=DjangoSessionValidator(),
        offers=DjangoOfferRepository(),
        calendar=availability_calendar(),
        uow=DjangoUnitOfWork,
    )
