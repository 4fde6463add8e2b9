"""Wiring of the rating use cases to their Django implementations."""

from __future__ import annotations

from django.conf import settings  # type: ignore

from apps.bookings.infrastructure.repositories import DjangoRequestRepository
from apps.offers.infrastructure.repositories import DjangoOfferRepository
from apps.reviews.application.services import RatingService
from apps.reviews.domain import RatingEligibility
from apps.reviews.infrastructure.repositories import DjangoRatingRepository
from apps.users.infrastructure.repositories import DjangoSessionValidator, DjangoUserRepository
from shared.application.uow import DjangoUnitOfWork


def rating_service() -> RatingService:
    return RatingService(
        sessions=DjangoSessionValidator(),
        offers=DjangoOfferRepository(),
        users=DjangoUserRepository(),
        ratings=DjangoRatingRepository(),
        eligibility=RatingEligibility(DjangoRequestRepository()),
        uow=DjangoUnitOfWork,
        default_limit=settings.RATING_LIST_DEFAULT_LIMIT,
    )
