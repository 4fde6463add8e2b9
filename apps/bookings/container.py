"""Wiring of the booking orchestrator to its Django implementations."""

from __future__ import annotations

from django.utils import timezone  # type: ignore

from apps.bookings.application.command_handlers import (
    BookOfferHandler,
    HandleRequestHandler,
    TimeOutRequestsHandler,
)
from apps.bookings.application.queries import GetRequestHandler, ListRequestsHandler
from apps.bookings.domain import RequestLifecycle
from apps.bookings.infrastructure.repositories import DjangoRequestRepository
from apps.chat.infrastructure.messaging import DjangoMessaging
from apps.offers.container import availability_calendar
from apps.offers.infrastructure.repositories import DjangoOfferRepository
from apps.users.infrastructure.repositories import DjangoSessionValidator
from shared.application.uow import DjangoUnitOfWork


def request_lifecycle() -> RequestLifecycle:
    return RequestLifecycle(clock=timezone.now)


def book_offer_handler() -> BookOfferHandler:
    return BookOfferHandler(
        sessions=DjangoSessionValidator(),
        offers=DjangoOfferRepository(),
        requests=DjangoRequestRepository(),
        calendar=availability_calendar(),
        messaging=DjangoMessaging(),
        lifecycle=request_lifecycle(),
        uow=DjangoUnitOfWork,
        today=timezone.localdate,
    )


def handle_request_handler() -> HandleRequestHandler:
    return HandleRequestHandler(
        sessions=DjangoSessionValidator(),
        offers=DjangoOfferRepository(),
        requests=DjangoRequestRepository(),
        calendar=availability_calendar(),
        lifecycle=request_lifecycle(),
        uow=DjangoUnitOfWork,
    )


def time_out_requests_handler() -> TimeOutRequestsHandler:
    return TimeOutRequestsHandler(
        offers=DjangoOfferRepository(),
        requests=DjangoRequestRepository(),
        lifecycle=request_lifecycle(),
        uow=DjangoUnitOfWork,
    )


def get_request_handler() -> GetRequestHandler:
    return GetRequestHandler(
        sessions=DjangoSessionValidator(),
        requests=DjangoRequestRepository(),
        uow=DjangoUnitOfWork,
    )


def list_requests_handler() -> ListRequestsHandler:
    return ListRequestsHandler(sessions=DjangoSessionValidator(), requests=DjangoRequestRepository())
