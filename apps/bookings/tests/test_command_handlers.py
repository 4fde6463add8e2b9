"""Unit tests for the booking orchestrator use cases, wired to in-memory fakes."""

from datetime import date, datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from apps.bookings.application.command_handlers import (
    BookOfferCommand,
    BookOfferHandler,
    HandleRequestCommand,
    HandleRequestHandler,
    TimeOutRequestsCommand,
    TimeOutRequestsHandler,
)
from apps.bookings.application.queries import GetRequestHandler, ListRequestsHandler
from apps.bookings.domain import ActorRole, RequestFilters, RequestLifecycle, RequestStatus
from apps.chat.domain import SystemMessageType
from apps.offers.domain import AvailabilityCalendar, Offer
from shared.domain.errors import (
    ConflictError,
    DatesUnavailableError,
    ErrorCode,
    ForbiddenError,
    IllegalTransitionError,
    InternalError,
    InvalidRangeError,
    NotFoundError,
    PastDateError,
    UnauthorizedError,
)
from shared.tests.fakes import (
    FakeIntervalRepository,
    FakeMessaging,
    FakeOfferRepository,
    FakeRequestRepository,
    FakeSessionValidator,
    FakeUnitOfWork,
)

TODAY = date(2030, 5, 20)
NOW = datetime(2030, 5, 20, 9, 30)


@pytest.fixture
def world():
    sessions = FakeSessionValidator()
    offers = FakeOfferRepository()
    intervals = FakeIntervalRepository()
    requests = FakeRequestRepository()
    messaging = FakeMessaging()
    calendar = AvailabilityCalendar(intervals, today=lambda: TODAY)
    lifecycle = RequestLifecycle(clock=lambda: NOW)

    lessor, lessee, other = uuid4(), uuid4(), uuid4()
    offer = offers.save(Offer(lessor_id=lessor, title="Drill", price=Decimal("12.50")))

    return SimpleNamespace(
        offers=offers,
        intervals=intervals,
        requests=requests,
        messaging=messaging,
        calendar=calendar,
        offer=offer,
        lessor=sessions.login(lessor),
        lessee=sessions.login(lessee),
        other=sessions.login(other),
        book=BookOfferHandler(
            sessions, offers, requests, calendar, messaging, lifecycle, FakeUnitOfWork, today=lambda: TODAY,
        ),
        handle=HandleRequestHandler(sessions, offers, requests, calendar, lifecycle, FakeUnitOfWork),
        time_out=TimeOutRequestsHandler(offers, requests, lifecycle, FakeUnitOfWork),
        get=GetRequestHandler(sessions, requests, FakeUnitOfWork),
        list=ListRequestsHandler(sessions, requests),
    )


def book(world, session, from_date=date(2030, 6, 1), to_date=date(2030, 6, 5), offer_id=None):
    return world.book.handle(BookOfferCommand(
        session=session,
        offer_id=offer_id or world.offer.id,
        from_date=from_date,
        to_date=to_date,
        message="Can I pick it up in the morning?",
    ))


def move(world, session, request_id, status, qr_code=None):
    return world.handle.handle(HandleRequestCommand(
        session=session, request_id=request_id, desired_status=status, qr_code=qr_code,
    ))


def live_code(world, request_id):
    return world.requests.get(request_id).qr_code


class TestBookOffer:
    def test_books_and_notifies_lessor(self, world):
        request = book(world, world.lessee)

        assert request.status is RequestStatus.OPEN
        assert request.qr_code is None
        assert request.lessor_id == world.lessor.user_id
        assert world.offer.id in world.offers.locked
        assert world.messaging.sent == [(
            world.lessee.user_id, world.lessor.user_id, request.id, SystemMessageType.OFFER_REQUEST,
        )]
        # Booking alone does not block anything
        assert world.intervals.intervals == []

    def test_missing_session_is_unauthorized(self, world):
        with pytest.raises(UnauthorizedError):
            book(world, None)
        assert world.requests.requests == {}

    def test_lessor_cannot_book_own_offer(self, world):
        with pytest.raises(ForbiddenError):
            book(world, world.lessor)

    def test_unknown_or_deleted_offer(self, world):
        with pytest.raises(NotFoundError):
            book(world, world.lessee, offer_id=uuid4())

        world.offers.save(world.offer.evolve(is_deleted=True))
        with pytest.raises(NotFoundError):
            book(world, world.lessee)

    @pytest.mark.parametrize(
        "from_date, to_date, error",
        [
            (date(2030, 6, 5), date(2030, 6, 1), InvalidRangeError),
            (date(2030, 5, 19), date(2030, 6, 1), PastDateError),
        ],
    )
    def test_invalid_dates(self, world, from_date, to_date, error):
        with pytest.raises(error):
            book(world, world.lessee, from_date, to_date)
        assert world.messaging.sent == []

    def test_today_is_bookable(self, world):
        request = book(world, world.lessee, TODAY, TODAY)
        assert request.dates.from_date == TODAY

    def test_overlap_with_lessor_block_is_refused(self, world):
        world.calendar.add_interval(world.offer.id, date(2030, 6, 4), date(2030, 6, 10), is_lessor=True)

        with pytest.raises(DatesUnavailableError):
            book(world, world.lessee)
        assert world.requests.requests == {}

    def test_open_requests_may_overlap(self, world):
        book(world, world.lessee)
        book(world, world.other, date(2030, 6, 3), date(2030, 6, 4))

        assert len(world.requests.requests) == 2


class TestHandleRequest:
    def test_accept_blocks_dates_then_refuses_overlapping_bookings(self, world):
        request = book(world, world.lessee)

        accepted = move(world, world.lessor, request.id, RequestStatus.ACCEPTED_BY_LESSOR)

        assert accepted.status is RequestStatus.ACCEPTED_BY_LESSOR
        assert accepted.qr_code is None
        assert live_code(world, request.id)
        [interval] = world.intervals.intervals
        assert interval.is_lessor is False
        assert interval.dates == request.dates

        with pytest.raises(DatesUnavailableError):
            book(world, world.other, date(2030, 6, 3), date(2030, 6, 4))

    def test_hand_over_and_return_with_rotating_codes(self, world):
        request = book(world, world.lessee)
        move(world, world.lessor, request.id, RequestStatus.ACCEPTED_BY_LESSOR)
        handover_code = live_code(world, request.id)

        lent = move(world, world.lessor, request.id, RequestStatus.ITEM_LENT_TO_LESSEE, handover_code)
        return_code = live_code(world, request.id)
        assert lent.status is RequestStatus.ITEM_LENT_TO_LESSEE
        assert return_code and return_code != handover_code

        with pytest.raises(IllegalTransitionError):
            move(world, world.lessee, request.id, RequestStatus.ITEM_RETURNED_TO_LESSOR, handover_code)

        returned = move(world, world.lessee, request.id, RequestStatus.ITEM_RETURNED_TO_LESSOR, return_code)
        assert returned.status is RequestStatus.ITEM_RETURNED_TO_LESSOR

    def test_accepting_a_second_overlapping_request_conflicts(self, world):
        first = book(world, world.lessee)
        second = book(world, world.other, date(2030, 6, 5), date(2030, 6, 7))
        move(world, world.lessor, first.id, RequestStatus.ACCEPTED_BY_LESSOR)

        with pytest.raises(ConflictError) as excinfo:
            move(world, world.lessor, second.id, RequestStatus.ACCEPTED_BY_LESSOR)

        assert excinfo.value.code is ErrorCode.DATES_UNAVAILABLE
        assert world.requests.get(second.id).status is RequestStatus.OPEN
        assert len(world.intervals.intervals) == 1

    def test_rejection_leaves_calendar_alone(self, world):
        request = book(world, world.lessee)
        rejected = move(world, world.lessor, request.id, RequestStatus.REJECTED_BY_LESSOR)

        assert rejected.status is RequestStatus.REJECTED_BY_LESSOR
        assert world.intervals.intervals == []

    def test_outsider_is_forbidden(self, world):
        request = book(world, world.lessee)
        with pytest.raises(ForbiddenError):
            move(world, world.other, request.id, RequestStatus.REJECTED_BY_LESSOR)

    def test_unknown_request(self, world):
        with pytest.raises(NotFoundError):
            move(world, world.lessor, uuid4(), RequestStatus.ACCEPTED_BY_LESSOR)

    def test_replay_is_refused(self, world):
        request = book(world, world.lessee)
        move(world, world.lessee, request.id, RequestStatus.CANCELED_BY_LESSEE)

        with pytest.raises(IllegalTransitionError):
            move(world, world.lessee, request.id, RequestStatus.CANCELED_BY_LESSEE)

    def test_accepting_on_deleted_offer_is_not_found(self, world):
        request = book(world, world.lessee)
        world.offers.save(world.offer.evolve(is_deleted=True))

        with pytest.raises(NotFoundError):
            move(world, world.lessor, request.id, RequestStatus.ACCEPTED_BY_LESSOR)

        stored = world.requests.get(request.id)
        assert stored.status is RequestStatus.OPEN
        assert stored.qr_code is None
        assert world.intervals.intervals == []
        # Other transitions still close the request
        canceled = move(world, world.lessee, request.id, RequestStatus.CANCELED_BY_LESSEE)
        assert canceled.status is RequestStatus.CANCELED_BY_LESSEE

    def test_request_whose_offer_vanished_is_not_found(self, world):
        request = book(world, world.lessee)
        del world.offers.offers[world.offer.id]

        with pytest.raises(NotFoundError):
            move(world, world.lessor, request.id, RequestStatus.REJECTED_BY_LESSOR)
        assert world.requests.get(request.id).status is RequestStatus.OPEN


class TestTimeOut:
    def test_sweep_closes_only_stale_open_requests(self, world):
        stale = book(world, world.lessee)
        answered = book(world, world.other, date(2030, 7, 1), date(2030, 7, 2))
        move(world, world.lessor, answered.id, RequestStatus.REJECTED_BY_LESSOR)

        timed_out = world.time_out.handle(TimeOutRequestsCommand(
            now=NOW + timedelta(hours=73), threshold=timedelta(hours=72),
        ))

        assert timed_out == [stale.id]
        request = world.requests.get(stale.id)
        assert request.status is RequestStatus.TIMED_OUT
        assert request.lessor_has_update and request.lessee_has_update
        assert world.requests.get(answered.id).status is RequestStatus.REJECTED_BY_LESSOR

    def test_fresh_requests_survive(self, world):
        book(world, world.lessee)
        timed_out = world.time_out.handle(TimeOutRequestsCommand(
            now=NOW + timedelta(hours=1), threshold=timedelta(hours=72),
        ))
        assert timed_out == []

    def test_storage_failure_propagates(self, world, monkeypatch):
        request = book(world, world.lessee)
        save = world.requests.save

        def failing_save(saved):
            if saved.status is RequestStatus.TIMED_OUT:
                raise InternalError("Storage is unavailable")
            return save(saved)

        monkeypatch.setattr(world.requests, "save", failing_save)

        with pytest.raises(InternalError):
            world.time_out.handle(TimeOutRequestsCommand(
                now=NOW + timedelta(hours=73), threshold=timedelta(hours=72),
            ))
        assert world.requests.get(request.id).status is RequestStatus.OPEN


class TestReadRequests:
    def test_get_marks_seen_and_shows_code_to_the_holder(self, world):
        request = book(world, world.lessee)

        first = world.get.handle(world.lessor, request.id)
        second = world.get.handle(world.lessor, request.id)
        assert first.role is ActorRole.LESSOR
        assert first.has_update is True
        assert second.has_update is False

        move(world, world.lessor, request.id, RequestStatus.ACCEPTED_BY_LESSOR)
        lessee_view = world.get.handle(world.lessee, request.id)
        lessor_view = world.get.handle(world.lessor, request.id)

        assert lessee_view.qr_code == live_code(world, request.id)
        assert lessee_view.request.qr_code is None
        assert lessor_view.qr_code is None

    def test_get_by_outsider_is_forbidden(self, world):
        request = book(world, world.lessee)
        with pytest.raises(ForbiddenError):
            world.get.handle(world.other, request.id)

    def test_list_by_role(self, world):
        request = book(world, world.lessee)

        as_lessor = world.list.handle(world.lessor, RequestFilters(role=ActorRole.LESSOR))
        as_lessee = world.list.handle(world.lessor, RequestFilters(role=ActorRole.LESSEE))

        assert [view.request.id for view in as_lessor] == [request.id]
        assert as_lessor[0].has_update is True
        assert as_lessee == []
        assert world.list.handle(world.other, RequestFilters()) == []
