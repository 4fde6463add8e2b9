"""Unit tests for the availability calendar."""

from datetime import date, datetime
from uuid import uuid4

import pytest

from apps.offers.domain import AvailabilityCalendar
from shared.domain.errors import InvalidRangeError, PastDateError
from shared.tests.fakes import FakeIntervalRepository

TODAY = date(2030, 1, 10)


@pytest.fixture
def intervals():
    return FakeIntervalRepository()


@pytest.fixture
def calendar(intervals):
    return AvailabilityCalendar(intervals, today=lambda: TODAY)


def test_add_interval_then_overlap(calendar):
    offer_id = uuid4()
    calendar.add_interval(offer_id, date(2030, 1, 12), date(2030, 1, 15), is_lessor=True)

    assert calendar.overlaps(offer_id, date(2030, 1, 15), date(2030, 1, 20))
    assert calendar.overlaps(offer_id, date(2030, 1, 1), date(2030, 1, 31))
    assert not calendar.overlaps(offer_id, date(2030, 1, 16), date(2030, 1, 20))
    assert not calendar.overlaps(uuid4(), date(2030, 1, 12), date(2030, 1, 15))


def test_add_interval_normalizes_datetimes(calendar, intervals):
    offer_id = uuid4()
    calendar.add_interval(offer_id, datetime(2030, 1, 12, 22, 0), datetime(2030, 1, 13, 1, 0), is_lessor=False)

    [interval] = intervals.list_for_offer(offer_id)
    assert interval.dates.from_date == date(2030, 1, 12)
    assert interval.dates.to_date == date(2030, 1, 13)
    assert interval.is_lessor is False


def test_add_interval_rejects_past_and_inverted_ranges(calendar, intervals):
    offer_id = uuid4()
    with pytest.raises(PastDateError):
        calendar.add_interval(offer_id, date(2030, 1, 9), date(2030, 1, 12), is_lessor=True)
    with pytest.raises(InvalidRangeError):
        calendar.add_interval(offer_id, date(2030, 1, 14), date(2030, 1, 12), is_lessor=True)
    assert intervals.list_for_offer(offer_id) == []


def test_today_is_not_in_the_past(calendar):
    offer_id = uuid4()
    calendar.add_interval(offer_id, TODAY, TODAY, is_lessor=True)
    assert calendar.overlaps(offer_id, TODAY, TODAY)


def test_remove_intervals_for_actor_keeps_booking_blocks(calendar):
    offer_id = uuid4()
    calendar.add_interval(offer_id, date(2030, 1, 12), date(2030, 1, 13), is_lessor=True)
    calendar.add_interval(offer_id, date(2030, 1, 20), date(2030, 1, 21), is_lessor=True)
    calendar.add_interval(offer_id, date(2030, 1, 15), date(2030, 1, 16), is_lessor=False)

    assert calendar.remove_intervals_for_actor(offer_id, is_lessor=True) == 2

    [remaining] = calendar.intervals(offer_id)
    assert remaining.is_lessor is False
    assert calendar.overlaps(offer_id, date(2030, 1, 16), date(2030, 1, 18))


def test_clear_removes_everything(calendar):
    offer_id = uuid4()
    calendar.add_interval(offer_id, date(2030, 1, 12), date(2030, 1, 13), is_lessor=True)
    calendar.add_interval(offer_id, date(2030, 1, 15), date(2030, 1, 16), is_lessor=False)

    assert calendar.clear(offer_id) == 2
    assert not calendar.overlaps(offer_id, date(2030, 1, 1), date(2030, 12, 31))
