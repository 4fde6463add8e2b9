"""Tests for DateRange and RatingAggregate."""

from datetime import date, datetime

import pytest

from shared.domain.errors import BadRequestError, InvalidRangeError, PastDateError
from shared.domain.value_objects import DateRange, RatingAggregate


def days(first: int, last: int) -> DateRange:
    return DateRange(date(2030, 6, first), date(2030, 6, last))


@pytest.mark.parametrize(
    "left, right, expected",
    [
        ((1, 5), (3, 4), True),   # containment
        ((1, 5), (5, 8), True),   # shared last day
        ((1, 5), (1, 1), True),   # shared first day
        ((1, 5), (6, 8), False),  # adjacent
        ((3, 3), (3, 3), True),   # single day
        ((1, 2), (10, 12), False),
    ],
)
def test_overlap_is_symmetric(left, right, expected):
    a, b = days(*left), days(*right)
    assert a.overlaps_with(b) is expected
    assert b.overlaps_with(a) is expected


def test_datetimes_are_normalized_to_days():
    dates = DateRange(datetime(2030, 6, 1, 23, 59), datetime(2030, 6, 2, 0, 1))
    assert dates.from_date == date(2030, 6, 1)
    assert dates.to_date == date(2030, 6, 2)
    assert len(dates) == 2


def test_same_day_with_later_start_time_is_valid():
    dates = DateRange(datetime(2030, 6, 1, 18, 0), datetime(2030, 6, 1, 9, 0))
    assert len(dates) == 1


def test_inverted_range_is_rejected():
    with pytest.raises(InvalidRangeError):
        DateRange(date(2030, 6, 5), date(2030, 6, 1))


def test_missing_endpoint_is_rejected():
    with pytest.raises(BadRequestError):
        DateRange(None, date(2030, 6, 1))


def test_past_days_are_rejected():
    with pytest.raises(PastDateError):
        days(1, 5).ensure_not_in_past(date(2030, 6, 2))
    days(2, 5).ensure_not_in_past(date(2030, 6, 2))


def test_empty_aggregate_has_zero_mean():
    assert RatingAggregate.from_values([]) == RatingAggregate(0.0, 0)
    assert RatingAggregate.from_query(None, 0) == RatingAggregate(0.0, 0)


def test_aggregate_mean_is_rounded():
    assert RatingAggregate.from_values([5, 4, 4]) == RatingAggregate(4.33, 3)
