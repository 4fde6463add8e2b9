"""
Common Value Objects

Value objects used across multiple domains:
- DateRange: Inclusive range of calendar days (booking periods, blocked dates)
- RatingAggregate: Running mean and count of ratings for a target
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable

from shared.domain.base import ValueObject
from shared.domain.errors import BadRequestError, InvalidRangeError, PastDateError

AGGREGATE_DECIMAL_PLACES = 2


def to_day(value: date | datetime) -> date:
    """Drop the time of day, keeping only the calendar day"""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a range from from_date to to_date, both inclusive, at day
    granularity. A single-day range has from_date == to_date.
    """
    from_date: date
    to_date: date

    def __post_init__(self):
        if self.from_date is None or self.to_date is None:
            raise BadRequestError("Date range requires both from_date and to_date")

        # Normalize to day granularity
        object.__setattr__(self, 'from_date', to_day(self.from_date))
        object.__setattr__(self, 'to_date', to_day(self.to_date))

        if self.from_date > self.to_date:
            raise InvalidRangeError(self.from_date, self.to_date)

    def contains(self, day: date) -> bool:
        """Check if a day is within this range (both ends inclusive)"""
        return self.from_date <= to_day(day) <= self.to_date

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range shares at least one day with another

        Either endpoint of one range falling within the other counts, in
        both directions. Ranges that merely touch (one ends the day before
        the other starts) do not overlap.

        Examples:
            - [1, 5] overlaps with [3, 4] -> True (containment)
            - [1, 5] overlaps with [5, 8] -> True (shared day 5)
            - [1, 5] overlaps with [6, 8] -> False (adjacent)
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")

        return (
            self.contains(other.from_date)
            or self.contains(other.to_date)
            or other.contains(self.from_date)
            or other.contains(self.to_date)
        )

    def ensure_not_in_past(self, today: date) -> None:
        """Raise PastDateError if either endpoint precedes today"""
        for day in (self.from_date, self.to_date):
            if day < today:
                raise PastDateError(day)

    def __len__(self) -> int:
        """Number of days covered, both ends included"""
        return (self.to_date - self.from_date).days + 1

    def __str__(self):
        return f"{self.from_date.isoformat()} - {self.to_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.from_date}, {self.to_date})"


@dataclass(frozen=True)
class RatingAggregate(ValueObject):
    """
    Mean and count of the ratings stored for one target

    An empty set of ratings has a mean of 0.
    """
    mean: float = 0.0
    count: int = 0

    @classmethod
    def from_values(cls, values: Iterable[int]) -> 'RatingAggregate':
        values = list(values)
        if not values:
            return cls()
        mean = round(sum(values) / len(values), AGGREGATE_DECIMAL_PLACES)
        return cls(mean=mean, count=len(values))

    @classmethod
    def from_query(cls, mean: float | None, count: int | None) -> 'RatingAggregate':
        """Build from a database aggregate where an empty set yields NULL"""
        if not count:
            return cls()
        return cls(mean=round(float(mean or 0), AGGREGATE_DECIMAL_PLACES), count=count)
