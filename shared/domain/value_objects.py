"""
Common Value Objects

Value objects used across the booking domain:
- DateRange: Represents a range of calendar dates, both ends inclusive
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator

from shared.domain.base import ValueObject


def as_date(value: date) -> date:
    """Drop the time-of-day part, keeping only the calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a range from start_date to end_date, both inclusive.
    A single-day range has start_date == end_date.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        # Normalize datetimes to calendar dates
        object.__setattr__(self, 'start_date', as_date(self.start_date))
        object.__setattr__(self, 'end_date', as_date(self.end_date))

        if self.end_date < self.start_date:
            raise ValueError(f"End date ({self.end_date}) must not be before start date ({self.start_date})")

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range overlaps with another

        Two ranges overlap if they share any dates.
        Note: both ends are inclusive, so touching ranges overlap.

        Examples:
            - DateRange(25, 28) overlaps with DateRange(27, 30) -> True
            - DateRange(25, 28) overlaps with DateRange(28, 31) -> True (shared day 28)
            - DateRange(25, 28) overlaps with DateRange(29, 31) -> False
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")

        # Overlap formula: start1 <= end2 AND start2 <= end1
        return (self.start_date <= other.end_date and
                other.start_date <= self.end_date)

    def contains(self, check_date: date) -> bool:
        """Check if a date is within this range (inclusive)"""
        return self.start_date <= as_date(check_date) <= self.end_date

    def days(self) -> Iterator[date]:
        """Iterate over every calendar date in the range, ascending"""
        current = self.start_date
        while current <= self.end_date:
            yield current
            current += timedelta(days=1)

    def __len__(self) -> int:
        """Return the number of calendar days covered by this range"""
        return (self.end_date - self.start_date).days + 1

    def __str__(self):
        return f"{self.start_date.strftime('%d.%m.%Y')} - {self.end_date.strftime('%d.%m.%Y')}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
