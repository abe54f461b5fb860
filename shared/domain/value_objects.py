"""
Common Value Objects

Value objects used across the hotels and bookings apps:
- StayRange: check-in (inclusive) to check-out (exclusive), used by bookings
- DatePeriod: start to end, both inclusive, used by blocks and seasonal rates
- YearMonth: a calendar month addressed by a "YYYY-MM" token
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator

from shared.domain.errors import InvalidRange


@dataclass(frozen=True)
class StayRange:
    """
    Stay range value object

    Represents a stay from check_in (inclusive) to check_out (exclusive).
    The check-out day is never occupied, so a guest can check in on the
    day the previous guest checks out.
    """
    check_in: date
    check_out: date

    def __post_init__(self):
        if self.check_out <= self.check_in:
            raise InvalidRange(
                f"Check-out ({self.check_out}) must be after check-in ({self.check_in})"
            )

    def overlaps_with(self, other: 'StayRange') -> bool:
        """
        Check if this stay overlaps with another

        Overlap formula: start1 < end2 AND end1 > start2

        Examples:
            - StayRange(1, 5) overlaps with StayRange(4, 7) -> True
            - StayRange(1, 5) overlaps with StayRange(5, 7) -> False (adjacent)
        """
        if not isinstance(other, StayRange):
            raise TypeError("Can only check overlap with another StayRange")
        return self.check_in < other.check_out and self.check_out > other.check_in

    def contains(self, day: date) -> bool:
        return self.check_in <= day < self.check_out

    @property
    def last_night(self) -> date:
        """The last occupied day, i.e. the inclusive end of the stay"""
        return self.check_out - timedelta(days=1)

    def nights(self) -> Iterator[date]:
        """Yield each charged night; the check-out day is not included"""
        current = self.check_in
        while current < self.check_out:
            yield current
            current += timedelta(days=1)

    def __len__(self) -> int:
        return (self.check_out - self.check_in).days

    def __str__(self):
        return f"{self.check_in.isoformat()} - {self.check_out.isoformat()}"


@dataclass(frozen=True)
class DatePeriod:
    """
    Inclusive date period value object

    Both start_date and end_date are occupied. A single-day period has
    start_date == end_date.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.end_date < self.start_date:
            raise InvalidRange(
                f"End date ({self.end_date}) must not be before start date ({self.start_date})"
            )

    def overlaps_with(self, other: 'DatePeriod') -> bool:
        # Inclusive formula: start1 <= end2 AND end1 >= start2
        return self.start_date <= other.end_date and self.end_date >= other.start_date

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def __str__(self):
        return f"{self.start_date.isoformat()} .. {self.end_date.isoformat()}"


_YEAR_MONTH_PATTERN = re.compile(r"(\d{4})-(\d{2})")


@dataclass(frozen=True)
class YearMonth:
    """A calendar month such as 2025-01"""
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {self.month}")
        if not 1 <= self.year <= 9999:
            raise ValueError(f"Year out of range: {self.year}")

    @classmethod
    def parse(cls, token: str) -> 'YearMonth':
        """
        Parse a "YYYY-MM" token

        Raises:
            ValueError: If the token does not match the format
        """
        match = _YEAR_MONTH_PATTERN.fullmatch(token or "")
        if not match:
            raise ValueError(f"Invalid month '{token}', expected YYYY-MM")
        return cls(year=int(match.group(1)), month=int(match.group(2)))

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    def days(self) -> Iterator[date]:
        first = self.first_day
        for offset in range(self.last_day.day):
            yield first + timedelta(days=offset)

    def __str__(self):
        return f"{self.year:04d}-{self.month:02d}"
