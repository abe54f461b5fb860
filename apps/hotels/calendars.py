"""Monthly availability and price calendar of a room.

Each day resolves to exactly one status, first match wins:

1. ``Blocked``   - a blocked period covers the day
2. ``Booked``    - a non-cancelled booking occupies the night
3. ``Available`` - priced by the seasonal rule covering the day or the base rate

The compositor only reads. It loads the three interval sets once and
resolves days in memory, so a concurrent write can at worst make the
result slightly stale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Sequence, Union

from apps.bookings.models import Booking
from shared.domain.value_objects import YearMonth

from .models import BlockedDate, Room, SeasonalPricing
from .pricing import price_for_day, seasonal_rates_for_period
from .services import get_room

BOOKED_REASON = "BOOKED"


@dataclass(frozen=True)
class Blocked:
    category: str
    notes: str = ""

    available = False

    @property
    def reason(self) -> str:
        return self.category


@dataclass(frozen=True)
class Booked:
    available = False

    @property
    def reason(self) -> str:
        return BOOKED_REASON


@dataclass(frozen=True)
class Available:
    price: Decimal
    season_name: str | None = None

    available = True

    @property
    def reason(self) -> str | None:
        return self.season_name


DayStatus = Union[Blocked, Booked, Available]


@dataclass(frozen=True)
class CalendarDay:
    date: date
    status: DayStatus

    @property
    def available(self) -> bool:
        return self.status.available

    @property
    def price(self) -> Decimal | None:
        if isinstance(self.status, Available):
            return self.status.price
        return None

    @property
    def reason(self) -> str | None:
        return self.status.reason


@dataclass(frozen=True)
class MonthCalendar:
    room_id: int
    month: YearMonth
    days: list[CalendarDay] = field(default_factory=list)


def resolve_day(
    room: Room,
    day: date,
    blocked_dates: Sequence[BlockedDate],
    bookings: Sequence[Booking],
    seasonal_rates: Sequence[SeasonalPricing],
) -> DayStatus:
    for blocked in blocked_dates:
        if blocked.start_date <= day <= blocked.end_date:
            return Blocked(category=blocked.reason, notes=blocked.notes)

    for booking in bookings:
        if booking.status != Booking.Status.CANCELLED and booking.check_in <= day < booking.check_out:
            return Booked()

    price, season_name = price_for_day(room, day, seasonal_rates)
    return Available(price=price, season_name=season_name)


def monthly_calendar(room_id, month: YearMonth) -> MonthCalendar:
    """Build the day-by-day view of ``month`` for the room."""

    room = get_room(room_id)
    first_day, last_day = month.first_day, month.last_day

    blocked_dates = list(BlockedDate.objects.overlapping(room.pk, first_day, last_day))
    # A booking touches the month when one of its nights falls on or before last_day.
    bookings = list(
        Booking.objects.active().filter(room_id=room.pk, check_in__lte=last_day, check_out__gt=first_day)
    )
    seasonal_rates = seasonal_rates_for_period(room, first_day, last_day)

    days = [
        CalendarDay(date=day, status=resolve_day(room, day, blocked_dates, bookings, seasonal_rates))
        for day in month.days()
    ]
    return MonthCalendar(room_id=room.pk, month=month, days=days)
