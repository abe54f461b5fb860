"""Monthly room calendar composition."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from apps.bookings.models import Booking
from apps.hotels.calendars import Available, Blocked, Booked, monthly_calendar
from apps.hotels.models import BlockedDate, SeasonalPricing
from shared.domain.errors import NotFound
from shared.domain.value_objects import YearMonth

pytestmark = pytest.mark.django_db


def _book(room, guest, check_in, check_out, status=Booking.Status.PENDING):
    return Booking.objects.create(
        booker=guest,
        room=room,
        check_in=check_in,
        check_out=check_out,
        total_price=Decimal("0.00"),
        status=status,
    )


def _days_by_date(calendar):
    return {day.date: day for day in calendar.days}


def test_empty_month_is_available_at_base_rate(room):
    calendar = monthly_calendar(room.pk, YearMonth(2025, 1))

    assert calendar.room_id == room.pk
    assert len(calendar.days) == 31
    assert all(day.available for day in calendar.days)
    assert {day.price for day in calendar.days} == {Decimal("100.00")}
    assert {day.reason for day in calendar.days} == {None}


def test_leap_february_has_29_days(room):
    calendar = monthly_calendar(room.pk, YearMonth(2024, 2))
    assert [day.date for day in calendar.days][-1] == date(2024, 2, 29)
    assert len(calendar.days) == 29


def test_booked_nights_exclude_checkout_day(room, guest):
    _book(room, guest, date(2025, 6, 10), date(2025, 6, 13))

    days = _days_by_date(monthly_calendar(room.pk, YearMonth(2025, 6)))

    assert days[date(2025, 6, 9)].available
    for day in (10, 11, 12):
        assert days[date(2025, 6, day)].status == Booked()
        assert days[date(2025, 6, day)].reason == "BOOKED"
        assert days[date(2025, 6, day)].price is None
    assert days[date(2025, 6, 13)].available


def test_cancelled_booking_does_not_occupy_days(room, guest):
    _book(room, guest, date(2025, 6, 10), date(2025, 6, 13), status=Booking.Status.CANCELLED)

    days = _days_by_date(monthly_calendar(room.pk, YearMonth(2025, 6)))

    assert days[date(2025, 6, 11)].available


def test_booking_spanning_month_boundary(room, guest):
    _book(room, guest, date(2025, 5, 30), date(2025, 6, 2))

    june = _days_by_date(monthly_calendar(room.pk, YearMonth(2025, 6)))
    may = _days_by_date(monthly_calendar(room.pk, YearMonth(2025, 5)))

    assert not june[date(2025, 6, 1)].available
    assert june[date(2025, 6, 2)].available
    assert not may[date(2025, 5, 30)].available
    assert not may[date(2025, 5, 31)].available


def test_blocked_days_include_end_date(room, owner):
    BlockedDate.objects.create(
        room=room,
        start_date=date(2025, 6, 20),
        end_date=date(2025, 6, 22),
        reason=BlockedDate.Reason.RENOVATION,
        notes="Painting",
    )

    days = _days_by_date(monthly_calendar(room.pk, YearMonth(2025, 6)))

    assert days[date(2025, 6, 22)].status == Blocked(category="RENOVATION", notes="Painting")
    assert days[date(2025, 6, 22)].reason == "RENOVATION"
    assert days[date(2025, 6, 23)].available


def test_block_takes_precedence_over_booking(room, guest):
    _book(room, guest, date(2025, 6, 10), date(2025, 6, 13))
    BlockedDate.objects.create(room=room, start_date=date(2025, 6, 11), end_date=date(2025, 6, 11))

    days = _days_by_date(monthly_calendar(room.pk, YearMonth(2025, 6)))

    assert isinstance(days[date(2025, 6, 10)].status, Booked)
    assert isinstance(days[date(2025, 6, 11)].status, Blocked)
    assert days[date(2025, 6, 11)].reason == "MAINTENANCE"
    assert isinstance(days[date(2025, 6, 12)].status, Booked)


def test_seasonal_days_show_season_price_and_name(room):
    SeasonalPricing.objects.create(
        room=room,
        start_date=date(2025, 7, 15),
        end_date=date(2025, 8, 15),
        price_per_night=Decimal("150.00"),
        season_name="Summer",
    )

    days = _days_by_date(monthly_calendar(room.pk, YearMonth(2025, 7)))

    assert days[date(2025, 7, 14)].status == Available(price=Decimal("100.00"), season_name=None)
    assert days[date(2025, 7, 15)].status == Available(price=Decimal("150.00"), season_name="Summer")
    assert days[date(2025, 7, 15)].reason == "Summer"


def test_other_rooms_do_not_leak_into_calendar(room, hotel, guest):
    other_room = hotel.rooms.create(name="Standard", price_per_night=Decimal("80.00"))
    _book(other_room, guest, date(2025, 6, 1), date(2025, 6, 30))

    calendar = monthly_calendar(room.pk, YearMonth(2025, 6))

    assert all(day.available for day in calendar.days)


def test_unknown_room_is_not_found(db):
    with pytest.raises(NotFound):
        monthly_calendar(999999, YearMonth(2025, 6))


def test_last_supported_month(room, guest):
    _book(room, guest, date(9999, 12, 30), date(9999, 12, 31))
    _book(room, guest, date(9999, 11, 29), date(9999, 12, 2))

    days = _days_by_date(monthly_calendar(room.pk, YearMonth(9999, 12)))

    assert len(days) == 31
    assert isinstance(days[date(9999, 12, 1)].status, Booked)
    assert days[date(9999, 12, 2)].available
    assert isinstance(days[date(9999, 12, 30)].status, Booked)
    assert days[date(9999, 12, 31)].available
