"""Overlap rules of stays, blocked periods and seasonal rules."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from apps.bookings.models import Booking
from apps.hotels.models import BlockedDate, SeasonalPricing
from shared.domain.errors import InvalidRange
from shared.domain.value_objects import DatePeriod, StayRange, YearMonth


def test_stay_range_is_half_open():
    first = StayRange(date(2025, 6, 1), date(2025, 6, 5))
    adjacent = StayRange(date(2025, 6, 5), date(2025, 6, 7))
    overlapping = StayRange(date(2025, 6, 4), date(2025, 6, 7))

    assert not first.overlaps_with(adjacent)
    assert first.overlaps_with(overlapping)
    assert not first.contains(date(2025, 6, 5))
    assert first.last_night == date(2025, 6, 4)
    assert len(first) == 4


@pytest.mark.parametrize("check_out", [date(2025, 6, 1), date(2025, 5, 31)])
def test_stay_range_needs_at_least_one_night(check_out):
    with pytest.raises(InvalidRange):
        StayRange(date(2025, 6, 1), check_out)


def test_date_period_is_inclusive():
    period = DatePeriod(date(2025, 6, 1), date(2025, 6, 5))

    assert period.contains(date(2025, 6, 5))
    assert period.overlaps_with(DatePeriod(date(2025, 6, 5), date(2025, 6, 5)))
    assert not period.overlaps_with(DatePeriod(date(2025, 6, 6), date(2025, 6, 9)))


def test_single_day_period_is_allowed():
    period = DatePeriod(date(2025, 6, 1), date(2025, 6, 1))
    assert period.contains(date(2025, 6, 1))


def test_date_period_rejects_end_before_start():
    with pytest.raises(InvalidRange):
        DatePeriod(date(2025, 6, 5), date(2025, 6, 4))


@pytest.mark.parametrize(
    "token, days",
    [("2025-01", 31), ("2024-02", 29), ("2025-02", 28), ("2025-06", 30)],
)
def test_year_month_days(token, days):
    month = YearMonth.parse(token)
    assert len(list(month.days())) == days
    assert str(month) == token


@pytest.mark.parametrize("token", ["2025-13", "2025-1", "25-01", "2025/01", "", "abcd-ef"])
def test_year_month_rejects_bad_tokens(token):
    with pytest.raises(ValueError):
        YearMonth.parse(token)


@pytest.mark.django_db
def test_booking_overlap_query_treats_checkout_as_free(room, guest):
    Booking.objects.create(
        booker=guest,
        room=room,
        check_in=date(2025, 6, 1),
        check_out=date(2025, 6, 5),
        total_price=Decimal("400.00"),
    )

    assert not Booking.objects.overlapping(room.pk, date(2025, 6, 5), date(2025, 6, 7)).exists()
    assert not Booking.objects.overlapping(room.pk, date(2025, 5, 28), date(2025, 6, 1)).exists()
    assert Booking.objects.overlapping(room.pk, date(2025, 6, 4), date(2025, 6, 6)).exists()
    assert Booking.objects.overlapping(room.pk, date(2025, 5, 1), date(2025, 7, 1)).exists()


@pytest.mark.django_db
def test_active_bookings_exclude_cancelled(room, guest):
    booking = Booking.objects.create(
        booker=guest,
        room=room,
        check_in=date(2025, 6, 1),
        check_out=date(2025, 6, 5),
        total_price=Decimal("400.00"),
    )
    booking.mark_cancelled("changed plans")

    assert not Booking.objects.active().overlapping(room.pk, date(2025, 6, 1), date(2025, 6, 5)).exists()


@pytest.mark.django_db
def test_blocked_overlap_query_includes_end_date(room, owner):
    BlockedDate.objects.create(
        room=room,
        start_date=date(2025, 6, 10),
        end_date=date(2025, 6, 12),
        created_by=owner,
    )

    assert BlockedDate.objects.overlapping(room.pk, date(2025, 6, 12), date(2025, 6, 14)).exists()
    assert BlockedDate.objects.overlapping(room.pk, date(2025, 6, 8), date(2025, 6, 10)).exists()
    assert not BlockedDate.objects.overlapping(room.pk, date(2025, 6, 13), date(2025, 6, 14)).exists()
    assert BlockedDate.objects.covering(room.pk, date(2025, 6, 11)).exists()


@pytest.mark.django_db
def test_seasonal_overlap_query_is_scoped_to_room(room, hotel, owner):
    other_room = hotel.rooms.create(name="Standard", price_per_night=Decimal("80.00"))
    SeasonalPricing.objects.create(
        room=other_room,
        start_date=date(2025, 6, 1),
        end_date=date(2025, 6, 30),
        price_per_night=Decimal("150.00"),
    )

    assert not SeasonalPricing.objects.overlapping(room.pk, date(2025, 6, 1), date(2025, 6, 30)).exists()
    assert SeasonalPricing.objects.overlapping(other_room.pk, date(2025, 6, 30), date(2025, 7, 2)).exists()


@pytest.mark.django_db
def test_within_window_filters_by_both_bounds(room):
    june = BlockedDate.objects.create(room=room, start_date=date(2025, 6, 1), end_date=date(2025, 6, 3))
    august = BlockedDate.objects.create(room=room, start_date=date(2025, 8, 1), end_date=date(2025, 8, 3))

    in_july_or_later = BlockedDate.objects.for_room(room.pk).within_window(start=date(2025, 7, 1))
    up_to_july = BlockedDate.objects.for_room(room.pk).within_window(end=date(2025, 7, 1))

    assert list(in_july_or_later) == [august]
    assert list(up_to_july) == [june]
    assert list(BlockedDate.objects.for_room(room.pk).within_window()) == [june, august]
