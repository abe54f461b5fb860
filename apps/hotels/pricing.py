"""Nightly price resolution for rooms.

A night costs the rate of the first seasonal rule (lowest id) whose
inclusive period contains it, otherwise the room base rate. A stay is
charged for every night in ``[check_in, check_out)``.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

from shared.domain.value_objects import StayRange

from .models import Room, SeasonalPricing

CENT = Decimal("0.01")


def quantize_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def seasonal_rates_for_period(room: Room, start: date, end: date) -> list[SeasonalPricing]:
    """Seasonal rules of the room touching [start, end], in resolution order."""

    return list(SeasonalPricing.objects.overlapping(room.pk, start, end).order_by("id"))


def match_seasonal_rate(day: date, seasonal_rates: Iterable[SeasonalPricing]) -> SeasonalPricing | None:
    for rate in seasonal_rates:
        if rate.start_date <= day <= rate.end_date:
            return rate
    return None


def price_for_day(
    room: Room,
    day: date,
    seasonal_rates: Sequence[SeasonalPricing] | None = None,
) -> tuple[Decimal, str | None]:
    """Return ``(nightly price, season label or None)`` for one day.

    ``seasonal_rates`` lets callers resolving many days load the rules once;
    it must be ordered by id.
    """

    if seasonal_rates is None:
        seasonal_rates = seasonal_rates_for_period(room, day, day)

    rate = match_seasonal_rate(day, seasonal_rates)
    if rate is None:
        return quantize_money(room.price_per_night), None
    return quantize_money(rate.price_per_night), rate.season_name or None


def price_for_stay(room: Room, check_in: date, check_out: date) -> Decimal:
    """Total price of the stay; raises InvalidRange for less than one night."""

    stay = StayRange(check_in, check_out)
    seasonal_rates = seasonal_rates_for_period(room, stay.check_in, stay.last_night)

    total = Decimal("0.00")
    for night in stay.nights():
        nightly, _label = price_for_day(room, night, seasonal_rates)
        total += nightly
    return quantize_money(total)
