"""Owner calendar services: blocking dates and seasonal pricing."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from apps.bookings.models import Booking
from apps.hotels import services
from apps.hotels.models import BlockedDate, SeasonalPricing
from shared.domain.errors import Conflict, Forbidden, InvalidRange, NotFound

pytestmark = pytest.mark.django_db


def test_owner_blocks_dates(room, owner):
    blocked = services.block_dates(
        owner.id,
        room.id,
        date(2025, 6, 10),
        date(2025, 6, 12),
        reason=BlockedDate.Reason.OWNER_USE,
        notes="Family visit",
    )

    assert blocked.room_id == room.id
    assert blocked.created_by_id == owner.id
    assert blocked.reason == "OWNER_USE"
    assert BlockedDate.objects.count() == 1


def test_single_day_block_is_allowed(room, owner):
    blocked = services.block_dates(owner.id, room.id, date(2025, 6, 10), date(2025, 6, 10))
    assert blocked.start_date == blocked.end_date


def test_non_owner_cannot_block(room, other_owner):
    with pytest.raises(Forbidden):
        services.block_dates(other_owner.id, room.id, date(2025, 6, 10), date(2025, 6, 12))
    assert not BlockedDate.objects.exists()


def test_block_rejects_reversed_range(room, owner):
    with pytest.raises(InvalidRange):
        services.block_dates(owner.id, room.id, date(2025, 6, 12), date(2025, 6, 10))


def test_overlapping_blocks_are_rejected(room, owner):
    services.block_dates(owner.id, room.id, date(2025, 6, 10), date(2025, 6, 12))

    with pytest.raises(Conflict):
        services.block_dates(owner.id, room.id, date(2025, 6, 12), date(2025, 6, 15))

    # The day after the end date is free.
    services.block_dates(owner.id, room.id, date(2025, 6, 13), date(2025, 6, 15))
    assert BlockedDate.objects.count() == 2


def test_block_may_cover_existing_booking(room, owner, guest):
    Booking.objects.create(
        booker=guest,
        room=room,
        check_in=date(2025, 6, 10),
        check_out=date(2025, 6, 12),
        total_price=Decimal("200.00"),
    )

    blocked = services.block_dates(owner.id, room.id, date(2025, 6, 11), date(2025, 6, 11))

    assert blocked.pk is not None


def test_block_unknown_room(owner):
    with pytest.raises(NotFound):
        services.block_dates(owner.id, 424242, date(2025, 6, 10), date(2025, 6, 12))


def test_unblock_removes_period(room, owner):
    blocked = services.block_dates(owner.id, room.id, date(2025, 6, 10), date(2025, 6, 12))

    services.unblock_dates(owner.id, room.id, blocked.id)

    assert not BlockedDate.objects.exists()


def test_unblock_by_stranger_is_forbidden(room, owner, other_owner):
    blocked = services.block_dates(owner.id, room.id, date(2025, 6, 10), date(2025, 6, 12))

    with pytest.raises(Forbidden):
        services.unblock_dates(other_owner.id, room.id, blocked.id)
    assert BlockedDate.objects.filter(pk=blocked.pk).exists()


def test_unblock_unknown_period(room, owner):
    with pytest.raises(NotFound):
        services.unblock_dates(owner.id, room.id, 999)


def test_unblock_checks_the_room_in_the_path(room, hotel, owner):
    other_room = hotel.rooms.create(name="Standard", price_per_night=Decimal("80.00"))
    blocked = services.block_dates(owner.id, other_room.id, date(2025, 6, 10), date(2025, 6, 12))

    with pytest.raises(NotFound):
        services.unblock_dates(owner.id, room.id, blocked.id)


def test_add_seasonal_pricing(room, owner):
    pricing = services.add_seasonal_pricing(
        owner.id,
        room.id,
        date(2025, 7, 1),
        date(2025, 8, 31),
        Decimal("150.00"),
        season_name="Summer",
    )

    assert pricing.season_name == "Summer"
    assert pricing.created_by_id == owner.id


def test_seasonal_pricing_may_overlap(room, owner):
    services.add_seasonal_pricing(owner.id, room.id, date(2025, 7, 1), date(2025, 7, 31), Decimal("150.00"))
    services.add_seasonal_pricing(owner.id, room.id, date(2025, 7, 15), date(2025, 8, 15), Decimal("180.00"))

    assert SeasonalPricing.objects.count() == 2


def test_seasonal_pricing_for_foreign_room_is_forbidden(room, other_owner):
    with pytest.raises(Forbidden):
        services.add_seasonal_pricing(
            other_owner.id, room.id, date(2025, 7, 1), date(2025, 7, 31), Decimal("150.00")
        )


def test_seasonal_pricing_rejects_reversed_range(room, owner):
    with pytest.raises(InvalidRange):
        services.add_seasonal_pricing(owner.id, room.id, date(2025, 7, 31), date(2025, 7, 1), Decimal("150.00"))


def test_delete_seasonal_pricing(room, owner, other_owner):
    pricing = services.add_seasonal_pricing(
        owner.id, room.id, date(2025, 7, 1), date(2025, 7, 31), Decimal("150.00")
    )

    with pytest.raises(Forbidden):
        services.delete_seasonal_pricing(other_owner.id, room.id, pricing.id)

    services.delete_seasonal_pricing(owner.id, room.id, pricing.id)
    assert not SeasonalPricing.objects.exists()

    with pytest.raises(NotFound):
        services.delete_seasonal_pricing(owner.id, room.id, pricing.id)


def test_room_owner_id(room, owner):
    assert services.room_owner_id(room.id) == owner.id

    with pytest.raises(NotFound):
        services.room_owner_id(123456)
