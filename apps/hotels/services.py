"""Owner-side calendar services: blocking dates and seasonal pricing.

Every mutation is authorized once, at the service boundary, by comparing
the acting user with ``room_owner_id``.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from django.db import transaction  # type: ignore

from shared.domain.errors import Conflict, Forbidden, NotFound
from shared.domain.value_objects import DatePeriod
from shared.infrastructure.locking import lock_queryset_if_possible

from .models import BlockedDate, Room, SeasonalPricing

logger = logging.getLogger(__name__)


def get_room(room_id) -> Room:
    try:
        return Room.objects.select_related("hotel").get(pk=room_id)
    except (Room.DoesNotExist, ValueError, TypeError):
        raise NotFound("Room not found") from None


def lock_room(room_id) -> Room:
    """Load the room holding a row lock; call inside transaction.atomic()."""

    try:
        return lock_queryset_if_possible(Room.objects.filter(pk=room_id)).get()
    except (Room.DoesNotExist, ValueError, TypeError):
        raise NotFound("Room not found") from None


def room_owner_id(room_id):
    """Return the id of the seller owning the room."""

    owner_id = Room.objects.filter(pk=room_id).values_list("hotel__owner_id", flat=True).first()
    if owner_id is None:
        raise NotFound("Room not found")
    return owner_id


def ensure_room_owner(actor_id, room_id, message: str) -> None:
    if room_owner_id(room_id) != actor_id:
        raise Forbidden(message)


def block_dates(
    owner_id,
    room_id,
    start_date: date,
    end_date: date,
    reason: str = BlockedDate.Reason.MAINTENANCE,
    notes: str = "",
) -> BlockedDate:
    """Take the room off sale for [start_date, end_date].

    Blocks of the same room never overlap each other. A block may cover
    dates that are already booked; the calendar then shows the block.
    """

    ensure_room_owner(owner_id, room_id, "You can only block dates for your own rooms")
    period = DatePeriod(start_date, end_date)

    with transaction.atomic():
        room = lock_room(room_id)
        overlapping = BlockedDate.objects.overlapping(room.pk, period.start_date, period.end_date)
        if overlapping.exists():
            raise Conflict("Dates overlap with an existing blocked period")

        blocked = BlockedDate.objects.create(
            room=room,
            start_date=period.start_date,
            end_date=period.end_date,
            reason=reason,
            notes=notes,
            created_by_id=owner_id,
        )

    logger.info(f"Room {room.pk} blocked {period} ({reason}) by user {owner_id}")
    return blocked


def unblock_dates(owner_id, room_id, blocked_date_id) -> None:
    try:
        blocked = BlockedDate.objects.get(pk=blocked_date_id, room_id=room_id)
    except (BlockedDate.DoesNotExist, ValueError, TypeError):
        raise NotFound("Blocked date not found") from None

    ensure_room_owner(owner_id, blocked.room_id, "You can only unblock dates for your own rooms")
    blocked.delete()
    logger.info(f"Room {room_id} unblocked period {blocked_date_id} by user {owner_id}")


def add_seasonal_pricing(
    owner_id,
    room_id,
    start_date: date,
    end_date: date,
    price_per_night: Decimal,
    season_name: str = "",
) -> SeasonalPricing:
    """Override the nightly rate for [start_date, end_date].

    Overlapping rules are allowed; the lowest id wins for a shared day.
    """

    ensure_room_owner(owner_id, room_id, "You can only set pricing for your own rooms")
    period = DatePeriod(start_date, end_date)

    pricing = SeasonalPricing.objects.create(
        room_id=room_id,
        start_date=period.start_date,
        end_date=period.end_date,
        price_per_night=price_per_night,
        season_name=season_name,
        created_by_id=owner_id,
    )
    logger.info(f"Room {room_id} seasonal price {price_per_night} for {period} by user {owner_id}")
    return pricing


def delete_seasonal_pricing(owner_id, room_id, pricing_id) -> None:
    try:
        pricing = SeasonalPricing.objects.get(pk=pricing_id, room_id=room_id)
    except (SeasonalPricing.DoesNotExist, ValueError, TypeError):
        raise NotFound("Seasonal pricing not found") from None

    ensure_room_owner(owner_id, pricing.room_id, "You can only delete pricing for your own rooms")
    pricing.delete()
    logger.info(f"Room {room_id} seasonal price {pricing_id} deleted by user {owner_id}")
