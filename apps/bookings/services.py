"""Domain services for booking workflows.

Creation and rescheduling run their availability check and the insert in
one transaction holding a lock on the room row, so two overlapping
requests for the same room can never both succeed.
"""

from __future__ import annotations

import logging
from datetime import date

from django.conf import settings  # type: ignore
from django.db import transaction  # type: ignore
from django.utils import timezone  # type: ignore

from apps.hotels.models import BlockedDate, Room
from apps.hotels.pricing import price_for_stay
from apps.hotels.services import lock_room, room_owner_id
from apps.users.services import find_user_by_id
from shared.domain.errors import Conflict, Forbidden, InvalidState, NotFound
from shared.domain.value_objects import StayRange
from shared.infrastructure.locking import lock_queryset_if_possible

from .models import Booking

logger = logging.getLogger(__name__)

EXPIRED_REASON = "Check-in date passed without confirmation"


def _blocked_dates_enforced() -> bool:
    return getattr(settings, "BOOKINGS_ENFORCE_BLOCKED_DATES", True)


def _availability_problem(room: Room, stay: StayRange, exclude_booking_id=None) -> str | None:
    if not room.is_available:
        return "Room is not available for booking"

    bookings_qs = Booking.objects.active().overlapping(room.pk, stay.check_in, stay.check_out)
    if exclude_booking_id is not None:
        bookings_qs = bookings_qs.exclude(pk=exclude_booking_id)
    if bookings_qs.exists():
        return "Room is already booked for the selected dates"

    if _blocked_dates_enforced():
        if BlockedDate.objects.overlapping(room.pk, stay.check_in, stay.last_night).exists():
            return "Room is blocked for the selected dates"

    return None


def is_bookable(room: Room, check_in: date, check_out: date, *, exclude_booking_id=None) -> bool:
    """Return whether the room can take a stay over [check_in, check_out)."""

    stay = StayRange(check_in, check_out)
    return _availability_problem(room, stay, exclude_booking_id) is None


def ensure_room_is_available(
    room: Room,
    check_in: date,
    check_out: date,
    *,
    exclude_booking_id=None,
) -> None:
    """Raise Conflict unless the room is free for the given period."""

    stay = StayRange(check_in, check_out)
    problem = _availability_problem(room, stay, exclude_booking_id)
    if problem is not None:
        raise Conflict(problem)


def get_booking(booking_id) -> Booking:
    try:
        return Booking.objects.select_related("room", "room__hotel").get(pk=booking_id)
    except (Booking.DoesNotExist, ValueError, TypeError):
        raise NotFound("Booking not found") from None


def _lock_booking(booking_id) -> Booking:
    try:
        return lock_queryset_if_possible(Booking.objects.filter(pk=booking_id)).get()
    except (Booking.DoesNotExist, ValueError, TypeError):
        raise NotFound("Booking not found") from None


def create_booking(booker_id, room_id, check_in: date, check_out: date) -> Booking:
    """Reserve the room for the booker and return the new PENDING booking."""

    stay = StayRange(check_in, check_out)
    booker = find_user_by_id(booker_id)

    with transaction.atomic():
        room = lock_room(room_id)
        ensure_room_is_available(room, stay.check_in, stay.check_out)
        total_price = price_for_stay(room, stay.check_in, stay.check_out)
        booking = Booking.objects.create(
            booker=booker,
            room=room,
            check_in=stay.check_in,
            check_out=stay.check_out,
            total_price=total_price,
            status=Booking.Status.PENDING,
        )

    logger.info(
        f"Booking {booking.pk} created for room {room.pk} "
        f"{stay.check_in} - {stay.check_out} by user {booker.pk}, total {total_price}"
    )
    return booking


def cancel_booking(booker_id, booking_id, reason: str = "") -> Booking:
    """Cancel a booking on behalf of its booker; the dates free up at once."""

    with transaction.atomic():
        booking = _lock_booking(booking_id)
        if booking.booker_id != booker_id:
            raise Forbidden("You can only cancel your own bookings")
        booking.mark_cancelled(reason)

    logger.info(f"Booking {booking.pk} cancelled by user {booker_id}")
    return booking


def confirm_booking(owner_id, booking_id) -> Booking:
    with transaction.atomic():
        booking = _lock_booking(booking_id)
        if room_owner_id(booking.room_id) != owner_id:
            raise Forbidden("Only the room owner can confirm this booking")
        booking.mark_confirmed()

    logger.info(f"Booking {booking.pk} confirmed by owner {owner_id}")
    return booking


def complete_booking(owner_id, booking_id) -> Booking:
    with transaction.atomic():
        booking = _lock_booking(booking_id)
        if room_owner_id(booking.room_id) != owner_id:
            raise Forbidden("Only the room owner can complete this booking")
        booking.mark_completed()

    logger.info(f"Booking {booking.pk} completed by owner {owner_id}")
    return booking


def reschedule_booking(booker_id, booking_id, check_in: date, check_out: date) -> Booking:
    """Move an open booking to new dates and reprice it.

    The booking's own dates do not count against the new range.
    """

    stay = StayRange(check_in, check_out)
    booking = get_booking(booking_id)
    if booking.booker_id != booker_id:
        raise Forbidden("You can only change your own bookings")

    with transaction.atomic():
        room = lock_room(booking.room_id)
        booking = _lock_booking(booking_id)
        if booking.is_terminal:
            raise InvalidState(f"Cannot change dates of a {booking.status.lower()} booking")
        ensure_room_is_available(room, stay.check_in, stay.check_out, exclude_booking_id=booking.pk)
        total_price = price_for_stay(room, stay.check_in, stay.check_out)
        booking.reschedule(stay.check_in, stay.check_out, total_price)

    logger.info(
        f"Booking {booking.pk} moved to {stay.check_in} - {stay.check_out} by user {booker_id}, "
        f"total {total_price}"
    )
    return booking


def expire_stale_pending_bookings(today: date | None = None) -> int:
    """Cancel PENDING bookings whose check-in date is already in the past.

    Each booking is expired in its own transaction; a failure is logged and
    the sweep moves on to the next one.
    """

    today = today or timezone.localdate()
    now = timezone.now()
    expired_count = 0

    stale_ids = list(Booking.objects.stale_pending(today).values_list("pk", flat=True))
    for booking_id in stale_ids:
        try:
            with transaction.atomic():
                booking = _lock_booking(booking_id)
                # Re-read under the lock, a user may have confirmed it meanwhile.
                if booking.status != Booking.Status.PENDING:
                    continue
                booking.mark_cancelled(EXPIRED_REASON, at=now)
            expired_count += 1
            logger.info(f"Booking {booking_id} expired automatically (check-in {booking.check_in})")
        except Exception as e:
            logger.error(f"Error expiring booking {booking_id}: {e}", exc_info=True)

    if expired_count > 0:
        logger.info(f"Expired {expired_count} pending bookings")
    return expired_count


def bookings_for_user(user):
    """Bookings the user made or received as a room owner, newest first."""

    return Booking.objects.for_user(user).select_related("room", "room__hotel", "booker").distinct()


def stay_quote(room: Room, check_in: date, check_out: date) -> dict:
    """Price and availability of a prospective stay."""

    stay = StayRange(check_in, check_out)
    return {
        "room_id": room.pk,
        "check_in": stay.check_in,
        "check_out": stay.check_out,
        "nights": len(stay),
        "available": is_bookable(room, stay.check_in, stay.check_out),
        "total_price": price_for_stay(room, stay.check_in, stay.check_out),
    }
