"""Celery tasks for the booking domain."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from .services import expire_stale_pending_bookings as expire_stale_pending

logger = logging.getLogger(__name__)


# ============================================================================
# PERIODIC TASKS (run by Celery Beat, see config/celery.py)
# ============================================================================

@shared_task(name="bookings.expire_stale_pending_bookings")
def expire_stale_pending_bookings() -> dict[str, int]:
    """
    Cancel PENDING bookings whose check-in date has passed.

    A PENDING booking holds its dates like a confirmed one, so unconfirmed
    holds that were never taken up are released once a day.

    Returns:
        dict: {"expired": number of cancelled bookings}
    """
    expired_count = expire_stale_pending()
    logger.info(f"Stale pending sweep finished, {expired_count} booking(s) expired")
    return {"expired": expired_count}
