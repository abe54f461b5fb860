"""Booking domain models."""

from __future__ import annotations

from datetime import date

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.errors import InvalidState


class BookingQuerySet(models.QuerySet):
    """Overlap queries for bookings; check-out is exclusive."""

    def active(self):
        """Bookings that still hold their dates (everything but CANCELLED)."""

        return self.exclude(status=Booking.Status.CANCELLED)

    def overlapping(self, room_id, check_in: date, check_out: date):
        """Bookings of the room sharing at least one night with [check_in, check_out)."""

        return self.filter(room_id=room_id, check_in__lt=check_out, check_out__gt=check_in)

    def stale_pending(self, today: date):
        """PENDING bookings whose check-in date has already passed."""

        return self.filter(status=Booking.Status.PENDING, check_in__lt=today)

    def for_user(self, user):
        return self.filter(models.Q(booker=user) | models.Q(room__hotel__owner=user))


class Booking(models.Model):
    """A reservation of one room for a date range."""

    class Status(models.TextChoices):
        PENDING = "PENDING", _("Pending")
        CONFIRMED = "CONFIRMED", _("Confirmed")
        CANCELLED = "CANCELLED", _("Cancelled")
        COMPLETED = "COMPLETED", _("Completed")

    ALLOWED_TRANSITIONS = {
        Status.PENDING: {Status.CONFIRMED, Status.CANCELLED},
        Status.CONFIRMED: {Status.CANCELLED, Status.COMPLETED},
        Status.CANCELLED: set(),
        Status.COMPLETED: set(),
    }

    booker = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    room = models.ForeignKey(
        "hotels.Room",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    check_in = models.DateField()
    check_out = models.DateField()
    total_price = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )
    cancellation_reason = models.TextField(blank=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)
    modified_at = models.DateTimeField(null=True, blank=True)
    original_check_in = models.DateField(null=True, blank=True)
    original_check_out = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BookingQuerySet.as_manager()

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(check_out__gt=models.F("check_in")),
                name="booking_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["room", "check_in", "check_out"], name="booking_room_dates_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} room {self.room_id} {self.check_in} - {self.check_out} ({self.status})"

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    @property
    def is_terminal(self) -> bool:
        return not self.ALLOWED_TRANSITIONS[self.Status(self.status)]

    def can_transition_to(self, status: str) -> bool:
        return status in self.ALLOWED_TRANSITIONS[self.Status(self.status)]

    def _ensure_transition(self, status: str) -> None:
        if self.can_transition_to(status):
            return
        if self.status == self.Status.CANCELLED:
            raise InvalidState("Booking is already cancelled")
        if self.status == self.Status.COMPLETED:
            raise InvalidState("Booking is already completed")
        raise InvalidState(f"Cannot move booking from {self.status} to {status}")

    def mark_cancelled(self, reason: str = "", at=None) -> None:
        self._ensure_transition(self.Status.CANCELLED)
        self.status = self.Status.CANCELLED
        self.cancellation_reason = reason
        self.cancelled_at = at or timezone.now()
        self.save(update_fields=["status", "cancellation_reason", "cancelled_at", "updated_at"])

    def mark_confirmed(self) -> None:
        self._ensure_transition(self.Status.CONFIRMED)
        self.status = self.Status.CONFIRMED
        self.save(update_fields=["status", "updated_at"])

    def mark_completed(self) -> None:
        self._ensure_transition(self.Status.COMPLETED)
        self.status = self.Status.COMPLETED
        self.save(update_fields=["status", "updated_at"])

    def reschedule(self, check_in: date, check_out: date, total_price) -> None:
        """Move the stay to new dates, keeping the first original dates for audit."""

        if self.is_terminal:
            raise InvalidState(f"Cannot change dates of a {self.status.lower()} booking")
        if self.original_check_in is None:
            self.original_check_in = self.check_in
            self.original_check_out = self.check_out
        self.check_in = check_in
        self.check_out = check_out
        self.total_price = total_price
        self.modified_at = timezone.now()
        self.save(
            update_fields=[
                "check_in",
                "check_out",
                "total_price",
                "original_check_in",
                "original_check_out",
                "modified_at",
                "updated_at",
            ]
        )
