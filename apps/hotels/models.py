"""Hotel catalog and room calendar models.

Rooms belong to hotels owned by sellers. Besides bookings (see
``apps.bookings``) each room carries two independent kinds of date
intervals managed by its owner: blocked periods and seasonal nightly
rates. Both use inclusive ``start_date``/``end_date`` bounds, unlike
bookings whose check-out day is exclusive.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Hotel(models.Model):
    """A hotel listed by a seller."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="hotels",
    )
    name = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    address = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Hotel")
        verbose_name_plural = _("Hotels")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["city"], name="hotel_city_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.city})"


class Room(models.Model):
    """A bookable room with a base nightly rate."""

    hotel = models.ForeignKey(Hotel, on_delete=models.CASCADE, related_name="rooms")
    name = models.CharField(max_length=255, help_text=_("For example 'Deluxe Suite'."))
    price_per_night = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    capacity = models.PositiveSmallIntegerField(default=2, validators=[MinValueValidator(1)])
    view_type = models.CharField(max_length=50, blank=True, help_text=_("Sea, garden, street..."))
    has_kitchen = models.BooleanField(default=False)
    is_available = models.BooleanField(
        default=True,
        help_text=_("Hard switch set by the owner; closed rooms are never bookable."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        ordering = ["hotel_id", "id"]

    def __str__(self) -> str:
        return f"{self.hotel.name}: {self.name}"

    @property
    def owner_id(self):
        return self.hotel.owner_id


class IntervalQuerySet(models.QuerySet):
    """Overlap queries for intervals with an inclusive end date."""

    def for_room(self, room_id):
        return self.filter(room_id=room_id)

    def overlapping(self, room_id, start: date, end: date):
        """Intervals of the room sharing at least one day with [start, end]."""

        return self.filter(room_id=room_id, start_date__lte=end, end_date__gte=start)

    def covering(self, room_id, day: date):
        return self.overlapping(room_id, day, day)

    def within_window(self, start: date | None = None, end: date | None = None):
        qs = self
        if start:
            qs = qs.filter(end_date__gte=start)
        if end:
            qs = qs.filter(start_date__lte=end)
        return qs


class BlockedDate(models.Model):
    """A period during which the owner takes the room off sale."""

    class Reason(models.TextChoices):
        MAINTENANCE = "MAINTENANCE", _("Maintenance")
        RENOVATION = "RENOVATION", _("Renovation")
        OWNER_USE = "OWNER_USE", _("Owner use")
        SEASONAL_CLOSURE = "SEASONAL_CLOSURE", _("Seasonal closure")
        OTHER = "OTHER", _("Other")

    room = models.ForeignKey(Room, on_delete=models.CASCADE, related_name="blocked_dates")
    start_date = models.DateField()
    end_date = models.DateField()
    reason = models.CharField(max_length=30, choices=Reason.choices, default=Reason.MAINTENANCE)
    notes = models.TextField(blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_blocked_dates",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = IntervalQuerySet.as_manager()

    class Meta:
        verbose_name = _("Blocked period")
        verbose_name_plural = _("Blocked periods")
        ordering = ["start_date", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gte=models.F("start_date")),
                name="blocked_date_valid_range",
            ),
        ]
        indexes = [
            models.Index(fields=["room", "start_date", "end_date"], name="blocked_room_dates_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.room}: {self.start_date} - {self.end_date} ({self.reason})"


class SeasonalPricing(models.Model):
    """A nightly rate overriding the room base price for a period."""

    room = models.ForeignKey(Room, on_delete=models.CASCADE, related_name="seasonal_pricing")
    start_date = models.DateField()
    end_date = models.DateField()
    price_per_night = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    season_name = models.CharField(
        max_length=100,
        blank=True,
        help_text=_("Label shown on the calendar, e.g. 'Summer' or 'Holidays'."),
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_seasonal_pricing",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = IntervalQuerySet.as_manager()

    class Meta:
        verbose_name = _("Seasonal price")
        verbose_name_plural = _("Seasonal prices")
        # Overlapping rules resolve to the lowest id, keep that order everywhere.
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gte=models.F("start_date")),
                name="seasonal_pricing_valid_range",
            ),
        ]
        indexes = [
            models.Index(fields=["room", "start_date", "end_date"], name="seasonal_room_dates_idx"),
        ]

    def __str__(self) -> str:
        label = self.season_name or "seasonal"
        return f"{self.room}: {self.start_date} - {self.end_date} {label} @ {self.price_per_night}"
