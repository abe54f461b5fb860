"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "room",
        "booker",
        "status",
        "check_in",
        "check_out",
        "total_price",
        "created_at",
    )
    list_filter = ("status", "check_in", "check_out")
    search_fields = ("room__name", "room__hotel__name", "booker__email")
    raw_id_fields = ("room", "booker")
    readonly_fields = (
        "total_price",
        "cancelled_at",
        "original_check_in",
        "original_check_out",
        "modified_at",
        "created_at",
        "updated_at",
    )
