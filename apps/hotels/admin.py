"""Admin registrations for the hotels domain."""

from __future__ import annotations

from django.contrib import admin

from .models import BlockedDate, Hotel, Room, SeasonalPricing


class RoomInline(admin.TabularInline):
    model = Room
    extra = 0
    fields = ("name", "price_per_night", "capacity", "is_available")


class BlockedDateInline(admin.TabularInline):
    model = BlockedDate
    extra = 0
    fields = ("start_date", "end_date", "reason", "notes")


class SeasonalPricingInline(admin.TabularInline):
    model = SeasonalPricing
    extra = 0
    fields = ("start_date", "end_date", "price_per_night", "season_name")


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = ("name", "city", "owner", "created_at")
    list_filter = ("city",)
    search_fields = ("name", "city", "owner__email")
    inlines = [RoomInline]


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("name", "hotel", "price_per_night", "capacity", "is_available")
    list_filter = ("is_available", "has_kitchen", "hotel__city")
    search_fields = ("name", "hotel__name")
    inlines = [BlockedDateInline, SeasonalPricingInline]


@admin.register(BlockedDate)
class BlockedDateAdmin(admin.ModelAdmin):
    list_display = ("room", "start_date", "end_date", "reason", "created_by")
    list_filter = ("reason",)
    search_fields = ("room__name", "room__hotel__name", "notes")


@admin.register(SeasonalPricing)
class SeasonalPricingAdmin(admin.ModelAdmin):
    list_display = ("room", "season_name", "start_date", "end_date", "price_per_night")
    search_fields = ("room__name", "season_name")
