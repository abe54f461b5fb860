"""Serializers for the hotels domain."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from apps.bookings.serializers import validate_stay_length
from shared.domain.value_objects import YearMonth

from .calendars import MonthCalendar
from .models import BlockedDate, Hotel, Room, SeasonalPricing


class HotelSerializer(serializers.ModelSerializer):
    owner = serializers.ReadOnlyField(source="owner_id")
    rooms_count = serializers.SerializerMethodField()

    class Meta:
        model = Hotel
        fields = [
            "id",
            "owner",
            "name",
            "city",
            "address",
            "description",
            "rooms_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["owner", "rooms_count", "created_at", "updated_at"]

    def get_rooms_count(self, obj: Hotel) -> int:
        return obj.rooms.count()


class RoomSerializer(serializers.ModelSerializer):
    hotel_name = serializers.ReadOnlyField(source="hotel.name")
    city = serializers.ReadOnlyField(source="hotel.city")

    class Meta:
        model = Room
        fields = [
            "id",
            "hotel",
            "hotel_name",
            "city",
            "name",
            "price_per_night",
            "capacity",
            "view_type",
            "has_kitchen",
            "is_available",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["hotel_name", "city", "created_at", "updated_at"]

    def validate_hotel(self, hotel: Hotel) -> Hotel:
        if self.instance is not None and hotel.pk != self.instance.hotel_id:
            raise serializers.ValidationError("A room cannot be moved to another hotel.")
        return hotel


class BlockedDateSerializer(serializers.ModelSerializer):
    created_by = serializers.ReadOnlyField(source="created_by_id")
    reason_display = serializers.ReadOnlyField(source="get_reason_display")

    class Meta:
        model = BlockedDate
        fields = [
            "id",
            "room",
            "start_date",
            "end_date",
            "reason",
            "reason_display",
            "notes",
            "created_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class BlockedDateWriteSerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    reason = serializers.ChoiceField(
        choices=BlockedDate.Reason.choices,
        default=BlockedDate.Reason.MAINTENANCE,
    )
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class SeasonalPricingSerializer(serializers.ModelSerializer):
    created_by = serializers.ReadOnlyField(source="created_by_id")
    status_label = serializers.SerializerMethodField()

    class Meta:
        model = SeasonalPricing
        fields = [
            "id",
            "room",
            "start_date",
            "end_date",
            "price_per_night",
            "season_name",
            "created_by",
            "created_at",
            "updated_at",
            "status_label",
        ]
        read_only_fields = fields

    def get_status_label(self, obj: SeasonalPricing) -> str:
        return f"{obj.start_date:%d.%m.%Y} - {obj.end_date:%d.%m.%Y}"


class SeasonalPricingWriteSerializer(serializers.Serializer):
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    price_per_night = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0.01"),
    )
    season_name = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")


class IntervalWindowSerializer(serializers.Serializer):
    """Optional ``start``/``end`` window for listing blocks and seasonal rules."""

    start = serializers.DateField(required=False)
    end = serializers.DateField(required=False)


class CalendarQuerySerializer(serializers.Serializer):
    month = serializers.CharField()

    def validate_month(self, value: str) -> YearMonth:
        try:
            return YearMonth.parse(value)
        except ValueError as exc:
            raise serializers.ValidationError(str(exc))


class StayQuoteQuerySerializer(serializers.Serializer):
    check_in = serializers.DateField()
    check_out = serializers.DateField()

    def validate(self, attrs):  # type: ignore
        validate_stay_length(attrs["check_in"], attrs["check_out"])
        return attrs


class CalendarDaySerializer(serializers.Serializer):
    """One day of the room calendar as shown to guests."""

    date = serializers.DateField()
    available = serializers.BooleanField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2, allow_null=True)
    reason = serializers.CharField(allow_null=True)


class MonthCalendarSerializer(serializers.Serializer):
    room_id = serializers.IntegerField()
    month = serializers.SerializerMethodField()
    days = CalendarDaySerializer(many=True)

    def get_month(self, obj: MonthCalendar) -> str:
        return str(obj.month)


class StayQuoteSerializer(serializers.Serializer):
    room_id = serializers.IntegerField()
    check_in = serializers.DateField()
    check_out = serializers.DateField()
    nights = serializers.IntegerField()
    available = serializers.BooleanField()
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2)
