"""Serializers for the booking domain."""

from __future__ import annotations

from datetime import date

from django.conf import settings  # type: ignore
from rest_framework import serializers  # type: ignore

from .models import Booking


def validate_stay_length(check_in: date, check_out: date) -> None:
    max_nights = settings.BOOKINGS_MAX_STAY_NIGHTS
    if (check_out - check_in).days > max_nights:
        raise serializers.ValidationError(
            {"check_out": f"A stay cannot be longer than {max_nights} nights."}
        )


class StayDatesSerializer(serializers.Serializer):
    """Check-in and check-out pair, check-out exclusive."""

    check_in = serializers.DateField()
    check_out = serializers.DateField()

    def validate(self, attrs):  # type: ignore
        check_in: date = attrs["check_in"]
        check_out: date = attrs["check_out"]
        if check_out <= check_in:
            raise serializers.ValidationError(
                {"check_out": "Check-out date must be after check-in date."}
            )
        validate_stay_length(check_in, check_out)
        return attrs


class BookingCreateSerializer(StayDatesSerializer):
    """Booking request made by a guest."""

    room = serializers.IntegerField(min_value=1)


class BookingCancelSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, default="")


class BookingSerializer(serializers.ModelSerializer):
    """Detailed booking representation."""

    booker_id = serializers.ReadOnlyField(source="booker.id")
    room_id = serializers.ReadOnlyField(source="room.id")
    room_name = serializers.ReadOnlyField(source="room.name")
    hotel_id = serializers.ReadOnlyField(source="room.hotel_id")
    nights = serializers.ReadOnlyField()

    class Meta:
        model = Booking
        fields = [
            "id",
            "booker_id",
            "room_id",
            "room_name",
            "hotel_id",
            "check_in",
            "check_out",
            "nights",
            "total_price",
            "status",
            "cancellation_reason",
            "cancelled_at",
            "original_check_in",
            "original_check_out",
            "modified_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
