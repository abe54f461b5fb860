"""FilterSet definitions for room listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Hotel, Room


class HotelFilterSet(django_filters.FilterSet):
    city = django_filters.CharFilter(field_name="city", lookup_expr="icontains")
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = Hotel
        fields = ["city", "name", "owner"]


class RoomFilterSet(django_filters.FilterSet):
    """FilterSet for Room with the filters used by guests browsing rooms."""

    city = django_filters.CharFilter(field_name="hotel__city", lookup_expr="icontains")
    hotel = django_filters.NumberFilter(field_name="hotel_id", lookup_expr="exact")
    view_type = django_filters.CharFilter(field_name="view_type", lookup_expr="iexact")

    price_min = django_filters.NumberFilter(field_name="price_per_night", lookup_expr="gte")
    price_max = django_filters.NumberFilter(field_name="price_per_night", lookup_expr="lte")
    guests = django_filters.NumberFilter(field_name="capacity", lookup_expr="gte")

    class Meta:
        model = Room
        fields = [
            "city",
            "hotel",
            "view_type",
            "has_kitchen",
            "is_available",
        ]
