"""URL routing for the hotels domain."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import (
    BlockedDateViewSet,
    HotelViewSet,
    RoomCalendarView,
    RoomQuoteView,
    RoomViewSet,
    SeasonalPricingViewSet,
)

router = DefaultRouter()
# "rooms" goes first so it is not captured as a hotel id.
router.register(r"rooms", RoomViewSet, basename="room")
router.register(r"", HotelViewSet, basename="hotel")

blocked_list = BlockedDateViewSet.as_view({"get": "list", "post": "create"})
blocked_detail = BlockedDateViewSet.as_view({"delete": "destroy"})

seasonal_list = SeasonalPricingViewSet.as_view({"get": "list", "post": "create"})
seasonal_detail = SeasonalPricingViewSet.as_view({"delete": "destroy"})

urlpatterns = [
    # Public calendar and quote
    path(
        "rooms/<int:room_id>/calendar/",
        RoomCalendarView.as_view(),
        name="room-calendar",
    ),
    path(
        "rooms/<int:room_id>/quote/",
        RoomQuoteView.as_view(),
        name="room-quote",
    ),
    # Blocked periods
    path(
        "rooms/<int:room_id>/calendar/blocks/",
        blocked_list,
        name="room-blocked-date-list",
    ),
    path(
        "rooms/<int:room_id>/calendar/blocks/<int:pk>/",
        blocked_detail,
        name="room-blocked-date-detail",
    ),
    # Seasonal pricing
    path(
        "rooms/<int:room_id>/calendar/seasonal-pricing/",
        seasonal_list,
        name="room-seasonal-pricing-list",
    ),
    path(
        "rooms/<int:room_id>/calendar/seasonal-pricing/<int:pk>/",
        seasonal_detail,
        name="room-seasonal-pricing-detail",
    ),
    path("", include(router.urls)),
]
