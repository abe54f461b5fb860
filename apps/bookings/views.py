"""API views for the booking domain.

Views only translate HTTP to service calls; authorization and state
checks live in ``apps.bookings.services`` and surface as domain errors.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from . import services
from .models import Booking
from .serializers import (
    BookingCancelSerializer,
    BookingCreateSerializer,
    BookingSerializer,
    StayDatesSerializer,
)


class BookingViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Create, list and manage bookings of the current user."""

    permission_classes = [permissions.IsAuthenticated]
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ["status", "room"]

    def get_queryset(self):  # type: ignore
        if getattr(self, "swagger_fake_view", False):
            return Booking.objects.none()
        return services.bookings_for_user(self.request.user)

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        if self.action == "cancel":
            return BookingCancelSerializer
        if self.action == "reschedule":
            return StayDatesSerializer
        return BookingSerializer

    def _booking_response(self, booking: Booking, status_code=status.HTTP_200_OK) -> Response:
        read_serializer = BookingSerializer(booking, context=self.get_serializer_context())
        return Response(read_serializer.data, status=status_code)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = services.create_booking(
            request.user.id,
            serializer.validated_data["room"],
            serializer.validated_data["check_in"],
            serializer.validated_data["check_out"],
        )
        return self._booking_response(booking, status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.cancel_booking(request.user.id, pk, serializer.validated_data["reason"])
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["post"])
    def confirm(self, request, pk=None):  # type: ignore
        booking = services.confirm_booking(request.user.id, pk)
        return self._booking_response(booking)

    @action(detail=True, methods=["post"])
    def complete(self, request, pk=None):  # type: ignore
        booking = services.complete_booking(request.user.id, pk)
        return self._booking_response(booking)

    @action(detail=True, methods=["post"])
    def reschedule(self, request, pk=None):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = services.reschedule_booking(
            request.user.id,
            pk,
            serializer.validated_data["check_in"],
            serializer.validated_data["check_out"],
        )
        return self._booking_response(booking)
