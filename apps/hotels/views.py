"""Hotel, room and room calendar API views."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.bookings.services import stay_quote
from shared.domain.errors import Forbidden

from . import services
from .calendars import monthly_calendar
from .filters import HotelFilterSet, RoomFilterSet
from .models import BlockedDate, Hotel, Room, SeasonalPricing
from .serializers import (
    BlockedDateSerializer,
    BlockedDateWriteSerializer,
    CalendarQuerySerializer,
    HotelSerializer,
    IntervalWindowSerializer,
    MonthCalendarSerializer,
    RoomSerializer,
    SeasonalPricingSerializer,
    SeasonalPricingWriteSerializer,
    StayQuoteQuerySerializer,
    StayQuoteSerializer,
)


class IsHotelOwnerOrReadOnly(permissions.BasePermission):
    """Anyone can read the catalog; sellers manage their own hotels and rooms."""

    def has_permission(self, request, view):  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        user = request.user
        if not user.is_authenticated:
            return False
        if getattr(view, "action", None) == "create":
            return user.is_seller() or user.is_platform_admin()
        return True

    def has_object_permission(self, request, view, obj):  # type: ignore
        if request.method in permissions.SAFE_METHODS:
            return True
        user = request.user
        if user.is_platform_admin():
            return True
        owner_id = obj.owner_id if isinstance(obj, Hotel) else obj.hotel.owner_id
        return owner_id == user.id


class HotelViewSet(viewsets.ModelViewSet):
    """Viewset for managing hotels."""

    queryset = Hotel.objects.select_related("owner").all()
    serializer_class = HotelSerializer
    permission_classes = [IsHotelOwnerOrReadOnly]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = HotelFilterSet
    ordering_fields = ["name", "city", "created_at"]

    def perform_create(self, serializer):  # type: ignore
        serializer.save(owner=self.request.user)


class RoomViewSet(viewsets.ModelViewSet):
    """Viewset for managing rooms; list and retrieve are public."""

    queryset = Room.objects.select_related("hotel").all()
    serializer_class = RoomSerializer
    permission_classes = [IsHotelOwnerOrReadOnly]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = RoomFilterSet
    ordering_fields = ["price_per_night", "capacity", "created_at"]

    def perform_create(self, serializer):  # type: ignore
        hotel = serializer.validated_data["hotel"]
        user = self.request.user
        if hotel.owner_id != user.id and not user.is_platform_admin():
            raise Forbidden("You can only add rooms to your own hotels")
        serializer.save()


class RoomCalendarMixin:
    """Loads the room from the URL and restricts access to its owner."""

    room_lookup_url_kwarg = "room_id"
    permission_classes = [permissions.IsAuthenticated]

    def initial(self, request, *args, **kwargs):  # type: ignore
        super().initial(request, *args, **kwargs)
        self.room = services.get_room(kwargs.get(self.room_lookup_url_kwarg))
        services.ensure_room_owner(
            request.user.id,
            self.room.pk,
            "You can only manage the calendar of your own rooms",
        )

    def get_room(self) -> Room:
        return self.room

    def get_window(self) -> dict:
        window = IntervalWindowSerializer(data=self.request.query_params)
        window.is_valid(raise_exception=True)
        return window.validated_data


class BlockedDateViewSet(
    RoomCalendarMixin,
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Owner management of blocked periods."""

    serializer_class = BlockedDateSerializer
    queryset = BlockedDate.objects.select_related("created_by").all()

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BlockedDateWriteSerializer
        return BlockedDateSerializer

    def get_queryset(self):  # type: ignore
        if getattr(self, "swagger_fake_view", False):
            return self.queryset.none()
        qs = super().get_queryset().for_room(self.get_room().pk)
        return qs.within_window(**self.get_window())

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        blocked = services.block_dates(
            request.user.id,
            self.get_room().pk,
            **serializer.validated_data,
        )
        read_serializer = BlockedDateSerializer(blocked, context=self.get_serializer_context())
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        services.unblock_dates(request.user.id, self.get_room().pk, kwargs.get("pk"))
        return Response(status=status.HTTP_204_NO_CONTENT)


class SeasonalPricingViewSet(
    RoomCalendarMixin,
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Owner management of seasonal nightly rates."""

    serializer_class = SeasonalPricingSerializer
    queryset = SeasonalPricing.objects.select_related("created_by").all()

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return SeasonalPricingWriteSerializer
        return SeasonalPricingSerializer

    def get_queryset(self):  # type: ignore
        if getattr(self, "swagger_fake_view", False):
            return self.queryset.none()
        qs = super().get_queryset().for_room(self.get_room().pk)
        return qs.within_window(**self.get_window())

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        pricing = services.add_seasonal_pricing(
            request.user.id,
            self.get_room().pk,
            **serializer.validated_data,
        )
        read_serializer = SeasonalPricingSerializer(pricing, context=self.get_serializer_context())
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        services.delete_seasonal_pricing(request.user.id, self.get_room().pk, kwargs.get("pk"))
        return Response(status=status.HTTP_204_NO_CONTENT)


class RoomCalendarView(APIView):
    """Public month view: one entry per day with availability, price and reason."""

    permission_classes = [permissions.AllowAny]

    def get(self, request, room_id):  # type: ignore
        query = CalendarQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        calendar = monthly_calendar(room_id, query.validated_data["month"])
        return Response(MonthCalendarSerializer(calendar).data)


class RoomQuoteView(APIView):
    """Price and availability of a prospective stay."""

    permission_classes = [permissions.AllowAny]

    def get(self, request, room_id):  # type: ignore
        query = StayQuoteQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        room = services.get_room(room_id)
        quote = stay_quote(room, query.validated_data["check_in"], query.validated_data["check_out"])
        return Response(StayQuoteSerializer(quote).data)
