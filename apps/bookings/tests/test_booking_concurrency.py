"""Concurrent booking requests for the same room."""

from __future__ import annotations

import threading
from datetime import date
from decimal import Decimal

from django.db import connection
from django.test import TransactionTestCase

from apps.bookings.models import Booking
from apps.bookings.services import create_booking
from apps.hotels.models import Hotel, Room
from apps.users.models import User
from shared.domain.errors import Conflict


class ConcurrentBookingTests(TransactionTestCase):
    def setUp(self) -> None:
        owner = User.objects.create_user(
            email="seller-race@example.com",
            password="StrongPass123",
            role=User.RoleChoices.SELLER,
        )
        self.guests = [
            User.objects.create_user(email=f"guest-race-{index}@example.com", password="StrongPass123")
            for index in range(2)
        ]
        hotel = Hotel.objects.create(owner=owner, name="Race Hotel", city="Almaty", address="Satpayev 1")
        self.room = Room.objects.create(hotel=hotel, name="Only Room", price_per_night=Decimal("100.00"))

    def _race(self, ranges):
        barrier = threading.Barrier(len(ranges))
        results: list = [None] * len(ranges)

        def attempt(index, check_in, check_out):
            try:
                barrier.wait(timeout=10)
                results[index] = create_booking(self.guests[index].id, self.room.id, check_in, check_out)
            except Exception as exc:  # noqa: BLE001
                results[index] = exc
            finally:
                connection.close()

        threads = [
            threading.Thread(target=attempt, args=(index, check_in, check_out))
            for index, (check_in, check_out) in enumerate(ranges)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=60)
        return results

    def test_overlapping_requests_yield_one_booking(self) -> None:
        results = self._race(
            [
                (date(2025, 6, 10), date(2025, 6, 13)),
                (date(2025, 6, 12), date(2025, 6, 15)),
            ]
        )

        successes = [result for result in results if isinstance(result, Booking)]
        conflicts = [result for result in results if isinstance(result, Conflict)]
        self.assertEqual(len(successes), 1, results)
        self.assertEqual(len(conflicts), 1, results)
        self.assertEqual(Booking.objects.filter(room=self.room).count(), 1)

    def test_disjoint_requests_both_succeed(self) -> None:
        results = self._race(
            [
                (date(2025, 6, 10), date(2025, 6, 13)),
                (date(2025, 6, 13), date(2025, 6, 15)),
            ]
        )

        self.assertTrue(all(isinstance(result, Booking) for result in results), results)
        self.assertEqual(Booking.objects.filter(room=self.room).count(), 2)
