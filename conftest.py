"""Shared pytest fixtures: users, a hotel and a room to book."""

from __future__ import annotations

from decimal import Decimal

import pytest

from apps.hotels.models import Hotel, Room
from apps.users.models import User


@pytest.fixture
def owner(db):
    return User.objects.create_user(
        email="seller@example.com",
        password="SellerPass123",
        username="Seller",
        role=User.RoleChoices.SELLER,
    )


@pytest.fixture
def other_owner(db):
    return User.objects.create_user(
        email="other-seller@example.com",
        password="SellerPass123",
        username="Other seller",
        role=User.RoleChoices.SELLER,
    )


@pytest.fixture
def guest(db):
    return User.objects.create_user(
        email="guest@example.com",
        password="GuestPass123",
        username="Guest",
        role=User.RoleChoices.GUEST,
    )


@pytest.fixture
def hotel(owner):
    return Hotel.objects.create(
        owner=owner,
        name="Seaside Hotel",
        city="Almaty",
        address="Abay ave, 10",
    )


@pytest.fixture
def room(hotel):
    return Room.objects.create(
        hotel=hotel,
        name="Deluxe Suite",
        price_per_night=Decimal("100.00"),
        capacity=2,
    )
