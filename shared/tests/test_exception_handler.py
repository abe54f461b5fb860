"""Mapping of domain errors to API responses."""

from __future__ import annotations

import pytest
from django.db.models import ProtectedError
from rest_framework import status
from rest_framework.exceptions import ValidationError

from shared.domain.errors import (
    BookingEngineError,
    Conflict,
    Forbidden,
    InvalidRange,
    InvalidState,
    NotFound,
    Unauthorized,
)
from shared.infrastructure.exception_handler import booking_exception_handler


@pytest.mark.parametrize(
    "error, status_code, code",
    [
        (NotFound("Room not found"), status.HTTP_404_NOT_FOUND, "not_found"),
        (Forbidden(), status.HTTP_403_FORBIDDEN, "forbidden"),
        (Unauthorized(), status.HTTP_401_UNAUTHORIZED, "unauthorized"),
        (Conflict(), status.HTTP_400_BAD_REQUEST, "conflict"),
        (InvalidRange(), status.HTTP_400_BAD_REQUEST, "invalid_range"),
        (InvalidState(), status.HTTP_400_BAD_REQUEST, "invalid_state"),
    ],
)
def test_domain_errors_map_to_status(error, status_code, code):
    response = booking_exception_handler(error, {})

    assert response.status_code == status_code
    assert response.data == {"detail": error.detail, "code": code}


def test_detail_defaults_to_class_message():
    assert NotFound().detail == NotFound.default_detail
    assert str(Conflict("Room is blocked")) == "Room is blocked"


def test_invalid_range_is_a_value_error():
    assert isinstance(InvalidRange(), ValueError)
    assert isinstance(InvalidRange(), BookingEngineError)


def test_other_errors_use_default_handler():
    response = booking_exception_handler(ValidationError({"month": ["bad"]}), {})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data == {"month": ["bad"]}


def test_unknown_exceptions_are_not_handled():
    assert booking_exception_handler(RuntimeError("boom"), {}) is None


def test_protected_delete_maps_to_conflict():
    response = booking_exception_handler(ProtectedError("Cannot delete room", set()), {})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.data["code"] == "conflict"
