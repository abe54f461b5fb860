"""
DRF exception handler

Maps domain errors from shared.domain.errors to HTTP responses so that
clients can tell "not found" from "conflict" from "forbidden". Everything
else is delegated to the default DRF handler.
"""

import logging

from django.db.models import ProtectedError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.errors import (
    BookingEngineError,
    Conflict,
    Forbidden,
    InvalidRange,
    InvalidState,
    NotFound,
    Unauthorized,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    NotFound: status.HTTP_404_NOT_FOUND,
    Forbidden: status.HTTP_403_FORBIDDEN,
    Unauthorized: status.HTTP_401_UNAUTHORIZED,
    Conflict: status.HTTP_400_BAD_REQUEST,
    InvalidRange: status.HTTP_400_BAD_REQUEST,
    InvalidState: status.HTTP_400_BAD_REQUEST,
}


def status_for_error(exc: BookingEngineError) -> int:
    for error_class in type(exc).__mro__:
        if error_class in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_class]
    return status.HTTP_400_BAD_REQUEST


def booking_exception_handler(exc, context):
    if isinstance(exc, ProtectedError):
        # Booking.room and Booking.booker are PROTECT.
        exc = Conflict("Cannot delete a record that still has bookings")

    if isinstance(exc, BookingEngineError):
        status_code = status_for_error(exc)
        view = context.get("view")
        logger.info(
            f"{exc.__class__.__name__} in {view.__class__.__name__ if view else 'unknown view'}: "
            f"{exc.detail}"
        )
        return Response({"detail": exc.detail, "code": exc.code}, status=status_code)

    return exception_handler(exc, context)
