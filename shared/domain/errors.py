"""
Domain Errors

Error taxonomy raised by the availability and pricing engine:
- NotFound: room, booking, user, blocked date or seasonal rule id unknown
- Forbidden: the actor is not the resource owner or booker
- Unauthorized: no authenticated actor where one is required
- InvalidRange: check-out not after check-in, end date before start date
- Conflict: overlapping booking or blocked range, closed room
- InvalidState: transition out of a terminal booking status

Errors are raised by the service that detects them and travel to the
presentation layer untouched; see shared.infrastructure.exception_handler.
"""


class BookingEngineError(Exception):
    """Base class for all domain errors"""

    code = "error"
    default_detail = "Booking request failed."

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFound(BookingEngineError):
    code = "not_found"
    default_detail = "Resource not found."


class Forbidden(BookingEngineError):
    code = "forbidden"
    default_detail = "You are not allowed to perform this action."


class Unauthorized(BookingEngineError):
    code = "unauthorized"
    default_detail = "Authentication is required."


class InvalidRange(BookingEngineError, ValueError):
    code = "invalid_range"
    default_detail = "Invalid date range."


class Conflict(BookingEngineError):
    code = "conflict"
    default_detail = "The room is not available for the selected dates."


class InvalidState(BookingEngineError):
    code = "invalid_state"
    default_detail = "The booking cannot change to the requested status."
