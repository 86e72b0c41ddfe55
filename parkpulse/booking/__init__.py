from parkpulse.booking.conflicts import ConflictChecker, find_overlapping
from parkpulse.booking.lifecycle import (
    BookingEvent,
    BookingStatus,
    InvalidTransitionError,
    can_cancel,
    can_delete,
    next_status,
)
from parkpulse.booking.pricing import calculate_cost, format_cost
from parkpulse.booking.time_window import (
    TimeSpan,
    format_time_of_day,
    parse_time_of_day,
    parse_time_span,
    spans_overlap,
)
from parkpulse.booking.validator import (
    RejectionReason,
    ValidationResult,
    validate_booking_window,
)

__all__ = [
    "TimeSpan",
    "parse_time_of_day",
    "format_time_of_day",
    "parse_time_span",
    "spans_overlap",
    "calculate_cost",
    "format_cost",
    "RejectionReason",
    "ValidationResult",
    "validate_booking_window",
    "ConflictChecker",
    "find_overlapping",
    "BookingStatus",
    "BookingEvent",
    "InvalidTransitionError",
    "next_status",
    "can_cancel",
    "can_delete",
]
