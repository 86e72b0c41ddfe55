"""
Booking window validation shared by every booking entry point.

Chat-driven booking, marketplace card booking, and owner approval all call
``validate_booking_window`` so the same request always gets the same answer.
Rejection is a returned value, not an exception: callers branch on it to
pick the message shown to the renter.

Checks run in a fixed order because each failure has its own guidance:
1. Both times parse as HH:MM               -> MALFORMED_TIME
2. End is strictly after start             -> END_NOT_AFTER_START
3. Span fits inside the listing's window   -> OUTSIDE_LISTING_WINDOW

Overnight spans (end <= start) are rejected, never wrapped to the next day.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from parkpulse.booking.time_window import TimeSpan, parse_time_of_day, parse_time_span

logger = logging.getLogger(__name__)

ListingWindow = Optional[Union[TimeSpan, tuple[str, str]]]


class RejectionReason(str, Enum):
    """Why a requested booking span was refused."""

    MALFORMED_TIME = "malformed_time"
    END_NOT_AFTER_START = "end_not_after_start"
    OUTSIDE_LISTING_WINDOW = "outside_listing_window"


MALFORMED_TIME_MESSAGE = "Please enter a valid start and end time in HH:MM format."
END_NOT_AFTER_START_MESSAGE = "End time must be after start time."


@dataclass(frozen=True)
class ValidationResult:
    """Accepted(span) or Rejected(reason), with the user-facing message."""

    span: Optional[TimeSpan] = None
    reason: Optional[RejectionReason] = None
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @classmethod
    def accept(cls, span: TimeSpan) -> "ValidationResult":
        return cls(span=span, message=f"Requested {span}.")

    @classmethod
    def reject(cls, reason: RejectionReason, message: str) -> "ValidationResult":
        return cls(reason=reason, message=message)


def _resolve_window(listing_window: ListingWindow) -> Optional[TimeSpan]:
    """Normalize the listing's window; None when it is corrupt or unordered."""
    if isinstance(listing_window, TimeSpan):
        window = listing_window
    elif isinstance(listing_window, tuple) and len(listing_window) == 2:
        window = parse_time_span(*listing_window)
    else:
        return None
    if window is None or not window.is_ordered:
        return None
    return window


def validate_booking_window(
    start_text: str, end_text: str, listing_window: ListingWindow
) -> ValidationResult:
    """Validate a requested start/end against a listing's advertised window.

    ``listing_window`` is a TimeSpan, the raw ``(start, end)`` strings from
    the listing record, or None when the stored window did not parse. A
    malformed listing window is treated as MALFORMED_TIME rather than raised.
    """
    start = parse_time_of_day(start_text)
    end = parse_time_of_day(end_text)
    if start is None or end is None:
        logger.debug("Rejected malformed times: %r - %r", start_text, end_text)
        return ValidationResult.reject(RejectionReason.MALFORMED_TIME, MALFORMED_TIME_MESSAGE)

    if start >= end:
        logger.debug("Rejected non-increasing span: %s - %s", start_text, end_text)
        return ValidationResult.reject(
            RejectionReason.END_NOT_AFTER_START, END_NOT_AFTER_START_MESSAGE
        )

    window = _resolve_window(listing_window)
    if window is None:
        logger.warning("Listing window is malformed: %r", listing_window)
        return ValidationResult.reject(RejectionReason.MALFORMED_TIME, MALFORMED_TIME_MESSAGE)

    requested = TimeSpan(start=start, end=end)
    if not window.contains(requested):
        logger.debug("Rejected %s outside window %s", requested, window)
        return ValidationResult.reject(
            RejectionReason.OUTSIDE_LISTING_WINDOW,
            f"Please select a time within the available window ({window}).",
        )

    return ValidationResult.accept(requested)
