"""
Booking conflict policy.

Overlap with an already-confirmed booking can only be judged by something
that sees every booking for a listing, which a renter's client cannot. The
owner-approval flow therefore depends on a ``ConflictChecker`` capability
instead of an inline check. ``find_overlapping`` is the shared rule any
implementation applies once it has the confirmed bookings in hand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Protocol

from parkpulse.booking.lifecycle import BookingStatus
from parkpulse.booking.time_window import TimeSpan, spans_overlap

if TYPE_CHECKING:
    from parkpulse.schemas.booking_schema import Booking


class ConflictChecker(Protocol):
    """Authority that reports confirmed bookings overlapping a candidate span."""

    def find_conflicts(
        self,
        listing_id: str,
        date: str,
        span: TimeSpan,
        exclude_booking_id: Optional[str] = None,
    ) -> list[Booking]:
        ...


def find_overlapping(
    bookings: Iterable[Booking],
    listing_id: str,
    date: str,
    span: TimeSpan,
    exclude_booking_id: Optional[str] = None,
) -> list[Booking]:
    """Confirmed bookings on the same listing and date whose span overlaps ``span``."""
    conflicts = []
    for booking in bookings:
        if booking.id == exclude_booking_id:
            continue
        if booking.status != BookingStatus.CONFIRMED:
            continue
        if booking.listing_id != listing_id or booking.date != date:
            continue
        existing = booking.span
        # Unparseable stored times cannot be ruled out, so they count as a clash
        if existing is None or spans_overlap(span, existing):
            conflicts.append(booking)
    return conflicts
