"""
Mock booking store and the booking operations every entry point shares.

In production, booking records live in the hosted document database and
the approval-time conflict check runs on the trusted backend. Here the
store is in-memory; ``BookingStoreConflictChecker`` plays the part of that
authority by reading confirmed bookings directly.

Every path that creates or confirms a booking goes through
``validate_booking_window`` and ``calculate_cost``:
    request_booking  - chat assistant and marketplace card requests
    approve_booking  - owner approval, re-validated against the current listing
"""

import logging
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from threading import RLock
from typing import Optional, TypedDict

from parkpulse.booking.conflicts import ConflictChecker, find_overlapping
from parkpulse.booking.lifecycle import (
    ACTIVE_STATUSES,
    BookingEvent,
    BookingStatus,
    InvalidTransitionError,
    can_cancel,
    can_delete,
    next_status,
)
from parkpulse.booking.pricing import ZERO_COST, calculate_cost, format_cost
from parkpulse.booking.time_window import TimeSpan, format_time_of_day
from parkpulse.booking.validator import (
    RejectionReason,
    ValidationResult,
    validate_booking_window,
)
from parkpulse.schemas.booking_schema import Booking
from parkpulse.schemas.listing_schema import Listing
from parkpulse.tools.listings import get_listing

logger = logging.getLogger(__name__)


class BookingResult(TypedDict, total=False):
    """Result from request, approve, deny, cancel, or delete operations."""

    success: bool
    message: str
    reason: str
    booking: Booking
    conflicts: list[Booking]


class BookingQuote(TypedDict):
    """Live validation and price for a proposed span, before submission."""

    validation: ValidationResult
    total_cost: Decimal


_bookings: dict[str, Booking] = {}
_lock = RLock()


class BookingStoreConflictChecker:
    """ConflictChecker backed by this process's booking store."""

    def find_conflicts(
        self,
        listing_id: str,
        date: str,
        span: TimeSpan,
        exclude_booking_id: Optional[str] = None,
    ) -> list[Booking]:
        with _lock:
            snapshot = list(_bookings.values())
        return find_overlapping(snapshot, listing_id, date, span, exclude_booking_id)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _failure(reason: str, message: str) -> BookingResult:
    return {"success": False, "reason": reason, "message": message}


def _validate_against_listing(
    listing: Listing, date: str, start_time: str, end_time: str
) -> ValidationResult:
    """Run the shared window check against the listing's current date and window."""
    if listing.date != date:
        return ValidationResult.reject(
            RejectionReason.OUTSIDE_LISTING_WINDOW,
            f"This driveway is no longer available on {date}.",
        )
    return validate_booking_window(start_time, end_time, listing.window)


def _apply(booking: Booking, event: BookingEvent, **changes) -> Booking:
    """Move a stored booking through the lifecycle and persist it."""
    status = next_status(booking.status, event)
    updated = booking.model_copy(update={"status": status, "updated_at": _now(), **changes})
    _bookings[booking.id] = updated
    logger.info("Booking %s: %s -> %s", booking.id, booking.status.value, status.value)
    return updated


def quote_booking(listing: Listing, start_time: str, end_time: str) -> BookingQuote:
    """Validate a proposed span and price it, for display while the renter edits times."""
    validation = validate_booking_window(
        start_time, end_time, listing.window
    )
    cost = calculate_cost(listing.rate, validation.span) if validation.accepted else ZERO_COST
    return {"validation": validation, "total_cost": cost}


def request_booking(
    listing_id: str,
    booker_id: str,
    booker_name: str,
    booker_email: str,
    start_time: str,
    end_time: str,
) -> BookingResult:
    """Create a pending booking request if the span fits the listing's window."""
    listing = get_listing(listing_id)
    if listing is None:
        return _failure("listing_not_found", f"Listing {listing_id} not found.")
    if listing.owner_id == booker_id:
        return _failure("own_listing", "You cannot book your own driveway.")

    validation = validate_booking_window(
        start_time, end_time, listing.window
    )
    if not validation.accepted:
        return _failure(validation.reason.value, validation.message)

    span = validation.span
    booking = Booking(
        id=f"BKG-{uuid.uuid4().hex[:8].upper()}",
        listing_id=listing.id,
        owner_id=listing.owner_id,
        owner_email=listing.contact_email,
        booker_id=booker_id,
        booker_name=booker_name,
        booker_email=booker_email,
        location=listing.location,
        date=listing.date,
        start_time=format_time_of_day(span.start),
        end_time=format_time_of_day(span.end),
        rate=listing.rate,
        total_cost=calculate_cost(listing.rate, span),
        created_at=_now(),
    )
    with _lock:
        _bookings[booking.id] = booking
    logger.info(
        "Booking requested: %s for %s on %s %s-%s",
        booking.id, listing.id, booking.date, booking.start_time, booking.end_time,
    )
    return {
        "success": True,
        "booking": booking,
        "message": (
            f"Booking request sent for {booking.location} on {booking.date} "
            f"from {booking.start_time} to {booking.end_time}. "
            f"Total {format_cost(booking.total_cost)}, pending owner approval."
        ),
    }


def approve_booking(
    booking_id: str,
    owner_id: str,
    conflict_checker: Optional[ConflictChecker] = None,
) -> BookingResult:
    """Confirm a pending request after re-validating it and checking for conflicts."""
    checker = conflict_checker or BookingStoreConflictChecker()
    with _lock:
        booking = _bookings.get(booking_id)
        if booking is None:
            return _failure("booking_not_found", f"Booking {booking_id} not found.")
        if booking.owner_id != owner_id:
            return _failure("not_authorized", "Only the listing owner can approve this request.")
        if booking.status != BookingStatus.PENDING:
            return _failure(
                "invalid_status", f"Booking {booking_id} is {booking.status.value}, not pending."
            )

        listing = get_listing(booking.listing_id)
        if listing is None:
            return _failure("listing_not_found", f"Listing {booking.listing_id} not found.")

        validation = _validate_against_listing(
            listing, booking.date, booking.start_time, booking.end_time
        )
        if not validation.accepted:
            return _failure(validation.reason.value, validation.message)

        conflicts = checker.find_conflicts(
            listing.id, booking.date, validation.span, exclude_booking_id=booking.id
        )
        if conflicts:
            logger.info("Booking %s conflicts with %s", booking_id, [b.id for b in conflicts])
            clashes = ", ".join(f"{b.start_time}-{b.end_time}" for b in conflicts)
            return {
                **_failure(
                    "booking_conflict",
                    f"This request overlaps a confirmed booking ({clashes}) on {booking.date}.",
                ),
                "conflicts": conflicts,
            }

        confirmed = _apply(
            booking,
            BookingEvent.APPROVE,
            rate=listing.rate,
            total_cost=calculate_cost(listing.rate, validation.span),
        )
    return {
        "success": True,
        "booking": confirmed,
        "message": f"Booking {booking_id} confirmed for {confirmed.date} "
                   f"{confirmed.start_time}-{confirmed.end_time}.",
    }


def deny_booking(booking_id: str, owner_id: str) -> BookingResult:
    """Deny a pending request."""
    with _lock:
        booking = _bookings.get(booking_id)
        if booking is None:
            return _failure("booking_not_found", f"Booking {booking_id} not found.")
        if booking.owner_id != owner_id:
            return _failure("not_authorized", "Only the listing owner can deny this request.")
        try:
            denied = _apply(booking, BookingEvent.DENY)
        except InvalidTransitionError:
            return _failure(
                "invalid_status", f"Booking {booking_id} is {booking.status.value}, not pending."
            )
    return {"success": True, "booking": denied, "message": f"Booking {booking_id} denied."}


def cancel_booking(booking_id: str, booker_id: str) -> BookingResult:
    """Cancel an active booking on behalf of the renter who made it."""
    with _lock:
        booking = _bookings.get(booking_id)
        if booking is None:
            return _failure("booking_not_found", f"Booking {booking_id} not found.")
        if booking.booker_id != booker_id:
            return _failure("not_authorized", "Only the renter can cancel this booking.")
        if not can_cancel(booking.status):
            return _failure(
                "invalid_status", f"Booking {booking_id} is already {booking.status.value}."
            )
        canceled = _apply(booking, BookingEvent.USER_CANCEL)
    return {
        "success": True,
        "booking": canceled,
        "message": f"Booking {booking_id} has been canceled.",
    }


def delete_booking(booking_id: str, booker_id: str) -> BookingResult:
    """Remove a finished (denied or canceled) booking from the renter's history."""
    with _lock:
        booking = _bookings.get(booking_id)
        if booking is None:
            return _failure("booking_not_found", f"Booking {booking_id} not found.")
        if booking.booker_id != booker_id:
            return _failure("not_authorized", "Only the renter can delete this booking.")
        if not can_delete(booking.status):
            return _failure(
                "invalid_status", "Only denied or canceled bookings can be deleted."
            )
        del _bookings[booking_id]
    logger.info("Booking deleted: %s", booking_id)
    return {"success": True, "booking": booking, "message": f"Booking {booking_id} deleted."}


def cancel_bookings_outside_listing(listing: Listing) -> list[Booking]:
    """Cancel active bookings on ``listing`` that no longer fit its date or window."""
    canceled = []
    with _lock:
        for booking in list(_bookings.values()):
            if booking.listing_id != listing.id or booking.status not in ACTIVE_STATUSES:
                continue
            validation = _validate_against_listing(
                listing, booking.date, booking.start_time, booking.end_time
            )
            if validation.accepted:
                continue
            canceled.append(_apply(booking, BookingEvent.LISTING_CHANGED))
    return canceled


def get_booking(booking_id: str) -> Optional[Booking]:
    """Retrieve a booking by ID."""
    return _bookings.get(booking_id)


def _sorted(items: list[Booking]) -> list[Booking]:
    return sorted(items, key=lambda b: (b.date, b.start_time, b.created_at))


def list_bookings_for_booker(booker_id: str) -> list[Booking]:
    """All bookings a renter has made, in date order."""
    with _lock:
        return _sorted([b for b in _bookings.values() if b.booker_id == booker_id])


def list_requests_for_owner(owner_id: str) -> list[Booking]:
    """Pending requests awaiting the owner's decision, in date order."""
    with _lock:
        return _sorted([
            b for b in _bookings.values()
            if b.owner_id == owner_id and b.status == BookingStatus.PENDING
        ])


def list_bookings_for_listing(listing_id: str) -> list[Booking]:
    """All bookings on a listing, in date order."""
    with _lock:
        return _sorted([b for b in _bookings.values() if b.listing_id == listing_id])


def reset() -> None:
    """Clear all bookings. Used by test fixtures for isolation."""
    with _lock:
        _bookings.clear()
