"""
Mock driveway listing store.

In production, listings live in the hosted document database and are read
through its SDK; this in-memory store has the same create/update/read
surface so flows and tests run without network access.
"""

import logging
import uuid
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, TypedDict

from parkpulse.booking.time_window import parse_time_span
from parkpulse.schemas.booking_schema import Booking
from parkpulse.schemas.listing_schema import Listing

logger = logging.getLogger(__name__)


class ListingResult(TypedDict, total=False):
    """Result from create_listing or update_listing."""

    success: bool
    message: str
    reason: str
    listing: Listing
    canceled_bookings: list[Booking]


REQUIRED_FIELDS = (
    "address", "city", "state", "zip_code", "country",
    "rate", "date", "start_time", "end_time", "contact_email",
)
OPTIONAL_FIELDS = ("description",)

_listings: dict[str, Listing] = {}


def _parse_rate(value: Any) -> Optional[Decimal]:
    try:
        rate = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return rate if rate.is_finite() else None


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def _validate_date(value: str) -> bool:
    """Validate date is in YYYY-MM-DD format."""
    try:
        datetime.strptime(value.strip(), "%Y-%m-%d")
        return True
    except ValueError:
        return False


def validate_listing_form(fields: dict[str, Any]) -> tuple[bool, str]:
    """
    Check a listing form before it is saved.

    Returns:
        (ok, message), ok=True if every check passed.
    """
    if any(_is_blank(fields.get(name)) for name in REQUIRED_FIELDS):
        return False, "Please fill out all required fields."

    rate = _parse_rate(fields["rate"])
    if rate is None or rate <= 0:
        return False, "Rate must be a positive number."

    if not _validate_date(str(fields["date"])):
        return False, "Please enter the date in YYYY-MM-DD format."

    window = parse_time_span(fields["start_time"], fields["end_time"])
    if window is None:
        return False, "Please enter times in the valid HH:MM 24-hour format (e.g., 09:00)."
    if not window.is_ordered:
        return False, "End time must be after start time on the same day."

    return True, "Listing details look good."


def _build_listing(listing_id: str, owner_id: str, fields: dict[str, Any]) -> Listing:
    window = parse_time_span(fields["start_time"], fields["end_time"])
    start_time, end_time = window.as_text()
    return Listing(
        id=listing_id,
        owner_id=owner_id,
        address=str(fields["address"]).strip(),
        city=str(fields["city"]).strip(),
        state=str(fields["state"]).strip(),
        zip_code=str(fields["zip_code"]).strip(),
        country=str(fields["country"]).strip(),
        description=str(fields.get("description") or "").strip(),
        rate=_parse_rate(fields["rate"]),
        date=str(fields["date"]).strip(),
        start_time=start_time,
        end_time=end_time,
        contact_email=str(fields["contact_email"]).strip(),
    )


def create_listing(owner_id: str, **fields: Any) -> ListingResult:
    """Validate and store a new listing for ``owner_id``."""
    ok, message = validate_listing_form(fields)
    if not ok:
        return {"success": False, "reason": "invalid_listing", "message": message}

    listing_id = f"LST-{uuid.uuid4().hex[:8].upper()}"
    listing = _build_listing(listing_id, owner_id, fields)
    _listings[listing_id] = listing
    logger.info(
        "Listing created: %s by %s on %s %s-%s",
        listing_id, owner_id, listing.date, listing.start_time, listing.end_time,
    )
    return {
        "success": True,
        "listing": listing,
        "message": f"Your driveway at {listing.location} is now live.",
    }


def update_listing(listing_id: str, owner_id: str, **changes: Any) -> ListingResult:
    """Apply an owner's edits and cancel active bookings that no longer fit."""
    from parkpulse.tools.bookings import cancel_bookings_outside_listing

    current = _listings.get(listing_id)
    if current is None:
        return {
            "success": False,
            "reason": "listing_not_found",
            "message": f"Listing {listing_id} not found.",
        }
    if current.owner_id != owner_id:
        return {
            "success": False,
            "reason": "not_authorized",
            "message": "Only the listing owner can update this listing.",
        }

    unknown = set(changes) - set(REQUIRED_FIELDS) - set(OPTIONAL_FIELDS)
    if unknown:
        return {
            "success": False,
            "reason": "invalid_listing",
            "message": f"Unknown listing fields: {', '.join(sorted(unknown))}.",
        }

    fields = current.model_dump()
    fields.update(changes)
    ok, message = validate_listing_form(fields)
    if not ok:
        return {"success": False, "reason": "invalid_listing", "message": message}

    listing = _build_listing(listing_id, owner_id, fields)
    _listings[listing_id] = listing
    canceled = cancel_bookings_outside_listing(listing)
    logger.info("Listing updated: %s (%d bookings canceled)", listing_id, len(canceled))

    message = "Listing updated."
    if canceled:
        message += f" {len(canceled)} booking(s) no longer fit and were canceled."
    return {
        "success": True,
        "listing": listing,
        "canceled_bookings": canceled,
        "message": message,
    }


def get_listing(listing_id: str) -> Optional[Listing]:
    """Retrieve a listing by ID."""
    return _listings.get(listing_id)


def list_listings(owner_id: Optional[str] = None) -> list[Listing]:
    """All listings, optionally only those owned by ``owner_id``, by date then start."""
    items = [
        listing for listing in _listings.values()
        if owner_id is None or listing.owner_id == owner_id
    ]
    items.sort(key=lambda listing: (listing.date, listing.start_time))
    return items


def reset() -> None:
    """Clear all listings. Used by test fixtures for isolation."""
    _listings.clear()
