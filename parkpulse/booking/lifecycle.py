"""
Booking status lifecycle as an explicit transition table.

A booking request starts as PENDING. Only the listing owner moves it to
CONFIRMED or DENIED; the booker may cancel while it is active; an owner's
listing change cancels active bookings that no longer fit.

Usage:
    status = next_status(BookingStatus.PENDING, BookingEvent.APPROVE)
    assert status == BookingStatus.CONFIRMED
"""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class BookingStatus(str, Enum):
    """Lifecycle states of a booking request."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DENIED = "denied"
    CANCELED_BY_USER = "canceled_by_user"
    CANCELED_BY_OWNER = "canceled_by_owner"


class BookingEvent(str, Enum):
    """Events that move a booking between states."""
    APPROVE = "approve"
    DENY = "deny"
    USER_CANCEL = "user_cancel"
    LISTING_CHANGED = "listing_changed"


@dataclass(frozen=True)
class Transition:
    """A single valid status transition."""
    from_status: BookingStatus
    to_status: BookingStatus
    event: BookingEvent


class InvalidTransitionError(Exception):
    """Raised when an event is not valid from the booking's current status."""


TRANSITIONS: list[Transition] = [
    # --- Owner decision ---
    Transition(BookingStatus.PENDING, BookingStatus.CONFIRMED, BookingEvent.APPROVE),
    Transition(BookingStatus.PENDING, BookingStatus.DENIED, BookingEvent.DENY),

    # --- Booker cancellation ---
    Transition(BookingStatus.PENDING, BookingStatus.CANCELED_BY_USER, BookingEvent.USER_CANCEL),
    Transition(BookingStatus.CONFIRMED, BookingStatus.CANCELED_BY_USER, BookingEvent.USER_CANCEL),

    # --- Listing updated by owner ---
    Transition(BookingStatus.PENDING, BookingStatus.CANCELED_BY_OWNER,
               BookingEvent.LISTING_CHANGED),
    Transition(BookingStatus.CONFIRMED, BookingStatus.CANCELED_BY_OWNER,
               BookingEvent.LISTING_CHANGED),
]

ACTIVE_STATUSES = frozenset({BookingStatus.PENDING, BookingStatus.CONFIRMED})
FINISHED_STATUSES = frozenset({
    BookingStatus.DENIED,
    BookingStatus.CANCELED_BY_USER,
    BookingStatus.CANCELED_BY_OWNER,
})


def valid_events(status: BookingStatus) -> list[BookingEvent]:
    """Return all events valid from ``status``."""
    return [t.event for t in TRANSITIONS if t.from_status == status]


def next_status(status: BookingStatus, event: BookingEvent) -> BookingStatus:
    """
    Resolve the status reached by applying ``event``.

    Raises:
        InvalidTransitionError: If no transition exists for this pair.
    """
    for t in TRANSITIONS:
        if t.from_status == status and t.event == event:
            logger.debug(
                "Booking transition: %s -> %s (event: %s)",
                status.value, t.to_status.value, event.value,
            )
            return t.to_status

    valid = [e.value for e in valid_events(status)]
    raise InvalidTransitionError(
        f"No valid transition from '{status.value}' "
        f"with event '{event.value}'. Valid events: {valid}"
    )


def can_cancel(status: BookingStatus) -> bool:
    return status in ACTIVE_STATUSES


def can_delete(status: BookingStatus) -> bool:
    return status in FINISHED_STATUSES
