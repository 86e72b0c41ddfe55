"""Shared test fixtures and helpers."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

import pytest
from pydantic import BaseModel

from parkpulse.booking.lifecycle import BookingStatus
from parkpulse.schemas.booking_schema import Booking
from parkpulse.schemas.user_schema import User
from parkpulse.tools import bookings, listings, notifications
from parkpulse.tools.text_generation import TextGenerationError


@pytest.fixture(autouse=True)
def _clean_stores():
    """Every test starts with empty listing and booking stores and outbox."""
    listings.reset()
    bookings.reset()
    notifications.reset()
    yield
    listings.reset()
    bookings.reset()
    notifications.reset()


class FakeTextGenerator:
    """TextGenerator returning queued responses; raises when the queue is empty."""

    def __init__(self, *responses: BaseModel) -> None:
        self.responses = list(responses)
        self.prompts: list[str] = []

    def generate(self, prompt, schema):
        self.prompts.append(prompt)
        if not self.responses:
            raise TextGenerationError("no canned response")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def offline_generator():
    return FakeTextGenerator()


@pytest.fixture
def owner():
    return User(id="owner-1", name="Olivia Owner", email="olivia@example.com")


@pytest.fixture
def renter():
    return User(id="renter-1", name="Riley Renter", email="riley@example.com")


@pytest.fixture
def other_renter():
    return User(id="renter-2", name="Sam Second", email="sam@example.com")


def listing_fields(**overrides) -> dict:
    """Valid listing form fields with sensible defaults."""
    fields = {
        "address": "12 Elm Street",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
        "country": "USA",
        "description": "Covered spot near the stadium",
        "rate": "5.00",
        "date": "2025-09-20",
        "start_time": "09:00",
        "end_time": "17:00",
        "contact_email": "olivia@example.com",
    }
    fields.update(overrides)
    return fields


def make_listing(owner_id: str = "owner-1", **overrides):
    """Create and store a listing, returning the Listing."""
    result = listings.create_listing(owner_id, **listing_fields(**overrides))
    assert result["success"], result["message"]
    return result["listing"]


def request(listing, user: User, start: str, end: str):
    """Request a booking on ``listing`` as ``user`` and return the result."""
    return bookings.request_booking(
        listing.id, user.id, user.name, user.email, start, end
    )


def make_booking(
    booking_id: str = "BKG-TEST",
    listing_id: str = "LST-TEST",
    date: str = "2025-09-20",
    start_time: str = "10:00",
    end_time: str = "12:00",
    status: BookingStatus = BookingStatus.CONFIRMED,
    rate: str = "5.00",
    total_cost: Optional[str] = None,
) -> Booking:
    """Helper to build a Booking record without going through the store."""
    return Booking(
        id=booking_id,
        listing_id=listing_id,
        owner_id="owner-1",
        owner_email="olivia@example.com",
        booker_id="renter-1",
        booker_name="Riley Renter",
        booker_email="riley@example.com",
        location="12 Elm Street, Springfield, IL 62701",
        date=date,
        start_time=start_time,
        end_time=end_time,
        rate=Decimal(rate),
        total_cost=Decimal(total_cost or "10.00"),
        status=status,
        created_at=datetime(2025, 9, 1, 12, 0, tzinfo=timezone.utc),
    )
