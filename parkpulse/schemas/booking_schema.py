"""Booking record and booking request data models."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from parkpulse.booking.lifecycle import BookingStatus
from parkpulse.booking.time_window import TimeSpan, parse_time_span


class BookingRequest(BaseModel):
    """A renter's proposed span against a listing. Not persisted until accepted."""
    listing_id: str = Field(..., min_length=1)
    booker_id: str = Field(..., min_length=1)
    booker_name: str
    booker_email: str
    start_time: str
    end_time: str


class Booking(BaseModel):
    """Persisted booking record."""
    id: str
    listing_id: str
    owner_id: str
    owner_email: str
    booker_id: str
    booker_name: str
    booker_email: str
    location: str
    date: str
    start_time: str  # HH:MM, stored exactly as validated
    end_time: str
    rate: Decimal
    total_cost: Decimal
    status: BookingStatus = BookingStatus.PENDING
    created_at: datetime
    updated_at: Optional[datetime] = None

    @property
    def span(self) -> Optional[TimeSpan]:
        return parse_time_span(self.start_time, self.end_time)
