"""Driveway listing data model."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from parkpulse.booking.time_window import TimeSpan, parse_time_span
from parkpulse.utils import format_location


class Listing(BaseModel):
    """A driveway advertised for one date within a daily time window."""
    id: str
    owner_id: str
    address: str
    city: str
    state: str
    zip_code: str
    country: str
    description: str = ""
    rate: Decimal  # per hour
    date: str  # YYYY-MM-DD
    start_time: str  # HH:MM
    end_time: str
    contact_email: str

    @property
    def location(self) -> str:
        return format_location(self.address, self.city, self.state, self.zip_code)

    @property
    def window(self) -> Optional[TimeSpan]:
        return parse_time_span(self.start_time, self.end_time)
