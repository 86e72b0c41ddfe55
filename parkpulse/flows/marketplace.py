"""Marketplace desk: browse listing cards, quote, book, and manage a renter's bookings."""

from typing import Optional

from parkpulse.logging_context import get_session_logger
from parkpulse.schemas.booking_schema import Booking, BookingRequest
from parkpulse.schemas.listing_schema import Listing
from parkpulse.schemas.user_schema import User
from parkpulse.tools.bookings import (
    BookingQuote,
    BookingResult,
    cancel_booking,
    delete_booking,
    list_bookings_for_booker,
    quote_booking,
    request_booking,
)
from parkpulse.tools.emails import (
    generate_booking_cancellation_emails,
    generate_booking_request_email,
)
from parkpulse.tools.listings import get_listing, list_listings
from parkpulse.tools.notifications import send_email
from parkpulse.tools.text_generation import TextGenerator

logger = get_session_logger(__name__)


class MarketplaceDesk:
    """A renter's view of the marketplace."""

    def __init__(self, user: User, generator: TextGenerator) -> None:
        self.user = user
        self._generator = generator

    def browse(self) -> list[Listing]:
        """Listings other users are offering."""
        return [listing for listing in list_listings() if listing.owner_id != self.user.id]

    def quote(self, listing_id: str, start_time: str, end_time: str) -> Optional[BookingQuote]:
        """Live validation message and total for the booking form."""
        listing = get_listing(listing_id)
        if listing is None:
            return None
        return quote_booking(listing, start_time, end_time)

    def book(self, listing_id: str, start_time: str, end_time: str) -> BookingResult:
        if get_listing(listing_id) is None:
            return {
                "success": False,
                "reason": "listing_not_found",
                "message": f"Listing {listing_id} not found.",
            }
        request = BookingRequest(
            listing_id=listing_id,
            booker_id=self.user.id,
            booker_name=self.user.name,
            booker_email=self.user.email,
            start_time=start_time,
            end_time=end_time,
        )
        result = request_booking(**request.model_dump())
        if result["success"]:
            booking = result["booking"]
            email = generate_booking_request_email(self._generator, booking)
            send_email(booking.owner_email, email.subject, email.body)
        return result

    def my_bookings(self) -> list[Booking]:
        return list_bookings_for_booker(self.user.id)

    def cancel(self, booking_id: str) -> BookingResult:
        """Cancel one of this renter's bookings and notify both parties."""
        result = cancel_booking(booking_id, self.user.id)
        if not result["success"]:
            logger.debug("Cancel rejected for %s: %s", booking_id, result["reason"])
            return result

        booking = result["booking"]
        emails = generate_booking_cancellation_emails(self._generator, booking)
        send_email(booking.booker_email, emails.booker_subject, emails.booker_email_content)
        send_email(booking.owner_email, emails.owner_subject, emails.owner_email_content)
        return result

    def delete(self, booking_id: str) -> BookingResult:
        return delete_booking(booking_id, self.user.id)
