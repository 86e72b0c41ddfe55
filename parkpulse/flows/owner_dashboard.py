"""
Owner dashboard: list driveways and decide on incoming requests.

Every state change here is followed by the matching notification:
    create_listing   - listing confirmation to the owner
    update_listing   - cancellation notice to each displaced booker
    approve          - confirmation to booker and owner
    deny             - denial notice to the booker
"""

from typing import Any, Optional

from parkpulse.booking.conflicts import ConflictChecker
from parkpulse.logging_context import get_session_logger
from parkpulse.schemas.booking_schema import Booking
from parkpulse.schemas.listing_schema import Listing
from parkpulse.schemas.user_schema import User
from parkpulse.tools import listings as listing_store
from parkpulse.tools.bookings import (
    BookingResult,
    approve_booking,
    deny_booking,
    list_requests_for_owner,
)
from parkpulse.tools.emails import (
    generate_booking_confirmation_emails,
    generate_booking_denied_email,
    generate_listing_confirmation_email,
    generate_listing_update_cancellation_email,
)
from parkpulse.tools.listings import ListingResult
from parkpulse.tools.notifications import send_email
from parkpulse.tools.text_generation import TextGenerator

logger = get_session_logger(__name__)


class OwnerDashboard:
    """A driveway owner's listings and pending requests."""

    def __init__(
        self,
        user: User,
        generator: TextGenerator,
        conflict_checker: Optional[ConflictChecker] = None,
    ) -> None:
        self.user = user
        self._generator = generator
        self._conflict_checker = conflict_checker

    def my_listings(self) -> list[Listing]:
        return listing_store.list_listings(owner_id=self.user.id)

    def create_listing(self, **fields: Any) -> ListingResult:
        fields.setdefault("contact_email", self.user.email)
        result = listing_store.create_listing(self.user.id, **fields)
        if result["success"]:
            email = generate_listing_confirmation_email(
                self._generator, result["listing"], self.user.name
            )
            send_email(self.user.email, email.subject, email.body)
        return result

    def update_listing(self, listing_id: str, **changes: Any) -> ListingResult:
        result = listing_store.update_listing(listing_id, self.user.id, **changes)
        for booking in result.get("canceled_bookings", []):
            email = generate_listing_update_cancellation_email(self._generator, booking)
            send_email(booking.booker_email, email.subject, email.body)
        return result

    def pending_requests(self) -> list[Booking]:
        return list_requests_for_owner(self.user.id)

    def approve(self, booking_id: str) -> BookingResult:
        """Confirm a pending request; on success both parties get a confirmation."""
        result = approve_booking(booking_id, self.user.id, self._conflict_checker)
        if not result["success"]:
            logger.info("Approval of %s refused: %s", booking_id, result["reason"])
            return result

        booking = result["booking"]
        emails = generate_booking_confirmation_emails(self._generator, booking)
        send_email(booking.booker_email, emails.booker_subject, emails.booker_email_content)
        send_email(booking.owner_email, emails.owner_subject, emails.owner_email_content)
        return result

    def deny(self, booking_id: str) -> BookingResult:
        result = deny_booking(booking_id, self.user.id)
        if result["success"]:
            booking = result["booking"]
            email = generate_booking_denied_email(self._generator, booking)
            send_email(booking.booker_email, email.subject, email.body)
        return result
