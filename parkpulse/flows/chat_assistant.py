"""
Chat assistant: conversational parking search with request-to-book.

Keeps the conversation as a list of ``ChatMessage``. Search results arrive
as a model message carrying ``ParkingResults``; validation problems and
booking outcomes are posted as system messages. A marketplace result can be
booked straight from the chat, which notifies the driveway owner.
"""

from typing import Optional

from parkpulse.config import settings
from parkpulse.logging_context import get_session_logger
from parkpulse.schemas.booking_schema import BookingRequest
from parkpulse.schemas.chat_schema import ChatMessage, ChatRole
from parkpulse.schemas.user_schema import User
from parkpulse.tools.bookings import BookingResult, request_booking
from parkpulse.tools.emails import generate_booking_request_email
from parkpulse.tools.listings import get_listing, list_listings
from parkpulse.tools.notifications import send_email
from parkpulse.tools.search import (
    NO_RESULTS_MESSAGE,
    build_location_query,
    build_near_me_query,
    find_parking_spots,
)
from parkpulse.tools.text_generation import TextGenerator

logger = get_session_logger(__name__)

LISTING_GONE_MESSAGE = (
    "Sorry, I couldn't find the details for that listing. It might no longer be available."
)


class ChatAssistant:
    """One user's conversation with the parking search assistant."""

    def __init__(self, user: User, generator: TextGenerator) -> None:
        self.user = user
        self._generator = generator
        self.messages: list[ChatMessage] = []

    def _post(self, role: ChatRole, content: str, **extra) -> ChatMessage:
        message = ChatMessage(role=role, content=content, **extra)
        self.messages.append(message)
        return message

    def add_system_message(self, content: str) -> ChatMessage:
        return self._post(ChatRole.SYSTEM, content)

    def search(self, query: str) -> Optional[ChatMessage]:
        """Run a free-text search. Returns the reply, or None for a blank query."""
        query = (query or "").strip()
        if not query:
            return None
        limit = settings.marketplace.max_query_length
        if len(query) > limit:
            return self.add_system_message(
                f"Please keep your request under {limit} characters."
            )

        self._post(ChatRole.USER, query)
        logger.info("Searching for %s: %r", self.user.id, query)
        outcome = find_parking_spots(query, list_listings(), self._generator)
        if not outcome.ok:
            return self.add_system_message(outcome.error)

        results = outcome.results
        if results.is_empty:
            content = NO_RESULTS_MESSAGE
        else:
            content = (
                f"Found {len(results.marketplace_results)} marketplace driveway(s) and "
                f"{len(results.web_results)} public or commercial option(s)."
            )
        return self._post(ChatRole.MODEL, content, results=results)

    def search_by_location(
        self, city: str = "", state: str = "", zip_code: str = "", country: str = "USA"
    ) -> Optional[ChatMessage]:
        query, error = build_location_query(city, state, zip_code, country)
        if error:
            return self.add_system_message(error)
        return self.search(query)

    def search_near_me(self, latitude: float, longitude: float) -> Optional[ChatMessage]:
        return self.search(build_near_me_query(latitude, longitude))

    def request_booking(self, listing_id: str, start_time: str, end_time: str) -> BookingResult:
        """Request a marketplace result from the chat and notify its owner."""
        if get_listing(listing_id) is None:
            self.add_system_message(LISTING_GONE_MESSAGE)
            return {"success": False, "reason": "listing_not_found", "message": LISTING_GONE_MESSAGE}

        request = BookingRequest(
            listing_id=listing_id,
            booker_id=self.user.id,
            booker_name=self.user.name,
            booker_email=self.user.email,
            start_time=start_time,
            end_time=end_time,
        )
        result = request_booking(**request.model_dump())
        self.add_system_message(result["message"])
        if not result["success"]:
            logger.debug("Chat booking rejected: %s", result["reason"])
            return result

        booking = result["booking"]
        email = generate_booking_request_email(self._generator, booking)
        send_email(booking.owner_email, email.subject, email.body)
        return result
