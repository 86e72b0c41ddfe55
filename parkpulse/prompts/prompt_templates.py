"""Dynamic prompt construction for search and notification emails."""

import json

from parkpulse.booking.pricing import format_cost
from parkpulse.prompts.system_prompts import NOTIFICATION_ROLE, SEARCH_ASSISTANT_ROLE
from parkpulse.schemas.booking_schema import Booking
from parkpulse.schemas.listing_schema import Listing


def build_search_prompt(user_query: str, listings: list[Listing]) -> str:
    """Build the search prompt embedding the current marketplace listings."""
    listings_json = json.dumps(
        [
            {
                "id": listing.id,
                "location": f"{listing.location}, {listing.country}",
                "rate": str(listing.rate),
                "date": listing.date,
                "startTime": listing.start_time,
                "endTime": listing.end_time,
                "description": listing.description,
            }
            for listing in listings
        ],
        indent=2,
    )
    return (
        f"{SEARCH_ASSISTANT_ROLE}\n"
        f'The user\'s request is: "{user_query}".\n\n'
        "Here are the current marketplace listings:\n"
        f"{listings_json}\n\n"
        "Analyze the request and the marketplace data and return relevant parking "
        "options from BOTH sources."
    )


def _booking_lines(booking: Booking) -> list[str]:
    return [
        f"- Date: {booking.date}",
        f"- Time: {booking.start_time} to {booking.end_time}",
    ]


def build_booking_request_prompt(booking: Booking) -> str:
    lines = [
        NOTIFICATION_ROLE,
        f'A user named "{booking.booker_name}" has just requested to book the driveway '
        f'at "{booking.location}".',
        "",
        "The requested details are:",
        *_booking_lines(booking),
        f"- Booker: {booking.booker_name} ({booking.booker_email})",
        f"- Total: {format_cost(booking.total_cost)}",
        "",
        "Write an email to the driveway owner announcing this request. Clearly state the "
        "details and tell the owner to visit their dashboard to approve or deny it.",
    ]
    return "\n".join(lines)


def build_booking_denied_prompt(booking: Booking) -> str:
    lines = [
        NOTIFICATION_ROLE,
        f'A booking request from "{booking.booker_name}" for the driveway at '
        f'"{booking.location}" has been denied by the owner.',
        "",
        "The original request details were:",
        *_booking_lines(booking),
        "",
        f"Write a polite, empathetic email to {booking.booker_name} stating the request was "
        "not accepted. Do not speculate on the reason. Encourage them to search for other "
        "spots.",
    ]
    return "\n".join(lines)


def build_booking_confirmed_prompt(booking: Booking) -> str:
    lines = [
        NOTIFICATION_ROLE,
        f'A booking has just been CONFIRMED for the driveway at "{booking.location}" '
        f'by "{booking.booker_name}".',
        "",
        "The booking details are:",
        *_booking_lines(booking),
        f"- Rate: {format_cost(booking.rate)}/hour",
        f"- Total: {format_cost(booking.total_cost)}",
        "",
        "Write two emails. This is the FINAL confirmation.",
        f"1. For the booker ({booking.booker_name}): friendly, confirm all details, "
        "give clear instructions.",
        f"2. For the owner (contact email: {booking.owner_email}): professional, confirm "
        "the booking with all relevant details.",
    ]
    return "\n".join(lines)


def build_listing_confirmation_prompt(listing: Listing, owner_name: str) -> str:
    lines = [
        NOTIFICATION_ROLE,
        f'A user named "{owner_name}" has just listed their driveway.',
        "",
        "The listing details are:",
        f"- Location: {listing.location}",
        f"- Date: {listing.date}",
        f"- Time: {listing.start_time} to {listing.end_time}",
        f"- Rate: {format_cost(listing.rate)}/hour",
        "",
        "Write a friendly, congratulatory email confirming the listing is live and "
        "visible to renters.",
    ]
    return "\n".join(lines)


def build_booking_canceled_prompt(booking: Booking) -> str:
    lines = [
        NOTIFICATION_ROLE,
        f'A booking for the driveway at "{booking.location}" has been CANCELED by the '
        f'booker, "{booking.booker_name}".',
        "",
        "The original booking details were:",
        *_booking_lines(booking),
        "",
        "Write two emails.",
        f"1. For the booker ({booking.booker_name}): confirm their cancellation.",
        "2. For the owner: inform them the booking has been canceled by the renter.",
    ]
    return "\n".join(lines)


def build_listing_update_cancellation_prompt(booking: Booking) -> str:
    lines = [
        NOTIFICATION_ROLE,
        f'A booking for "{booking.location}" has been automatically canceled because the '
        "driveway owner updated the listing's availability.",
        "",
        "The canceled booking details were:",
        f"- Booker: {booking.booker_name}",
        *_booking_lines(booking),
        "",
        f"Write a polite, empathetic email to {booking.booker_name} explaining the booking "
        "was canceled due to a change made by the owner. Apologize for the inconvenience "
        "and encourage them to search for other spots.",
    ]
    return "\n".join(lines)
