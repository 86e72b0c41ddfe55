"""
Notification email generation.

Each generator asks the language model for an email and falls back to a
fixed text when generation fails, so a notification is always produced.
Time and date values appear exactly as stored on the booking or listing.
"""

from parkpulse.config import settings
from parkpulse.prompts.prompt_templates import (
    build_booking_canceled_prompt,
    build_booking_confirmed_prompt,
    build_booking_denied_prompt,
    build_booking_request_prompt,
    build_listing_confirmation_prompt,
    build_listing_update_cancellation_prompt,
)
from parkpulse.schemas.booking_schema import Booking
from parkpulse.schemas.email_schema import BookerOwnerEmails, SingleEmail
from parkpulse.schemas.listing_schema import Listing
from parkpulse.tools.text_generation import TextGenerator, generate_or_fallback

_app_name = settings.marketplace.name


def generate_booking_request_email(generator: TextGenerator, booking: Booking) -> SingleEmail:
    """Email to the owner announcing a new pending request."""
    fallback = SingleEmail(
        subject=f"New Booking Request for {booking.location}",
        body=(
            f"You have a new booking request from {booking.booker_name} for your driveway "
            f"at {booking.location} on {booking.date} from {booking.start_time} to "
            f"{booking.end_time}. Please log in to your {_app_name} dashboard to respond."
        ),
    )
    return generate_or_fallback(
        generator, build_booking_request_prompt(booking), SingleEmail, fallback
    )


def generate_booking_denied_email(generator: TextGenerator, booking: Booking) -> SingleEmail:
    """Email to the booker saying the owner declined the request."""
    fallback = SingleEmail(
        subject=f"Update on your booking request for {booking.location}",
        body=(
            f"Unfortunately, your booking request for the driveway at {booking.location} "
            f"on {booking.date} could not be accepted by the owner. We encourage you to "
            f"search for other available spots on {_app_name}."
        ),
    )
    return generate_or_fallback(
        generator, build_booking_denied_prompt(booking), SingleEmail, fallback
    )


def generate_booking_confirmation_emails(
    generator: TextGenerator, booking: Booking
) -> BookerOwnerEmails:
    """Final confirmation emails for both parties."""
    fallback = BookerOwnerEmails(
        booker_subject=f"Booking Confirmed: {booking.location}",
        booker_email_content=(
            f"Your booking for {booking.location} on {booking.date} from "
            f"{booking.start_time} to {booking.end_time} is confirmed."
        ),
        owner_subject=f"Booking Confirmed: {booking.location}",
        owner_email_content=(
            f"Your driveway at {booking.location} has been booked by {booking.booker_name} "
            f"on {booking.date} from {booking.start_time} to {booking.end_time}."
        ),
    )
    return generate_or_fallback(
        generator, build_booking_confirmed_prompt(booking), BookerOwnerEmails, fallback
    )


def generate_listing_confirmation_email(
    generator: TextGenerator, listing: Listing, owner_name: str
) -> SingleEmail:
    """Congratulations email once a listing is live."""
    fallback = SingleEmail(
        subject="Your Driveway is Listed!",
        body=(
            f"Congratulations, {owner_name}! Your driveway at {listing.address} "
            f"is now live on {_app_name}."
        ),
    )
    return generate_or_fallback(
        generator, build_listing_confirmation_prompt(listing, owner_name), SingleEmail, fallback
    )


def generate_booking_cancellation_emails(
    generator: TextGenerator, booking: Booking
) -> BookerOwnerEmails:
    """Emails to both parties after the booker cancels."""
    fallback = BookerOwnerEmails(
        booker_subject=f"Booking Canceled: {booking.location}",
        booker_email_content=(
            f"Your booking for {booking.location} on {booking.date} "
            "has been successfully canceled."
        ),
        owner_subject=f"Booking Canceled by User: {booking.location}",
        owner_email_content=(
            f"The booking for your driveway at {booking.location} on {booking.date} from "
            f"{booking.start_time} to {booking.end_time} has been canceled by the user."
        ),
    )
    return generate_or_fallback(
        generator, build_booking_canceled_prompt(booking), BookerOwnerEmails, fallback
    )


def generate_listing_update_cancellation_email(
    generator: TextGenerator, booking: Booking
) -> SingleEmail:
    """Email to a booker whose booking no longer fits an updated listing."""
    fallback = SingleEmail(
        subject=f"Important Update on your booking for {booking.location}",
        body=(
            f"Unfortunately, your booking for the driveway at {booking.location} on "
            f"{booking.date} has been canceled because the owner updated their "
            "availability. We apologize for any inconvenience this may cause and "
            f"encourage you to search for other available spots on {_app_name}."
        ),
    )
    return generate_or_fallback(
        generator, build_listing_update_cancellation_prompt(booking), SingleEmail, fallback
    )
