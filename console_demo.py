"""
Offline console demo: runs marketplace scenarios without any API keys.

Uses the real listing and booking stores, the window validator, the cost
calculator and the notification outbox. Text generation is offline, so
every email uses its fallback text. No network calls.

Usage:
    python console_demo.py
    python console_demo.py --scenario conflict
    python console_demo.py --scenario listing-update
"""

import argparse

from parkpulse.config import settings
from parkpulse.booking.pricing import format_cost
from parkpulse.flows import MarketplaceDesk, OwnerDashboard
from parkpulse.logging_context import set_session_id
from parkpulse.schemas.listing_schema import Listing
from parkpulse.schemas.user_schema import User
from parkpulse.tools.bookings import BookingResult, list_bookings_for_listing
from parkpulse.tools.notifications import get_outbox
from parkpulse.tools.text_generation import OfflineTextGenerator

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

DEMO_LISTING = {
    "address": "12 Elm Street",
    "city": "Springfield",
    "state": "IL",
    "zip_code": "62701",
    "country": "USA",
    "description": "Covered spot, 5 minutes from the stadium",
    "rate": "5.00",
    "date": "2025-09-20",
    "start_time": "09:00",
    "end_time": "17:00",
}


class ConsoleSession:
    """Plays an owner and two renters against the in-memory marketplace."""

    SCENARIOS = ("booking", "conflict", "listing-update")
    MAX_INPUT_LENGTH = 500

    def __init__(self) -> None:
        generator = OfflineTextGenerator()
        self.owner = User(id="owner-1", name="Olivia Owner", email="olivia@example.com")
        self.renter = User(id="renter-1", name="Riley Renter", email="riley@example.com")
        self.other = User(id="renter-2", name="Sam Second", email="sam@example.com")
        self.dashboard = OwnerDashboard(self.owner, generator)
        self.desk = MarketplaceDesk(self.renter, generator)
        self.other_desk = MarketplaceDesk(self.other, generator)
        self._emails_shown = 0

    def say(self, who: str, text: str) -> None:
        print(f"{GREEN}{BOLD}[{who}]{RESET} {GREEN}{text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def _show_result(self, who: str, result: BookingResult) -> None:
        colour = GREEN if result["success"] else RED
        print(f"{colour}{BOLD}[{who}]{RESET} {colour}{result['message']}{RESET}")
        self._show_new_emails()

    def _show_new_emails(self) -> None:
        outbox = get_outbox()
        for email in outbox[self._emails_shown:]:
            self.system_log(f"email to {email['to']}: {email['subject']}")
        self._emails_shown = len(outbox)

    def _banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {settings.marketplace.name.upper()} - {title}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()

    def _publish_listing(self) -> Listing:
        result = self.dashboard.create_listing(**DEMO_LISTING)
        listing = result["listing"]
        self.say(self.owner.name, result["message"])
        self.system_log(
            f"{listing.id}: {listing.date} {listing.start_time}-{listing.end_time} "
            f"at {format_cost(listing.rate)}/hr"
        )
        self._show_new_emails()
        return listing

    def _quote(self, listing: Listing, start: str, end: str) -> None:
        quote = self.desk.quote(listing.id, start, end)
        validation = quote["validation"]
        colour = GREEN if validation.accepted else YELLOW
        print(f"\n{BLUE}[{self.renter.name}] {RESET}{start} - {end}")
        self.system_log(
            f"{colour}{validation.message}{RESET}{DIM} total {format_cost(quote['total_cost'])}"
        )

    # ------------------------------------------------------------------ #
    # Scenarios
    # ------------------------------------------------------------------ #

    def _scenario_booking(self) -> None:
        listing = self._publish_listing()
        for start, end in [("9:00", "17:30"), ("12:00", "11:00"), ("9:5", "10:00"),
                           ("09:00", "17:00")]:
            self._quote(listing, start, end)

        result = self.desk.book(listing.id, "09:00", "17:00")
        self._show_result(self.renter.name, result)
        self._show_result(self.owner.name, self.dashboard.approve(result["booking"].id))
        self._show_result(self.renter.name, self.desk.cancel(result["booking"].id))
        self._show_result(self.renter.name, self.desk.delete(result["booking"].id))

    def _scenario_conflict(self) -> None:
        listing = self._publish_listing()
        first = self.desk.book(listing.id, "10:00", "12:00")
        self._show_result(self.renter.name, first)
        second = self.other_desk.book(listing.id, "11:00", "13:00")
        self._show_result(self.other.name, second)
        adjacent = self.other_desk.book(listing.id, "12:00", "14:00")
        self._show_result(self.other.name, adjacent)

        self._show_result(self.owner.name, self.dashboard.approve(first["booking"].id))
        self._show_result(self.owner.name, self.dashboard.approve(second["booking"].id))
        self._show_result(self.owner.name, self.dashboard.deny(second["booking"].id))
        self._show_result(self.owner.name, self.dashboard.approve(adjacent["booking"].id))

    def _scenario_listing_update(self) -> None:
        listing = self._publish_listing()
        morning = self.desk.book(listing.id, "09:00", "11:00")
        afternoon = self.other_desk.book(listing.id, "14:00", "16:00")
        self._show_result(self.renter.name, morning)
        self._show_result(self.other.name, afternoon)
        self._show_result(self.owner.name, self.dashboard.approve(morning["booking"].id))

        result = self.dashboard.update_listing(listing.id, start_time="12:00")
        self.say(self.owner.name, result["message"])
        self._show_new_emails()
        for booking in list_bookings_for_listing(listing.id):
            self.system_log(
                f"{booking.id} {booking.start_time}-{booking.end_time}: {booking.status.value}"
            )

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        if scenario not in self.SCENARIOS:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        set_session_id(f"DEMO-{scenario}")
        self._banner(f"Scenario: {scenario}")
        getattr(self, f"_scenario_{scenario.replace('-', '_')}")()

        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  Scenario '{scenario}' complete.{RESET}")
        print(f"{DIM}  Emails sent: {len(get_outbox())}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    def run(self) -> None:
        """Interactive quote loop: type start and end times against a demo listing."""
        set_session_id("DEMO-interactive")
        self._banner("Console Demo")
        listing = self._publish_listing()
        print(f"{BOLD}  Enter 'HH:MM HH:MM' to quote, 'book HH:MM HH:MM' to request,"
              f" 'quit' to exit{RESET}")

        while True:
            user_input = input(f"\n{BLUE}[{self.renter.name}] {RESET}").strip()
            if not user_input:
                continue
            if user_input.lower() in ("quit", "exit", "q"):
                print(f"\n{DIM}Session ended.{RESET}")
                return
            if len(user_input) > self.MAX_INPUT_LENGTH:
                self.system_log("Input too long.")
                continue

            parts = user_input.split()
            if len(parts) == 3 and parts[0].lower() == "book":
                self._show_result(self.renter.name, self.desk.book(listing.id, parts[1], parts[2]))
            elif len(parts) == 2:
                self._quote(listing, parts[0], parts[1])
            else:
                self.system_log("Expected two times, e.g. 09:00 17:00")


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Offline marketplace console demo")
    parser.add_argument(
        "--scenario",
        choices=list(ConsoleSession.SCENARIOS),
        default=None,
        help="Auto-play a pre-scripted scenario instead of interactive mode",
    )
    args = parser.parse_args(argv)

    session = ConsoleSession()
    if args.scenario:
        session.run_scenario(args.scenario)
    else:
        session.run()


if __name__ == "__main__":
    main()
