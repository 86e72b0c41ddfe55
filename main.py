"""
ParkPulse entry point.

Runs a live parking search through the OpenAI API, or the offline console
demo for development.

The listing store is in-memory and starts empty, so a live search from the
command line only returns public and commercial (web) results. Marketplace
driveways appear once listings are created in the same process, as the
console demo does.

Usage:
    Live search:  python main.py search "covered parking near the stadium"
    Console mode: python main.py console [--scenario booking|conflict|listing-update]
"""

import logging
import sys

from parkpulse.config import settings

logger = logging.getLogger(__name__)


def _run_search(query: str) -> int:
    """Search the marketplace and the web for ``query`` (requires OPENAI_API_KEY)."""
    from parkpulse.tools.listings import list_listings
    from parkpulse.tools.search import NO_RESULTS_MESSAGE, find_parking_spots
    from parkpulse.tools.text_generation import OpenAITextGenerator

    if not settings.model.api_key:
        logger.error("OPENAI_API_KEY is not set; use 'console' for the offline demo")
        return 1

    listings = list_listings()
    if not listings:
        logger.info("No marketplace listings in this process; searching the web only")
    outcome = find_parking_spots(query, listings, OpenAITextGenerator())
    if not outcome.ok:
        print(outcome.error)
        return 1
    if outcome.results.is_empty:
        print(NO_RESULTS_MESSAGE)
        return 0
    for result in outcome.results.marketplace_results:
        print(f"[driveway] {result.address}: {result.details}")
    for result in outcome.results.web_results:
        website = f" ({result.website})" if result.website else ""
        print(f"[public]   {result.name}, {result.address}: {result.details}{website}")
    return 0


def _run_console_mode(argv: list[str]) -> int:
    """Start the offline console demo (no API keys required)."""
    from console_demo import main as console_main

    console_main(argv)
    return 0


if __name__ == "__main__":
    if len(sys.argv) > 2 and sys.argv[1] == "search":
        sys.exit(_run_search(" ".join(sys.argv[2:])))
    elif len(sys.argv) > 1 and sys.argv[1] == "console":
        sys.exit(_run_console_mode(sys.argv[2:]))
    else:
        print(__doc__)
        sys.exit(2)
