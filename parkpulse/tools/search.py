"""
Parking search over marketplace listings and general web knowledge.

The language model sees every current listing (capped by configuration)
and answers with ``ParkingResults``. Marketplace results must reference a
listing that was actually supplied; anything else is dropped before the
results reach the renter.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from parkpulse.config import settings
from parkpulse.prompts.prompt_templates import build_search_prompt
from parkpulse.schemas.listing_schema import Listing
from parkpulse.schemas.search_schema import ParkingResults
from parkpulse.tools.text_generation import TextGenerationError, TextGenerator

logger = logging.getLogger(__name__)

SEARCH_ERROR_MESSAGE = (
    "I'm sorry, I encountered an error while searching for parking. Please try again."
)
NO_RESULTS_MESSAGE = (
    "I couldn't find any parking spots matching your request. "
    "Please try a different location."
)
LOCATION_REQUIRED_MESSAGE = "Please fill out at least one location field to search."


@dataclass
class SearchOutcome:
    """Either structured results or a user-facing error message."""
    results: Optional[ParkingResults] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _drop_unknown_listings(results: ParkingResults, listings: list[Listing]) -> ParkingResults:
    known = {listing.id for listing in listings}
    kept = [r for r in results.marketplace_results if r.listing_id in known]
    dropped = len(results.marketplace_results) - len(kept)
    if dropped:
        logger.warning("Dropped %d marketplace result(s) with unknown listing ids", dropped)
    return results.model_copy(update={"marketplace_results": kept})


def find_parking_spots(
    query: str,
    listings: list[Listing],
    generator: TextGenerator,
) -> SearchOutcome:
    """Search for parking matching ``query`` across both sources."""
    offered = listings[: settings.marketplace.max_search_listings]
    prompt = build_search_prompt(query, offered)
    try:
        results = generator.generate(prompt, ParkingResults)
    except TextGenerationError as exc:
        logger.error("Parking search failed: %s", exc)
        return SearchOutcome(error=SEARCH_ERROR_MESSAGE)

    results = _drop_unknown_listings(results, offered)
    logger.info(
        "Search returned %d marketplace and %d web result(s)",
        len(results.marketplace_results), len(results.web_results),
    )
    return SearchOutcome(results=results)


def build_location_query(
    city: str = "", state: str = "", zip_code: str = "", country: str = "USA"
) -> tuple[Optional[str], Optional[str]]:
    """Compose a search query from the location form.

    Returns ``(query, None)``, or ``(None, error_message)`` when city, state
    and ZIP are all blank.
    """
    city, state, zip_code, country = (
        (v or "").strip() for v in (city, state, zip_code, country)
    )
    if not (city or state or zip_code):
        return None, LOCATION_REQUIRED_MESSAGE
    return f"Find parking in {city}, {state} {zip_code}, {country}", None


def build_near_me_query(latitude: float, longitude: float) -> str:
    """Compose a search query from device coordinates."""
    return f"Find parking near me (latitude: {latitude:.4f}, longitude: {longitude:.4f})"
