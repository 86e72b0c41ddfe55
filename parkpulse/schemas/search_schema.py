"""Structured parking search results returned by the language model."""

from typing import Optional

from pydantic import BaseModel, Field


class MarketplaceResult(BaseModel):
    """A private driveway from the marketplace that matches the query."""
    listing_id: str = Field(description="The unique ID of the listing from the marketplace data.")
    name: str = Field(description="Should be 'Private Driveway'.")
    address: str = Field(description="The full address of the parking spot.")
    details: str = Field(
        description=(
            "A summary of rate and availability, e.g. '$5.00/hr, available on "
            "2024-09-20 from 09:00 - 17:00'. Always 24-hour times and YYYY-MM-DD dates."
        )
    )


class WebResult(BaseModel):
    """A public or commercial parking option from general knowledge."""
    name: str = Field(description="The name of the parking garage or lot.")
    address: str = Field(description="The approximate address or cross-streets.")
    details: str = Field(description="A summary of typical rates or hours, if known.")
    website: Optional[str] = Field(
        default=None, description="The official website URL, if available."
    )


class ParkingResults(BaseModel):
    """Search results from both sources."""
    marketplace_results: list[MarketplaceResult] = Field(default_factory=list)
    web_results: list[WebResult] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.marketplace_results and not self.web_results
