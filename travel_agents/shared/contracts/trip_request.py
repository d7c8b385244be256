"""
Trip request contract.

The single request type accepted by both inbound operations. Every
optional input is an explicit field, so agents never need to probe the
request for attributes.
"""

from typing import List, Optional, Union

from pydantic import Field

from travel_agents.shared.contracts.itinerary import Itinerary
from travel_agents.shared.schemas.base import CamelModel


class SpecialNeeds(CamelModel):
    """Special-needs flags for the travel party."""

    kids: bool = False
    elderly: bool = False
    differently_abled: bool = False


class TripRequest(CamelModel):
    """
    User-supplied trip parameters.

    Ranges and lengths are enforced by ``TripRequestValidator``, which
    truncates or rejects with a reason instead of failing the body parse.
    """

    trip_title: Optional[str] = Field(default=None, description="Trip title")
    days: int = Field(default=1, description="Trip duration in days")
    region: Optional[str] = Field(default=None, description="Destination region")
    budget: Optional[str] = Field(default=None, description="Budget (e.g., '1500 USD')")
    people: int = Field(default=1, description="Number of travelers")
    special: SpecialNeeds = Field(default_factory=SpecialNeeds)
    weather_preference: Optional[str] = Field(
        default=None, description="any, warm, mild, cool, cold or rainy"
    )
    food_preferences: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)
    booking_preferences: List[str] = Field(
        default_factory=list, description="Subset of flight, train, car, bus"
    )
    tentative_dates: Optional[Union[str, List[str]]] = Field(
        default=None,
        description="Date range such as '2025-12-20 to 2025-12-27' or a list of dates",
    )
    notes: Optional[str] = None
    amendments: Optional[str] = Field(
        default=None,
        description="Free-text feedback such as 'more relaxing on day 3'",
    )
    previous_itinerary: Optional[Itinerary] = Field(
        default=None, description="Itinerary to refine, supplied by the caller"
    )

    def tentative_dates_text(self) -> str:
        """Tentative dates as a single string for prompts."""
        if self.tentative_dates is None:
            return ""
        if isinstance(self.tentative_dates, list):
            return ", ".join(self.tentative_dates)
        return self.tentative_dates

    def amendments_text(self) -> str:
        """Amendment text for prompts; empty when none was given."""
        return self.amendments or ""
