"""Hotel search agent."""

from typing import Any, Dict

from travel_agents.search.base import DomainAgent
from travel_agents.search.mock_data import fallback_hotels
from travel_agents.shared.agent import special_needs_text
from travel_agents.shared.contracts.trip_request import TripRequest


HOTEL_SCHEMA = """
{
    "recommended": {
        "name": "string",
        "price": "string",
        "notes": "string"
    },
    "options": [
        {
            "name": "string",
            "pricePerNight": "string",
            "totalPrice": "string",
            "location": "string",
            "rating": "string",
            "amenities": ["amenity1", "amenity2"],
            "pros": ["pro1", "pro2"],
            "cons": ["con1", "con2"],
            "bookingUrl": "string"
        }
    ],
    "summary": "string"
}
"""


class HotelAgent(DomainAgent):
    """Finds accommodation for the trip."""

    name = "hotel"
    expected_keys = ("recommended", "options")

    def build_prompt(self, request: TripRequest) -> str:
        nights = max(request.days, 1)
        return (
            f"You are a hotel search assistant. Given the trip: {request.trip_title}, "
            f"region={request.region}, tentativeDates='{request.tentative_dates_text()}', "
            f"nights={nights}, people={request.people}, budget={request.budget or 'not specified'}. "
            f"Find 3-{self.settings.max_options} hotel options with different price ranges "
            f"and locations, and pick one as 'recommended'. "
            f"Consider special needs: {special_needs_text(request)}. "
            f"If the user provided amendments: '{request.amendments_text()}' include them "
            f"when suggesting hotels. "
            f"Return ONLY valid JSON strictly matching this schema: \n{HOTEL_SCHEMA}\n"
            f"Do not add any commentary outside the JSON."
        )

    def fallback(self) -> Dict[str, Any]:
        return fallback_hotels()
