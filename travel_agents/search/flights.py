"""Flight search agent."""

from typing import Any, Dict

from travel_agents.search.base import DomainAgent
from travel_agents.search.mock_data import fallback_flights
from travel_agents.shared.contracts.trip_request import TripRequest


FLIGHT_SCHEMA = """
{
    "recommended": {
        "carrier": "string",
        "price": "string",
        "notes": "string"
    },
    "options": [
        {
            "carrier": "string",
            "price": "string",
            "departureTime": "string",
            "arrivalTime": "string",
            "duration": "string",
            "stops": "string",
            "pros": ["pro1", "pro2"],
            "cons": ["con1", "con2"],
            "bookingUrl": "string"
        }
    ],
    "summary": "string"
}
"""


class FlightAgent(DomainAgent):
    """Finds flight options for the trip."""

    name = "flight"
    expected_keys = ("recommended", "options", "alternatives")

    def build_prompt(self, request: TripRequest) -> str:
        return (
            f"You are a flight search assistant. Given the trip request: {request.trip_title}, "
            f"days={request.days}, region={request.region}, people={request.people}. "
            f"Tentative dates: '{request.tentative_dates_text()}'. "
            f"Find 3-{self.settings.max_options} flight options with different price points "
            f"and convenience levels, and pick one as 'recommended'. "
            f"Booking preferences: {', '.join(request.booking_preferences) or 'none'}. "
            f"If the user provided amendments: '{request.amendments_text()}' include them "
            f"when suggesting flights. "
            f"Return ONLY valid JSON strictly matching this schema: \n{FLIGHT_SCHEMA}\n"
            f"Do not add any extra commentary outside the JSON."
        )

    def fallback(self) -> Dict[str, Any]:
        return fallback_flights()
