"""Ground transport search agent (car rental, trains, buses)."""

from typing import Any, Dict

from travel_agents.search.base import DomainAgent
from travel_agents.search.mock_data import fallback_transport
from travel_agents.shared.agent import special_needs_text
from travel_agents.shared.contracts.trip_request import TripRequest


TRANSPORT_SCHEMA = """
{
    "recommended": {
        "provider": "string",
        "price": "string",
        "notes": "string"
    },
    "carRental": [
        {
            "provider": "string",
            "pricePerDay": "string",
            "totalPrice": "string",
            "carType": "string",
            "pros": ["pro1", "pro2"],
            "cons": ["con1", "con2"],
            "bookingUrl": "string"
        }
    ],
    "trainOptions": [
        {
            "provider": "string",
            "price": "string",
            "duration": "string",
            "route": "string",
            "pros": ["pro1", "pro2"],
            "cons": ["con1", "con2"],
            "bookingUrl": "string"
        }
    ],
    "busOptions": [
        {
            "provider": "string",
            "price": "string",
            "duration": "string",
            "route": "string",
            "pros": ["pro1", "pro2"],
            "cons": ["con1", "con2"],
            "bookingUrl": "string"
        }
    ],
    "summary": "string"
}
"""


class TransportAgent(DomainAgent):
    """Finds ways of getting around at the destination."""

    name = "transport"
    expected_keys = ("recommended", "carRental", "trainOptions", "busOptions")

    def build_prompt(self, request: TripRequest) -> str:
        preferences = ", ".join(request.booking_preferences) or "none"
        return (
            f"You are a transport search assistant. Given trip to {request.region}, "
            f"tentativeDates='{request.tentative_dates_text()}', for {request.people} people "
            f"over {request.days} days and preferences {preferences}. "
            f"Find up to {self.settings.max_options} transport options including car rental, "
            f"trains, and buses, and pick one as 'recommended'. "
            f"Consider special needs: {special_needs_text(request)}. "
            f"If user amendments: '{request.amendments_text()}' include them in consideration. "
            f"Return ONLY valid JSON strictly matching this schema: \n{TRANSPORT_SCHEMA}\n"
            f"Do not add any extra commentary."
        )

    def fallback(self) -> Dict[str, Any]:
        return fallback_transport()
