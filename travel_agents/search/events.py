"""Events and activities search agent."""

from typing import Any, Dict, List

from travel_agents.search.base import DomainAgent
from travel_agents.search.mock_data import fallback_events
from travel_agents.shared.agent import list_text, special_needs_text
from travel_agents.shared.contracts.trip_request import TripRequest
from travel_agents.shared.parsing import parse_json_object, require_list


EVENT_SCHEMA = """
{
    "events": [
        {
            "name": "string",
            "date": "string",
            "time": "string",
            "location": "string",
            "description": "string",
            "category": "string",
            "price": "string",
            "duration": "string",
            "bookingUrl": "string"
        }
    ],
    "summary": "string"
}
"""


class EventAgent(DomainAgent):
    """
    Finds events, attractions and experiences in the region.

    Unlike the other domain agents the result is a list of event documents.
    """

    name = "event"

    def build_prompt(self, request: TripRequest) -> str:
        return (
            f"You are an events and activities assistant. Given region {request.region}, "
            f"tentative dates '{request.tentative_dates_text()}', "
            f"interests: {list_text(request.interests, 'general')}, "
            f"food preferences: {list_text(request.food_preferences, 'none')}, "
            f"and user amendments '{request.amendments_text()}'. "
            f"Find 5-{self.settings.max_options} relevant events, activities, attractions, "
            f"or experiences that would be suitable for this trip. "
            f"Consider special needs: {special_needs_text(request)}. "
            f"Return ONLY a valid JSON object matching this schema: \n{EVENT_SCHEMA}\n"
            f"Do not add any commentary outside the JSON."
        )

    def parse(self, response: str) -> List[Dict[str, Any]]:
        data = parse_json_object(response)
        events = require_list(data, "events")
        return [event for event in events if isinstance(event, dict)]

    def fallback(self) -> List[Dict[str, Any]]:
        return fallback_events()
