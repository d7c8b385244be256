"""Weather forecast agent."""

from typing import Any, Dict

from travel_agents.search.base import DomainAgent
from travel_agents.search.mock_data import fallback_weather
from travel_agents.shared.contracts.trip_request import TripRequest


WEATHER_SCHEMA = """
{
    "forecastSummary": "string",
    "dailyForecast": [
        {
            "date": "string",
            "high": "string",
            "low": "string",
            "condition": "string",
            "precipitation": "string",
            "wind": "string",
            "recommendations": ["rec1", "rec2"]
        }
    ],
    "packingSuggestions": ["item1", "item2"],
    "activityRecommendations": ["activity1", "activity2"]
}
"""


class WeatherAgent(DomainAgent):
    """Forecasts weather for the trip and suggests what to pack."""

    name = "weather"
    expected_keys = ("forecastSummary", "dailyForecast")

    def build_prompt(self, request: TripRequest) -> str:
        return (
            f"You are a weather assistant. For region {request.region}, "
            f"tentativeDates='{request.tentative_dates_text()}', "
            f"user amendments '{request.amendments_text()}', "
            f"and weather preference '{request.weather_preference or 'any'}'. "
            f"Provide a detailed weather forecast and recommendations for the "
            f"{request.days}-day trip. "
            f"Consider the user's weather preference and suggest appropriate activities "
            f"and packing items. "
            f"Return ONLY valid JSON strictly matching this schema: \n{WEATHER_SCHEMA}\n"
            f"Do not add commentary outside the JSON."
        )

    def fallback(self) -> Dict[str, Any]:
        return fallback_weather()
