"""Reshaping of agent output into the itinerary contract."""

from travel_agents.mapping.mapper import (
    map_to_booking,
    map_to_day_plans,
    map_to_events,
    map_to_weather,
    parse_embedded_notes,
)

__all__ = [
    "map_to_booking",
    "map_to_day_plans",
    "map_to_events",
    "map_to_weather",
    "parse_embedded_notes",
]
