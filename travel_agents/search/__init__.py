"""
Domain search agents.

Each agent turns part of a trip request into a model prompt and parses the
answer into a loosely-typed document, falling back to a canned document
when the answer is unusable.
"""

from travel_agents.search.base import DomainAgent
from travel_agents.search.events import EventAgent
from travel_agents.search.flights import FlightAgent
from travel_agents.search.hotels import HotelAgent
from travel_agents.search.transport import TransportAgent
from travel_agents.search.weather import WeatherAgent

__all__ = [
    "DomainAgent",
    "EventAgent",
    "FlightAgent",
    "HotelAgent",
    "TransportAgent",
    "WeatherAgent",
]
