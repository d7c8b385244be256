"""HTTP endpoints."""

from travel_agents.api.itineraries import router as itineraries_router

__all__ = ["itineraries_router"]
