"""
Agents package for the travel itinerary service.

This package contains:
- shared/: Common infrastructure (model client, logging, contracts, parsing)
- search/: Flight, hotel, transport, event and weather agents
- clarification/: Clarifying-question agent
- planner/: Day-by-day planner agent
- mapping/: Reshaping of agent output into the itinerary contract
- graph/: Agent coordinator (dispatch -> plan -> map pipeline)
- validation/: Request validation, sanitization and injection screening
- api/: HTTP endpoints
"""

from travel_agents.graph import AgentCoordinator, create_coordinator_graph

__all__ = ["AgentCoordinator", "create_coordinator_graph"]
