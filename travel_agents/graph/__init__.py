"""
Agent coordinator graph.

Composes the agents into one pipeline:
    trip request -> domain agents (concurrently) -> planner -> mapper -> itinerary

The planning stage either creates a new plan or refines the previous
itinerary's plan, depending on the request.
"""

from travel_agents.graph.build import create_coordinator_graph
from travel_agents.graph.coordinator import AgentCoordinator
from travel_agents.graph.fan_out import fan_out
from travel_agents.graph.router import select_mode

__all__ = ["AgentCoordinator", "create_coordinator_graph", "fan_out", "select_mode"]
