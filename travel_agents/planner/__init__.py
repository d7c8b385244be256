"""
Planner agent.

Composes the day-by-day plan after the domain agents have joined:
    flights + hotels + transport + events + weather -> day plans
"""

from travel_agents.planner.agent import PlannerAgent

__all__ = ["PlannerAgent"]
