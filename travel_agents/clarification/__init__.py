"""
Clarifying-question agent.

Runs outside the itinerary pipeline: clients ask for questions first,
fold the answers into the trip request, then request the itinerary.
"""

from travel_agents.clarification.agent import QuestionAgent, default_questions

__all__ = ["QuestionAgent", "default_questions"]
