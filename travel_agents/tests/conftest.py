"""
Shared test fixtures.

``FakeModelClient`` stands in for the OpenAI client: it returns a canned
response (optionally chosen by a substring of the prompt), can be told to
fail, and records every prompt it receives.
"""

import asyncio
import json
from typing import Dict, List, Optional, Tuple

import pytest

from travel_agents.shared.contracts.itinerary import Activity, DayPlan, Itinerary
from travel_agents.shared.contracts.trip_request import SpecialNeeds, TripRequest
from travel_agents.shared.errors import ModelClientError


class FakeModelClient:
    """In-memory model client for tests."""

    name = "fake"

    def __init__(
        self,
        response: str = "OK",
        routes: Optional[Dict[str, str]] = None,
        fail_on: Optional[str] = None,
        delay: float = 0.0,
    ):
        """
        Args:
            response: Reply for prompts no route matches
            routes: Prompt substring -> reply, checked in insertion order
            fail_on: Raise ModelClientError for prompts containing this
                substring ("" fails every prompt)
            delay: Seconds to sleep before replying
        """
        self.response = response
        self.routes = routes or {}
        self.fail_on = fail_on
        self.delay = delay
        self.calls: List[Tuple[str, Optional[str]]] = []

    async def prompt(self, text: str, model: Optional[str] = None) -> str:
        self.calls.append((text, model))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_on is not None and self.fail_on in text:
            raise ModelClientError("Model provider unreachable")
        for needle, reply in self.routes.items():
            if needle in text:
                return reply
        return self.response

    def prompts_containing(self, needle: str) -> List[str]:
        return [text for text, _ in self.calls if needle in text]


# Substrings that identify each agent's prompt
FLIGHT_PROMPT = "flight search assistant"
HOTEL_PROMPT = "hotel search assistant"
TRANSPORT_PROMPT = "transport search assistant"
EVENT_PROMPT = "events and activities assistant"
WEATHER_PROMPT = "weather assistant"
PLANNER_CREATE_PROMPT = "Create a detailed day-by-day itinerary"
PLANNER_REFINE_PROMPT = "Refine the following itinerary"
QUESTION_PROMPT = "clarifying questions"


def make_day_plans_json(days: int) -> str:
    return json.dumps(
        {
            "dayPlans": [
                {
                    "dayNumber": day,
                    "title": f"Day {day} in Kyoto",
                    "activities": [
                        {"title": f"Temple visit {day}", "time": "09:00", "location": "Higashiyama"},
                        {"title": f"Dinner {day}", "time": "19:00", "cost": "40 USD"},
                    ],
                }
                for day in range(1, days + 1)
            ],
            "summary": "A calm trip",
        }
    )


def make_trip_request(**overrides) -> TripRequest:
    """Create a typical trip request for testing."""
    fields = {
        "trip_title": "Kyoto Getaway",
        "days": 3,
        "region": "Kyoto, Japan",
        "budget": "1500 USD",
        "people": 2,
        "special": SpecialNeeds(kids=False, elderly=True),
        "weather_preference": "mild",
        "food_preferences": ["vegetarian"],
        "interests": ["temples", "gardens"],
        "booking_preferences": ["flight", "train"],
        "tentative_dates": "2025-04-01 to 2025-04-03",
        "notes": "Prefer quiet mornings",
    }
    fields.update(overrides)
    return TripRequest(**fields)


def make_previous_itinerary() -> Itinerary:
    return Itinerary(
        summary="Complete itinerary for Kyoto Getaway",
        day_plans=[
            DayPlan(
                day_number=1,
                title="Temples",
                activities=[Activity(title="Kinkaku-ji", time="09:00", details={})],
            ),
            DayPlan(day_number=2, title="Gardens", activities=[]),
        ],
    )


@pytest.fixture
def trip_request() -> TripRequest:
    return make_trip_request()


@pytest.fixture
def fake_llm() -> FakeModelClient:
    return FakeModelClient()
