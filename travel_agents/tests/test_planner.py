"""
Tests for the planner agent.
"""

import asyncio
import json
import logging

import pytest

from travel_agents.planner.agent import PlannerAgent, summarize_day_plans
from travel_agents.planner.mock_data import generate_fallback_day_plans
from travel_agents.search.mock_data import (
    fallback_events,
    fallback_flights,
    fallback_hotels,
    fallback_transport,
    fallback_weather,
)
from travel_agents.shared.errors import ModelClientError
from travel_agents.tests.conftest import (
    FakeModelClient,
    make_day_plans_json,
    make_previous_itinerary,
    make_trip_request,
)


def _create(llm, request=None):
    agent = PlannerAgent(llm)
    return asyncio.run(
        agent.create_day_plans(
            request or make_trip_request(),
            flights=fallback_flights(),
            hotels=fallback_hotels(),
            transport=fallback_transport(),
            events=fallback_events(),
            weather=fallback_weather(),
        )
    )


def _refine(llm, previous, amendments="More relaxing on day 2"):
    agent = PlannerAgent(llm)
    request = make_trip_request(days=2, amendments=amendments)
    return asyncio.run(agent.refine_day_plans(request, previous, amendments))


# ============================================================================
# TestCreateDayPlans
# ============================================================================


class TestCreateDayPlans:
    """Tests for create_day_plans."""

    @pytest.mark.parametrize("days", [1, 3, 7])
    def test_day_count_matches_request(self, days):
        plans = _create(FakeModelClient(make_day_plans_json(days)), make_trip_request(days=days))

        assert len(plans) == days
        assert [p.day_number for p in plans] == list(range(1, days + 1))

    def test_activity_order_preserved(self):
        plans = _create(FakeModelClient(make_day_plans_json(3)))

        assert [a.title for a in plans[0].activities] == ["Temple visit 1", "Dinner 1"]
        assert plans[0].activities[1].details["cost"] == "40 USD"

    def test_prompt_embeds_domain_results(self):
        llm = FakeModelClient(make_day_plans_json(3))
        _create(llm)

        prompt = llm.calls[0][0]
        assert "OpenAI Airlines" in prompt
        assert "Luxury Resort" in prompt
        assert "City Museum Tour" in prompt
        assert "exactly 3 entries" in prompt
        assert "elderly=true" in prompt

    def test_unparseable_answer_uses_fallback_schedule(self):
        plans = _create(FakeModelClient("OK"), make_trip_request(days=4))

        assert len(plans) == 4
        assert plans[0].title == "Day 1 Activities"
        assert plans[3].activities[0].title == "Morning Activity 4"
        assert plans[3].activities[1].time == "14:00"

    def test_missing_day_plans_key_uses_fallback(self):
        plans = _create(FakeModelClient(json.dumps({"summary": "nothing"})))

        assert plans == generate_fallback_day_plans(3)

    def test_day_count_mismatch_kept_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="travel_agents.planner.agent"):
            plans = _create(FakeModelClient(make_day_plans_json(2)), make_trip_request(days=3))

        assert [p.day_number for p in plans] == [1, 2]
        assert "Planner returned 2 days, expected 3" in caplog.text

    def test_deeply_nested_answer_uses_fallback_schedule(self):
        plans = _create(FakeModelClient("{\"dayPlans\": " + "[" * 100000))

        assert plans == generate_fallback_day_plans(3)

    def test_unreshapeable_day_plans_use_fallback(self, monkeypatch):
        def _too_deep(raw):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr("travel_agents.planner.agent.map_to_day_plans", _too_deep)
        plans = _create(FakeModelClient(make_day_plans_json(3)))

        assert plans == generate_fallback_day_plans(3)

    def test_model_error_propagates(self):
        with pytest.raises(ModelClientError):
            _create(FakeModelClient(fail_on=""))


# ============================================================================
# TestRefineDayPlans
# ============================================================================


class TestRefineDayPlans:
    """Tests for refine_day_plans."""

    def test_refined_plan_returned(self):
        previous = make_previous_itinerary().day_plans
        plans = _refine(FakeModelClient(make_day_plans_json(2)), previous)

        assert len(plans) == 2
        assert plans[1].title == "Day 2 in Kyoto"

    def test_prompt_summarises_previous_plan(self):
        llm = FakeModelClient(make_day_plans_json(2))
        _refine(llm, make_previous_itinerary().day_plans)

        prompt = llm.calls[0][0]
        assert "Day 1: Temples; Day 2: Gardens" in prompt
        assert "More relaxing on day 2" in prompt

    def test_unparseable_answer_keeps_previous_plan(self):
        previous = make_previous_itinerary().day_plans
        plans = _refine(FakeModelClient("OK"), previous)

        assert plans == previous

    def test_empty_previous_plan_summary(self):
        assert summarize_day_plans([]) == "No previous itinerary"


# ============================================================================
# TestFallbackSchedule
# ============================================================================


class TestFallbackSchedule:
    """Tests for generate_fallback_day_plans."""

    def test_two_activities_per_day(self):
        plans = generate_fallback_day_plans(2)

        assert all(len(p.activities) == 2 for p in plans)
        morning = plans[1].activities[0]
        assert morning.title == "Morning Activity 2"
        assert morning.time == "09:00"
        assert morning.details["bookingUrl"] == "https://example.com"
        assert plans[1].activities[1].details["cost"] == "25 USD"
