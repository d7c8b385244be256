"""
Tests for the domain search agents.

Covers prompt construction, parsing, the fallback path for unusable
answers and propagation of transport failures.
"""

import asyncio
import json

import pytest

from travel_agents.search import (
    EventAgent,
    FlightAgent,
    HotelAgent,
    TransportAgent,
    WeatherAgent,
)
from travel_agents.search.mock_data import (
    fallback_events,
    fallback_flights,
    fallback_hotels,
    fallback_transport,
    fallback_weather,
)
from travel_agents.shared.agent import AgentSettings
from travel_agents.shared.errors import ModelClientError
from travel_agents.tests.conftest import FakeModelClient, make_trip_request


FLIGHT_JSON = json.dumps(
    {
        "recommended": {"carrier": "Sky Air", "price": "500 USD", "notes": "Direct"},
        "options": [{"carrier": "Sky Air", "price": "500 USD"}],
        "summary": "One good option",
    }
)


def _search(agent, request=None):
    return asyncio.run(agent.search(request or make_trip_request()))


# ============================================================================
# TestDomainAgentParsing
# ============================================================================


class TestDomainAgentParsing:
    """Tests for parsing model answers."""

    def test_flight_agent_parses_json(self):
        result = _search(FlightAgent(FakeModelClient(FLIGHT_JSON)))

        assert result["recommended"]["carrier"] == "Sky Air"
        assert result["options"][0]["price"] == "500 USD"

    def test_code_fenced_answer_is_accepted(self):
        llm = FakeModelClient(f"```json\n{FLIGHT_JSON}\n```")
        result = _search(FlightAgent(llm))

        assert result["recommended"]["carrier"] == "Sky Air"

    def test_hotel_agent_parses_json(self):
        answer = json.dumps({"recommended": {"name": "Ryokan", "price": "200 USD"}, "options": []})
        result = _search(HotelAgent(FakeModelClient(answer)))

        assert result["recommended"]["name"] == "Ryokan"

    def test_weather_agent_parses_json(self):
        answer = json.dumps({"forecastSummary": "Sunny", "dailyForecast": []})
        result = _search(WeatherAgent(FakeModelClient(answer)))

        assert result["forecastSummary"] == "Sunny"

    def test_event_agent_drops_non_object_items(self):
        answer = json.dumps({"events": [{"name": "Tea ceremony"}, "junk", 3, {"name": "Gion walk"}]})
        result = _search(EventAgent(FakeModelClient(answer)))

        assert [event["name"] for event in result] == ["Tea ceremony", "Gion walk"]


# ============================================================================
# TestDomainAgentFallback
# ============================================================================


class TestDomainAgentFallback:
    """Unusable answers should produce the agent's fallback document."""

    @pytest.mark.parametrize(
        "agent_cls, fallback",
        [
            (FlightAgent, fallback_flights),
            (HotelAgent, fallback_hotels),
            (TransportAgent, fallback_transport),
            (EventAgent, fallback_events),
            (WeatherAgent, fallback_weather),
        ],
    )
    def test_non_json_answer_returns_fallback(self, agent_cls, fallback):
        result = _search(agent_cls(FakeModelClient("Sorry, I cannot help with that.")))

        assert result == fallback()

    def test_wrong_shape_returns_fallback(self):
        result = _search(WeatherAgent(FakeModelClient(FLIGHT_JSON)))

        assert result == fallback_weather()

    def test_event_list_missing_returns_fallback(self):
        result = _search(EventAgent(FakeModelClient(json.dumps({"events": "none"}))))

        assert result == fallback_events()

    def test_top_level_array_returns_fallback(self):
        result = _search(HotelAgent(FakeModelClient('[{"name": "Ryokan"}]')))

        assert result == fallback_hotels()

    @pytest.mark.parametrize(
        "agent_cls, fallback",
        [(FlightAgent, fallback_flights), (EventAgent, fallback_events)],
    )
    def test_deeply_nested_answer_returns_fallback(self, agent_cls, fallback):
        result = _search(agent_cls(FakeModelClient("[" * 100000)))

        assert result == fallback()

    def test_fallback_is_a_fresh_copy(self):
        first = _search(FlightAgent(FakeModelClient("OK")))
        first["recommended"]["carrier"] = "Changed"

        second = _search(FlightAgent(FakeModelClient("OK")))
        assert second["recommended"]["carrier"] == "OpenAI Airlines"


# ============================================================================
# TestDomainAgentFailures
# ============================================================================


class TestDomainAgentFailures:
    """Transport failures must propagate."""

    def test_model_error_propagates(self):
        agent = FlightAgent(FakeModelClient(fail_on=""))

        with pytest.raises(ModelClientError):
            _search(agent)

    def test_timeout_becomes_model_error(self):
        llm = FakeModelClient(FLIGHT_JSON, delay=0.5)
        agent = HotelAgent(llm, AgentSettings(timeout=0.01))

        with pytest.raises(ModelClientError, match="timed out"):
            _search(agent)


# ============================================================================
# TestPrompts
# ============================================================================


class TestPrompts:
    """Prompts should embed the relevant request fields."""

    def test_flight_prompt_contents(self):
        llm = FakeModelClient(FLIGHT_JSON)
        request = make_trip_request(amendments="no red-eye flights")
        _search(FlightAgent(llm), request)

        prompt, model = llm.calls[0]
        assert "Kyoto, Japan" in prompt
        assert "2025-04-01 to 2025-04-03" in prompt
        assert "no red-eye flights" in prompt
        assert '"recommended"' in prompt
        assert model == "gpt-4.1-mini"

    def test_hotel_prompt_includes_special_needs(self):
        llm = FakeModelClient("OK")
        _search(HotelAgent(llm))

        assert "elderly=true" in llm.calls[0][0]
        assert "kids=false" in llm.calls[0][0]

    def test_event_prompt_includes_interests(self):
        llm = FakeModelClient("OK")
        _search(EventAgent(llm, AgentSettings(max_options=10)))

        prompt = llm.calls[0][0]
        assert "temples, gardens" in prompt
        assert "vegetarian" in prompt
        assert "5-10" in prompt

    def test_tentative_date_list_is_joined(self):
        llm = FakeModelClient("OK")
        request = make_trip_request(tentative_dates=["2025-04-01", "2025-04-03"])
        _search(WeatherAgent(llm), request)

        assert "2025-04-01, 2025-04-03" in llm.calls[0][0]

    def test_missing_amendments_render_empty(self):
        llm = FakeModelClient("OK")
        _search(FlightAgent(llm), make_trip_request(amendments=None))

        assert "amendments: ''" in llm.calls[0][0]

    def test_configured_model_is_used(self):
        llm = FakeModelClient("OK")
        _search(TransportAgent(llm, AgentSettings(model="gpt-test")))

        assert llm.calls[0][1] == "gpt-test"
