"""
Coordinator graph construction.

Builds the graph that sequences the itinerary pipeline:

    dispatch (five domain agents, concurrently) -> plan -> map -> complete

Nodes are built as closures over the agents the coordinator owns, so one
compiled graph serves every request handled by that coordinator.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from langgraph.graph import StateGraph, START, END

from travel_agents.clarification.agent import QuestionAgent
from travel_agents.graph.config import CoordinatorConfig
from travel_agents.graph.fan_out import fan_out
from travel_agents.graph.router import route_mode
from travel_agents.graph.state import CoordinatorState
from travel_agents.mapping.mapper import map_to_booking, map_to_events, map_to_weather
from travel_agents.planner.agent import PlannerAgent
from travel_agents.search import (
    EventAgent,
    FlightAgent,
    HotelAgent,
    TransportAgent,
    WeatherAgent,
)
from travel_agents.shared.contracts.itinerary import Itinerary
from travel_agents.shared.llm.client import ModelClient
from travel_agents.shared.logging.config import log_state_transition


logger = logging.getLogger(__name__)


@dataclass
class CoordinatorAgents:
    """Every agent the coordinator drives."""

    flight: FlightAgent
    hotel: HotelAgent
    transport: TransportAgent
    event: EventAgent
    weather: WeatherAgent
    question: QuestionAgent
    planner: PlannerAgent

    @classmethod
    def from_config(cls, llm: ModelClient, config: CoordinatorConfig) -> "CoordinatorAgents":
        return cls(
            flight=FlightAgent(llm, config.flight),
            hotel=HotelAgent(llm, config.hotel),
            transport=TransportAgent(llm, config.transport),
            event=EventAgent(llm, config.event),
            weather=WeatherAgent(llm, config.weather),
            question=QuestionAgent(llm, config.question),
            planner=PlannerAgent(llm, config.planner),
        )


def _log_prefix(state: CoordinatorState, node: str) -> str:
    request_id = state.get("request_id", "unknown")
    return f"[request={request_id}] [graph=coordinator] [node={node}] "


def _make_dispatch_node(agents: CoordinatorAgents):
    async def dispatch(state: CoordinatorState) -> Dict[str, Any]:
        """
        Query the five domain agents concurrently and join their results.

        Any transport failure propagates out of the graph; agents absorb
        parse failures themselves.
        """
        _log = _log_prefix(state, "dispatch")
        request = state["request"]
        log_state_transition("dispatching", state, logger=logger)
        logger.info(
            f"{_log}Entering node | mode={state['mode']}, region={request.region}, "
            f"days={request.days}, people={request.people}"
        )

        results = await fan_out(
            {
                "flights": agents.flight.search(request),
                "hotels": agents.hotel.search(request),
                "transport": agents.transport.search(request),
                "events": agents.event.search(request),
                "weather": agents.weather.search(request),
            }
        )

        logger.info(f"{_log}All domain agents joined | results={sorted(results)}")
        return {
            **results,
            "stage": "joined",
            "messages": ["Domain agents joined: flights, hotels, transport, events, weather"],
        }

    return dispatch


def _make_plan_generate_node(agents: CoordinatorAgents):
    async def plan_generate(state: CoordinatorState) -> Dict[str, Any]:
        """Plan the trip from scratch using the joined domain results."""
        _log = _log_prefix(state, "plan_generate")
        request = state["request"]
        log_state_transition("planning", state, {"mode": "generate"}, logger=logger)
        logger.info(f"{_log}Entering node | days={request.days}")

        day_plans = await agents.planner.create_day_plans(
            request,
            flights=state.get("flights"),
            hotels=state.get("hotels"),
            transport=state.get("transport"),
            events=state.get("events"),
            weather=state.get("weather"),
        )

        logger.info(f"{_log}Planner returned {len(day_plans)} day(s)")
        return {
            "day_plans": day_plans,
            "stage": "planned",
            "messages": [f"Planned {len(day_plans)} day(s)"],
        }

    return plan_generate


def _make_plan_refine_node(agents: CoordinatorAgents):
    async def plan_refine(state: CoordinatorState) -> Dict[str, Any]:
        """Adjust the previous itinerary's day plans to the amendments."""
        _log = _log_prefix(state, "plan_refine")
        request = state["request"]
        previous = request.previous_itinerary.day_plans if request.previous_itinerary else []
        log_state_transition("planning", state, {"mode": "refine"}, logger=logger)
        logger.info(
            f"{_log}Entering node | previous_days={len(previous)}, "
            f"amendment_chars={len(request.amendments or '')}"
        )

        day_plans = await agents.planner.refine_day_plans(
            request, previous, request.amendments
        )

        logger.info(f"{_log}Planner returned {len(day_plans)} day(s)")
        return {
            "day_plans": day_plans,
            "stage": "planned",
            "messages": [f"Refined plan has {len(day_plans)} day(s)"],
        }

    return plan_refine


def _map_node(state: CoordinatorState) -> Dict[str, Any]:
    """
    Reshape the joined domain results into itinerary sub-documents.

    Mapping problems never abort the pipeline; they become parsing notes.
    """
    _log = _log_prefix(state, "map")
    log_state_transition("mapping", state, logger=logger)
    logger.info(f"{_log}Entering node")

    notes: List[str] = []
    updates: Dict[str, Any] = {"stage": "mapped"}

    # Each sub-document maps independently
    mappings = (
        (
            "bookings",
            "bookings",
            lambda: map_to_booking(
                state.get("flights"), state.get("transport"), state.get("hotels"), notes
            ),
        ),
        ("mapped_events", "events", lambda: map_to_events(state.get("events"), notes)),
        ("mapped_weather", "weather", lambda: map_to_weather(state.get("weather"), notes)),
    )
    for key, label, mapping in mappings:
        try:
            updates[key] = mapping()
        except Exception as e:
            logger.exception(f"{_log}Failed to map {label}: {e}")
            notes.append(f"{label}: {e}")

    if notes:
        logger.warning(f"{_log}Mapping produced {len(notes)} note(s)")

    updates["notes_parsing_errors"] = [f"Component mapping: {note}" for note in notes]
    return updates


def _complete_node(state: CoordinatorState) -> Dict[str, Any]:
    """
    Final node that assembles the itinerary.
    """
    _log = _log_prefix(state, "complete")
    request = state["request"]
    title = request.trip_title or "Untitled Trip"
    if state.get("mode") == "refine":
        summary = f"Refined itinerary for {title}"
    else:
        summary = f"Complete itinerary for {title}"

    itinerary = Itinerary(
        summary=summary,
        day_plans=state.get("day_plans") or [],
        bookings=state.get("bookings"),
        events=state.get("mapped_events") or [],
        weather=state.get("mapped_weather") or {},
        notes_parsing_errors=list(state.get("notes_parsing_errors") or []),
    )

    log_state_transition("done", state, logger=logger)
    logger.info(
        f"{_log}Pipeline complete | days={len(itinerary.day_plans)}, "
        f"events={len(itinerary.events)}, "
        f"bookings={'done' if itinerary.bookings else 'MISSING'}, "
        f"notes={len(itinerary.notes_parsing_errors)} -> END"
    )

    return {
        "itinerary": itinerary,
        "stage": "done",
        "messages": [summary],
    }


def create_coordinator_graph(agents: CoordinatorAgents):
    """
    Create and compile the coordinator graph.

    The graph structure is:
        START -> dispatch -> route_mode
          -> "plan_generate" -> map
          -> "plan_refine"   -> map
        map -> complete -> END

    Args:
        agents: Agents the graph nodes call

    Returns:
        Compiled LangGraph application ready for ``ainvoke``.
    """
    graph = StateGraph(CoordinatorState)

    # Add nodes
    graph.add_node("dispatch", _make_dispatch_node(agents))
    graph.add_node("plan_generate", _make_plan_generate_node(agents))
    graph.add_node("plan_refine", _make_plan_refine_node(agents))
    graph.add_node("map", _map_node)
    graph.add_node("complete", _complete_node)

    graph.add_edge(START, "dispatch")

    # Planning depends on the mode chosen for the request
    graph.add_conditional_edges(
        "dispatch",
        route_mode,
        {
            "plan_generate": "plan_generate",
            "plan_refine": "plan_refine",
        },
    )

    graph.add_edge("plan_generate", "map")
    graph.add_edge("plan_refine", "map")
    graph.add_edge("map", "complete")
    graph.add_edge("complete", END)

    return graph.compile()
