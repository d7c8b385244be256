"""
Planner agent.

Turns the joined domain results into a day-by-day plan, or adjusts a
previous plan to user amendments. Unusable model output never fails the
caller: creation falls back to a fixed schedule and refinement falls back
to the previous plan.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from travel_agents.mapping.mapper import map_to_day_plans
from travel_agents.planner.mock_data import generate_fallback_day_plans
from travel_agents.planner.prompts import (
    CREATE_PLAN_TEMPLATE,
    DAY_PLAN_SCHEMA,
    REFINE_PLAN_TEMPLATE,
)
from travel_agents.shared.agent import ModelBackedAgent, list_text, special_needs_text
from travel_agents.shared.contracts.itinerary import DayPlan
from travel_agents.shared.contracts.trip_request import TripRequest
from travel_agents.shared.errors import ParseError
from travel_agents.shared.parsing import parse_json_object, require_list


logger = logging.getLogger(__name__)


def _serialize(document: Any) -> str:
    if document is None:
        return "None"
    return json.dumps(document, ensure_ascii=False, default=str)


def summarize_day_plans(day_plans: List[DayPlan]) -> str:
    """Render a plan as ``Day N: title; ...`` for the refinement prompt."""
    if not day_plans:
        return "No previous itinerary"
    return "; ".join(f"Day {plan.day_number}: {plan.title}" for plan in day_plans)


class PlannerAgent(ModelBackedAgent):
    """Builds and refines day plans."""

    name = "planner"

    def parse(self, response: str) -> List[DayPlan]:
        """
        Parse a planner response into day plans.

        Raises:
            ParseError: If the response has no ``dayPlans`` list or is
                nested too deeply to reshape
        """
        data = parse_json_object(response)
        raw_plans = require_list(data, "dayPlans")
        try:
            return map_to_day_plans(raw_plans)
        except RecursionError as e:
            raise ParseError("Day plans are nested too deeply") from e

    def build_create_prompt(
        self,
        request: TripRequest,
        flights: Any,
        hotels: Any,
        transport: Any,
        events: Any,
        weather: Any,
    ) -> str:
        return CREATE_PLAN_TEMPLATE.format(
            title=request.trip_title or "Travel Trip",
            days=request.days,
            region=request.region or "Unknown",
            people=request.people,
            interests=list_text(request.interests, "General"),
            special_needs=special_needs_text(request),
            weather_preference=request.weather_preference or "Any",
            notes=request.notes or "None",
            flights=_serialize(flights),
            hotels=_serialize(hotels),
            transport=_serialize(transport),
            events=_serialize(events),
            weather=_serialize(weather),
            schema=DAY_PLAN_SCHEMA,
        )

    def build_refine_prompt(
        self,
        request: TripRequest,
        previous_day_plans: List[DayPlan],
        amendments: Optional[str],
    ) -> str:
        return REFINE_PLAN_TEMPLATE.format(
            previous_summary=summarize_day_plans(previous_day_plans),
            amendments=amendments or "No specific feedback",
            title=request.trip_title or "Travel Trip",
            days=request.days,
            region=request.region or "Unknown",
            people=request.people,
            interests=list_text(request.interests, "General"),
            schema=DAY_PLAN_SCHEMA,
        )

    async def create_day_plans(
        self,
        request: TripRequest,
        flights: Dict[str, Any],
        hotels: Dict[str, Any],
        transport: Dict[str, Any],
        events: List[Dict[str, Any]],
        weather: Dict[str, Any],
    ) -> List[DayPlan]:
        """
        Plan the trip day by day from the joined domain results.

        Returns:
            Parsed day plans, or the fallback schedule of ``request.days``
            days when the response cannot be parsed

        Raises:
            ModelClientError: If the model call fails or times out
        """
        _log = f"[agent={self.name}] [op=create] "
        prompt = self.build_create_prompt(request, flights, hotels, transport, events, weather)
        response = await self.ask(prompt)

        try:
            day_plans = self.parse(response)
        except ParseError as e:
            logger.warning(f"{_log}Unusable planner response, using fallback schedule: {e}")
            return generate_fallback_day_plans(request.days)

        if len(day_plans) != request.days:
            logger.warning(
                f"{_log}Planner returned {len(day_plans)} days, expected {request.days}"
            )
        logger.info(
            f"{_log}Planning complete | days={len(day_plans)}, "
            f"activities={sum(len(d.activities) for d in day_plans)}"
        )
        return day_plans

    async def refine_day_plans(
        self,
        request: TripRequest,
        previous_day_plans: List[DayPlan],
        amendments: Optional[str],
    ) -> List[DayPlan]:
        """
        Adjust a previous plan to the user's amendments.

        Returns:
            Refined day plans, or ``previous_day_plans`` unchanged when the
            response cannot be parsed

        Raises:
            ModelClientError: If the model call fails or times out
        """
        _log = f"[agent={self.name}] [op=refine] "
        prompt = self.build_refine_prompt(request, previous_day_plans, amendments)
        response = await self.ask(prompt)

        try:
            day_plans = self.parse(response)
        except ParseError as e:
            logger.warning(f"{_log}Unusable planner response, keeping previous plan: {e}")
            return previous_day_plans

        logger.info(
            f"{_log}Refinement complete | days={len(day_plans)}, "
            f"previous_days={len(previous_day_plans)}"
        )
        return day_plans
