"""
Agent coordinator.

Entry point for both inbound operations: runs the coordinator graph to
build (or refine) an itinerary, and delegates clarifying questions to the
question agent.
"""

import logging
import uuid
from typing import Optional

from travel_agents.graph.build import CoordinatorAgents, create_coordinator_graph
from travel_agents.graph.config import DEFAULT_CONFIG, CoordinatorConfig
from travel_agents.graph.router import select_mode
from travel_agents.shared.contracts.itinerary import Itinerary
from travel_agents.shared.contracts.questions import QuestionResponse
from travel_agents.shared.contracts.trip_request import TripRequest
from travel_agents.shared.errors import ItineraryGenerationError, ModelClientError
from travel_agents.shared.llm.client import ModelClient


logger = logging.getLogger(__name__)


class AgentCoordinator:
    """
    Coordinates the domain, planner and question agents.

    Holds no per-request state, so one instance can serve concurrent
    requests.
    """

    def __init__(self, llm: ModelClient, config: Optional[CoordinatorConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.agents = CoordinatorAgents.from_config(llm, self.config)
        self.graph = create_coordinator_graph(self.agents)

    async def generate_itinerary(self, request: TripRequest) -> Itinerary:
        """
        Generate a new itinerary, or refine the previous one.

        Refinement happens when the request carries both amendment text
        and a previous itinerary.

        Raises:
            ItineraryGenerationError: If a domain or planner model call fails
        """
        request_id = str(uuid.uuid4())
        mode = select_mode(request)
        _log = f"[request={request_id}] [graph=coordinator] [op=generate_itinerary] "

        logger.info(
            f"{_log}Pipeline starting | mode={mode}, region={request.region}, "
            f"days={request.days}, people={request.people}"
        )

        initial_state = {
            "request": request,
            "mode": mode,
            "flights": None,
            "hotels": None,
            "transport": None,
            "events": None,
            "weather": None,
            "day_plans": None,
            "bookings": None,
            "mapped_events": None,
            "mapped_weather": None,
            "itinerary": None,
            "stage": "idle",
            "notes_parsing_errors": [],
            "messages": [f"Pipeline started in {mode} mode"],
            "request_id": request_id,
        }

        try:
            final_state = await self.graph.ainvoke(initial_state)
        except ModelClientError as e:
            logger.error(f"{_log}Pipeline failed: {e}")
            verb = "refine" if mode == "refine" else "generate"
            raise ItineraryGenerationError(f"Failed to {verb} itinerary: {e}") from e

        itinerary = final_state["itinerary"]
        logger.info(
            f"{_log}Pipeline finished | days={len(itinerary.day_plans)}, "
            f"notes={len(itinerary.notes_parsing_errors)}, "
            f"messages={len(final_state.get('messages', []))}"
        )
        return itinerary

    async def generate_questions(self, request: TripRequest) -> QuestionResponse:
        """
        Generate clarifying questions for an under-specified request.

        Raises:
            ModelClientError: If the model call fails or times out
        """
        return await self.agents.question.generate_questions(request)
