"""
Routing logic for the coordinator graph.

Decides whether a request is a fresh generation or a refinement of a
previous itinerary, and routes the planning stage accordingly.
"""

import logging
from typing import Literal

from travel_agents.graph.state import CoordinatorState, Mode
from travel_agents.shared.contracts.trip_request import TripRequest


logger = logging.getLogger(__name__)


def select_mode(request: TripRequest) -> Mode:
    """
    Choose the pipeline mode for a request.

    Refinement needs both non-blank amendment text and a previous
    itinerary; anything else is a fresh generation.
    """
    has_amendments = bool(request.amendments and request.amendments.strip())
    if has_amendments and request.previous_itinerary is not None:
        return "refine"
    return "generate"


def route_mode(
    state: CoordinatorState,
) -> Literal["plan_generate", "plan_refine"]:
    """
    Pick the planning node after the domain agents have joined.

    Args:
        state: Current coordinator state

    Returns:
        Name of the planning node to execute
    """
    request_id = state.get("request_id", "unknown")
    mode = state.get("mode", "generate")
    _log = f"[request={request_id}] [graph=coordinator] [router=route_mode] "

    if mode == "refine":
        logger.info(f"{_log}Routing to 'plan_refine' | mode={mode}")
        return "plan_refine"

    logger.info(f"{_log}Routing to 'plan_generate' | mode={mode}")
    return "plan_generate"
