"""
FastAPI endpoints for itineraries.

Exposes the two coordinator operations: clarifying questions for a trip
request, and itinerary generation (or refinement when the request carries
a previous itinerary and amendments).
"""

import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from travel_agents.graph.coordinator import AgentCoordinator
from travel_agents.shared.contracts.itinerary import Itinerary
from travel_agents.shared.contracts.questions import QuestionResponse
from travel_agents.shared.contracts.trip_request import TripRequest
from travel_agents.shared.llm.client import get_model_client
from travel_agents.validation.validator import TripRequestValidator, ValidationResult


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/itineraries", tags=["itineraries"])

# Coordinator instance (shared across requests)
_coordinator: Optional[AgentCoordinator] = None


def get_coordinator() -> AgentCoordinator:
    """Get or create the shared coordinator."""
    global _coordinator
    if _coordinator is None:
        _coordinator = AgentCoordinator(get_model_client())
    return _coordinator


def get_validator() -> TripRequestValidator:
    return TripRequestValidator()


def _validated(
    request: TripRequest, validator: TripRequestValidator, _log: str
) -> TripRequest:
    result: ValidationResult = validator.validate(request)
    if not result.valid:
        logger.warning(f"{_log}Invalid trip request: {result.first_error}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"errors": result.errors, "warnings": result.warnings},
        )
    if result.warnings:
        logger.info(f"{_log}Validation warnings: {result.warnings}")
    return result.request


@router.post("/questions", response_model=QuestionResponse)
async def generate_questions(
    request: TripRequest,
    coordinator: AgentCoordinator = Depends(get_coordinator),
    validator: TripRequestValidator = Depends(get_validator),
) -> QuestionResponse:
    """Generate clarifying questions for a trip request."""
    _log = "[api=questions] "
    logger.info(f"{_log}Generating questions | trip={request.trip_title!r}")
    start_time = time.perf_counter()

    sanitized = _validated(request, validator, _log)

    try:
        response = await coordinator.generate_questions(sanitized)
    except Exception as e:
        logger.exception(f"{_log}Failed to generate questions: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate questions: {str(e)}",
        )

    duration_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"{_log}Generated {len(response.questions)} question(s) | duration={duration_ms:.0f}ms"
    )
    return response


@router.post("", response_model=Itinerary)
async def create_itinerary(
    request: TripRequest,
    coordinator: AgentCoordinator = Depends(get_coordinator),
    validator: TripRequestValidator = Depends(get_validator),
) -> Itinerary:
    """
    Generate an itinerary.

    When the request carries ``previousItinerary`` and non-blank
    ``amendments`` the previous plan is refined instead.
    """
    _log = "[api=itineraries] "
    logger.info(f"{_log}Creating itinerary | trip={request.trip_title!r}")
    start_time = time.perf_counter()

    sanitized = _validated(request, validator, _log)

    try:
        itinerary = await coordinator.generate_itinerary(sanitized)
    except Exception as e:
        logger.exception(f"{_log}Failed to create itinerary: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create itinerary: {str(e)}",
        )

    duration_ms = (time.perf_counter() - start_time) * 1000
    logger.info(
        f"{_log}Itinerary created | days={len(itinerary.day_plans)}, "
        f"notes={len(itinerary.notes_parsing_errors)}, duration={duration_ms:.0f}ms"
    )
    return itinerary
