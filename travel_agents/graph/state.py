"""
Coordinator state schema.

Defines the state that flows through the coordinator graph: the trip
request, the joined domain results, the day plans and the mapped
sub-documents that make up the final itinerary.
"""

from typing import Any, Annotated, Dict, List, Literal, Optional, TypedDict
import operator

from travel_agents.shared.contracts.itinerary import Booking, DayPlan, Itinerary
from travel_agents.shared.contracts.trip_request import TripRequest


Mode = Literal["generate", "refine"]


class CoordinatorState(TypedDict):
    """
    State schema for the coordinator graph.

    Domain slots are filled together by the dispatch node once every agent
    has answered; nothing downstream runs on a partial join.
    """

    # Input
    request: TripRequest
    mode: Mode

    # Joined domain results (raw agent documents)
    flights: Optional[Dict[str, Any]]
    hotels: Optional[Dict[str, Any]]
    transport: Optional[Dict[str, Any]]
    events: Optional[List[Dict[str, Any]]]
    weather: Optional[Dict[str, Any]]

    # Planning and mapping output
    day_plans: Optional[List[DayPlan]]
    bookings: Optional[Booking]
    mapped_events: Optional[List[Dict[str, Any]]]
    mapped_weather: Optional[Dict[str, Any]]
    itinerary: Optional[Itinerary]

    # Tracking
    stage: str
    notes_parsing_errors: Annotated[List[str], operator.add]
    messages: Annotated[List[str], operator.add]

    request_id: Optional[str]
