"""Documents exchanged between the coordinator, agents and clients."""

from travel_agents.shared.contracts.itinerary import (
    Activity,
    Booking,
    DayPlan,
    FlightBooking,
    HotelBooking,
    Itinerary,
    TransportBooking,
)
from travel_agents.shared.contracts.questions import ClarifyingQuestion, QuestionResponse
from travel_agents.shared.contracts.trip_request import SpecialNeeds, TripRequest

__all__ = [
    "Activity",
    "Booking",
    "DayPlan",
    "FlightBooking",
    "HotelBooking",
    "Itinerary",
    "TransportBooking",
    "ClarifyingQuestion",
    "QuestionResponse",
    "SpecialNeeds",
    "TripRequest",
]
