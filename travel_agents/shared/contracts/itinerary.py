"""
Itinerary output contract.

Defines the aggregated document the coordinator returns: day plans from
the planner plus bookings, events and weather reshaped by the mapper.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from travel_agents.shared.schemas.base import CamelModel


class Activity(CamelModel):
    """A single activity within a day."""

    title: Optional[str] = Field(default=None, description="Activity title")
    time: Optional[str] = Field(
        default=None, description="Start time (e.g., '09:00', 'Morning')"
    )
    details: Dict[str, Any] = Field(
        default_factory=dict,
        description=(
            "Raw activity document (duration, location, description, "
            "category, cost, bookingUrl)"
        ),
    )


class DayPlan(CamelModel):
    """A single day in the itinerary."""

    day_number: int = Field(default=0, description="Day number (1-indexed)")
    title: Optional[str] = Field(default=None, description="Day title or theme")
    activities: List[Activity] = Field(
        default_factory=list, description="Activities in the order returned by the model"
    )


class FlightBooking(CamelModel):
    """Typed view of the recommended flight."""

    carrier: Optional[str] = None
    price: Optional[str] = None
    notes: Optional[Dict[str, Any]] = None


class TransportBooking(CamelModel):
    """Typed view of the recommended ground transport option."""

    provider: Optional[str] = None
    price: Optional[str] = None
    notes: Optional[Dict[str, Any]] = None


class HotelBooking(CamelModel):
    """Typed view of the recommended hotel."""

    name: Optional[str] = None
    price: Optional[str] = None
    notes: Optional[Dict[str, Any]] = None


class Booking(CamelModel):
    """
    Booking data for the trip.

    Raw documents are kept exactly as the agents produced them (plus any
    ``notes_parsed`` siblings); typed fields are best-effort and may be absent.
    """

    flights: Dict[str, Any] = Field(default_factory=dict)
    transport: Dict[str, Any] = Field(default_factory=dict)
    hotels: Dict[str, Any] = Field(default_factory=dict)
    flights_typed: Optional[FlightBooking] = None
    transport_typed: Optional[TransportBooking] = None
    hotels_typed: Optional[HotelBooking] = None


class Itinerary(CamelModel):
    """
    Contract for the coordinator output.

    ``notes_parsing_errors`` collects non-fatal problems met while reshaping
    agent output; it only ever grows.
    """

    summary: str = Field(default="", description="Human readable summary")
    day_plans: List[DayPlan] = Field(
        default_factory=list, description="Day-by-day plan"
    )
    bookings: Optional[Booking] = Field(
        default=None, description="Raw and typed booking data"
    )
    events: List[Dict[str, Any]] = Field(
        default_factory=list, description="Events and activities found for the region"
    )
    weather: Dict[str, Any] = Field(
        default_factory=dict, description="Weather forecast document"
    )
    notes_parsing_errors: List[str] = Field(
        default_factory=list,
        description="Non-fatal errors met while mapping agent output",
    )
