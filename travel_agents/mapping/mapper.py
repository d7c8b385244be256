"""
Response mapper.

Reshapes the loosely-typed documents returned by the agents into the
itinerary contract. Every function here is pure and total: inputs are
never mutated and unusable input yields an empty result rather than an
exception. Problems worth surfacing are appended to an optional ``notes``
list which the coordinator folds into ``Itinerary.notes_parsing_errors``.
"""

import copy
import json
import logging
import math
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from travel_agents.shared.contracts.itinerary import (
    Activity,
    Booking,
    DayPlan,
    FlightBooking,
    HotelBooking,
    TransportBooking,
)


logger = logging.getLogger(__name__)


NOTES_KEY = "notes"
NOTES_PARSED_KEY = "notes_parsed"


def parse_embedded_notes(document: Any) -> Any:
    """
    Return a copy of ``document`` where JSON-looking ``notes`` strings gain
    a parsed ``notes_parsed`` sibling.

    A key matches when it equals ``notes`` ignoring case and its value is a
    string starting with ``{`` or ``[`` after leading whitespace. Nested
    dicts and lists are walked; strings that fail to parse are left alone.

    Args:
        document: Any JSON-compatible value

    Returns:
        A new value; the input is never mutated
    """
    if isinstance(document, dict):
        result: Dict[str, Any] = {}
        parsed_notes = None
        for key, value in document.items():
            result[key] = parse_embedded_notes(value)
            if isinstance(key, str) and key.lower() == NOTES_KEY:
                parsed = _parse_notes_string(value)
                if parsed is not None:
                    parsed_notes = parsed
        if parsed_notes is not None:
            result[NOTES_PARSED_KEY] = parsed_notes
        return result

    if isinstance(document, list):
        return [parse_embedded_notes(item) for item in document]

    return copy.deepcopy(document)


def _parse_notes_string(value: Any) -> Optional[Any]:
    if not isinstance(value, str):
        return None
    stripped = value.lstrip()
    if not stripped.startswith(("{", "[")):
        return None
    try:
        return json.loads(stripped)
    except (json.JSONDecodeError, RecursionError):
        return None


def _as_document(
    value: Any, label: str, notes: Optional[List[str]] = None
) -> Dict[str, Any]:
    if not isinstance(value, dict):
        return {}
    try:
        return parse_embedded_notes(value)
    except RecursionError:
        _annotate(notes, f"{label}: document nested too deeply, notes left unparsed")
        return dict(value)


def _stringify(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _typed_booking(
    label: str,
    document: Dict[str, Any],
    model_cls,
    name_field: str,
    notes: Optional[List[str]],
):
    """Build a typed sub-booking from ``document['recommended']`` when possible."""
    if "recommended" not in document:
        return None

    recommended = document["recommended"]
    if not isinstance(recommended, dict):
        _annotate(notes, f"{label}: 'recommended' is not an object")
        return None

    parsed_notes = recommended.get(NOTES_PARSED_KEY)
    try:
        return model_cls(
            **{
                name_field: _stringify(recommended.get(name_field)),
                "price": _stringify(recommended.get("price")),
                "notes": parsed_notes if isinstance(parsed_notes, dict) else None,
            }
        )
    except ValidationError as e:
        _annotate(notes, f"{label}: could not build typed booking ({e.error_count()} errors)")
        return None
    except RecursionError:
        _annotate(notes, f"{label}: 'recommended' is nested too deeply")
        return None


def _annotate(notes: Optional[List[str]], message: str) -> None:
    logger.warning(f"[mapper] {message}")
    if notes is not None:
        notes.append(message)


def map_to_booking(
    flights: Any,
    transport: Any,
    hotels: Any,
    notes: Optional[List[str]] = None,
) -> Booking:
    """
    Build the booking document from the flight, transport and hotel results.

    Raw documents are kept (with embedded notes parsed); typed views come
    from each document's ``recommended`` object when it is usable.

    Args:
        flights: Flight agent result
        transport: Transport agent result
        hotels: Hotel agent result
        notes: Optional list that receives human-readable mapping problems

    Returns:
        Booking with raw documents always set and typed fields best-effort
    """
    flights_doc = _as_document(flights, "flights", notes)
    transport_doc = _as_document(transport, "transport", notes)
    hotels_doc = _as_document(hotels, "hotels", notes)

    return Booking(
        flights=flights_doc,
        transport=transport_doc,
        hotels=hotels_doc,
        flights_typed=_typed_booking("flights", flights_doc, FlightBooking, "carrier", notes),
        transport_typed=_typed_booking(
            "transport", transport_doc, TransportBooking, "provider", notes
        ),
        hotels_typed=_typed_booking("hotels", hotels_doc, HotelBooking, "name", notes),
    )


def map_to_events(
    events: Any, notes: Optional[List[str]] = None
) -> List[Dict[str, Any]]:
    """Copy the event documents, skipping anything that is not an object."""
    if not isinstance(events, list):
        return []
    return [
        _as_document(event, f"events[{index}]", notes)
        for index, event in enumerate(events)
        if isinstance(event, dict)
    ]


def map_to_weather(weather: Any, notes: Optional[List[str]] = None) -> Dict[str, Any]:
    """Copy the weather document; anything but an object maps to ``{}``."""
    return _as_document(weather, "weather", notes)


def _coerce_day_number(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def _map_activity(raw: Dict[str, Any]) -> Activity:
    return Activity(
        title=_stringify(raw.get("title")),
        time=_stringify(raw.get("time")),
        details=copy.deepcopy(raw),
    )


def map_to_day_plans(raw: Any) -> List[DayPlan]:
    """
    Convert a raw ``dayPlans`` list into typed day plans.

    Non-list input maps to ``[]``. Items and activities that are not
    objects are skipped; activity order within a day is preserved.

    Args:
        raw: The ``dayPlans`` value from a planner response

    Returns:
        Day plans in the order given
    """
    if not isinstance(raw, list):
        return []

    day_plans = []
    for item in raw:
        if not isinstance(item, dict):
            continue

        activities = item.get("activities")
        if not isinstance(activities, list):
            activities = []

        day_plans.append(
            DayPlan(
                day_number=_coerce_day_number(item.get("dayNumber")),
                title=_stringify(item.get("title")),
                activities=[_map_activity(a) for a in activities if isinstance(a, dict)],
            )
        )
    return day_plans
