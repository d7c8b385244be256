"""
Fallback day plans for the planner agent.

Used when the planner response cannot be parsed, so an itinerary always
carries one plan per requested day.
"""

from typing import Any, Dict, List

from travel_agents.shared.contracts.itinerary import Activity, DayPlan


def _morning_activity(day: int) -> Dict[str, Any]:
    return {
        "title": f"Morning Activity {day}",
        "time": "09:00",
        "duration": "2h",
        "location": "City Center",
        "description": "Explore local attractions",
        "category": "Sightseeing",
        "cost": "Free",
        "bookingUrl": "https://example.com",
    }


def _afternoon_activity(day: int) -> Dict[str, Any]:
    return {
        "title": f"Afternoon Activity {day}",
        "time": "14:00",
        "duration": "3h",
        "location": "Historic District",
        "description": "Visit historical sites",
        "category": "Culture",
        "cost": "25 USD",
        "bookingUrl": "https://example.com",
    }


def generate_fallback_day_plans(days: int) -> List[DayPlan]:
    """
    Build a fixed two-activity schedule for each day of the trip.

    Args:
        days: Number of days to plan

    Returns:
        ``days`` day plans numbered from 1
    """
    plans = []
    for day in range(1, days + 1):
        activities = [
            Activity(title=raw["title"], time=raw["time"], details=raw)
            for raw in (_morning_activity(day), _afternoon_activity(day))
        ]
        plans.append(
            DayPlan(day_number=day, title=f"Day {day} Activities", activities=activities)
        )
    return plans
