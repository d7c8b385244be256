"""
Fallback documents for the domain agents.

Each builder returns a fresh, plausible document used when the model's
answer cannot be parsed. They are the only source of canned data, kept
apart from prompt construction so tests can assert on them directly.
"""

from typing import Any, Dict, List


def fallback_flights() -> Dict[str, Any]:
    """Fallback flight search result."""
    return {
        "recommended": {
            "carrier": "OpenAI Airlines",
            "price": "450 USD",
            "notes": "Fallback flight info",
        },
        "alternatives": [
            {"carrier": "Budget Air", "price": "320 USD", "notes": "Budget option"},
        ],
        "summary": "Found multiple flight options with different price points and schedules.",
    }


def fallback_hotels() -> Dict[str, Any]:
    """Fallback hotel search result."""
    luxury = {
        "name": "Luxury Resort",
        "pricePerNight": "250 USD",
        "totalPrice": "750 USD",
        "location": "City Center",
        "rating": "4.8/5",
        "amenities": ["Pool", "Spa", "Restaurant"],
        "pros": ["Great location", "Excellent amenities"],
        "cons": ["Higher price"],
        "bookingUrl": "https://example.com",
    }
    budget = {
        "name": "Budget Inn",
        "pricePerNight": "80 USD",
        "totalPrice": "240 USD",
        "location": "Near Airport",
        "rating": "3.5/5",
        "amenities": ["Free WiFi", "Breakfast"],
        "pros": ["Affordable", "Clean rooms"],
        "cons": ["Further from city"],
        "bookingUrl": "https://example.com",
    }
    return {
        "recommended": {"name": "Luxury Resort", "price": "250 USD per night"},
        "options": [luxury, budget],
        "summary": "Found multiple hotel options with different price ranges and locations.",
    }


def fallback_transport() -> Dict[str, Any]:
    """Fallback ground transport search result."""
    return {
        "recommended": {"provider": "RentACar Pro", "price": "135 USD"},
        "carRental": [
            {
                "provider": "RentACar Pro",
                "pricePerDay": "45 USD",
                "totalPrice": "135 USD",
                "carType": "Compact",
                "pros": ["Flexible", "Door-to-door"],
                "cons": ["Parking costs"],
                "bookingUrl": "https://example.com",
            }
        ],
        "trainOptions": [
            {
                "provider": "Rail Express",
                "price": "25 USD",
                "duration": "2h 15m",
                "route": "City to City",
                "pros": ["Scenic route", "Comfortable"],
                "cons": ["Fixed schedule"],
                "bookingUrl": "https://example.com",
            }
        ],
        "busOptions": [
            {
                "provider": "Budget Bus",
                "price": "15 USD",
                "duration": "3h 30m",
                "route": "City to City",
                "pros": ["Cheapest option"],
                "cons": ["Longer journey"],
                "bookingUrl": "https://example.com",
            }
        ],
        "summary": "Found multiple transport options with different price points and convenience levels.",
    }


def fallback_events() -> List[Dict[str, Any]]:
    """Fallback events and activities."""
    return [
        {
            "name": "City Museum Tour",
            "date": "2025-01-15",
            "time": "10:00",
            "location": "City Center",
            "description": "Guided tour of local history",
            "category": "Culture",
            "price": "15 USD",
            "duration": "2h",
            "bookingUrl": "https://example.com",
        },
        {
            "name": "Food Market Visit",
            "date": "2025-01-16",
            "time": "14:00",
            "location": "Old Town",
            "description": "Local food tasting experience",
            "category": "Food",
            "price": "25 USD",
            "duration": "3h",
            "bookingUrl": "https://example.com",
        },
        {
            "name": "Scenic Walking Tour",
            "date": "2025-01-17",
            "time": "09:00",
            "location": "Historic District",
            "description": "Explore historic landmarks",
            "category": "Sightseeing",
            "price": "Free",
            "duration": "2h",
            "bookingUrl": "https://example.com",
        },
    ]


def fallback_weather() -> Dict[str, Any]:
    """Fallback weather forecast."""
    return {
        "forecastSummary": "Generally pleasant weather with mild temperatures",
        "dailyForecast": [
            {
                "date": "2025-01-15",
                "high": "22°C",
                "low": "12°C",
                "condition": "Partly cloudy",
                "precipitation": "10%",
                "wind": "Light breeze",
                "recommendations": [
                    "Perfect for outdoor activities",
                    "Light jacket recommended",
                ],
            },
            {
                "date": "2025-01-16",
                "high": "25°C",
                "low": "15°C",
                "condition": "Sunny",
                "precipitation": "0%",
                "wind": "Calm",
                "recommendations": ["Great day for sightseeing", "Sunscreen recommended"],
            },
            {
                "date": "2025-01-17",
                "high": "20°C",
                "low": "10°C",
                "condition": "Overcast",
                "precipitation": "30%",
                "wind": "Moderate",
                "recommendations": ["Indoor activities preferred", "Umbrella suggested"],
            },
        ],
        "packingSuggestions": [
            "Light jacket",
            "Comfortable walking shoes",
            "Sunscreen",
            "Umbrella",
        ],
        "activityRecommendations": ["Outdoor sightseeing", "Museum visits", "Food tours"],
    }
