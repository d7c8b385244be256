"""
Prompt templates for the planner agent.
"""

DAY_PLAN_SCHEMA = """
{
    "dayPlans": [
        {
            "dayNumber": 1,
            "title": "string",
            "activities": [
                {
                    "title": "string",
                    "time": "string",
                    "duration": "string",
                    "location": "string",
                    "description": "string",
                    "category": "string",
                    "cost": "string",
                    "bookingUrl": "string"
                }
            ]
        }
    ],
    "summary": "string"
}
"""


CREATE_PLAN_TEMPLATE = """You are an expert travel itinerary planner. Create a detailed day-by-day itinerary based on the following information:

Trip Details:
- Title: {title}
- Duration: {days} days
- Region: {region}
- People: {people}
- Interests: {interests}
- Special Needs: {special_needs}
- Weather Preference: {weather_preference}
- Notes: {notes}

Available Resources:
- Flights: {flights}
- Hotels: {hotels}
- Transport: {transport}
- Events/Activities: {events}
- Weather: {weather}

Create a realistic itinerary that:
1. Has exactly {days} entries in dayPlans, one per day, with appropriate pacing
2. Considers travel time between locations
3. Balances sightseeing, dining and relaxation
4. Accounts for special needs and interests
5. Includes practical details like check-in/out times
6. Considers weather conditions for outdoor activities
7. Provides realistic timing and durations

Return ONLY valid JSON matching this schema:
{schema}
"""


REFINE_PLAN_TEMPLATE = """You are an expert travel itinerary planner. Refine the following itinerary based on user feedback:

Previous Itinerary:
{previous_summary}

User Amendments/Feedback:
{amendments}

Trip Details:
- Title: {title}
- Duration: {days} days
- Region: {region}
- People: {people}
- Interests: {interests}

Adjust the itinerary according to the user's feedback while keeping a realistic and well-paced schedule.

Return ONLY valid JSON matching this schema:
{schema}
"""
