"""
Typed prompt template for the question agent.

The prompt inputs are a Pydantic model so missing request fields are
rendered consistently as "Not specified".
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from travel_agents.shared.contracts.trip_request import TripRequest


NOT_SPECIFIED = "Not specified"


QUESTION_SCHEMA = """
{
    "questions": [
        {
            "question": "string",
            "type": "destination|activity|pace|budget|preference",
            "options": ["option1", "option2"],
            "required": false
        }
    ],
    "context": "string"
}
"""


QUESTION_PROMPT_TEMPLATE = """You are a travel planning assistant. Analyze this trip request and generate 2-{max_questions} clarifying questions
that would help create a better itinerary. Focus on areas where the request is vague or could benefit
from more specificity.

Trip Request:
- Title: {title}
- Days: {days}
- Region: {region}
- Budget: {budget}
- People: {people}
- Weather Preference: {weather_preference}
- Interests: {interests}
- Special Needs: {special_needs}
- Notes: {notes}

Generate questions that help clarify:
1. Specific destinations within the region
2. Activity preferences and pace
3. Budget priorities
4. Must-see attractions or experiences

Return ONLY valid JSON matching this schema:
{schema}
"""


class QuestionPromptConfig(BaseModel):
    """Inputs for the clarifying-question prompt."""

    title: Optional[str] = None
    days: int
    region: Optional[str] = None
    budget: Optional[str] = None
    people: int
    weather_preference: Optional[str] = None
    interests: List[str] = Field(default_factory=list)
    special_needs: str
    notes: Optional[str] = None
    max_questions: int = Field(default=4, ge=2)

    @classmethod
    def from_request(
        cls, request: TripRequest, special_needs: str, max_questions: int
    ) -> "QuestionPromptConfig":
        return cls(
            title=request.trip_title,
            days=request.days,
            region=request.region,
            budget=request.budget,
            people=request.people,
            weather_preference=request.weather_preference,
            interests=request.interests,
            special_needs=special_needs,
            notes=request.notes,
            max_questions=max(max_questions, 2),
        )

    def format_prompt(self, template: str = QUESTION_PROMPT_TEMPLATE) -> str:
        """
        Format the template with this config's values.

        Returns:
            Formatted prompt string with all placeholders filled
        """
        return template.format(
            title=self.title or NOT_SPECIFIED,
            days=self.days,
            region=self.region or NOT_SPECIFIED,
            budget=self.budget or NOT_SPECIFIED,
            people=self.people,
            weather_preference=self.weather_preference or "Any",
            interests=", ".join(self.interests) if self.interests else NOT_SPECIFIED,
            special_needs=self.special_needs,
            notes=self.notes or "None",
            max_questions=self.max_questions,
            schema=QUESTION_SCHEMA,
        )
