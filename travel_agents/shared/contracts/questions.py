"""
Clarifying question contract.

Produced only by the question agent.
"""

from typing import List, Literal, Optional

from pydantic import Field

from travel_agents.shared.schemas.base import CamelModel


QuestionType = Literal["destination", "activity", "pace", "budget", "preference"]

QUESTION_TYPES = ("destination", "activity", "pace", "budget", "preference")


class ClarifyingQuestion(CamelModel):
    """A single clarifying question about the trip."""

    question: str = Field(description="The question text to display to the user")
    type: QuestionType = Field(
        default="preference", description="Category of the question"
    )
    options: Optional[List[str]] = Field(
        default=None, description="Fixed answer options, if any"
    )
    required: bool = Field(default=False)


class QuestionResponse(CamelModel):
    """Clarifying questions plus why they are being asked."""

    questions: List[ClarifyingQuestion] = Field(default_factory=list)
    context: str = Field(default="")
