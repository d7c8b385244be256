"""
Clarifying-question agent.

Asks the model which details of a trip request are too vague and returns
typed questions for the client to show. Parse failures fall back to two
default questions; transport failures propagate.
"""

import logging
from typing import Any, List, Optional

from travel_agents.clarification.prompts import QuestionPromptConfig
from travel_agents.shared.agent import ModelBackedAgent, special_needs_text
from travel_agents.shared.contracts.questions import (
    QUESTION_TYPES,
    ClarifyingQuestion,
    QuestionResponse,
)
from travel_agents.shared.contracts.trip_request import TripRequest
from travel_agents.shared.errors import ParseError
from travel_agents.shared.parsing import parse_json_object, require_list


logger = logging.getLogger(__name__)


DEFAULT_CONTEXT = "Questions to help refine your travel preferences."
FALLBACK_CONTEXT = "Default questions to help refine your travel preferences."


def default_questions() -> QuestionResponse:
    """The questions returned when the model answer is unusable."""
    return QuestionResponse(
        questions=[
            ClarifyingQuestion(
                question="What specific cities or attractions are you most interested in visiting?",
                type="destination",
                required=True,
            ),
            ClarifyingQuestion(
                question="What pace do you prefer for your trip?",
                type="pace",
                options=["Relaxed", "Moderate", "Fast-paced"],
                required=True,
            ),
        ],
        context=FALLBACK_CONTEXT,
    )


def _to_question(raw: Any) -> Optional[ClarifyingQuestion]:
    if not isinstance(raw, dict):
        return None

    text = raw.get("question")
    if not isinstance(text, str) or not text.strip():
        return None

    # Unknown categories are kept as generic preferences
    question_type = raw.get("type")
    if question_type not in QUESTION_TYPES:
        question_type = "preference"

    options = raw.get("options")
    if isinstance(options, list):
        options = [str(option) for option in options if option is not None]
    else:
        options = None

    return ClarifyingQuestion(
        question=text.strip(),
        type=question_type,
        options=options,
        required=raw.get("required") is True,
    )


class QuestionAgent(ModelBackedAgent):
    """Generates clarifying questions for a trip request."""

    name = "question"

    def build_prompt(self, request: TripRequest) -> str:
        config = QuestionPromptConfig.from_request(
            request,
            special_needs=special_needs_text(request),
            max_questions=self.settings.max_options,
        )
        return config.format_prompt()

    def parse(self, response: str) -> QuestionResponse:
        """
        Parse a question response.

        Raises:
            ParseError: If no usable question is present
        """
        data = parse_json_object(response)
        raw_questions = require_list(data, "questions")

        questions: List[ClarifyingQuestion] = []
        for raw in raw_questions:
            try:
                question = _to_question(raw)
            except RecursionError as e:
                raise ParseError("Question options are nested too deeply") from e
            if question is not None:
                questions.append(question)

        if not questions:
            raise ParseError("Response contained no usable questions")

        context = data.get("context")
        if not isinstance(context, str) or not context.strip():
            context = DEFAULT_CONTEXT

        return QuestionResponse(
            questions=questions[: self.settings.max_options],
            context=context,
        )

    async def generate_questions(self, request: TripRequest) -> QuestionResponse:
        """
        Generate clarifying questions for the request.

        Returns:
            Parsed questions, or the default questions when the answer is
            unusable

        Raises:
            ModelClientError: If the model call fails or times out
        """
        _log = f"[agent={self.name}] "
        response = await self.ask(self.build_prompt(request))

        try:
            result = self.parse(response)
        except ParseError as e:
            logger.warning(f"{_log}Unusable model response, using default questions: {e}")
            return default_questions()

        logger.info(
            f"{_log}Questions generated | count={len(result.questions)}, "
            f"types={[q.type for q in result.questions]}"
        )
        return result
