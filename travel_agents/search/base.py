"""
Shared contract for the domain search agents.

A domain agent builds a prompt from the trip request, asks the model for
JSON, and parses the answer. Parse failures are absorbed into the agent's
fallback document; transport failures propagate.
"""

import logging
from typing import Any, Tuple

from travel_agents.shared.agent import ModelBackedAgent
from travel_agents.shared.contracts.trip_request import TripRequest
from travel_agents.shared.errors import ParseError
from travel_agents.shared.parsing import parse_json_object


logger = logging.getLogger(__name__)


class DomainAgent(ModelBackedAgent):
    """
    Base class for the flight, hotel, transport, event and weather agents.

    Subclasses set ``name`` and ``expected_keys`` and implement
    ``build_prompt`` and ``fallback``; ``parse`` can be overridden when the
    result is not a plain object.
    """

    name = "domain"

    # At least one of these must be present at the top level of the answer
    expected_keys: Tuple[str, ...] = ()

    def build_prompt(self, request: TripRequest) -> str:
        raise NotImplementedError

    def fallback(self) -> Any:
        raise NotImplementedError

    def parse(self, response: str) -> Any:
        """
        Parse the model answer into the agent's document.

        Raises:
            ParseError: If the answer is not a JSON object carrying any
                expected key
        """
        data = parse_json_object(response)
        if self.expected_keys and not any(key in data for key in self.expected_keys):
            raise ParseError(
                f"Response has none of the expected keys {list(self.expected_keys)}"
            )
        return data

    async def search(self, request: TripRequest) -> Any:
        """
        Query the model for this agent's part of the trip.

        Returns:
            The parsed document, or the fallback document when the answer
            cannot be parsed

        Raises:
            ModelClientError: If the model call itself fails
        """
        _log = f"[agent={self.name}] "
        prompt = self.build_prompt(request)
        response = await self.ask(prompt)

        try:
            result = self.parse(response)
        except ParseError as e:
            logger.warning(f"{_log}Unusable model response, using fallback: {e}")
            return self.fallback()

        logger.info(f"{_log}Parsed model response | keys={_describe(result)}")
        return result


def _describe(result: Any) -> str:
    if isinstance(result, dict):
        return ",".join(sorted(result.keys()))
    if isinstance(result, list):
        return f"list[{len(result)}]"
    return type(result).__name__