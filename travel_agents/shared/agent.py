"""
Base class for agents backed by the model client.

Handles the outbound call (with the per-agent timeout and timing logs) so
agents only build prompts and parse answers.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Optional

from travel_agents.shared.contracts.trip_request import TripRequest
from travel_agents.shared.errors import ModelClientError
from travel_agents.shared.llm.client import ModelClient


logger = logging.getLogger(__name__)


@dataclass
class AgentSettings:
    """
    Settings for a single agent.

    Attributes:
        model: Model identifier passed to the model client
        timeout: Upper bound in seconds for one model call
        max_options: Maximum options (or questions) to ask the model for
    """

    model: str = "gpt-4.1-mini"
    timeout: float = 30.0
    max_options: int = 5


class ModelBackedAgent:
    """Common plumbing for every agent that prompts the model."""

    name = "agent"

    def __init__(self, llm: ModelClient, settings: Optional[AgentSettings] = None):
        self.llm = llm
        self.settings = settings or AgentSettings()

    async def ask(self, prompt: str) -> str:
        """
        Send a prompt to the model, bounded by the agent timeout.

        Raises:
            ModelClientError: On provider failure or timeout
        """
        _log = f"[agent={self.name}] "
        logger.info(
            f"{_log}Calling model | model={self.settings.model}, "
            f"prompt_chars={len(prompt)}, timeout={self.settings.timeout}s"
        )

        start_time = time.perf_counter()
        try:
            response = await asyncio.wait_for(
                self.llm.prompt(prompt, self.settings.model),
                timeout=self.settings.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"{_log}Model call timed out after {self.settings.timeout}s")
            raise ModelClientError(
                f"{self.name} agent timed out after {self.settings.timeout}s"
            ) from e
        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            f"{_log}Model responded | duration={duration_ms:.0f}ms, "
            f"chars={len(response) if response else 0}"
        )
        return response


def special_needs_text(request: TripRequest) -> str:
    """Render the special-needs flags the way every prompt states them."""
    special = request.special
    return (
        f"kids={str(special.kids).lower()}, "
        f"elderly={str(special.elderly).lower()}, "
        f"accessible={str(special.differently_abled).lower()}"
    )


def list_text(values, default: str) -> str:
    """Comma-join a list for a prompt, or return ``default`` when empty."""
    return ", ".join(values) if values else default
