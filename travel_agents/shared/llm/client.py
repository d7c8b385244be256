"""
Async OpenAI model client with retry logic.

Agents depend only on the ``ModelClient`` protocol: a prompt and a model
identifier in, completion text out. ``OpenAIModelClient`` is the production
implementation; retries of transient failures use tenacity and every
request carries connect/request timeouts.
"""

import logging
from typing import Optional, Protocol

import httpx
from openai import (
    APIConnectionError,
    APITimeoutError,
    AsyncOpenAI,
    InternalServerError,
    OpenAIError,
)
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from travel_agents.shared.errors import ModelClientError
from travel_agents.shared.llm.config import LLMConfig


logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful travel planning assistant. "
    "Always respond with valid JSON when requested."
)

_RETRYABLE_ERRORS = (APIConnectionError, APITimeoutError, InternalServerError)


class ModelClient(Protocol):
    """Anything that turns a prompt into model-generated text."""

    name: str

    async def prompt(self, text: str, model: Optional[str] = None) -> str:
        ...


class OpenAIModelClient:
    """
    Chat-completion client for the OpenAI API.

    Safe to share between concurrent requests: it holds configuration and
    the underlying ``AsyncOpenAI`` connection pool only.
    """

    name = "openai"

    def __init__(
        self,
        config: Optional[LLMConfig] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.config = config or LLMConfig.from_env()
        if client is None:
            if not self.config.api_key:
                raise ValueError(
                    "OPENAI_API_KEY environment variable is not set. "
                    "Please set it to your OpenAI API key."
                )
            client = AsyncOpenAI(
                api_key=self.config.api_key,
                base_url=self.config.base_url,
                timeout=httpx.Timeout(
                    self.config.timeout, connect=self.config.connect_timeout
                ),
                # tenacity owns retries
                max_retries=0,
            )
        self._client = client

    async def prompt(self, text: str, model: Optional[str] = None) -> str:
        """
        Send a prompt and return the completion text.

        Args:
            text: User prompt
            model: Model identifier; falls back to the configured model

        Returns:
            The assistant's response content, stripped

        Raises:
            ModelClientError: If the provider fails after all retry attempts
                or returns no content
        """
        model_to_use = model or self.config.model

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(max(self.config.max_retries, 1)),
                wait=wait_exponential(multiplier=1, min=2, max=10),
                retry=retry_if_exception_type(_RETRYABLE_ERRORS),
                reraise=True,
            ):
                with attempt:
                    response = await self._client.chat.completions.create(
                        model=model_to_use,
                        messages=[
                            {"role": "system", "content": SYSTEM_PROMPT},
                            {"role": "user", "content": text},
                        ],
                        temperature=self.config.temperature,
                        max_tokens=self.config.max_tokens,
                        response_format={"type": "json_object"},
                    )
        except OpenAIError as e:
            logger.error(f"[client=openai] Completion failed | model={model_to_use}: {e}")
            raise ModelClientError(f"Failed to call OpenAI API: {e}") from e

        if not response.choices or response.choices[0].message.content is None:
            raise ModelClientError("No content in OpenAI response")

        content = response.choices[0].message.content.strip()
        logger.debug(
            f"[client=openai] Completion received | model={model_to_use}, "
            f"chars={len(content)}"
        )
        return content


# Module-level cache for the shared client
_client: Optional[OpenAIModelClient] = None


def get_model_client() -> OpenAIModelClient:
    """
    Returns a cached OpenAIModelClient built from the environment.

    The client is created once and reused for all subsequent requests.
    """
    global _client
    if _client is None:
        _client = OpenAIModelClient()
    return _client
