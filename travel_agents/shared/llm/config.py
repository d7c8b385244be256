"""
Model provider configuration.

Values come from the environment (a ``.env`` file is loaded if present).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass
class LLMConfig:
    """
    Configuration for the OpenAI model client.

    Attributes:
        api_key: OpenAI API key
        model: Default model when an agent passes none
        base_url: Optional alternative API endpoint
        timeout: Request timeout in seconds
        connect_timeout: Connection timeout in seconds
        max_retries: Attempts per call (used by tenacity in llm/client.py)
        max_tokens: Completion token limit
        temperature: Sampling temperature
    """

    api_key: Optional[str] = None
    model: str = "gpt-4.1-mini"
    base_url: Optional[str] = None
    timeout: float = 60.0
    connect_timeout: float = 30.0
    max_retries: int = 3
    max_tokens: int = 2000
    temperature: float = 0.7

    @classmethod
    def from_env(cls) -> "LLMConfig":
        """Build a configuration from OPENAI_* environment variables."""
        defaults = cls()
        return cls(
            api_key=os.environ.get("OPENAI_API_KEY"),
            model=os.environ.get("OPENAI_MODEL", defaults.model),
            base_url=os.environ.get("OPENAI_BASE_URL") or None,
            timeout=float(os.environ.get("OPENAI_TIMEOUT", defaults.timeout)),
            connect_timeout=float(
                os.environ.get("OPENAI_CONNECT_TIMEOUT", defaults.connect_timeout)
            ),
            max_retries=int(os.environ.get("OPENAI_MAX_RETRIES", defaults.max_retries)),
            max_tokens=int(os.environ.get("OPENAI_MAX_TOKENS", defaults.max_tokens)),
            temperature=float(
                os.environ.get("OPENAI_TEMPERATURE", defaults.temperature)
            ),
        )
