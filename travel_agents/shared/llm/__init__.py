"""LLM client utilities."""

from travel_agents.shared.llm.client import ModelClient, OpenAIModelClient, get_model_client
from travel_agents.shared.llm.config import LLMConfig

__all__ = ["ModelClient", "OpenAIModelClient", "get_model_client", "LLMConfig"]
