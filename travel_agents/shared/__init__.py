"""
Shared infrastructure for all agents.

Modules:
- llm: Async OpenAI client with retry logic
- logging: Console and JSON logging configuration
- contracts: Request and itinerary documents
- schemas: Common base models
- parsing: JSON extraction from model responses
- errors: Exception types
"""

from travel_agents.shared.llm.client import ModelClient, get_model_client
from travel_agents.shared.logging.config import configure_logging, log_state_transition

__all__ = [
    "ModelClient",
    "get_model_client",
    "configure_logging",
    "log_state_transition",
]
