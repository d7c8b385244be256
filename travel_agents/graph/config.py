"""
Configuration for the agent coordinator.

Centralizes per-agent model, timeout and option-count settings so they can
be tuned without touching prompt or pipeline code.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from travel_agents.shared.agent import AgentSettings


@dataclass
class CoordinatorConfig:
    """
    Configuration for the coordinator and every agent it owns.
    """

    flight: AgentSettings = field(default_factory=AgentSettings)
    hotel: AgentSettings = field(default_factory=AgentSettings)
    transport: AgentSettings = field(default_factory=AgentSettings)
    event: AgentSettings = field(default_factory=lambda: AgentSettings(max_options=10))
    weather: AgentSettings = field(default_factory=AgentSettings)
    question: AgentSettings = field(default_factory=lambda: AgentSettings(max_options=4))
    planner: AgentSettings = field(default_factory=lambda: AgentSettings(timeout=60.0))


# Default configuration instance
DEFAULT_CONFIG = CoordinatorConfig()


def get_config(
    model: Optional[str] = None,
    timeout_scale: Optional[float] = None,
) -> CoordinatorConfig:
    """
    Create a configuration with optional overrides applied to every agent.

    Args:
        model: Override for the model used by all agents
        timeout_scale: Multiplier applied to every agent timeout

    Returns:
        CoordinatorConfig with the overrides applied
    """
    config = CoordinatorConfig()
    for name in ("flight", "hotel", "transport", "event", "weather", "question", "planner"):
        settings = getattr(config, name)
        updates = {}
        if model:
            updates["model"] = model
        if timeout_scale:
            updates["timeout"] = settings.timeout * timeout_scale
        if updates:
            setattr(config, name, replace(settings, **updates))
    return config
