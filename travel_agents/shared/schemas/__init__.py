"""Common base models."""

from travel_agents.shared.schemas.base import CamelModel

__all__ = ["CamelModel"]
