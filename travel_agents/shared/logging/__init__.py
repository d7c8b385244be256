"""Logging configuration and utilities."""

from travel_agents.shared.logging.config import (
    StructuredFormatter,
    log_state_transition,
    configure_logging,
)

__all__ = [
    "configure_logging",
    "log_state_transition",
    "StructuredFormatter",
]
