"""Request validation, text sanitization and prompt-injection screening."""

from travel_agents.validation.injection import (
    InjectionAssessment,
    PromptInjectionDetector,
    RiskLevel,
)
from travel_agents.validation.sanitizer import InputSanitizer
from travel_agents.validation.validator import TripRequestValidator, ValidationResult

__all__ = [
    "InjectionAssessment",
    "InputSanitizer",
    "PromptInjectionDetector",
    "RiskLevel",
    "TripRequestValidator",
    "ValidationResult",
]
