"""
Trip request validation.

Checks a trip request against business rules, screens its free text for
prompt injection and returns a sanitized copy. The caller's request is
never modified.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from travel_agents.shared.contracts.trip_request import TripRequest
from travel_agents.validation.injection import PromptInjectionDetector, RiskLevel
from travel_agents.validation.sanitizer import InputSanitizer


logger = logging.getLogger(__name__)


VALID_BOOKING_PREFERENCES = ("flight", "train", "car", "bus")
VALID_WEATHER_PREFERENCES = ("any", "warm", "mild", "cool", "cold", "rainy")

MAX_INTERESTS = 5

# "1500 USD", "€2000", "$2000", "2000 CAD", "2000"
_BUDGET_PATTERN = re.compile(r"^[€$]?\d+\s*(?:[A-Z]{3})?$|^\d+\s*[€$]?$")
# "2025-12-20 to 2025-12-27", "2025-12-20, 2025-12-27" or a single date
_DATE_RANGE_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}(?:\s*(?:to|,)\s*\d{4}-\d{2}-\d{2})?$"
)


@dataclass
class ValidationResult:
    """
    Outcome of validating a trip request.

    Attributes:
        valid: False when any error was found
        errors: Problems that reject the request
        warnings: Problems that were corrected or are only advisory
        request: Sanitized copy of the request, set when valid
    """

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    request: Optional[TripRequest] = None

    @property
    def first_error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None


class TripRequestValidator:
    """Validates and sanitizes trip requests before they reach the coordinator."""

    def __init__(
        self,
        sanitizer: Optional[InputSanitizer] = None,
        detector: Optional[PromptInjectionDetector] = None,
    ):
        self.sanitizer = sanitizer or InputSanitizer()
        self.detector = detector or PromptInjectionDetector()

    def _screen(
        self,
        label: str,
        text: Optional[str],
        errors: List[str],
        warnings: List[str],
    ) -> None:
        # Same policy for every free-text field
        if not text:
            return
        assessment = self.detector.assess(text)
        if assessment.level == RiskLevel.HIGH:
            errors.append(f"{label} contains suspicious content: {assessment.reason}")
        elif assessment.level != RiskLevel.NONE:
            warnings.append(
                f"{label} flagged as {assessment.level.value} risk: {assessment.reason}"
            )

    def _clean_text(
        self,
        label: str,
        value: Optional[str],
        sanitize,
        updates: Dict[str, Any],
        key: str,
        errors: List[str],
        warnings: List[str],
    ) -> None:
        if value is None:
            return
        cleaned = sanitize(value)
        if cleaned != value:
            warnings.append(f"{label} was sanitized")
            updates[key] = cleaned
        # Screened as submitted, so oversized or stripped content still counts
        self._screen(label, value, errors, warnings)

    def validate(self, request: Optional[TripRequest]) -> ValidationResult:
        """
        Validate a trip request.

        Args:
            request: The request to validate

        Returns:
            ValidationResult carrying a sanitized copy of the request when
            valid
        """
        if request is None:
            return ValidationResult(valid=False, errors=["Trip request cannot be null"])

        errors: List[str] = []
        warnings: List[str] = []
        updates: Dict[str, Any] = {}

        s = self.sanitizer
        self._clean_text(
            "Trip title", request.trip_title, s.sanitize_trip_title, updates, "trip_title",
            errors, warnings,
        )
        self._clean_text(
            "Region", request.region, s.sanitize_region, updates, "region", errors, warnings
        )
        self._clean_text(
            "Notes", request.notes, s.sanitize_notes, updates, "notes", errors, warnings
        )
        self._clean_text(
            "Amendments", request.amendments, s.sanitize_amendments, updates, "amendments",
            errors, warnings,
        )

        if request.days <= 0:
            errors.append("Number of days must be positive")
        elif request.days > 365:
            errors.append("Number of days cannot exceed 365")

        if request.people <= 0:
            errors.append("Number of people must be positive")
        elif request.people > 50:
            errors.append("Number of people cannot exceed 50")

        budget = request.budget
        if budget is not None:
            budget = s.sanitize_budget(budget)
            if budget != request.budget:
                warnings.append("Budget was sanitized")
                updates["budget"] = budget
        if budget:
            if not _BUDGET_PATTERN.match(budget):
                warnings.append(
                    "Budget format may be invalid. Expected format: '1500 USD' or '€2000'"
                )

        interests = s.sanitize_string_list(request.interests, 10, 50)
        if len(interests) > MAX_INTERESTS:
            warnings.append(f"Too many interests specified, using first {MAX_INTERESTS}")
            interests = interests[:MAX_INTERESTS]
        updates["interests"] = interests

        updates["food_preferences"] = s.sanitize_string_list(request.food_preferences, 10, 100)

        booking_preferences: List[str] = []
        for preference in request.booking_preferences:
            if preference in VALID_BOOKING_PREFERENCES and preference not in booking_preferences:
                booking_preferences.append(preference)
        updates["booking_preferences"] = booking_preferences

        dates = request.tentative_dates_text().strip()
        if dates and not _DATE_RANGE_PATTERN.match(dates):
            warnings.append(
                "Tentative dates format may be invalid. Expected: '2025-12-20 to 2025-12-27'"
            )

        if (
            request.weather_preference is not None
            and request.weather_preference not in VALID_WEATHER_PREFERENCES
        ):
            warnings.append("Invalid weather preference, using 'any'")
            updates["weather_preference"] = "any"

        region = updates.get("region", request.region)
        if not region or not region.strip():
            warnings.append("Region is recommended for better results")
        if not interests:
            warnings.append("Interests are recommended for personalized recommendations")

        if errors:
            logger.warning(
                f"[validator] Trip request rejected | errors={len(errors)}, "
                f"warnings={len(warnings)}, first_error={errors[0]!r}"
            )
            return ValidationResult(valid=False, errors=errors, warnings=warnings)

        logger.info(f"[validator] Trip request accepted | warnings={len(warnings)}")
        return ValidationResult(
            valid=True,
            warnings=warnings,
            request=request.model_copy(update=updates),
        )
