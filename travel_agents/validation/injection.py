"""
Rule-based prompt-injection screening.

Every free-text field of a trip request is screened with the same rules
before it is embedded in a prompt.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


logger = logging.getLogger(__name__)


MAX_INPUT_LENGTH = 10000

INSTRUCTION_PHRASES = (
    "ignore previous instructions",
    "forget everything",
    "you are now a different assistant",
    "pretend to be",
    "act as if",
    "roleplay as",
)

ROLE_MARKERS = (
    "system:",
    "assistant:",
    "user:",
    "### system:",
    "### assistant:",
    "### user:",
)

CODE_PHRASES = (
    "eval(",
    "function(",
    "execute(",
    "run this code",
    "```javascript",
    "```python",
    "```bash",
)

JAILBREAK_PHRASES = (
    "jailbreak",
    "dan mode",
    "developer mode",
    "admin mode",
    "bypass safety",
    "bypass restrictions",
)

_PHRASE_GROUPS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("instruction override", INSTRUCTION_PHRASES),
    ("role marker", ROLE_MARKERS),
    ("code execution", CODE_PHRASES),
    ("jailbreak attempt", JAILBREAK_PHRASES),
)

_HEX_PATTERN = re.compile(r"(?:[0-9A-Fa-f]{2}){10,}")
_BASE64_PATTERN = re.compile(r"[A-Za-z0-9+/=]{20,}")
_REPEATED_CHAR_PATTERN = re.compile(r"(.)\1{10,}")
_REPEATED_WORD_PATTERN = re.compile(r"\b(\w+)\b(?:\W+\1\b){3,}", re.IGNORECASE)


class RiskLevel(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class InjectionAssessment:
    """
    Result of screening one input.

    Attributes:
        level: Assessed risk
        reason: Short description of the rule that fired, if any
    """

    level: RiskLevel
    reason: Optional[str] = None

    @property
    def is_threat(self) -> bool:
        return self.level == RiskLevel.HIGH


def _truncate_for_log(text: str, limit: int = 100) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


class PromptInjectionDetector:
    """Assesses free text for prompt-injection patterns."""

    def assess(self, text: Optional[str]) -> InjectionAssessment:
        """
        Assess the injection risk of ``text``.

        Returns:
            InjectionAssessment with the highest-priority rule that fired
        """
        if not text:
            return InjectionAssessment(RiskLevel.NONE)

        lowered = text.lower()
        for label, phrases in _PHRASE_GROUPS:
            for phrase in phrases:
                if phrase in lowered:
                    logger.warning(
                        f"[injection] {label} pattern in input: {_truncate_for_log(text)!r}"
                    )
                    return InjectionAssessment(RiskLevel.HIGH, f"{label} ('{phrase}')")

        if len(text) > MAX_INPUT_LENGTH:
            logger.warning(f"[injection] Extremely long input: {len(text)} characters")
            return InjectionAssessment(
                RiskLevel.LOW, f"input longer than {MAX_INPUT_LENGTH} characters"
            )

        if _REPEATED_WORD_PATTERN.search(text):
            logger.warning("[injection] Repeated word pattern in input")
            return InjectionAssessment(RiskLevel.HIGH, "repeated words")

        if _REPEATED_CHAR_PATTERN.search(text):
            logger.warning("[injection] Repeated character pattern in input")
            return InjectionAssessment(RiskLevel.HIGH, "repeated characters")

        if _HEX_PATTERN.search(text) or _BASE64_PATTERN.search(text):
            logger.warning("[injection] Encoded-looking content in input")
            return InjectionAssessment(RiskLevel.MEDIUM, "encoded content")

        return InjectionAssessment(RiskLevel.NONE)
