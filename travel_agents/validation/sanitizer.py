"""
Text sanitization for user-supplied trip fields.

Strips markup, control characters and symbol floods, normalizes
whitespace and enforces per-field length limits before any text reaches
a prompt.
"""

import logging
import re
import unicodedata
from typing import Iterable, List, Optional


logger = logging.getLogger(__name__)


MAX_TRIP_TITLE_LENGTH = 200
MAX_REGION_LENGTH = 100
MAX_NOTES_LENGTH = 2000
MAX_AMENDMENTS_LENGTH = 1000
MAX_BUDGET_LENGTH = 50

# A run this long of symbol or unassigned characters is treated as noise
SYMBOL_RUN_LENGTH = 10

_SCRIPT_PATTERN = re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL)
_HTML_PATTERN = re.compile(r"<[^>]+>")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def _is_control(char: str) -> bool:
    return unicodedata.category(char) == "Cc" and char not in "\r\n\t"


def _is_noise(char: str) -> bool:
    # Anything that is not a letter, number, separator or punctuation
    return unicodedata.category(char)[0] not in ("L", "N", "Z", "P")


def _strip_symbol_runs(text: str) -> str:
    kept: List[str] = []
    run: List[str] = []
    for char in text:
        if _is_noise(char) and not char.isspace():
            run.append(char)
            continue
        if len(run) < SYMBOL_RUN_LENGTH:
            kept.extend(run)
        run = []
        kept.append(char)
    if len(run) < SYMBOL_RUN_LENGTH:
        kept.extend(run)
    return "".join(kept)


class InputSanitizer:
    """Cleans free text and string lists from trip requests."""

    def sanitize_text(self, text: Optional[str], max_length: int) -> str:
        """
        Sanitize a text input.

        Args:
            text: Raw input; ``None`` becomes an empty string
            max_length: Maximum length of the result

        Returns:
            Cleaned, whitespace-normalized text no longer than ``max_length``
        """
        if text is None:
            return ""

        sanitized = "".join(char for char in text if not _is_control(char))
        sanitized = _SCRIPT_PATTERN.sub("", sanitized)
        sanitized = _HTML_PATTERN.sub("", sanitized)

        stripped = _strip_symbol_runs(sanitized)
        if stripped != sanitized:
            logger.warning(
                f"[sanitizer] Removed symbol run(s) from input: {sanitized[:50]!r}"
            )
            sanitized = stripped

        sanitized = _WHITESPACE_PATTERN.sub(" ", sanitized).strip()

        if len(sanitized) > max_length:
            logger.warning(
                f"[sanitizer] Input truncated from {len(sanitized)} to {max_length} characters"
            )
            sanitized = sanitized[:max_length].strip()

        return sanitized

    def sanitize_trip_title(self, title: Optional[str]) -> str:
        return self.sanitize_text(title, MAX_TRIP_TITLE_LENGTH)

    def sanitize_region(self, region: Optional[str]) -> str:
        return self.sanitize_text(region, MAX_REGION_LENGTH)

    def sanitize_notes(self, notes: Optional[str]) -> str:
        return self.sanitize_text(notes, MAX_NOTES_LENGTH)

    def sanitize_amendments(self, amendments: Optional[str]) -> str:
        return self.sanitize_text(amendments, MAX_AMENDMENTS_LENGTH)

    def sanitize_budget(self, budget: Optional[str]) -> str:
        return self.sanitize_text(budget, MAX_BUDGET_LENGTH)

    def sanitize_string_list(
        self,
        items: Optional[Iterable[str]],
        max_items: int,
        max_item_length: int,
    ) -> List[str]:
        """
        Sanitize a list of short strings such as interests.

        Only the first ``max_items`` entries are considered; empty results
        and duplicates are dropped and the original order is kept.
        """
        if items is None:
            return []

        result: List[str] = []
        for item in list(items)[:max_items]:
            cleaned = self.sanitize_text(item, max_item_length)
            if cleaned and cleaned not in result:
                result.append(cleaned)
        return result
