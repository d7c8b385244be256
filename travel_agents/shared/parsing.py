"""
JSON extraction from model responses.

Handles the formats models actually return: raw JSON, JSON wrapped in
markdown code blocks, and JSON preceded or followed by stray prose.
"""

import json
import re
from typing import Any, Dict, List, Optional

from travel_agents.shared.errors import ParseError


_CODE_BLOCK_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)```")

_decoder = json.JSONDecoder()


def extract_json_from_response(raw_response: Optional[str]) -> str:
    """
    Extract the JSON portion of an LLM response.

    Args:
        raw_response: Raw LLM response string

    Returns:
        The substring holding the first complete JSON object or array

    Raises:
        ParseError: If no JSON structure is found
    """
    if raw_response is None:
        raise ParseError("Empty response")

    content = raw_response.strip()

    match = _CODE_BLOCK_PATTERN.search(content)
    if match:
        content = match.group(1).strip()

    starts = [i for i in (content.find("{"), content.find("[")) if i != -1]
    if not starts:
        raise ParseError(f"No JSON structure in response: {content[:80]!r}")

    start = min(starts)
    try:
        _, end = _decoder.raw_decode(content, start)
    except (json.JSONDecodeError, RecursionError) as e:
        raise ParseError(f"Malformed JSON in response: {e}") from e

    return content[start:end]


def parse_json_response(raw_response: Optional[str]) -> Any:
    """
    Parse the JSON document contained in an LLM response.

    Raises:
        ParseError: If the response holds no parseable JSON
    """
    json_str = extract_json_from_response(raw_response)
    try:
        return json.loads(json_str)
    except (json.JSONDecodeError, RecursionError) as e:
        raise ParseError(f"Failed to parse response JSON: {e}") from e


def parse_json_object(raw_response: Optional[str]) -> Dict[str, Any]:
    """
    Parse a response that must be a JSON object.

    Raises:
        ParseError: If the response is not a JSON object
    """
    data = parse_json_response(raw_response)
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def require_list(data: Dict[str, Any], key: str) -> List[Any]:
    """
    Return ``data[key]`` when it is a list.

    Raises:
        ParseError: If the key is missing or not a list
    """
    value = data.get(key)
    if not isinstance(value, list):
        raise ParseError(f"Response key '{key}' is missing or not a list")
    return value
