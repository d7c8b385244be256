"""
Tests for JSON extraction from model responses.
"""

import pytest

from travel_agents.shared.errors import ParseError
from travel_agents.shared.parsing import (
    extract_json_from_response,
    parse_json_object,
    parse_json_response,
    require_list,
)


class TestExtractJson:
    """Tests for extract_json_from_response."""

    def test_raw_json(self):
        assert extract_json_from_response('{"a": 1}') == '{"a": 1}'

    def test_markdown_code_block(self):
        raw = 'Here you go:\n```json\n{"a": [1, 2]}\n```\nEnjoy!'
        assert extract_json_from_response(raw) == '{"a": [1, 2]}'

    def test_code_block_without_language(self):
        raw = '```\n[{"a": 1}]\n```'
        assert extract_json_from_response(raw) == '[{"a": 1}]'

    def test_surrounding_prose(self):
        raw = 'Sure! {"a": {"b": "}"}} Hope that helps.'
        assert extract_json_from_response(raw) == '{"a": {"b": "}"}}'

    def test_no_json_raises(self):
        with pytest.raises(ParseError):
            extract_json_from_response("OK")

    def test_none_raises(self):
        with pytest.raises(ParseError):
            extract_json_from_response(None)

    def test_malformed_json_raises(self):
        with pytest.raises(ParseError):
            extract_json_from_response('{"a": 1,')

    def test_deeply_nested_json_raises(self):
        with pytest.raises(ParseError):
            extract_json_from_response("[" * 100000)


class TestParseHelpers:
    """Tests for the typed parse helpers."""

    def test_parse_json_response_returns_list(self):
        assert parse_json_response("[1, 2]") == [1, 2]

    def test_parse_json_response_deeply_nested(self):
        with pytest.raises(ParseError):
            parse_json_response("[" * 100000 + "]" * 100000)

    def test_parse_json_object_rejects_list(self):
        with pytest.raises(ParseError):
            parse_json_object("[1, 2]")

    def test_require_list_missing_key(self):
        with pytest.raises(ParseError):
            require_list({"other": []}, "events")

    def test_require_list_wrong_type(self):
        with pytest.raises(ParseError):
            require_list({"events": "none"}, "events")

    def test_require_list_returns_value(self):
        assert require_list({"events": [{"a": 1}]}, "events") == [{"a": 1}]
