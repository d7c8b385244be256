"""
Tests for logging configuration.
"""

import json
import logging

from travel_agents.shared.logging.config import StructuredFormatter, log_state_transition


class _Capture(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def _make_logger(name):
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    handler = _Capture()
    logger.addHandler(handler)
    return logger, handler


class TestLogging:
    """Tests for StructuredFormatter and log_state_transition."""

    def test_transition_summary_attached(self):
        logger, handler = _make_logger("travel_agents.tests.transition")
        state = {
            "request_id": "req-1",
            "mode": "refine",
            "stage": "joined",
            "day_plans": [1, 2],
            "notes_parsing_errors": ["Component mapping: x"],
        }

        log_state_transition("planning", state, {"extra_key": 1}, logger=logger)

        record = handler.records[0]
        assert "State transition: planning" in record.getMessage()
        assert record.transition["state"]["day_plans"] == 2
        assert record.transition["state"]["notes_parsing_errors"] == 1
        assert record.transition["extra_key"] == 1

    def test_structured_formatter_emits_json(self):
        logger, handler = _make_logger("travel_agents.tests.json")
        log_state_transition("mapping", {"request_id": "req-2"}, logger=logger)

        entry = json.loads(StructuredFormatter().format(handler.records[0]))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "travel_agents.tests.json"
        assert entry["transition"]["event"] == "mapping"
        assert entry["transition"]["state"]["request_id"] == "req-2"
