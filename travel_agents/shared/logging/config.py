"""
Logging configuration.

One place that decides how the service logs: the pipe-separated console
format by default, or one JSON object per record when ``json_format`` is
set. Coordinator stage transitions are logged with a compact summary of
the pipeline state attached.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-35s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("httpcore", "httpx", "openai")


class StructuredFormatter(logging.Formatter):
    """
    Formats each record as a single JSON object.

    Keys: timestamp (UTC, ISO 8601), level, logger, message, plus
    ``transition`` when the record came from ``log_state_transition`` and
    ``exception`` when exception info is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        transition = getattr(record, "transition", None)
        if transition is not None:
            entry["transition"] = transition

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure root logging for the service.

    Args:
        level: Level name for the root logger
        json_format: Emit JSON records instead of the pipe format
        log_file: Optional file that receives the same records as stdout
    """
    formatter: logging.Formatter
    if json_format:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)

    # Override any prior basicConfig calls
    logging.basicConfig(level=level.upper(), handlers=handlers, force=True)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def log_state_transition(
    event: str,
    state: Dict[str, Any],
    extra: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Log a coordinator stage transition.

    Args:
        event: Name of the stage entered (e.g., "dispatching", "planning")
        state: Current coordinator state; only a summary is logged
        extra: Additional context to include
        logger: Logger to use; defaults to the package logger
    """
    logger = logger or logging.getLogger("travel_agents")

    summary = {
        "request_id": state.get("request_id"),
        "mode": state.get("mode"),
        "stage": state.get("stage"),
        "day_plans": len(state.get("day_plans") or []),
        "notes_parsing_errors": len(state.get("notes_parsing_errors") or []),
    }
    transition = {"event": event, "state": summary, **(extra or {})}

    logger.info(
        f"[request={summary['request_id']}] State transition: {event} | "
        f"mode={summary['mode']}, from_stage={summary['stage']}",
        extra={"transition": transition},
    )
