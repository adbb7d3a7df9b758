"""Logging configuration.

Stdout carries the shell code that the calling shell evaluates, so every
log record is rendered to stderr.
"""
import datetime
import json
import logging
import sys
from typing import Any, List

import structlog
from structlog.types import EventDict, Processor

DEFAULT_LOG_LEVEL = "WARNING"


def add_timestamp(_, __, event_dict: EventDict) -> EventDict:
    """Add ISO timestamp to the event dict."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.datetime.now(datetime.timezone.utc).isoformat()
    return event_dict


def flatten_event(_, __, event_dict: EventDict) -> EventDict:
    """Unpack dict-style events (``logger.info({"event": ..., ...})``)."""
    event = event_dict.get("event")
    if isinstance(event, dict):
        event = dict(event)
        event_dict["event"] = event.pop("event", "")
        for key, value in event.items():
            event_dict.setdefault(key, value)
    return event_dict


class CompactJSONRenderer:
    """Single-line JSON renderer with minimal output."""

    def __call__(self, _: Any, __: str, event_dict: EventDict) -> str:
        items = {
            "ts": event_dict.pop("timestamp", None),
            "lvl": event_dict.pop("level", "???"),
            "msg": event_dict.pop("event", ""),
        }
        event_dict.pop("logger", None)
        if event_dict:
            items["data"] = event_dict
        return json.dumps(items, separators=(",", ":"), default=str)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structured logging to stderr at the given level."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level),
        force=True,
    )

    processors: List[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_timestamp,
        flatten_event,
        CompactJSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
