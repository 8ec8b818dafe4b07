"""Logging configuration."""
import datetime
import json
import logging
import os
import sys
from typing import Any, List

import structlog
from structlog.types import Processor, EventDict

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENV = "STATS_REPORT_LOG_LEVEL"
IGNORED_LOGGERS = [
    "mcp.server.session",
    "mcp.server.stdio",
    "aiohttp",
    "asyncio"
]


def get_log_level() -> str:
    """Log level from the environment, falling back to INFO."""
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if not isinstance(getattr(logging, level, None), int):
        return DEFAULT_LOG_LEVEL
    return level


def add_timestamp(_, __, event_dict: EventDict) -> EventDict:
    """Add ISO timestamp to the event dict."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.datetime.now(datetime.timezone.utc).isoformat()
    return event_dict


def unpack_event_dict(_, __, event_dict: EventDict) -> EventDict:
    """Lift `logger.info({"event": ..., **fields})` calls into the event dict."""
    event = event_dict.get("event")
    if isinstance(event, dict):
        payload = dict(event)
        event_dict["event"] = payload.pop("event", "")
        for key, value in payload.items():
            event_dict.setdefault(key, value)
    return event_dict


def ignored_logger_filter(logger: Any, name: str, event_dict: EventDict) -> EventDict:
    """Drop records from noisy third-party loggers."""
    logger_name = getattr(logger, "name", "") or ""
    if any(ignored in logger_name for ignored in IGNORED_LOGGERS):
        raise structlog.DropEvent
    return event_dict


class CompactJSONRenderer:
    """Single-line JSON renderer with minimal output."""
    def __call__(self, _: Any, __: str, event_dict: EventDict) -> str:
        items = {
            "ts": event_dict.pop("timestamp", None),
            "lvl": event_dict.pop("level", "???"),
            "msg": event_dict.pop("event", ""),
        }
        if other := {k: v for k, v in event_dict.items() if k != "logger"}:
            items["data"] = other
        return json.dumps(items, separators=(",", ":"), default=str)


def configure_logging(level: str = DEFAULT_LOG_LEVEL, json_output: bool | None = None) -> None:
    """Configure structured logging for the application.

    Everything goes to STDERR so STDOUT stays free for command output and the
    MCP stdio transport:
    - not a terminal (or json_output=True): compact single-line JSON
    - terminal: coloured console output
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper())
    )
    logging.getLogger().setLevel(getattr(logging, level.upper()))

    if json_output is None:
        json_output = not sys.stderr.isatty()

    shared: List[Processor] = [
        structlog.stdlib.filter_by_level,
        ignored_logger_filter,
        unpack_event_dict,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]

    json_processors: List[Processor] = [
        *shared,
        add_timestamp,
        structlog.processors.format_exc_info,
        CompactJSONRenderer()
    ]

    console_processors: List[Processor] = [
        *shared,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer(colors=True)
    ]

    structlog.configure(
        processors=json_processors if json_output else console_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
