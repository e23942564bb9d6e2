"""
Centralized Logging

Architectural Intent:
- One place to attach handlers to the hebo_notifications logger tree
- Library modules only create module-level loggers; embedding services or
  the CLI decide where records go
- Structured JSON output for log shippers, plain text for terminals
"""

import json
import logging
import sys
from datetime import datetime, UTC
from typing import IO, Optional, Union

ROOT_LOGGER = "hebo_notifications"

# Attributes passed through logging's `extra=` that end up in JSON output.
CONTEXT_FIELDS = ("notification_type", "channel_id", "message_id")


class JSONFormatter(logging.Formatter):
    """Structured JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_entry[name] = str(value)
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def resolve_level(level: Union[int, str]) -> int:
    """Turn "debug"/"INFO"/10 into a logging level number."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_logging(
    level: Union[int, str] = logging.INFO,
    json_format: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Configure the hebo_notifications logger.

    Args:
        level: Logging level number or name (DEBUG, INFO, WARNING, ...)
        json_format: If True, use JSON structured output. Otherwise human-readable.
        stream: Destination stream, stderr by default

    Returns:
        The configured package logger
    """
    level = resolve_level(level)
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )

    root.addHandler(handler)
    return root
