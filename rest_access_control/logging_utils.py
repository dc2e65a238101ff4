"""
Structured JSON logging utilities.

Access decisions are logged with their role, template and intent as extra
fields, so a JSON formatter keeps them queryable in log aggregation systems.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

_STANDARD_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "taskName", "message",
    }
)


class StructuredJsonFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs logs as single-line JSON objects with consistent fields:
    - timestamp: ISO 8601 format in UTC
    - level: Log level (DEBUG, INFO, WARNING, ...)
    - logger: Logger name
    - message: Log message
    - Additional context fields from the extra dict
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_obj: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS or key.startswith("_"):
                continue
            try:
                json.dumps(value)
                log_obj[key] = value
            except (TypeError, ValueError):
                log_obj[key] = str(value)

        return json.dumps(log_obj, default=str)


def configure_structured_logging(
    level: int | str = logging.INFO,
    logger_name: str | None = "rest_access_control",
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configure structured JSON logging on a stream.

    Args:
        level: Logging level, as a number or a name like "DEBUG"
        logger_name: Logger to configure (None for the root logger)
        stream: Output stream (default: stdout)

    Returns:
        Configured logger instance

    Raises:
        ValueError: If level is not a known level name.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(StructuredJsonFormatter())
    logger.addHandler(handler)

    return logger

