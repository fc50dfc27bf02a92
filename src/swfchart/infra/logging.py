"""Structured logging for swfchart.

Log entries are emitted as one JSON object per line so that document building
can be traced next to the service that ships the XML to the chart viewer.
"""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any

__all__ = ["LOG_LEVEL_ENV", "StructuredFormatter", "StructuredLogger", "get_logger"]

LOG_LEVEL_ENV = "SWFCHART_LOG_LEVEL"

# LogRecord attributes that are never copied into the JSON payload
_RESERVED_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


class StructuredFormatter(logging.Formatter):
    """Formatter that renders log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: The log record to format.

        Returns:
            JSON-formatted log string.
        """
        log_entry: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_entry.update({key: value for key, value in record.__dict__.items() if key not in _RESERVED_FIELDS})
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class StructuredLogger:
    """Logger wrapper taking extra fields as keyword arguments."""

    def __init__(self, logger: logging.Logger) -> None:
        """Initialize structured logger.

        Args:
            logger: The underlying Python logger instance.
        """
        self._logger = logger

    def is_enabled_for(self, level: int) -> bool:
        """Return whether records of ``level`` would be emitted."""
        return self._logger.isEnabledFor(level)

    def _log(self, level: int, msg: str, **kwargs: Any) -> None:
        self._logger.log(level, msg, extra=dict(kwargs))

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, msg, **kwargs)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance.

    The handler is attached once per logger name; the level is read from the
    ``SWFCHART_LOG_LEVEL`` environment variable on first configuration.

    Args:
        name: Logger name (typically __name__ of the calling module).

    Returns:
        Configured StructuredLogger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        log_level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
        logger.setLevel(getattr(logging, log_level, logging.INFO))

    return StructuredLogger(logger)
