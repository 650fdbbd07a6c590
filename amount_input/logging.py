# PATH: amount_input/logging.py
"""
Structured logging for amount_input.

All contextual fields are passed only via extra={"context": {...}}.
The library never configures logging on import. Hosts either route the
"amount_input" loggers through their own setup or call setup_logging(),
which attaches handlers to the "amount_input" namespace only and leaves
the root logger alone.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

LOGGER_NAMESPACE = "amount_input"


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter, one object per line.

    Includes context fields from extra={"context": {...}}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = getattr(record, "context", None)
        if context:
            log_data["context"] = context

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # LRE/PDF marks and exotic separators are escaped
        return json.dumps(log_data, ensure_ascii=True, default=str)


class ConsoleFormatter(logging.Formatter):
    """
    One line per record: time, level, logger, message, then the first
    few context fields. Field texts are shown with repr() so invisible
    direction marks and space separators stay visible.
    """

    MAX_CONTEXT_FIELDS = 3

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        base = f"{timestamp} | {record.levelname:<9} | {record.name} | {record.getMessage()}"

        context = getattr(record, "context", None)
        if context:
            base += f" | {format_context(context, self.MAX_CONTEXT_FIELDS)}"

        return base


def format_context(context: dict, limit: int) -> str:
    """
    key=repr(value) pairs, truncated after limit fields.

    Example: format_context({"text": "1 234,5", "cursor": 5}, 1)
        -> "text='1 234,5', ... (+1 more)"
    """
    items = list(context.items())
    text = ", ".join(f"{k}={v!r}" for k, v in items[:limit])
    if len(items) > limit:
        text += f", ... (+{len(items) - limit} more)"
    return text


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """
    Configure the amount_input logger namespace.

    Args:
        level: Logging level
        log_file: Optional file path; always written as JSON lines
        json_format: Use JSON format (True) or console format (False) on stdout

    Returns:
        The "amount_input" namespace logger
    """
    logger = reset_logging()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        StructuredFormatter() if json_format else ConsoleFormatter()
    )
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger


def reset_logging() -> logging.Logger:
    """Close and detach every handler setup_logging() installed."""
    logger = logging.getLogger(LOGGER_NAMESPACE)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name, under the "amount_input" namespace

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
