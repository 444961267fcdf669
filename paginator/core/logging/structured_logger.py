"""
Structured JSON logging configuration for paginator.
Provides JSON-formatted logs optimized for log aggregation platforms.
"""

import logging
import sys
import traceback
from datetime import datetime
from typing import Any

from pythonjsonlogger.json import JsonFormatter

from .context import get_correlation_id

SERVICE_NAME = "paginator"
SERVICE_VERSION = "0.1.0"

JSON_LOG_FORMAT = "%(timestamp)s %(level)s %(correlation_id)s %(message)s"


class StructuredFormatter(JsonFormatter):
    """JSON formatter that adds standard fields for observability."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to every log record."""
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now().astimezone().isoformat()
        log_record["correlation_id"] = getattr(
            record, "correlation_id", None
        ) or get_correlation_id()

        log_record["level"] = record.levelname
        log_record["logger_name"] = record.name
        log_record["module"] = record.module
        log_record["function"] = record.funcName
        log_record["line"] = record.lineno

        log_record["service"] = {
            "name": SERVICE_NAME,
            "version": SERVICE_VERSION,
        }

        if record.exc_info:
            log_record["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "stacktrace": traceback.format_exception(*record.exc_info),
            }

        # Remove duplicate or internal fields
        for field in ["msg", "args", "created", "msecs", "relativeCreated", "pathname"]:
            log_record.pop(field, None)


def build_formatter(use_json_format: bool = True) -> logging.Formatter:
    """Return the JSON formatter or a plain pipe-separated text formatter."""
    if use_json_format:
        return StructuredFormatter(fmt=JSON_LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")
    return logging.Formatter(
        "%(asctime)s | %(levelname)s | %(correlation_id)s | "
        "%(filename)s:%(lineno)d | %(message)s"
    )


def setup_structured_logging(
    log_level: str = "INFO", use_json_format: bool = True
) -> logging.Logger:
    """
    Set up console logging for the package logger.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
        use_json_format: Whether to emit JSON instead of plain text

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(SERVICE_NAME)
    logger.setLevel(getattr(logging, log_level.upper()))

    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(build_formatter(use_json_format))

    logger.addHandler(console_handler)

    return logger
