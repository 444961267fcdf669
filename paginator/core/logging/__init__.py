"""Logging infrastructure for paginator."""

from .context import (
    CorrelationIdFilter,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from .file_logger import FileLogger, setup_file_logging
from .logger_config import get_logger, setup_logging, shutdown_logging
from .structured_logger import StructuredFormatter

__all__ = [
    "CorrelationIdFilter",
    "FileLogger",
    "StructuredFormatter",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
    "setup_file_logging",
    "setup_logging",
    "shutdown_logging",
]
