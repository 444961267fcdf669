"""
Correlation tracking for log records.
Lets callers tag every record emitted while serving one request or job.
"""

import logging
import uuid
from contextvars import ContextVar

# Context variable for correlation ID
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def generate_correlation_id() -> str:
    """Generate a short unique correlation ID."""
    return str(uuid.uuid4())[:8]


def get_correlation_id() -> str:
    """Get the current correlation ID or generate a new one."""
    correlation_id = _correlation_id.get()
    if correlation_id is None:
        correlation_id = generate_correlation_id()
        _correlation_id.set(correlation_id)
    return correlation_id


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context."""
    _correlation_id.set(correlation_id)


class CorrelationIdFilter(logging.Filter):
    """Logging filter that adds the correlation ID to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add correlation ID to the log record."""
        if not getattr(record, "correlation_id", None):
            record.correlation_id = get_correlation_id()
        return True
