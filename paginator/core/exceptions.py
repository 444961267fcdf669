"""
Custom exception classes for consistent error handling across the package.
"""

from typing import Any


class PaginatorException(Exception):
    """Base exception for all paginator related errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(PaginatorException):
    """Raised when pagination bounds or settings are inconsistent."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        value: Any = None,
        details: dict[str, Any] | None = None,
    ):
        if setting:
            full_message = f"Invalid configuration for '{setting}': {message}"
        else:
            full_message = message
        super().__init__(full_message, details)
        self.setting = setting
        self.value = value
