"""Core infrastructure for paginator."""

from .exceptions import ConfigurationError, PaginatorException
from .utils import clamp, coerce_int

__all__ = [
    "ConfigurationError",
    "PaginatorException",
    "clamp",
    "coerce_int",
]
