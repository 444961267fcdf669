"""Common utilities for paginator."""

import math
import re
import sys
from typing import Any

# Plain decimal numerals, optionally signed, with fraction and exponent.
_NUMERAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def coerce_int(value: Any) -> int | None:
    """Floor a loosely typed numeric value to an int.

    Accepts ints, floats and numeric strings. Numerals too large to convert
    saturate to +/- sys.maxsize so callers still clamp them. Returns None for
    anything that cannot be read as a finite number (None, booleans, NaN,
    infinities, non-numeric strings and other objects).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            return int(value)
        except ValueError:
            pass
        if _NUMERAL.fullmatch(value):
            number = float(value)
            if math.isinf(number):
                return -sys.maxsize if number < 0 else sys.maxsize
            return math.floor(number)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return math.floor(number)


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp value into the closed range [lower, upper]."""
    return max(lower, min(value, upper))
