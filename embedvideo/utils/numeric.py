"""Lenient numeric parsing for user-supplied dimension values."""

import math
import re

_NUMERIC = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*")


def is_numeric(value: object) -> bool:
    """True for ints, floats and strings such as "480", " 4.5", "1e3"."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and _NUMERIC.fullmatch(value) is not None


def to_int(value: object) -> int | None:
    """Truncate a numeric value to int; anything else (including empty) is None."""
    if not is_numeric(value):
        return None
    number = float(value)
    if not math.isfinite(number):
        return None
    return int(number)
