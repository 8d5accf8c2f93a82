"""Shared helpers for normalizers.

Normalizers are total functions: they take whatever was parsed from an
artifact (None when absent) and always return a score between 0-100.
They never raise and never read files themselves.
"""

import math
from typing import Any


def clamp_norm(value: float) -> float:
    """Clamp a value to the 0-100 norm scale."""
    return max(0.0, min(100.0, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 ties going up."""
    return math.floor(value + 0.5)


def coerce_number(value: Any) -> float | None:
    """Convert a JSON scalar to a finite float.

    Numbers and numeric strings are accepted. Booleans, containers, NaN
    and infinities are not.

    Returns:
        The float value, or None if the value is not numeric.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number
