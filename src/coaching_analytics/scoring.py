"""Numeric helpers shared by the progress, grading and analytics code."""

import math
from collections.abc import Iterable

from coaching_analytics.errors import ComputationError


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values.

    Python's ``round`` uses banker's rounding (``round(82.5) == 82``); scores
    shown to learners round halves up.
    """
    return math.floor(value + 0.5)


def clamp_percent(value: float) -> int:
    """Round and clamp a value to the 0-100 range."""
    return max(0, min(100, round_half_up(value)))


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean. Raises ComputationError for an empty input."""
    items = list(values)
    if not items:
        raise ComputationError("mean of an empty sequence")
    return sum(items) / len(items)


def percentage(part: int, whole: int, empty: int) -> int:
    """``round(100 * part / whole)``, or ``empty`` when ``whole`` is zero."""
    if whole == 0:
        return empty
    return round_half_up(100 * part / whole)
