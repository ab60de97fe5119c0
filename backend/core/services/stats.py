"""
Statistics Helpers

Small numeric helpers shared by the scorers and the session aggregator.
"""

import math
from typing import Iterable, Optional

import numpy as np


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round with .5 always going up (never banker's rounding).

    Scores are displayed next to numbers from other tools that round
    this way, so 86.5 must become 87 here too.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_score(value: float) -> int:
    """Round a 0-100 score to an integer, half up."""
    return int(round_half_up(value))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def present(values: Iterable[Optional[float]]) -> list[float]:
    """Drop missing values (absent fields are excluded, never zero-filled)."""
    return [float(v) for v in values if v is not None]


def mean(values: Iterable[Optional[float]]) -> Optional[float]:
    """Arithmetic mean of the present values, None if there are none."""
    data = present(values)
    if not data:
        return None
    return float(np.mean(data))


def population_std(values: Iterable[Optional[float]]) -> float:
    """Population standard deviation; 0 for fewer than two values."""
    data = present(values)
    if len(data) < 2:
        return 0.0
    return float(np.std(data))


def coefficient_of_variation(values: Iterable[Optional[float]]) -> Optional[float]:
    """
    Standard deviation over mean.

    Returns:
        The CV as a fraction, or None when there is no data or the
        mean is zero (the ratio is undefined there)
    """
    data = present(values)
    if not data:
        return None
    avg = float(np.mean(data))
    if avg == 0:
        return None
    return population_std(data) / avg
