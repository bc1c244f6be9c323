"""Minimum and maximum of float sequences that must not contain NaN."""

from __future__ import annotations

import math
from typing import Iterable, List


def _checked(vals: Iterable[float]) -> List[float]:
    values = list(vals)
    if not values:
        raise ValueError("empty sequence")
    if any(math.isnan(v) for v in values):
        raise ValueError("sequence contains NaN")
    return values


def maximum(vals: Iterable[float]) -> float:
    """Return the largest value; the sequence must be non-empty and NaN-free."""
    return max(_checked(vals))


def minimum(vals: Iterable[float]) -> float:
    """Return the smallest value; the sequence must be non-empty and NaN-free."""
    return min(_checked(vals))