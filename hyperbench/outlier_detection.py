"""Statistical outlier detection based on modified Z-scores.

Reference: Iglewicz and Hoaglin (1993), "How to Detect and Handle Outliers".
"""

from __future__ import annotations

import sys
from statistics import median
from typing import List, Sequence

# 1.4826 turns the MAD into a standard deviation estimate; 10 is the number of deviations.
OUTLIER_THRESHOLD = 1.4826 * 10.0


def modified_zscores(xs: Sequence[float]) -> List[float]:
    """Return (x - median) / MAD for every sample value."""
    if not xs:
        raise ValueError("cannot compute Z-scores of an empty sample")

    x_median = median(xs)
    mad = median(abs(x - x_median) for x in xs)
    if not mad > 0.0:
        mad = sys.float_info.epsilon
    return [(x - x_median) / mad for x in xs]


def num_outliers(xs: Sequence[float]) -> int:
    """Count values whose modified Z-score exceeds OUTLIER_THRESHOLD."""
    if not xs:
        return 0
    return sum(1 for score in modified_zscores(xs) if abs(score) > OUTLIER_THRESHOLD)