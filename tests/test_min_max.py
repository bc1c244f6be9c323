import math

import pytest

from hyperbench.min_max import maximum, minimum


@pytest.mark.parametrize(
    "vals, expected",
    [
        ([1.0], 1.0),
        ([-1.0], -1.0),
        ([-2.0, -1.0], -1.0),
        ([-1.0, 1.0], 1.0),
        ([-1.0, 1.0, 0.0], 1.0),
    ],
)
def test_max(vals, expected):
    assert abs(maximum(vals) - expected) < 2.220446049250313e-16


@pytest.mark.parametrize(
    "vals, expected",
    [
        ([1.0], 1.0),
        ([-2.0, -1.0], -2.0),
        ([-1.0, 1.0, 0.0], -1.0),
    ],
)
def test_min(vals, expected):
    assert minimum(vals) == expected


@pytest.mark.parametrize("func", [maximum, minimum])
def test_empty_raises(func):
    with pytest.raises(ValueError):
        func([])


@pytest.mark.parametrize("func", [maximum, minimum])
def test_nan_raises(func):
    with pytest.raises(ValueError):
        func([1.0, math.nan])