from decimal import Decimal

import pytest

from hyperbench.range_step import ParameterScanError, RangeStep


def test_integer_range():
    values = list(RangeStep(0, 10, 3))
    assert len(values) == 4
    assert values[0] == 0
    assert values[3] == 9


def test_decimal_range():
    values = list(RangeStep(Decimal(0), Decimal(1), Decimal("0.1")))
    assert len(values) == 11
    assert values[0] == Decimal(0)
    assert values[10] == Decimal(1)


def test_range_step_validate_ok():
    assert list(RangeStep(0, 10, 3)) == [0, 3, 6, 9]
    assert len(RangeStep(Decimal(0), Decimal(1), Decimal("0.1"))) == 11


def test_empty_range():
    with pytest.raises(ParameterScanError) as info:
        RangeStep(11, 10, 1)
    assert str(info.value) == "Empty parameter range"


def test_zero_step():
    with pytest.raises(ParameterScanError) as info:
        RangeStep(0, 10, 0)
    assert str(info.value) == "Zero is not a valid parameter step"


def test_too_large():
    with pytest.raises(ParameterScanError) as info:
        RangeStep(0, 100_001, 1)
    assert str(info.value) == "Parameter range is too large"


def test_negative_step_rejected():
    with pytest.raises(ParameterScanError) as info:
        RangeStep(Decimal(0), Decimal(1), Decimal("-0.1"))
    assert str(info.value) == "Parameter range is too large"


def test_len_matches_iteration():
    rng = RangeStep(2, 20, 4)
    assert len(rng) == len(list(rng))


def test_range_is_reiterable():
    rng = RangeStep(0, 4, 2)
    first = list(rng)
    second = list(rng)
    assert first == [0, 2, 4]
    assert second == [0, 2, 4]


def test_mixed_types_become_decimal():
    values = list(RangeStep(0, 1, Decimal("0.5")))
    assert values == [Decimal(0), Decimal("0.5"), Decimal(1)]
    assert all(isinstance(v, Decimal) for v in values)


def test_float_bounds_rejected():
    with pytest.raises(TypeError):
        RangeStep(0.0, 1.0, 0.1)