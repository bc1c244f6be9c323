from decimal import Decimal

import pytest

from hyperbench.number import ParameterValue, format_number, number_to_count


def test_format_int():
    assert format_number(7) == "7"
    assert format_number(-12) == "-12"


def test_format_decimal_keeps_scale():
    assert format_number(Decimal("0.5")) == "0.5"
    assert format_number(Decimal(0) + Decimal("1.0")) == "1.0"


def test_format_decimal_never_uses_exponent():
    assert format_number(Decimal("1E-7")) == "0.0000001"


def test_format_rejects_float():
    with pytest.raises(TypeError):
        format_number(1.5)


def test_count_from_int():
    assert number_to_count(5) == 5
    assert number_to_count(0) == 0


def test_count_from_decimal_truncates():
    assert number_to_count(Decimal("3.7")) == 3


@pytest.mark.parametrize("value", [-1, Decimal("-2.5"), Decimal("NaN"), Decimal("Infinity")])
def test_count_rejects_invalid(value):
    with pytest.raises(ValueError):
        number_to_count(value)


def test_parameter_value_text():
    pv = ParameterValue("hello, world")
    assert str(pv) == "hello, world"
    assert not pv.is_numeric


def test_parameter_value_numeric():
    assert str(ParameterValue(42)) == format_number(42)
    assert str(ParameterValue(Decimal("0.25"))) == "0.25"
    assert ParameterValue(42).is_numeric


def test_parameter_value_equality():
    assert ParameterValue(3) == ParameterValue(3)
    assert ParameterValue("3") != ParameterValue(3)