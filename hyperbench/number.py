"""Numbers and values used for benchmark parameters."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

Number = Union[int, Decimal]


def format_number(value: Number) -> str:
    """Render an integer or decimal in plain positional notation."""
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, int):
        return str(value)
    raise TypeError(f"not a parameter number: {value!r}")


def number_to_count(value: Number) -> int:
    """Convert a number into a non-negative count, truncating decimals.

    Raises ValueError if the number is negative or not finite.
    """
    if isinstance(value, Decimal):
        if not value.is_finite() or value.is_signed():
            if value.is_finite() and value == 0:
                return 0
            raise ValueError(f"cannot convert {value} to a count")
        return int(value)
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"cannot convert {value} to a count")
        return value
    raise TypeError(f"not a parameter number: {value!r}")


@dataclass(frozen=True)
class ParameterValue:
    """A parameter value: either free text or a number."""

    value: Union[str, int, Decimal]

    @property
    def is_numeric(self) -> bool:
        return not isinstance(self.value, str)

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return self.value
        return format_number(self.value)