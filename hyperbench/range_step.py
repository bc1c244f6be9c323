"""Stepped numeric ranges for parameter scans."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator, Union

from .number import Number, number_to_count

MAX_PARAMETERS = 100_000


class ParameterScanError(ValueError):
    """Raised when a parameter scan range is invalid."""


def _coerce(start: Number, end: Number, step: Number):
    values = (start, end, step)
    for v in values:
        if isinstance(v, bool) or not isinstance(v, (int, Decimal)):
            raise TypeError(f"range bounds must be int or Decimal, got {v!r}")
    if any(isinstance(v, Decimal) for v in values):
        return tuple(Decimal(v) for v in values)
    return values


def _size_hint(start: Number, end: Number, step: Number) -> Union[int, None]:
    span = end - start + 1
    if isinstance(span, Decimal):
        steps: Number = span / step
    else:
        # Integer division truncating toward zero.
        quotient = abs(span) // abs(step)
        steps = quotient if (span < 0) == (step < 0) else -quotient
    try:
        return number_to_count(steps)
    except ValueError:
        return None


class RangeStep:
    """Values from start up to and including end, in increments of step.

    Ints and Decimals may be given; if any bound is a Decimal all are.
    Only ranges that advance towards end are accepted.
    """

    def __init__(self, start: Number, end: Number, step: Number) -> None:
        start, end, step = _coerce(start, end, step)
        if end < start:
            raise ParameterScanError("Empty parameter range")
        if step == 0:
            raise ParameterScanError("Zero is not a valid parameter step")
        size = _size_hint(start, end, step)
        if size is None or size > MAX_PARAMETERS or step < 0:
            raise ParameterScanError("Parameter range is too large")
        self.start = start
        self.end = end
        self.step = step

    def __iter__(self) -> Iterator[Number]:
        state = self.start
        while state <= self.end:
            yield state
            state += self.step

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"RangeStep({self.start!r}, {self.end!r}, {self.step!r})"