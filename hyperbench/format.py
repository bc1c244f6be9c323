"""Human-readable formatting of durations."""

from __future__ import annotations

from typing import Optional, Tuple

from .units import Second, Unit


def format_duration(duration: Second, unit: Optional[Unit] = None) -> str:
    """Format a duration with its unit suffix, choosing the unit if none is given."""
    text, _ = format_duration_unit(duration, unit)
    return text


def format_duration_unit(
    duration: Second, unit: Optional[Unit] = None
) -> Tuple[str, Unit]:
    """Like format_duration, but also return the unit that was used."""
    value, out_unit = format_duration_value(duration, unit)
    return f"{value} {out_unit.short_name()}", out_unit


def format_duration_value(
    duration: Second, unit: Optional[Unit] = None
) -> Tuple[str, Unit]:
    """Format a duration without suffix and return it with the unit used."""
    if (unit is None and duration < 0.001) or unit is Unit.MICROSECOND:
        target = Unit.MICROSECOND
    elif (unit is None and duration < 1.0) or unit is Unit.MILLISECOND:
        target = Unit.MILLISECOND
    else:
        target = Unit.SECOND
    return target.format(duration), target