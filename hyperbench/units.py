"""Time units used when displaying benchmark results."""

from __future__ import annotations

from enum import Enum

Second = float


class Unit(Enum):
    """Supported time units, valued by their abbreviation."""

    SECOND = "s"
    MILLISECOND = "ms"
    MICROSECOND = "µs"

    def short_name(self) -> str:
        """Return the abbreviation of the unit."""
        return self.value

    def format(self, value: Second) -> str:
        """Format a duration given in seconds in this unit, without the suffix."""
        if self is Unit.SECOND:
            return f"{value:.3f}"
        if self is Unit.MILLISECOND:
            return f"{value * 1e3:.1f}"
        return f"{value * 1e6:.1f}"