"""Benchmark results and the shared logic of table-based (markup) exporters."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from ..format import format_duration_value
from ..options import SortOrder
from ..units import Unit


class Alignment(Enum):
    """Horizontal alignment of a table column."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class BenchmarkResult:
    """Summary of the timing runs of one command."""

    command: str
    command_with_unused_parameters: str
    mean: float
    stddev: Optional[float]
    median: float
    user: float
    system: float
    min: float
    max: float
    times: Optional[List[float]] = None
    exit_codes: List[Optional[int]] = field(default_factory=list)
    parameters: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return the result as a plain dictionary, parameters sorted by name."""
        return {
            "command": self.command,
            "mean": self.mean,
            "stddev": self.stddev,
            "median": self.median,
            "user": self.user,
            "system": self.system,
            "min": self.min,
            "max": self.max,
            "times": None if self.times is None else list(self.times),
            "exit_codes": list(self.exit_codes),
            "parameters": dict(sorted(self.parameters.items())),
        }


@dataclass(frozen=True)
class BenchmarkResultWithRelativeSpeed:
    """A result together with its speed relative to the fastest one."""

    result: BenchmarkResult
    relative_speed: float
    relative_speed_stddev: Optional[float]
    is_fastest: bool


def compute_relative_speed(
    results: Sequence[BenchmarkResult], sort_order: SortOrder
) -> List[BenchmarkResultWithRelativeSpeed]:
    """Compare every result with the fastest one and order them as requested."""
    if not results:
        return []
    fastest_index = min(range(len(results)), key=lambda i: results[i].mean)
    fastest = results[fastest_index]

    entries = []
    for index, result in enumerate(results):
        ratio = result.mean / fastest.mean
        ratio_stddev: Optional[float] = None
        if result.stddev is not None and fastest.stddev is not None:
            ratio_stddev = ratio * math.sqrt(
                (result.stddev / result.mean) ** 2 + (fastest.stddev / fastest.mean) ** 2
            )
        entries.append(
            BenchmarkResultWithRelativeSpeed(
                result=result,
                relative_speed=ratio,
                relative_speed_stddev=ratio_stddev,
                is_fastest=index == fastest_index,
            )
        )

    if sort_order is SortOrder.MEAN_TIME:
        entries.sort(key=lambda e: e.result.mean)
    return entries


def determine_unit_from_results(results: Sequence[BenchmarkResult]) -> Unit:
    """Pick the unit that suits the first result's mean, or seconds if there is none."""
    if results:
        return format_duration_value(results[0].mean, None)[1]
    return Unit.SECOND


_CELL_ALIGNMENTS = (
    Alignment.LEFT,
    Alignment.RIGHT,
    Alignment.RIGHT,
    Alignment.RIGHT,
    Alignment.RIGHT,
)


class MarkupExporter(ABC):
    """Base class of exporters that render results as a table in a markup language."""

    #: Text placed before the table; subclasses may override.
    header_text: str = ""
    #: Text placed after the table; subclasses may override.
    footer_text: str = ""

    def table_results(
        self, entries: Sequence[BenchmarkResultWithRelativeSpeed], unit: Unit
    ) -> str:
        """Render the whole table with all values in the given unit."""
        notation = f"[{unit.short_name()}]"
        parts = [
            self.table_header(_CELL_ALIGNMENTS),
            self.table_row(
                [
                    "Command",
                    f"Mean {notation}",
                    f"Min {notation}",
                    f"Max {notation}",
                    "Relative",
                ]
            ),
            self.table_divider(_CELL_ALIGNMENTS),
        ]

        for entry in entries:
            measurement = entry.result
            cmd_str = measurement.command_with_unused_parameters.replace("|", "\\|")
            mean_str = format_duration_value(measurement.mean, unit)[0]
            stddev_str = (
                f" ± {format_duration_value(measurement.stddev, unit)[0]}"
                if measurement.stddev is not None
                else ""
            )
            min_str = format_duration_value(measurement.min, unit)[0]
            max_str = format_duration_value(measurement.max, unit)[0]
            rel_str = f"{entry.relative_speed:.2f}"
            if entry.is_fastest or entry.relative_speed_stddev is None:
                rel_stddev_str = ""
            else:
                rel_stddev_str = f" ± {entry.relative_speed_stddev:.2f}"

            parts.append(
                self.table_row(
                    [
                        self.command(cmd_str),
                        mean_str + stddev_str,
                        min_str,
                        max_str,
                        rel_str + rel_stddev_str,
                    ]
                )
            )

        parts.append(self.table_footer(_CELL_ALIGNMENTS))
        return "".join(parts)

    @abstractmethod
    def table_row(self, cells: Sequence[str]) -> str:
        """Render one row of cells."""

    @abstractmethod
    def table_divider(self, cell_alignments: Sequence[Alignment]) -> str:
        """Render the line between the header row and the data rows."""

    def table_header(self, cell_alignments: Sequence[Alignment]) -> str:
        """Render what comes before the first row."""
        return self.header_text

    def table_footer(self, cell_alignments: Sequence[Alignment]) -> str:
        """Render what comes after the last row."""
        return self.footer_text

    @abstractmethod
    def command(self, cmd: str) -> str:
        """Render a command as inline code."""

    def serialize(
        self,
        results: Sequence[BenchmarkResult],
        unit: Optional[Unit],
        sort_order: SortOrder,
    ) -> bytes:
        """Render the results as a UTF-8 encoded table."""
        if unit is None:
            unit = determine_unit_from_results(results)
        entries = compute_relative_speed(results, sort_order)
        return self.table_results(entries, unit).encode("utf-8")