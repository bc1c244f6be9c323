"""Export of benchmark results as CSV."""

from __future__ import annotations

import csv
import io
import math
from decimal import Decimal
from typing import Optional, Sequence

from ..options import SortOrder
from ..units import Unit
from .markup import BenchmarkResult

# The lists of times and exit codes cannot be exported to CSV, so they are omitted.
_HEADERS = ("command", "mean", "stddev", "median", "user", "system", "min", "max")


def _format_float(value: float) -> str:
    """Render a float in shortest positional notation, without a trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class CsvExporter:
    """Renders results as comma separated values."""

    def serialize(
        self,
        results: Sequence[BenchmarkResult],
        unit: Optional[Unit],
        sort_order: SortOrder,
    ) -> bytes:
        """Return the results as UTF-8 encoded CSV; unit and sort order are not used."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")

        headers = list(_HEADERS)
        if results:
            headers.extend(f"parameter_{name}" for name in sorted(results[0].parameters))
        writer.writerow(headers)

        for res in results:
            numbers = (
                res.mean,
                res.stddev if res.stddev is not None else 0.0,
                res.median,
                res.user,
                res.system,
                res.min,
                res.max,
            )
            row = [res.command]
            row.extend(_format_float(float(n)) for n in numbers)
            row.extend(value for _, value in sorted(res.parameters.items()))
            writer.writerow(row)

        return buffer.getvalue().encode("utf-8")