"""Export of benchmark results as JSON."""

from __future__ import annotations

import json
from typing import Optional, Sequence

from ..options import SortOrder
from ..units import Unit
from .markup import BenchmarkResult


class JsonExporter:
    """Renders results as a pretty-printed JSON document."""

    def serialize(
        self,
        results: Sequence[BenchmarkResult],
        unit: Optional[Unit],
        sort_order: SortOrder,
    ) -> bytes:
        """Return {"results": [...]} as UTF-8 JSON; unit and sort order are not used."""
        summary = {"results": [result.to_dict() for result in results]}
        text = json.dumps(summary, indent=2, ensure_ascii=False)
        return (text + "\n").encode("utf-8")