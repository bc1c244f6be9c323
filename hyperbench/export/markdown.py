"""Export of benchmark results as a Markdown table."""

from __future__ import annotations

from typing import Sequence

from .markup import Alignment, MarkupExporter

_DIVIDER_CELLS = {
    Alignment.LEFT: ":---|",
    Alignment.RIGHT: "---:|",
}


class MarkdownExporter(MarkupExporter):
    """Renders results as a Markdown table."""

    def table_row(self, cells: Sequence[str]) -> str:
        return f"| {' | '.join(cells)} |\n"

    def table_divider(self, cell_alignments: Sequence[Alignment]) -> str:
        return "|" + "".join(_DIVIDER_CELLS[a] for a in cell_alignments) + "\n"

    def command(self, cmd: str) -> str:
        return f"`{cmd}`"