"""Export of benchmark results as an AsciiDoc table."""

from __future__ import annotations

from typing import Sequence

from .markup import Alignment, MarkupExporter

_COLUMN_SPECS = {
    Alignment.LEFT: "<",
    Alignment.RIGHT: ">",
}

_TABLE_DELIMITER = "|==="


class AsciidocExporter(MarkupExporter):
    """Renders results as an AsciiDoc table."""

    def table_header(self, cell_alignments: Sequence[Alignment]) -> str:
        cols = ",".join(_COLUMN_SPECS[a] for a in cell_alignments)
        return f'[cols="{cols}"]\n{_TABLE_DELIMITER}'

    def table_footer(self, cell_alignments: Sequence[Alignment]) -> str:
        return f"{_TABLE_DELIMITER}\n"

    def table_row(self, cells: Sequence[str]) -> str:
        return "\n| " + " \n| ".join(cells) + " \n"

    def table_divider(self, cell_alignments: Sequence[Alignment]) -> str:
        return ""

    def command(self, cmd: str) -> str:
        return f"`{cmd}`"