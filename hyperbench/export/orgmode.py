"""Export of benchmark results as an Emacs org-mode table."""

from __future__ import annotations

from typing import Sequence

from .markup import Alignment, MarkupExporter


class OrgmodeExporter(MarkupExporter):
    """Renders results as an org-mode table."""

    def table_row(self, cells: Sequence[str]) -> str:
        if not cells:
            raise ValueError("a table row needs at least one cell")
        first, *rest = cells
        return f"| {first}  |  {' |  '.join(rest)} |\n"

    def table_divider(self, cell_alignments: Sequence[Alignment]) -> str:
        if not cell_alignments:
            raise ValueError("a table divider needs at least one column")
        return f"|{'--+' * (len(cell_alignments) - 1)}--|\n"

    def command(self, cmd: str) -> str:
        return f"={cmd}="