"""Management of the exporters selected on the command line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Protocol, Sequence

from ..options import SortOrder
from ..units import Unit
from .asciidoc import AsciidocExporter
from .csv_export import CsvExporter
from .json_export import JsonExporter
from .markdown import MarkdownExporter
from .markup import BenchmarkResult
from .orgmode import OrgmodeExporter


class ExportType(Enum):
    """The format an export file is written in."""

    ASCIIDOC = "asciidoc"
    CSV = "csv"
    JSON = "json"
    MARKDOWN = "markdown"
    ORGMODE = "orgmode"


class _Exporter(Protocol):
    def serialize(
        self,
        results: Sequence[BenchmarkResult],
        unit: Optional[Unit],
        sort_order: SortOrder,
    ) -> bytes: ...


_EXPORTERS = {
    ExportType.ASCIIDOC: AsciidocExporter,
    ExportType.CSV: CsvExporter,
    ExportType.JSON: JsonExporter,
    ExportType.MARKDOWN: MarkdownExporter,
    ExportType.ORGMODE: OrgmodeExporter,
}

_CLI_FLAGS = (
    ("export-asciidoc", ExportType.ASCIIDOC),
    ("export-json", ExportType.JSON),
    ("export-csv", ExportType.CSV),
    ("export-markdown", ExportType.MARKDOWN),
    ("export-orgmode", ExportType.ORGMODE),
)


@dataclass(frozen=True)
class _ExporterWithTarget:
    exporter: _Exporter
    filename: Optional[str]  # None means standard output


class ExportManager:
    """Writes benchmark results through every configured exporter."""

    def __init__(self, time_unit: Optional[Unit] = None) -> None:
        self.time_unit = time_unit
        self._exporters: list[_ExporterWithTarget] = []

    @classmethod
    def from_cli_arguments(
        cls, matches: Mapping[str, Any], time_unit: Optional[Unit] = None
    ) -> "ExportManager":
        """Build a manager from option names such as 'export-json' mapped to file names."""
        manager = cls(time_unit)
        for flag, export_type in _CLI_FLAGS:
            filename = matches.get(flag)
            if filename is not None:
                manager.add_exporter(export_type, str(filename))
        return manager

    def add_exporter(self, export_type: ExportType, filename: str) -> None:
        """Add an exporter writing to filename, or to standard output if it is '-'.

        The file is created (and emptied) right away; OSError is raised if that fails.
        """
        exporter = _EXPORTERS[export_type]()
        if filename == "-":
            target = None
        else:
            try:
                with open(filename, "wb"):
                    pass
            except OSError as exc:
                raise OSError(f"Could not create export file '{filename}': {exc}") from exc
            target = filename
        self._exporters.append(_ExporterWithTarget(exporter, target))

    def write_results(
        self,
        results: Sequence[BenchmarkResult],
        sort_order: SortOrder,
        intermediate: bool,
    ) -> None:
        """Write results to all targets.

        Intermediate calls update the export files, so they are current even if a later
        benchmark fails; the final call prints the standard-output targets.
        """
        for entry in self._exporters:
            if entry.filename is not None:
                if intermediate:
                    content = entry.exporter.serialize(results, self.time_unit, sort_order)
                    _write_to_file(entry.filename, content)
            elif not intermediate:
                content = entry.exporter.serialize(results, self.time_unit, sort_order)
                print()
                print(content.decode("utf-8"))


def _write_to_file(filename: str, content: bytes) -> None:
    try:
        with open(filename, "r+b") as file:
            file.write(content)
    except OSError as exc:
        raise OSError(f"Failed to export results to '{filename}': {exc}") from exc