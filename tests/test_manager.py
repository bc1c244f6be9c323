import pytest

from hyperbench.export.csv_export import CsvExporter
from hyperbench.export.json_export import JsonExporter
from hyperbench.export.manager import ExportManager, ExportType
from hyperbench.export.markdown import MarkdownExporter
from hyperbench.export.markup import BenchmarkResult
from hyperbench.options import SortOrder
from hyperbench.units import Unit


def _results():
    return [
        BenchmarkResult(
            command="sleep 2",
            command_with_unused_parameters="sleep 2",
            mean=2.005,
            stddev=0.002,
            median=2.005,
            user=0.0009,
            system=0.0012,
            min=2.002,
            max=2.008,
            times=[2.0, 2.0, 2.0],
            exit_codes=[0, 0, 0],
            parameters={},
        ),
        BenchmarkResult(
            command="sleep 0.1",
            command_with_unused_parameters="sleep 0.1",
            mean=0.1057,
            stddev=0.0016,
            median=0.1057,
            user=0.0009,
            system=0.0011,
            min=0.1023,
            max=0.108,
            times=[0.1, 0.1, 0.1],
            exit_codes=[0, 0, 0],
            parameters={},
        ),
    ]


def test_add_exporter_creates_empty_file(tmp_path):
    target = tmp_path / "out.md"
    target.write_text("old content")
    manager = ExportManager()
    manager.add_exporter(ExportType.MARKDOWN, str(target))
    assert target.read_bytes() == b""


def test_add_exporter_fails_for_missing_directory(tmp_path):
    manager = ExportManager()
    with pytest.raises(OSError):
        manager.add_exporter(ExportType.JSON, str(tmp_path / "missing" / "out.json"))


def test_intermediate_writes_files(tmp_path):
    target = tmp_path / "out.md"
    manager = ExportManager(Unit.MILLISECOND)
    manager.add_exporter(ExportType.MARKDOWN, str(target))
    results = _results()
    manager.write_results(results, SortOrder.MEAN_TIME, intermediate=True)
    expected = MarkdownExporter().serialize(results, Unit.MILLISECOND, SortOrder.MEAN_TIME)
    assert target.read_bytes() == expected


def test_final_call_leaves_files_alone(tmp_path, capsys):
    target = tmp_path / "out.csv"
    manager = ExportManager()
    manager.add_exporter(ExportType.CSV, str(target))
    manager.write_results(_results(), SortOrder.COMMAND, intermediate=False)
    assert target.read_bytes() == b""
    assert capsys.readouterr().out == ""


def test_stdout_target_printed_only_at_the_end(capsys):
    manager = ExportManager()
    manager.add_exporter(ExportType.JSON, "-")
    results = _results()

    manager.write_results(results, SortOrder.COMMAND, intermediate=True)
    assert capsys.readouterr().out == ""

    manager.write_results(results, SortOrder.COMMAND, intermediate=False)
    content = JsonExporter().serialize(results, None, SortOrder.COMMAND).decode("utf-8")
    assert capsys.readouterr().out == "\n" + content + "\n"


def test_from_cli_arguments(tmp_path):
    csv_path = tmp_path / "r.csv"
    json_path = tmp_path / "r.json"
    manager = ExportManager.from_cli_arguments(
        {"export-csv": str(csv_path), "export-json": str(json_path)}, None
    )
    assert csv_path.exists() and json_path.exists()

    results = _results()
    manager.write_results(results, SortOrder.COMMAND, intermediate=True)
    assert csv_path.read_bytes() == CsvExporter().serialize(results, None, SortOrder.COMMAND)
    assert json_path.read_bytes() == JsonExporter().serialize(
        results, None, SortOrder.COMMAND
    )


def test_write_fails_when_file_was_removed(tmp_path):
    target = tmp_path / "out.md"
    manager = ExportManager()
    manager.add_exporter(ExportType.ORGMODE, str(target))
    target.unlink()
    with pytest.raises(OSError):
        manager.write_results(_results(), SortOrder.COMMAND, intermediate=True)