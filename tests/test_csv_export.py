import csv
import io

from hyperbench.export.csv_export import CsvExporter
from hyperbench.export.markup import BenchmarkResult
from hyperbench.options import SortOrder
from hyperbench.units import Unit


def _results():
    return [
        BenchmarkResult(
            command="FOO=one BAR=two command | 1",
            command_with_unused_parameters="FOO=one BAR=two command | 1",
            mean=1.0,
            stddev=2.0,
            median=1.0,
            user=3.0,
            system=4.0,
            min=5.0,
            max=6.0,
            times=[7.0, 8.0, 9.0],
            exit_codes=[0, 0, 0],
            parameters={"foo": "one", "bar": "two"},
        ),
        BenchmarkResult(
            command="FOO=one BAR=seven command | 2",
            command_with_unused_parameters="FOO=one BAR=seven command | 2",
            mean=11.0,
            stddev=12.0,
            median=11.0,
            user=13.0,
            system=14.0,
            min=15.0,
            max=16.5,
            times=[17.0, 18.0, 19.0],
            exit_codes=[0, 0, 0],
            parameters={"foo": "one", "bar": "seven"},
        ),
    ]


def test_csv():
    expected = (
        "command,mean,stddev,median,user,system,min,max,parameter_bar,parameter_foo\n"
        "FOO=one BAR=two command | 1,1,2,1,3,4,5,6,two,one\n"
        "FOO=one BAR=seven command | 2,11,12,11,13,14,15,16.5,seven,one\n"
    )
    generated = CsvExporter().serialize(_results(), Unit.SECOND, SortOrder.COMMAND)
    assert generated.decode("utf-8") == expected


def test_empty_results_give_header_only():
    generated = CsvExporter().serialize([], None, SortOrder.COMMAND)
    assert generated.decode("utf-8") == "command,mean,stddev,median,user,system,min,max\n"


def test_missing_stddev_and_quoting_round_trip():
    result = _results()[0]
    result.command = 'say "hi", then stop'
    result.stddev = None
    generated = CsvExporter().serialize([result], None, SortOrder.COMMAND)
    rows = list(csv.reader(io.StringIO(generated.decode("utf-8"))))
    assert rows[1][0] == 'say "hi", then stop'
    assert rows[1][2] == "0"
    assert len(rows[1]) == len(rows[0])


def test_small_values_use_positional_notation():
    result = _results()[0]
    result.mean = 1e-7
    generated = CsvExporter().serialize([result], None, SortOrder.COMMAND)
    row = generated.decode("utf-8").splitlines()[1].split(",")
    assert row[1] == "0.0000001"