# hyperbench

Building blocks for benchmarking shell commands: session options parsed
from command-line values, statistics over timing runs, parameter scans,
human-readable durations, user-facing warnings, a progress bar, and
exporters that write results as Markdown, AsciiDoc, Emacs org-mode, CSV
or JSON.

## Formatting durations

Durations are given in seconds. Without an explicit unit, the unit is
chosen from the size of the value:

```python
from hyperbench.format import format_duration

format_duration(1.3, None)     # "1.300 s"
format_duration(0.999, None)   # "999.0 ms"
format_duration(0.0005, None)  # "500.0 µs"
```

`format_duration_unit` and `format_duration_value` return the chosen
`Unit` (from `hyperbench.units`) alongside the text; the latter leaves
out the unit suffix.

## Statistics

`hyperbench.outlier_detection` finds statistical outliers with modified
Z-scores, which are based on the median absolute deviation:

```python
from hyperbench.outlier_detection import num_outliers

num_outliers([-0.2, 0.0, 0.2, 4.0])  # 1
```

`modified_zscores` returns the scores themselves. `hyperbench.min_max`
provides `minimum` and `maximum` for non-empty lists of floats without
NaN, raising `ValueError` otherwise.

## Parameter scans

Parameter lists are separated by commas. A backslash escapes a comma or
another backslash:

```python
from hyperbench.tokenize import tokenize

tokenize(r"hello\, world!,foo")  # ["hello, world!", "foo"]
```

Numeric ranges are walked with `RangeStep`; integers and `Decimal` values
both work:

```python
from decimal import Decimal
from hyperbench.range_step import RangeStep

list(RangeStep(0, 10, 3))                               # [0, 3, 6, 9]
len(RangeStep(Decimal(0), Decimal(1), Decimal("0.1")))  # 11
```

An empty range, a zero step or a range of more than 100,000 values raises
`ParameterScanError`. `hyperbench.number` holds `ParameterValue`, which
renders text or numbers in plain notation, and the helpers
`format_number` and `number_to_count`.

## Exit codes and environment offset

`hyperbench.exit_code.extract_exit_code` turns a `subprocess` return
code into an exit code; on POSIX a termination by signal (a negative
return code) becomes `128 + signal`, as shells report it.
`random_environment_offset` returns a string of random length below 4096,
meant to be set as an environment variable to vary the environment size
between runs.

## Options

`hyperbench.options.Options.from_cli_arguments` builds the settings of a
benchmark session from a mapping of option names without dashes (such as
`"warmup"`, `"runs"`, `"prepare"`, `"shell"`, `"output"`, `"style"`,
`"sort"`, `"time-unit"`, `"input"`) to their values. It covers run bounds,
warmup count, setup, preparation, conclusion and cleanup commands, the
shell to run commands with, and where their input and output go; invalid
values raise `OptionsError`. `validate_against_command_list` checks that
`--prepare` and `--conclude` were given once or once per command.

A custom shell is parsed with shell quoting rules:

```python
from hyperbench.options import Shell

shell = Shell.parse_from_str("shell -x 'aaa bbb'")
str(shell)        # "shell -x 'aaa bbb'"
shell.command()   # ["shell", "-x", "aaa bbb"]
```

`CommandInputPolicy.get_stdin` and `CommandOutputPolicy.get_stdout_stderr`
return arguments ready for `subprocess`.

## Warnings and progress

`hyperbench.warnings_text` has `FastExecutionTime`, `NonZeroExitCode`,
`SlowInitialRun` and `OutliersDetected`, whose `str()` is the message
shown to the user. `hyperbench.progress_bar.get_progress_bar` returns a
`tqdm` bar, hidden for the basic and color output styles.

## Exporting results

Each exporter turns a list of `BenchmarkResult` objects (from
`hyperbench.export.markup`) into bytes with
`serialize(results, unit, sort_order)`. The markup exporters —
`MarkdownExporter`, `AsciidocExporter` and `OrgmodeExporter` — write a
table with the mean, minimum, maximum and speed relative to the fastest
command; `CsvExporter` and `JsonExporter` write every summary value.

```python
from hyperbench.export.markdown import MarkdownExporter

MarkdownExporter().table_row(["a", "b", "c"])  # "| a | b | c |\n"
```

`ExportManager` in `hyperbench.export.manager` sends results to several
exporters at once, each writing to a file or, for the name `-`, to
standard output: intermediate calls update the files, the final call
prints the standard-output targets.

## What this package does not do

There is no command-line program, and nothing here runs or times the
benchmarked commands: measuring wall-clock, user and system time of a
child process, scheduling warmup and timing runs, and computing the
`BenchmarkResult` summaries are left to the code that uses this package.