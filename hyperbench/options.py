"""Settings for a benchmark session, built from parsed command-line arguments."""

from __future__ import annotations

import os
import re
import shlex
import subprocess
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePath
from typing import IO, Any, List, Mapping, Optional, Tuple, Union

from .units import Second, Unit

DEFAULT_SHELL = "cmd.exe" if os.name == "nt" else "sh"

_UINT_RE = re.compile(r"\+?[0-9]+")
_U64_LIMIT = 2**64

Stream = Union[int, IO[bytes], None]


class OptionsError(ValueError):
    """Raised when the command-line options are invalid."""


@dataclass(frozen=True)
class Shell:
    """Shell used to run benchmarked commands: the default one or a custom command line."""

    cmdline: Tuple[str, ...] = (DEFAULT_SHELL,)
    custom: bool = False

    @classmethod
    def default(cls) -> "Shell":
        """Return the platform's default shell."""
        return cls()

    @classmethod
    def parse_from_str(cls, s: str) -> "Shell":
        """Parse a shell command line such as "bash -e"."""
        try:
            words = shlex.split(s)
        except ValueError as exc:
            raise OptionsError(f"Could not parse the shell command: {exc}") from exc
        if not words or not words[0]:
            raise OptionsError("The shell command must not be empty")
        return cls(tuple(words), custom=True)

    def command(self) -> List[str]:
        """Return the argument vector that starts this shell."""
        return list(self.cmdline)

    def __str__(self) -> str:
        if self.custom:
            return shlex.join(self.cmdline)
        return self.cmdline[0]


class CmdFailureAction(Enum):
    """What to do when a benchmarked command exits with a non-zero code."""

    RAISE_ERROR = "raise-error"
    IGNORE = "ignore"


class OutputStyleOption(Enum):
    """How terminal output is styled."""

    BASIC = "basic"
    FULL = "full"
    NO_COLOR = "nocolor"
    COLOR = "color"
    DISABLED = "none"


class SortOrder(Enum):
    """How benchmarks are ordered in comparisons and exports."""

    COMMAND = "command"
    MEAN_TIME = "mean-time"


@dataclass
class RunBounds:
    """Lower and optional upper bound for the number of benchmark runs."""

    min: int = 10
    max: Optional[int] = None


@dataclass(frozen=True)
class CommandInputPolicy:
    """Where the benchmarked command reads its input from: the null device or a file."""

    path: Optional[Path] = None

    @classmethod
    def null(cls) -> "CommandInputPolicy":
        return cls()

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CommandInputPolicy":
        return cls(Path(path))

    @property
    def is_null(self) -> bool:
        return self.path is None

    def get_stdin(self) -> Stream:
        """Return a stdin argument for subprocess; a file is opened and must be closed by the caller."""
        if self.path is None:
            return subprocess.DEVNULL
        return open(self.path, "rb")


_OUTPUT_KINDS = ("null", "pipe", "file", "inherit")


@dataclass(frozen=True)
class CommandOutputPolicy:
    """What happens to the output of the benchmarked command."""

    kind: str = "null"
    path: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.kind not in _OUTPUT_KINDS:
            raise ValueError(f"unknown output policy kind: {self.kind!r}")
        if (self.kind == "file") != (self.path is not None):
            raise ValueError("a path is given exactly for the 'file' output policy")

    @classmethod
    def null(cls) -> "CommandOutputPolicy":
        return cls("null")

    @classmethod
    def pipe(cls) -> "CommandOutputPolicy":
        return cls("pipe")

    @classmethod
    def inherit(cls) -> "CommandOutputPolicy":
        return cls("inherit")

    @classmethod
    def to_file(cls, path: Union[str, Path]) -> "CommandOutputPolicy":
        return cls("file", Path(path))

    def get_stdout_stderr(self) -> Tuple[Stream, Stream]:
        """Return stdout and stderr arguments for subprocess.

        Only stdout is piped or written to a file, since typically only it matters for timing.
        """
        if self.kind == "null":
            return subprocess.DEVNULL, subprocess.DEVNULL
        if self.kind == "pipe":
            return subprocess.PIPE, subprocess.DEVNULL
        if self.kind == "file":
            assert self.path is not None
            return open(self.path, "wb"), subprocess.DEVNULL
        return None, None


_EXECUTOR_KINDS = ("raw", "shell", "mock")


@dataclass(frozen=True)
class ExecutorKind:
    """How commands are run: directly, through a shell, or by a mock executor."""

    kind: str = "shell"
    shell: Optional[Shell] = field(default_factory=Shell.default)
    mock_shell: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind not in _EXECUTOR_KINDS:
            raise ValueError(f"unknown executor kind: {self.kind!r}")

    @classmethod
    def default(cls) -> "ExecutorKind":
        return cls()

    @classmethod
    def raw(cls) -> "ExecutorKind":
        return cls("raw", None)

    @classmethod
    def using_shell(cls, shell: Shell) -> "ExecutorKind":
        return cls("shell", shell)

    @classmethod
    def mock(cls, shell: Optional[str] = None) -> "ExecutorKind":
        return cls("mock", None, shell)


def _get_one(matches: Mapping[str, Any], name: str) -> Optional[str]:
    value = matches.get(name)
    if value is None:
        return None
    return str(value)


def _get_many(matches: Mapping[str, Any], name: str) -> Optional[List[str]]:
    value = matches.get(name)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value]


def _get_flag(matches: Mapping[str, Any], name: str) -> bool:
    return bool(matches.get(name, False))


def _param_to_int(matches: Mapping[str, Any], name: str) -> Optional[int]:
    text = _get_one(matches, name)
    if text is None:
        return None
    if not _UINT_RE.fullmatch(text) or int(text) >= _U64_LIMIT:
        raise OptionsError(
            f"Could not read value '{text}' of option '--{name}' as a non-negative integer"
        )
    return int(text)


def _parse_float(name: str, text: str) -> float:
    if text != text.strip() or "_" in text:
        raise OptionsError(f"Could not read value '{text}' of option '--{name}' as a number")
    try:
        return float(text)
    except ValueError as exc:
        raise OptionsError(
            f"Could not read value '{text}' of option '--{name}' as a number"
        ) from exc


def _component_count(arg: str) -> int:
    count = len(PurePath(arg).parts)
    if arg == "." or arg.startswith("./") or (os.name == "nt" and arg.startswith(".\\")):
        count += 1
    return count


def _parse_output_policy(matches: Mapping[str, Any]) -> CommandOutputPolicy:
    if _get_flag(matches, "show-output"):
        return CommandOutputPolicy.inherit()
    output = _get_one(matches, "output")
    if output is None or output == "null":
        return CommandOutputPolicy.null()
    if output == "pipe":
        return CommandOutputPolicy.pipe()
    if output == "inherit":
        return CommandOutputPolicy.inherit()
    if _component_count(output) <= 1:
        raise OptionsError(
            f"Unknown output policy '{output}'. Use './{output}' to output to a file "
            "named '{output}'.".replace("{output}", output)
        )
    return CommandOutputPolicy.to_file(output)


_STYLES = {
    "full": OutputStyleOption.FULL,
    "basic": OutputStyleOption.BASIC,
    "nocolor": OutputStyleOption.NO_COLOR,
    "color": OutputStyleOption.COLOR,
    "none": OutputStyleOption.DISABLED,
}


def _auto_output_style(output_policy: CommandOutputPolicy) -> OutputStyleOption:
    stdout = sys.stdout
    is_terminal = stdout is not None and stdout.isatty()
    if output_policy.kind == "inherit" or not is_terminal:
        return OutputStyleOption.BASIC
    term = os.environ.get("TERM")
    dumb_terminal = term in ("unknown", "dumb") if term is not None else os.name != "nt"
    if dumb_terminal or os.environ.get("NO_COLOR"):
        return OutputStyleOption.NO_COLOR
    return OutputStyleOption.FULL


_SORT_ORDERS = {
    "auto": (SortOrder.MEAN_TIME, SortOrder.COMMAND),
    "command": (SortOrder.COMMAND, SortOrder.COMMAND),
    "mean-time": (SortOrder.MEAN_TIME, SortOrder.MEAN_TIME),
}

_TIME_UNITS = {
    "microsecond": Unit.MICROSECOND,
    "millisecond": Unit.MILLISECOND,
    "second": Unit.SECOND,
}


def _parse_executor(matches: Mapping[str, Any]) -> ExecutorKind:
    if _get_flag(matches, "no-shell"):
        return ExecutorKind.raw()
    shell = _get_one(matches, "shell")
    if _get_flag(matches, "debug-mode"):
        return ExecutorKind.mock(shell)
    if shell is None or shell == "default":
        return ExecutorKind.using_shell(Shell.default())
    if shell == "none":
        return ExecutorKind.raw()
    return ExecutorKind.using_shell(Shell.parse_from_str(shell))


def _parse_input_policy(matches: Mapping[str, Any]) -> CommandInputPolicy:
    path_str = _get_one(matches, "input")
    if path_str is None or path_str == "null":
        return CommandInputPolicy.null()
    path = Path(path_str)
    if not path.exists():
        raise OptionsError(f"The file '{path_str}' specified as '--input' does not exist")
    return CommandInputPolicy.from_file(path)


@dataclass
class Options:
    """The main settings of a benchmark session."""

    run_bounds: RunBounds = field(default_factory=RunBounds)
    warmup_count: int = 0
    min_benchmarking_time: Second = 3.0
    command_failure_action: CmdFailureAction = CmdFailureAction.RAISE_ERROR
    preparation_command: Optional[List[str]] = None
    conclusion_command: Optional[List[str]] = None
    setup_command: Optional[str] = None
    cleanup_command: Optional[str] = None
    output_style: OutputStyleOption = OutputStyleOption.FULL
    sort_order_speed_comparison: SortOrder = SortOrder.MEAN_TIME
    sort_order_exports: SortOrder = SortOrder.COMMAND
    executor_kind: ExecutorKind = field(default_factory=ExecutorKind.default)
    command_input_policy: CommandInputPolicy = field(default_factory=CommandInputPolicy)
    command_output_policy: CommandOutputPolicy = field(default_factory=CommandOutputPolicy)
    time_unit: Optional[Unit] = None

    @classmethod
    def from_cli_arguments(cls, matches: Mapping[str, Any]) -> "Options":
        """Build options from a mapping of option names (without dashes) to values.

        Flags map to booleans, repeatable options to lists of strings.
        """
        options = cls()

        warmup = _param_to_int(matches, "warmup")
        if warmup is not None:
            options.warmup_count = warmup

        min_runs = _param_to_int(matches, "min-runs")
        max_runs = _param_to_int(matches, "max-runs")
        runs = _param_to_int(matches, "runs")
        if runs is not None:
            min_runs = max_runs = runs

        if min_runs is not None and max_runs is not None:
            if min_runs > max_runs:
                raise OptionsError(
                    "The range of runs is empty: the minimum is larger than the maximum"
                )
            options.run_bounds = RunBounds(min_runs, max_runs)
        elif min_runs is not None:
            options.run_bounds.min = min_runs
        elif max_runs is not None:
            # Without an explicit minimum, lower it when the maximum is below the default.
            options.run_bounds.min = min(options.run_bounds.min, max_runs)
            options.run_bounds.max = max_runs

        options.setup_command = _get_one(matches, "setup")
        options.preparation_command = _get_many(matches, "prepare")
        options.conclusion_command = _get_many(matches, "conclude")
        options.cleanup_command = _get_one(matches, "cleanup")

        options.command_output_policy = _parse_output_policy(matches)

        style = _get_one(matches, "style")
        if style in _STYLES:
            options.output_style = _STYLES[style]
        else:
            options.output_style = _auto_output_style(options.command_output_policy)

        sort = _get_one(matches, "sort") or "auto"
        if sort not in _SORT_ORDERS:
            raise OptionsError(f"Unknown sort order '{sort}'")
        options.sort_order_speed_comparison, options.sort_order_exports = _SORT_ORDERS[sort]

        options.executor_kind = _parse_executor(matches)

        if _get_flag(matches, "ignore-failure"):
            options.command_failure_action = CmdFailureAction.IGNORE

        options.time_unit = _TIME_UNITS.get(_get_one(matches, "time-unit") or "")

        min_time = _get_one(matches, "min-benchmarking-time")
        if min_time is not None:
            options.min_benchmarking_time = _parse_float("min-benchmarking-time", min_time)

        options.command_input_policy = _parse_input_policy(matches)

        return options

    def validate_against_command_list(self, num_commands: int) -> None:
        """Check that '--prepare' and '--conclude' fit the number of benchmark commands."""
        for option, commands in (
            ("prepare", self.preparation_command),
            ("conclude", self.conclusion_command),
        ):
            if commands is not None and len(commands) > 1 and len(commands) != num_commands:
                raise OptionsError(
                    f"The '--{option}' option has to be provided just once or N times, "
                    "where N is the number of benchmark commands."
                )