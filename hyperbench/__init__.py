"""Options, statistics, parameter scans, duration formatting and result exporters for command benchmarks."""

__version__ = "0.1.0"