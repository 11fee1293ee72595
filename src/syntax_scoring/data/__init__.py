"""Input and report utilities for the syntax checker."""

from .lines import available_resources, load_bundled_lines, read_lines, split_lines
from .report import LineReport, read_report, write_report

__all__ = [
    "available_resources",
    "load_bundled_lines",
    "read_lines",
    "split_lines",
    "LineReport",
    "read_report",
    "write_report",
]
