"""Syntax scoring for navigation subsystem bracket lines."""

from .brackets import CLOSING_CHARS, OPENING_CHARS, Bracket
from .parser import CorruptedLineError, LineResult, ParserState, parse_line
from .pipeline import AnalysisResult, analyse_lines
from .scorer import COMPLETION_POINTS, calculate_score, find_median_score

__all__ = [
    "Bracket",
    "OPENING_CHARS",
    "CLOSING_CHARS",
    "CorruptedLineError",
    "LineResult",
    "ParserState",
    "parse_line",
    "AnalysisResult",
    "analyse_lines",
    "COMPLETION_POINTS",
    "calculate_score",
    "find_median_score",
]
