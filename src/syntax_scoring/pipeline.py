"""Whole-input analysis: classify every line and aggregate completion scores."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .parser import STATUS_INCOMPLETE, LineResult, parse_line
from .scorer import (
    MAX_SCORE,
    ScoreOverflowError,
    calculate_score,
    check_score,
    find_median_score,
    sort_scores,
)


@dataclass
class AnalysisResult:
    """Per-line outcomes in input order plus the aggregated scores."""

    results: List[LineResult]
    scores: List[int]
    median: Optional[int]

    @property
    def corrupted_count(self) -> int:
        return sum(1 for r in self.results if r.corrupted)

    @property
    def incomplete_count(self) -> int:
        return sum(1 for r in self.results if r.status == STATUS_INCOMPLETE)

    @property
    def complete_count(self) -> int:
        return len(self.results) - self.corrupted_count - self.incomplete_count


def analyse_lines(lines: Iterable[str], *, strict_median: bool = False) -> AnalysisResult:
    """Parse each line independently and take the median of the non-corrupted scores.

    Balanced lines contribute a score of 0. ``median`` is ``None`` when every
    line is corrupted (or there are no lines).

    Raises
    ------
    ScoreOverflowError
        If a line's completion score does not fit in 64 bits; the message
        names the 1-based line number.
    """
    results: List[LineResult] = []
    raw_scores: List[int] = []
    for line_no, line in enumerate(lines, start=1):
        result = parse_line(line)
        results.append(result)
        if result.corrupted:
            continue
        score = calculate_score(result.completion or "")
        try:
            raw_scores.append(check_score(score))
        except ScoreOverflowError as exc:
            raise ScoreOverflowError(
                f"Line {line_no}: completion of length {len(result.completion or '')} scores {score}, "
                f"which exceeds the 64-bit limit {MAX_SCORE}"
            ) from exc

    scores = sort_scores(raw_scores)
    median = find_median_score(scores, strict=strict_median) if scores else None
    return AnalysisResult(results=results, scores=scores, median=median)


def print_summary(
    lines: List[str],
    analysis: AnalysisResult,
    *,
    echo_lines: bool = True,
) -> None:
    if echo_lines:
        print(f"lines: {json.dumps(list(lines), ensure_ascii=False)}")
    for result in analysis.results:
        if result.corrupted:
            print(result.error)
    print(analysis.scores)
    median = analysis.median if analysis.median is not None else "n/a"
    print(f"Middle score: {median}")


__all__ = ["AnalysisResult", "analyse_lines", "print_summary"]
