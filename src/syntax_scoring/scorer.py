"""Scoring utilities for completion strings and the median of incomplete lines."""

from __future__ import annotations

import warnings
from typing import Dict, Iterable, List

import numpy as np

# Points per closing character; scores accumulate in base 5.
COMPLETION_POINTS: Dict[str, int] = {
    ")": 1,
    "]": 2,
    "}": 3,
    ">": 4,
}
_BASE: int = 5
MAX_SCORE: int = int(np.iinfo(np.int64).max)


class EvenScoreCountWarning(UserWarning):
    """Median requested for an even number of scores."""


class ScoreOverflowError(OverflowError):
    """Raised when a completion score does not fit in a signed 64-bit integer."""


def calculate_score(completion: str) -> int:
    """Return the base-5 score of a completion string.

    Parameters
    ----------
    completion:
        Closing characters in the order they would be appended to the line.

    Returns
    -------
    int
        ``0`` for an empty completion, otherwise ``score * 5 + points`` folded
        over the characters.
    """
    score = 0
    for ch in completion:
        points = COMPLETION_POINTS.get(ch)
        if points is None:
            # Completions are built from bracket kinds only; anything else is a bug.
            raise AssertionError(f"Unexpected character in completion string: {ch!r}")
        score = score * _BASE + points
    return score


def check_score(score: int) -> int:
    """Return ``score`` unchanged if it fits in the 64-bit score range."""
    if not 0 <= score <= MAX_SCORE:
        raise ScoreOverflowError(f"Score {score} does not fit in a signed 64-bit integer")
    return score


def _as_score_array(scores: Iterable[int]) -> np.ndarray:
    values = np.fromiter((check_score(int(s)) for s in scores), dtype=np.int64)
    return np.sort(values, kind="stable")


def sort_scores(scores: Iterable[int]) -> List[int]:
    """Return the scores as plain ints in ascending order."""
    return [int(s) for s in _as_score_array(scores)]


def find_median_score(scores: Iterable[int], *, strict: bool = False) -> int:
    """Return the middle score after sorting ascending.

    The element at index ``len // 2`` is returned, which for an even count is
    the upper of the two central values. The input is not modified.

    Raises
    ------
    ValueError
        If ``scores`` is empty, or if ``strict`` is set and the count is even.
    """
    ordered = _as_score_array(scores)
    if ordered.size == 0:
        raise ValueError("Cannot take the median of an empty score collection")
    if ordered.size % 2 == 0:
        message = f"Even number of scores ({ordered.size}); using index {ordered.size // 2}"
        if strict:
            raise ValueError(message)
        warnings.warn(message, EvenScoreCountWarning, stacklevel=2)
    return int(ordered[ordered.size // 2])


__all__ = [
    "COMPLETION_POINTS",
    "MAX_SCORE",
    "EvenScoreCountWarning",
    "ScoreOverflowError",
    "calculate_score",
    "check_score",
    "sort_scores",
    "find_median_score",
]
