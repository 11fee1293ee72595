"""Bracket kinds and character classification for the navigation syntax checker."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Sequence


class Bracket(Enum):
    """The four canonical bracket pairs, valued by ``(opening, closing)``."""

    ROUND = ("(", ")")
    SQUARE = ("[", "]")
    CURLY = ("{", "}")
    ANGLE = ("<", ">")

    @property
    def opening(self) -> str:
        return self.value[0]

    @property
    def closing(self) -> str:
        return self.value[1]

    @classmethod
    def from_opening(cls, ch: str) -> Optional["Bracket"]:
        """Return the bracket opened by ``ch``, or ``None`` for any other character."""
        return _BY_OPENING.get(ch)

    @classmethod
    def from_closing(cls, ch: str) -> Optional["Bracket"]:
        """Return the bracket closed by ``ch``, or ``None`` for any other character."""
        return _BY_CLOSING.get(ch)


_BY_OPENING: Dict[str, Bracket] = {bracket.opening: bracket for bracket in Bracket}
_BY_CLOSING: Dict[str, Bracket] = {bracket.closing: bracket for bracket in Bracket}

OPENING_CHARS: Sequence[str] = tuple(bracket.opening for bracket in Bracket)
CLOSING_CHARS: Sequence[str] = tuple(bracket.closing for bracket in Bracket)


__all__ = [
    "Bracket",
    "OPENING_CHARS",
    "CLOSING_CHARS",
]
