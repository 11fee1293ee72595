"""Stack-based line parser that separates corrupted lines from incomplete ones."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .brackets import Bracket

STATUS_CORRUPTED = "corrupted"
STATUS_INCOMPLETE = "incomplete"
STATUS_COMPLETE = "complete"


class CorruptedLineError(ValueError):
    """Raised when a closing bracket does not match the innermost open bracket."""

    def __init__(self, found: str, expected: Optional[str] = None) -> None:
        if expected is None:
            message = f"Expected opening bracket, but found {found} instead."
        else:
            message = f"Expected {expected}, but found {found} instead."
        super().__init__(message)
        self.found = found
        self.expected = expected
        self.position: Optional[int] = None


@dataclass
class ParserState:
    """Open brackets of a single line, innermost last."""

    stack: List[Bracket] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return len(self.stack)

    def push(self, bracket: Bracket) -> None:
        self.stack.append(bracket)

    def pop(self, closing: Bracket) -> Optional[Bracket]:
        """Pop the innermost bracket, returning it only if it matches ``closing``.

        The top of the stack is consumed even on a mismatch; callers treat a
        mismatch as the end of the line.
        """
        if not self.stack:
            return None
        opening = self.stack.pop()
        return opening if opening is closing else None

    def completion_string(self) -> str:
        """Closing characters that close every open bracket, innermost first."""
        return "".join(bracket.closing for bracket in reversed(self.stack))


def handle_opening_bracket(state: ParserState, ch: str) -> None:
    bracket = Bracket.from_opening(ch)
    if bracket is not None:
        state.push(bracket)


def handle_closing_bracket(state: ParserState, ch: str) -> None:
    """Match a closing character against the innermost open bracket.

    Characters that are not closing brackets are ignored.

    Raises
    ------
    CorruptedLineError
        If nothing is open or the innermost open bracket closes differently.
    """
    bracket = Bracket.from_closing(ch)
    if bracket is None:
        return
    if not state.stack:
        raise CorruptedLineError(ch)
    expected = state.stack[-1].closing
    if state.pop(bracket) is None:
        raise CorruptedLineError(ch, expected=expected)


@dataclass(frozen=True)
class LineResult:
    """Outcome of parsing one line."""

    line: str
    status: str
    completion: Optional[str] = None
    error: Optional[str] = None
    expected: Optional[str] = None
    found: Optional[str] = None
    position: Optional[int] = None

    @property
    def corrupted(self) -> bool:
        return self.status == STATUS_CORRUPTED


def parse_line(line: str) -> LineResult:
    """Parse ``line`` until its first corruption or its end.

    Each character is offered to the closing handler first and only then to
    the opening handler, so a character triggers at most one action.
    """
    state = ParserState()
    for position, ch in enumerate(line):
        try:
            handle_closing_bracket(state, ch)
        except CorruptedLineError as exc:
            exc.position = position
            return LineResult(
                line=line,
                status=STATUS_CORRUPTED,
                error=str(exc),
                expected=exc.expected,
                found=exc.found,
                position=position,
            )
        handle_opening_bracket(state, ch)

    completion = state.completion_string()
    status = STATUS_INCOMPLETE if completion else STATUS_COMPLETE
    return LineResult(line=line, status=status, completion=completion)


__all__ = [
    "STATUS_CORRUPTED",
    "STATUS_INCOMPLETE",
    "STATUS_COMPLETE",
    "CorruptedLineError",
    "ParserState",
    "LineResult",
    "handle_opening_bracket",
    "handle_closing_bracket",
    "parse_line",
]
