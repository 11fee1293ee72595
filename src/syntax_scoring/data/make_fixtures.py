"""Synthetic input generator for the syntax checker."""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Tuple

from ..brackets import Bracket, CLOSING_CHARS, OPENING_CHARS
from ..parser import ParserState, handle_closing_bracket, handle_opening_bracket

KINDS: Tuple[Bracket, ...] = tuple(Bracket)

DEFAULT_COUNTS: Dict[str, int] = {
    "complete": 2,
    "incomplete": 5,
    "corrupted": 5,
}
LENGTH_RANGE: Tuple[int, int] = (8, 24)


def generate_complete_line(length: int, rng: random.Random | None = None) -> str:
    """Generate a random balanced line of the given length.

    Raises
    ------
    ValueError
        If length is odd or < 2.
    """
    if length < 2 or length % 2 != 0:
        raise ValueError(f"Length must be even and >= 2, got {length}")

    if rng is None:
        rng = random.Random()

    # Shuffle n opens and n closes, then rotate past the deepest prefix deficit
    n = length // 2
    shape = [True] * n + [False] * n
    rng.shuffle(shape)
    start = 0
    depth = 0
    min_depth = 0
    for i, is_open in enumerate(shape):
        depth += 1 if is_open else -1
        if depth < min_depth:
            min_depth = depth
            start = i + 1
    shape = shape[start:] + shape[:start]

    chars: list[str] = []
    stack: list[Bracket] = []
    for is_open in shape:
        if is_open:
            bracket = rng.choice(KINDS)
            stack.append(bracket)
            chars.append(bracket.opening)
        else:
            chars.append(stack.pop().closing)
    return "".join(chars)


def generate_incomplete_line(length: int, rng: random.Random | None = None) -> str:
    """Generate a line with no corruption and at least one bracket left open."""
    if length < 1:
        raise ValueError(f"Length must be >= 1, got {length}")

    if rng is None:
        rng = random.Random()

    chars: list[str] = []
    stack: list[Bracket] = []
    for i in range(length):
        remaining = length - i
        # Never close the last open bracket with the final character.
        can_close = bool(stack) and not (remaining == 1 and len(stack) == 1)
        if can_close and rng.random() < 0.4:
            chars.append(stack.pop().closing)
        else:
            bracket = rng.choice(KINDS)
            stack.append(bracket)
            chars.append(bracket.opening)
    return "".join(chars)


def generate_corrupted_line(length: int, rng: random.Random | None = None) -> str:
    """Generate a line whose first corruption is a mismatched closing bracket."""
    if length < 2:
        raise ValueError(f"Length must be >= 2, got {length}")

    if rng is None:
        rng = random.Random()

    prefix_len = rng.randint(1, length - 1)
    prefix = generate_incomplete_line(prefix_len, rng)

    state = ParserState()
    for ch in prefix:
        handle_closing_bracket(state, ch)
        handle_opening_bracket(state, ch)
    expected = state.stack[-1].closing
    wrong = rng.choice([ch for ch in CLOSING_CHARS if ch != expected])

    tail_alphabet = list(OPENING_CHARS) + list(CLOSING_CHARS)
    tail = "".join(rng.choice(tail_alphabet) for _ in range(length - prefix_len - 1))
    return prefix + wrong + tail


_GENERATORS: Dict[str, Callable[[int, random.Random], str]] = {
    "complete": generate_complete_line,
    "incomplete": generate_incomplete_line,
    "corrupted": generate_corrupted_line,
}


def build_fixture_lines(
    seed: int,
    counts: Dict[str, int] | None = None,
    length_range: Tuple[int, int] = LENGTH_RANGE,
) -> List[str]:
    """Build a shuffled list of synthetic lines.

    Parameters
    ----------
    seed:
        Random seed for reproducibility.
    counts:
        Dict mapping ``"complete"``, ``"incomplete"`` and ``"corrupted"`` to
        the number of lines of each kind.
    length_range:
        Inclusive (min, max) line length.
    """
    if counts is None:
        counts = DEFAULT_COUNTS.copy()

    unknown = sorted(set(counts) - set(_GENERATORS))
    if unknown:
        raise ValueError(f"Unknown line kinds: {unknown}; available: {sorted(_GENERATORS)}")

    rng = random.Random(seed)
    lines: List[str] = []
    for kind, count in counts.items():
        generator = _GENERATORS[kind]
        for _ in range(count):
            length = rng.randint(length_range[0], length_range[1])
            if kind == "complete" and length % 2 != 0:
                # Stay inside the inclusive range.
                length += 1 if length < length_range[1] else -1
            line_rng = random.Random(rng.randint(0, 2**62))
            lines.append(generator(max(length, 2), line_rng))

    rng.shuffle(lines)
    return lines


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate synthetic bracket lines")
    parser.add_argument("--out", type=Path, required=True, help="Output text path")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument(
        "--complete", type=int, default=DEFAULT_COUNTS["complete"], help="Balanced lines"
    )
    parser.add_argument(
        "--incomplete", type=int, default=DEFAULT_COUNTS["incomplete"], help="Incomplete lines"
    )
    parser.add_argument(
        "--corrupted", type=int, default=DEFAULT_COUNTS["corrupted"], help="Corrupted lines"
    )

    args = parser.parse_args(argv)

    lines = build_fixture_lines(
        seed=args.seed,
        counts={
            "complete": args.complete,
            "incomplete": args.incomplete,
            "corrupted": args.corrupted,
        },
    )

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    print(f"Wrote {len(lines)} lines to {args.out}")


if __name__ == "__main__":
    main()
