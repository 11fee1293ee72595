"""Line sources for the syntax checker: text, files and bundled resources."""

from __future__ import annotations

from pathlib import Path
from typing import List

RESOURCE_DIR = Path(__file__).resolve().parent.parent / "resources"
DEFAULT_RESOURCE = "navigation"


def split_lines(text: str) -> List[str]:
    """Split text into lines without line terminators.

    A trailing newline does not produce an extra empty line; blank lines in
    the middle of the text are kept.
    """
    return text.splitlines()


def read_lines(path: str | Path) -> List[str]:
    """Read a UTF-8 text file fully and return its lines."""
    return split_lines(Path(path).read_text(encoding="utf-8"))


def available_resources() -> List[str]:
    return sorted(p.stem for p in RESOURCE_DIR.glob("*.txt"))


def load_bundled_lines(name: str = DEFAULT_RESOURCE) -> List[str]:
    """Load one of the input files shipped with the package."""
    path = RESOURCE_DIR / f"{name}.txt"
    if not path.is_file():
        raise FileNotFoundError(
            f"Unknown bundled input '{name}'; available: {available_resources()}"
        )
    return read_lines(path)


__all__ = [
    "DEFAULT_RESOURCE",
    "split_lines",
    "read_lines",
    "available_resources",
    "load_bundled_lines",
]
