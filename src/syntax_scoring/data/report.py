"""JSON Lines reports of per-line parse outcomes."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterable, List, Optional

import json

from ..parser import LineResult
from ..scorer import calculate_score


@dataclass
class LineReport:
    """Serialisable record for a single input line."""

    line_no: int
    line: str
    status: str
    # Set for corrupted lines only
    error: Optional[str] = None
    # Set for non-corrupted lines only
    completion: Optional[str] = None
    score: Optional[int] = None

    @classmethod
    def from_result(cls, line_no: int, result: LineResult) -> "LineReport":
        if result.corrupted:
            return cls(line_no=line_no, line=result.line, status=result.status, error=result.error)
        completion = result.completion or ""
        return cls(
            line_no=line_no,
            line=result.line,
            status=result.status,
            completion=completion,
            score=calculate_score(completion),
        )

    def to_json(self) -> str:
        """Serialise the report as a JSON string."""
        payload = asdict(self)
        # Omit fields that do not apply to this line's status.
        payload = {k: v for k, v in payload.items() if v is not None}
        return json.dumps(payload, ensure_ascii=False)


def write_report(reports: Iterable[LineReport], path: str | Path) -> None:
    """Write line reports to disk as JSON Lines."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        for report in reports:
            f.write(report.to_json())
            f.write("\n")


def read_report(path: str | Path, status: Optional[str] = None) -> List[LineReport]:
    """Load line reports from disk.

    Parameters
    ----------
    path:
        JSON Lines report path.
    status:
        Optional status filter (``"corrupted"``, ``"incomplete"`` or ``"complete"``).
    """

    reports: list[LineReport] = []
    with Path(path).open("r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            report = LineReport(**json.loads(line))
            if status is None or report.status == status:
                reports.append(report)
    return reports


__all__ = ["LineReport", "read_report", "write_report"]
