"""Result records produced by a search and their JSON form."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_NANOS_PER_SEC = 1_000_000_000


def _duration_dict(seconds: float) -> dict[str, int]:
    secs, nanos = divmod(round(seconds * _NANOS_PER_SEC), _NANOS_PER_SEC)
    return {"secs": secs, "nanos": nanos}


def _number(value: float) -> float | None:
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class Match:
    """One hit: a line number (0 for a file-name hit), the text and the span."""

    line_number: int
    content: str
    position: tuple[int, int]

    def _to_dict(self) -> dict[str, Any]:
        return {
            "line_number": self.line_number,
            "content": self.content,
            "position": list(self.position),
        }


@dataclass
class SearchResult:
    """The hits found in one file and how long scanning it took, in seconds."""

    file_path: Path
    matches: list[Match] = field(default_factory=list)
    scan_duration: float = 0.0

    def _to_dict(self) -> dict[str, Any]:
        return {
            "file_path": str(self.file_path),
            "matches": [m._to_dict() for m in self.matches],
            "scan_duration": _duration_dict(self.scan_duration),
        }


@dataclass
class PerformanceStats:
    """Throughput figures for a search; times are in seconds."""

    files_per_second: float
    average_scan_time: float
    thread_utilization: float

    def _to_dict(self) -> dict[str, Any]:
        return {
            "files_per_second": _number(self.files_per_second),
            "average_scan_time": _duration_dict(self.average_scan_time),
            "thread_utilization": _number(self.thread_utilization),
        }


@dataclass
class SearchReport:
    """Everything a search produced."""

    total_files_scanned: int
    total_matches: int
    total_duration: float
    results: list[SearchResult]
    performance: PerformanceStats

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict; durations become ``{"secs", "nanos"}``."""
        return {
            "total_files_scanned": self.total_files_scanned,
            "total_matches": self.total_matches,
            "total_duration": _duration_dict(self.total_duration),
            "results": [r._to_dict() for r in self.results],
            "performance": self.performance._to_dict(),
        }

    def to_json(self) -> str:
        """Return the report as indented JSON."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)