from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from status_checker.checks.results import CheckResult


@dataclass(frozen=True)
class SummaryStats:
    count: int
    min_ms: int
    max_ms: int
    mean_ms: float

    @property
    def mean_display(self) -> str:
        return f"{self.mean_ms:.2f}"

    def to_dict(self) -> dict:
        return {
            "count": self.count,
            "min_ms": self.min_ms,
            "max_ms": self.max_ms,
            "avg_ms": round(self.mean_ms, 2),
        }


def summarize(results: Iterable[CheckResult]) -> SummaryStats | None:
    """
    Latency statistics over successful checks only.
    Returns None when nothing succeeded.
    """
    times = sorted(r.latency_ms for r in results if r.ok)
    if not times:
        return None

    return SummaryStats(
        count=len(times),
        min_ms=times[0],
        max_ms=times[-1],
        mean_ms=sum(times) / len(times),
    )
