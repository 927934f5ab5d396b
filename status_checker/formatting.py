from __future__ import annotations

from status_checker.checks.results import CheckResult, serialize_ts
from status_checker.summary import SummaryStats


def format_result(result: CheckResult) -> str:
    ts = serialize_ts(result.timestamp)
    if result.ok:
        return (
            f"[SUCCESS] {result.url} - HTTP {result.status_code} "
            f"in {result.latency_ms} ms at {ts}"
        )
    return f"[FAILURE] {result.url} - {result.error} in {result.latency_ms} ms at {ts}"


def format_summary(summary: SummaryStats | None) -> str:
    if summary is None:
        return "No successful responses to summarize."

    lines = [
        "Summary statistics for successful responses:",
        f"  Min: {summary.min_ms} ms",
        f"  Max: {summary.max_ms} ms",
        f"  Avg: {summary.mean_display} ms",
    ]
    return "\n".join(lines)
