from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    status_code: int

    def __post_init__(self) -> None:
        if not 0 <= self.status_code <= 0xFFFF:
            raise ValueError(f"status code out of range: {self.status_code}")


@dataclass(frozen=True)
class Failure:
    message: str


CheckOutcome = Union[Success, Failure]


def serialize_ts(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class CheckResult:
    url: str
    outcome: CheckOutcome
    latency_ms: int
    timestamp: datetime

    def __post_init__(self) -> None:
        if self.latency_ms < 0:
            raise ValueError(f"negative latency for {self.url}: {self.latency_ms}")

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, Success)

    @property
    def status_code(self) -> int | None:
        if isinstance(self.outcome, Success):
            return self.outcome.status_code
        return None

    @property
    def error(self) -> str | None:
        if isinstance(self.outcome, Failure):
            return self.outcome.message
        return None

    def to_dict(self) -> dict[str, Any]:
        status: dict[str, Any]
        if isinstance(self.outcome, Success):
            status = {"Ok": self.outcome.status_code}
        else:
            status = {"Err": self.outcome.message}
        return {
            "url": self.url,
            "status": status,
            "response_time_ms": self.latency_ms,
            "timestamp": serialize_ts(self.timestamp),
        }
