from __future__ import annotations

import threading

from status_checker.checks.results import CheckResult


class ResultStore:
    """
    Append-only collection shared by all workers.
    Entries keep completion order; read them back only after ``close()``.
    """

    def __init__(self) -> None:
        self._results: list[CheckResult] = []
        self._closed = False
        self._lock = threading.Lock()

    def append(self, result: CheckResult) -> None:
        with self._lock:
            if self._closed:
                raise RuntimeError("result store is closed")
            self._results.append(result)

    def close(self) -> None:
        with self._lock:
            self._closed = True

    def results(self) -> tuple[CheckResult, ...]:
        with self._lock:
            if not self._closed:
                raise RuntimeError("results read before all workers finished")
            return tuple(self._results)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
