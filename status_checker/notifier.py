from __future__ import annotations

import sys
import threading
from typing import Optional, TextIO

from status_checker.checks.results import CheckResult
from status_checker.formatting import format_result


class ConsolePrinter:
    """Writes one complete line per result; safe to call from any worker."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    def _write(self, line: str) -> None:
        stream = self._stream or sys.stdout
        with self._lock:
            stream.write(line + "\n")
            stream.flush()

    def __call__(self, result: CheckResult) -> None:
        self._write(format_result(result))

    def message(self, text: str) -> None:
        self._write(text)
