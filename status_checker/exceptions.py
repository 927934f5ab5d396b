"""Errors that stop a status-check run before or after dispatch."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when the run configuration or URL source is unusable."""


class ReportWriteError(Exception):
    """Raised when the JSON report cannot be written."""

    def __init__(self, path: str, original: Exception):
        self.path = path
        self.original = original
        super().__init__(f"Could not write report to {path}: {original}")
