from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, TypeVar

import yaml
from pydantic import NonNegativeFloat, TypeAdapter, ValidationError

from status_checker.config import settings
from status_checker.exceptions import ConfigurationError
from status_checker.models import Defaults, RunConfig, UrlList

YAML_SUFFIXES = {".yml", ".yaml"}

T = TypeVar("T")

_DELAY_MS = TypeAdapter(NonNegativeFloat)


def parse_url_lines(text: str) -> list[str]:
    """One URL per line; blank lines and ``#`` comments are skipped."""
    urls: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            urls.append(line)
    return urls


def load_urls(path: Path | str) -> UrlList:
    p = Path(path)
    if not p.exists():
        raise ConfigurationError(f"Missing URL file at {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Error reading file {p}: {e}") from e

    if p.suffix.lower() not in YAML_SUFFIXES:
        return UrlList(urls=parse_url_lines(text))

    try:
        data = yaml.safe_load(text) or {}
        if isinstance(data, list):
            data = {"urls": data}
        return UrlList.model_validate(data)
    except (yaml.YAMLError, ValidationError) as e:
        raise ConfigurationError(f"Invalid URL file {p}: {e}") from e


def _first(*values: Optional[T]) -> Optional[T]:
    for v in values:
        if v is not None:
            return v
    return None


def _retry_delay_s(raw: object) -> float:
    try:
        return _DELAY_MS.validate_python(raw) / 1000
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: CHECKER_RETRY_DELAY_MS: {raw!r} is not a non-negative number"
        ) from e


def build_run_config(
    urls: Iterable[str],
    workers: int | None = None,
    timeout_s: float | None = None,
    retries: int | None = None,
    defaults: Defaults | None = None,
) -> RunConfig:
    """
    Resolve the run configuration once, before any worker starts.
    Explicit values win over URL-file defaults, which win over the environment.
    """
    urls = tuple(urls)
    if not urls:
        raise ConfigurationError("No URLs provided")

    d = defaults or Defaults()
    values = {
        "worker_count": _first(workers, d.workers, settings.CHECKER_WORKERS),
        "timeout_s": _first(timeout_s, d.timeout_s, settings.CHECKER_TIMEOUT_S),
        "max_retries": _first(retries, d.retries, settings.CHECKER_RETRIES),
        "retry_delay_s": _retry_delay_s(settings.CHECKER_RETRY_DELAY_MS),
        "connect_timeout_s": settings.CHECKER_CONNECT_TIMEOUT_S,
        "urls": urls,
    }
    try:
        return RunConfig.model_validate(values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from e
