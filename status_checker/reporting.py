from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from status_checker.checks.results import serialize_ts
from status_checker.exceptions import ReportWriteError
from status_checker.report_schemas import (
    ReportConfig,
    ResultEntry,
    StatusReport,
    SummaryEntry,
)
from status_checker.runner import RunReport

logger = logging.getLogger(__name__)


def build_status_report(report: RunReport) -> StatusReport:
    cfg = report.config
    summary = (
        SummaryEntry.model_validate(report.summary.to_dict())
        if report.summary is not None
        else None
    )
    return StatusReport(
        generated_at=serialize_ts(datetime.now(timezone.utc)),
        started_at=serialize_ts(report.started_at),
        finished_at=serialize_ts(report.finished_at),
        config=ReportConfig(
            workers=cfg.worker_count,
            timeout_s=cfg.timeout_s,
            retries=cfg.max_retries,
            url_count=len(cfg.urls),
        ),
        results=[ResultEntry.model_validate(r.to_dict()) for r in report.results],
        summary=summary,
    )


def render_report_json(report: RunReport) -> str:
    return build_status_report(report).model_dump_json(by_alias=True, indent=2) + "\n"


def write_report(report: RunReport, path: Path | str) -> Path:
    p = Path(path).expanduser()
    payload = render_report_json(report)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(payload, encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(str(p), e) from e

    logger.info("Wrote %d result(s) to %s", len(report.results), p)
    return p
