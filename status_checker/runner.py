from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

import requests

from status_checker.checks.http_check import run_http
from status_checker.checks.results import CheckResult, Failure
from status_checker.config import settings
from status_checker.models import RunConfig
from status_checker.state import ResultStore
from status_checker.summary import SummaryStats, summarize

logger = logging.getLogger(__name__)

ResultCallback = Callable[[CheckResult], None]
Check = Callable[..., CheckResult]

# Queued once per worker after the last URL; a worker exits when it pulls one.
_CLOSED = object()


@dataclass(frozen=True)
class RunReport:
    config: RunConfig
    results: tuple[CheckResult, ...]
    summary: SummaryStats | None
    started_at: datetime
    finished_at: datetime

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def failed(self) -> int:
        return len(self.results) - self.succeeded


def build_session() -> requests.Session:
    s = requests.Session()
    s.headers.update({"User-Agent": settings.CHECKER_USER_AGENT})
    return s


def _notify(on_result: ResultCallback | None, result: CheckResult) -> None:
    if on_result is None:
        return
    try:
        on_result(result)
    except Exception:
        # Notification errors should never stop the worker loop.
        logger.exception("Result callback failed for %s", result.url)


def _check_one(
    check: Check, url: str, config: RunConfig, session: requests.Session
) -> CheckResult:
    start = time.perf_counter()
    try:
        return check(
            url,
            timeout_s=config.timeout_s,
            max_retries=config.max_retries,
            session=session,
            retry_delay_s=config.retry_delay_s,
            connect_timeout_s=config.connect_timeout_s,
        )
    except Exception as e:
        logger.exception("Check crashed for %s", url)
        return CheckResult(
            url=url,
            outcome=Failure(f"internal error: {e}"),
            latency_ms=int((time.perf_counter() - start) * 1000),
            timestamp=datetime.now(timezone.utc),
        )


def _worker(
    jobs: queue.Queue,
    store: ResultStore,
    config: RunConfig,
    check: Check,
    on_result: ResultCallback | None,
) -> None:
    name = threading.current_thread().name
    logger.debug("%s started", name)
    session = build_session()
    try:
        while True:
            url = jobs.get()
            if url is _CLOSED:
                break
            res = _check_one(check, url, config, session)
            store.append(res)
            logger.debug(
                "%s finished %s (%d/%d done)", name, url, len(store), len(config.urls)
            )
            _notify(on_result, res)
    finally:
        session.close()
        logger.debug("%s stopped", name)


def run_checks(
    config: RunConfig,
    on_result: ResultCallback | None = None,
    check: Check = run_http,
) -> tuple[CheckResult, ...]:
    """
    Check every URL in ``config`` exactly once using ``config.worker_count``
    threads pulling from one shared queue.

    Returns after every worker has exited, with results in completion order.
    ``on_result`` is called from the worker thread as each result lands.
    """
    jobs: queue.Queue = queue.Queue()
    for url in config.urls:
        jobs.put(url)
    for _ in range(config.worker_count):
        jobs.put(_CLOSED)

    store = ResultStore()
    workers = [
        threading.Thread(
            target=_worker,
            args=(jobs, store, config, check, on_result),
            name=f"checker-{i}",
            daemon=True,
        )
        for i in range(config.worker_count)
    ]
    for t in workers:
        t.start()
    for t in workers:
        t.join()

    store.close()
    return store.results()


def run_batch(
    config: RunConfig,
    on_result: ResultCallback | None = None,
    check: Check = run_http,
) -> RunReport:
    logger.info(
        "Checking %d URL(s) with %d worker(s), timeout=%ss, retries=%d",
        len(config.urls),
        config.worker_count,
        config.timeout_s,
        config.max_retries,
    )
    started_at = datetime.now(timezone.utc)
    results = run_checks(config, on_result=on_result, check=check)
    report = RunReport(
        config=config,
        results=results,
        summary=summarize(results),
        started_at=started_at,
        finished_at=datetime.now(timezone.utc),
    )
    logger.info("Finished: %d ok, %d failed", report.succeeded, report.failed)
    return report
