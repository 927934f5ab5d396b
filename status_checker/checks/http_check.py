from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Union

import requests

from status_checker.checks.results import CheckOutcome, CheckResult, Failure, Success

logger = logging.getLogger(__name__)

RETRY_DELAY_S = 0.1

# Request errors that no amount of retrying can fix.
UNRECOVERABLE_ERRORS = (
    requests.exceptions.InvalidURL,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.URLRequired,
)


@dataclass(frozen=True)
class Attempting:
    """Retry loop state: ``made`` attempts have failed at the transport level."""

    made: int


AttemptState = Union[Attempting, Success, Failure]
Getter = Callable[..., requests.Response]


class DeadlineExceeded(requests.exceptions.Timeout):
    """The whole request, headers included, took longer than the deadline."""


class _DeadlineCall:
    """
    Runs one GET on a daemon thread and stops waiting for it at the deadline.

    ``requests`` timeouts only bound each socket read, so a server trickling
    bytes could otherwise hold an attempt open indefinitely. A response that
    arrives after the caller gave up is closed by the abandoned thread.
    """

    def __init__(self, get: Getter, url: str, timeout: tuple[float, float]) -> None:
        self._get = get
        self._url = url
        self._timeout = timeout
        self._lock = threading.Lock()
        self._abandoned = False
        self._response: requests.Response | None = None
        self._error: Exception | None = None

    def _run(self) -> None:
        try:
            r = self._get(self._url, timeout=self._timeout, stream=True)
        except Exception as e:
            with self._lock:
                self._error = e
            return

        with self._lock:
            late = self._abandoned
            if not late:
                self._response = r
        if late:
            r.close()

    def __call__(self, deadline_s: float) -> requests.Response:
        t = threading.Thread(target=self._run, name="http-attempt", daemon=True)
        t.start()
        t.join(deadline_s)

        with self._lock:
            if self._response is not None:
                return self._response
            if self._error is not None:
                raise self._error
            self._abandoned = True
        raise DeadlineExceeded(f"No response from {self._url} within {deadline_s}s")


def _next_state(
    state: Attempting,
    get: Getter,
    url: str,
    timeout: tuple[float, float],
    max_retries: int,
) -> AttemptState:
    try:
        r = _DeadlineCall(get, url, timeout)(max(timeout))
    except UNRECOVERABLE_ERRORS as e:
        logger.warning("Not retrying %s: %s", url, e)
        return Failure(str(e))
    except requests.RequestException as e:
        made = state.made + 1
        if made > max_retries:
            logger.warning("Giving up on %s after %d attempt(s): %s", url, made, e)
            return Failure(str(e))
        logger.warning(
            "Attempt %d/%d for %s failed: %s", made, max_retries + 1, url, e
        )
        return Attempting(made)

    # Only the status line matters; don't download the body.
    r.close()
    return Success(r.status_code)


def attempt(
    url: str,
    timeout_s: float,
    max_retries: int,
    session: requests.Session | None = None,
    retry_delay_s: float = RETRY_DELAY_S,
    connect_timeout_s: float | None = None,
) -> CheckOutcome:
    """
    GET ``url`` until a response arrives or the retry budget is spent.

    Any HTTP status, 4xx and 5xx included, is a ``Success``. Transport
    failures are retried ``max_retries`` times with ``retry_delay_s`` between
    attempts, so an always-failing URL costs exactly ``max_retries + 1``
    requests.

    Each attempt must receive its status line and headers within
    ``timeout_s`` (or ``connect_timeout_s`` when that is larger); an attempt
    that runs past it counts as a timeout.
    """
    if max_retries < 0:
        raise ValueError("max_retries must be >= 0")

    get: Getter = session.get if session is not None else requests.get
    connect_timeout = timeout_s if connect_timeout_s is None else connect_timeout_s
    timeout = (connect_timeout, timeout_s)

    state: AttemptState = Attempting(0)
    while isinstance(state, Attempting):
        if state.made:
            time.sleep(retry_delay_s)
        state = _next_state(state, get, url, timeout, max_retries)
    return state


def run_http(
    url: str,
    timeout_s: float,
    max_retries: int = 0,
    session: requests.Session | None = None,
    retry_delay_s: float = RETRY_DELAY_S,
    connect_timeout_s: float | None = None,
) -> CheckResult:
    start = time.perf_counter()
    outcome = attempt(
        url,
        timeout_s=timeout_s,
        max_retries=max_retries,
        session=session,
        retry_delay_s=retry_delay_s,
        connect_timeout_s=connect_timeout_s,
    )
    latency_ms = int((time.perf_counter() - start) * 1000)
    return CheckResult(
        url=url,
        outcome=outcome,
        latency_ms=latency_ms,
        timestamp=datetime.now(timezone.utc),
    )
