from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from status_checker.config import settings
from status_checker.exceptions import ConfigurationError, ReportWriteError
from status_checker.formatting import format_summary
from status_checker.notifier import ConsolePrinter
from status_checker.registry import build_run_config, load_urls
from status_checker.reporting import write_report
from status_checker.runner import run_batch

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="status-checker",
        description="Check reachability and response time of HTTP(S) endpoints.",
    )
    ap.add_argument("urls", nargs="*", metavar="URL", help="URL to check")
    ap.add_argument(
        "--file",
        help="URL list: one URL per line, or a YAML file with 'urls' and 'defaults'",
    )
    ap.add_argument("--workers", type=int, help="number of worker threads")
    ap.add_argument("--timeout", type=float, help="per-request timeout in seconds")
    ap.add_argument("--retries", type=int, help="retries after a transport failure")
    ap.add_argument("--output", help="where to write the JSON report")
    ap.add_argument(
        "--quiet", action="store_true", help="don't print a line per result"
    )
    return ap


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(settings.LOG_LEVEL)

    try:
        urls = list(args.urls)
        defaults = None
        if args.file:
            source = load_urls(args.file)
            urls.extend(source.urls)
            defaults = source.defaults
        config = build_run_config(
            urls,
            workers=args.workers,
            timeout_s=args.timeout,
            retries=args.retries,
            defaults=defaults,
        )
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 2

    printer = ConsolePrinter()
    report = run_batch(config, on_result=None if args.quiet else printer)
    printer.message("\n" + format_summary(report.summary) + "\n")

    try:
        path = write_report(report, args.output or settings.CHECKER_OUTPUT_PATH)
    except ReportWriteError as e:
        logger.error("%s", e)
        return 1

    printer.message(f"Results written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
