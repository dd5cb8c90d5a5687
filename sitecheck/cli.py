from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from pydantic import ValidationError

from sitecheck.config import settings
from sitecheck.models import Defaults, PoolConfig
from sitecheck.ops_logic import summarize_records
from sitecheck.persistence import write_report
from sitecheck.registry import load_target_file
from sitecheck.runner import run_checks

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitecheck",
        description="Check liveness and response time of HTTP(S) endpoints concurrently.",
    )
    parser.add_argument("urls", nargs="*", help="URLs to check")
    parser.add_argument("--file", type=Path, help="File with one URL per line, or a YAML target file")
    parser.add_argument("--workers", type=int, help=f"Worker threads (default: {settings.SITECHECK_WORKERS})")
    parser.add_argument("--timeout", type=float, help=f"Per-request timeout in seconds (default: {settings.SITECHECK_TIMEOUT_S:g})")
    parser.add_argument("--retries", type=int, help=f"Extra attempts after a failed request (default: {settings.SITECHECK_RETRIES})")
    parser.add_argument("--output", default=settings.SITECHECK_REPORT_PATH, help="Report path (default: %(default)s)")
    return parser


def _first(*values):
    for value in values:
        if value is not None:
            return value
    return None


def resolve_pool_config(args: argparse.Namespace, defaults: Defaults) -> PoolConfig:
    return PoolConfig(
        worker_count=_first(args.workers, defaults.workers, settings.SITECHECK_WORKERS),
        timeout_s=_first(args.timeout, defaults.timeout_s, settings.SITECHECK_TIMEOUT_S),
        retries=_first(args.retries, defaults.retries, settings.SITECHECK_RETRIES),
    )


def resolve_log_level(name: str) -> int | None:
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else None


def main(argv: List[str] | None = None) -> int:
    level = resolve_log_level(settings.SITECHECK_LOG_LEVEL)
    logging.basicConfig(
        level=logging.INFO if level is None else level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if level is None:
        logger.warning(
            "Unknown log level %r in SITECHECK_LOG_LEVEL, using INFO",
            settings.SITECHECK_LOG_LEVEL,
        )
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file is None and not args.urls:
        parser.print_usage(sys.stderr)
        return 2

    targets = list(args.urls)
    defaults = Defaults()
    if args.file is not None:
        try:
            target_file = load_target_file(args.file)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read URLs from file '%s': %s", args.file, exc)
        else:
            targets.extend(target_file.targets)
            defaults = target_file.defaults

    try:
        config = resolve_pool_config(args, defaults)
    except ValidationError as exc:
        parser.error(f"invalid pool settings: {exc}")

    if not targets:
        print("No URLs to check.", file=sys.stderr)
        return 0

    records = run_checks(targets, config)
    summary = summarize_records(records)
    logger.info(
        "Checked %s targets: %s reachable, %s failed",
        summary["count"],
        summary["reachable"],
        summary["failed"],
    )

    try:
        write_report(args.output, records)
    except OSError as exc:
        print(f"Error writing to {args.output}: {exc}", file=sys.stderr)
        return 1

    print(f"Results saved to {args.output}")
    return 0
