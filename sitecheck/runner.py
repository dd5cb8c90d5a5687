from __future__ import annotations

import logging
from typing import Any, Sequence

from sitecheck.checks.http_check import run_http
from sitecheck.formatting import print_outcome
from sitecheck.models import PoolConfig
from sitecheck.pool import CheckFn, OutcomeCallback, WorkerPool
from sitecheck.reporting import build_report

logger = logging.getLogger(__name__)


def run_checks(
    targets: Sequence[str],
    config: PoolConfig,
    on_outcome: OutcomeCallback | None = print_outcome,
    check_fn: CheckFn | None = None,
) -> list[dict[str, Any]]:
    if not targets:
        logger.info("No URLs to check.")
        return []

    logger.debug(
        "Checking %s targets with %s workers (timeout=%ss, retries=%s)",
        len(targets),
        config.worker_count,
        config.timeout_s,
        config.retries,
    )
    pool = WorkerPool(config, check_fn=check_fn or run_http, on_outcome=on_outcome)
    outcomes = pool.run(list(targets))
    return build_report(outcomes)
