from __future__ import annotations

from datetime import timedelta
from typing import Any, Iterable

from sitecheck.api_schemas import ReportRecord
from sitecheck.checks.results import CheckOutcome
from sitecheck.ops_logic import serialize_ts


def elapsed_ms(elapsed: timedelta) -> int:
    # Whole milliseconds, truncated.
    return elapsed // timedelta(milliseconds=1)


def build_record(outcome: CheckOutcome) -> ReportRecord:
    return ReportRecord(
        url=outcome.url,
        status_code=outcome.status_code,
        response_time_ms=elapsed_ms(outcome.elapsed),
        timestamp=serialize_ts(outcome.observed_at) or "",
        error=outcome.error,
    )


def build_report(outcomes: Iterable[CheckOutcome]) -> list[dict[str, Any]]:
    """
    One serializable record per outcome, in snapshot order.

    No sorting or deduplication: a URL checked twice yields two records.
    """
    return [build_record(outcome).model_dump() for outcome in outcomes]
