from __future__ import annotations

import sys
import threading
from datetime import timedelta

from sitecheck.checks.results import CheckOutcome
from sitecheck.ops_logic import serialize_ts

_stdout_lock = threading.Lock()


def format_duration(elapsed: timedelta) -> str:
    seconds = elapsed.total_seconds()
    if seconds < 1:
        return f"{seconds * 1000:.3f}ms"
    return f"{seconds:.3f}s"


def format_outcome(outcome: CheckOutcome) -> str:
    status = str(outcome.status_code) if outcome.ok else outcome.error
    return (
        f"{outcome.url} - Status: {status}, "
        f"Response Time: {format_duration(outcome.elapsed)}, "
        f"Timestamp: {serialize_ts(outcome.observed_at)}"
    )


def print_outcome(outcome: CheckOutcome) -> None:
    line = format_outcome(outcome) + "\n"
    with _stdout_lock:
        sys.stdout.write(line)
        sys.stdout.flush()
