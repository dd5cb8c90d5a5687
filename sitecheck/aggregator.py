from __future__ import annotations

import threading

from sitecheck.checks.results import CheckOutcome


class ResultAggregator:
    """Append-only outcome list shared by all workers.

    ``snapshot()`` is meant to be read once, after every writer has joined.
    """

    def __init__(self) -> None:
        self._outcomes: list[CheckOutcome] = []
        self._lock = threading.Lock()

    def record(self, outcome: CheckOutcome) -> None:
        with self._lock:
            self._outcomes.append(outcome)

    def snapshot(self) -> list[CheckOutcome]:
        with self._lock:
            return list(self._outcomes)
