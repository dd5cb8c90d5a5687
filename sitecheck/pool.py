from __future__ import annotations

import logging
import threading
from collections import Counter
from typing import Callable, Sequence

from sitecheck.aggregator import ResultAggregator
from sitecheck.checks.http_check import run_http
from sitecheck.checks.results import CheckOutcome
from sitecheck.models import PoolConfig
from sitecheck.target_queue import CLOSED, TargetQueue, TargetQueueClosed

logger = logging.getLogger(__name__)

CheckFn = Callable[..., CheckOutcome]
OutcomeCallback = Callable[[CheckOutcome], None]


class Worker(threading.Thread):
    """Drains the target queue one target at a time until it is closed."""

    def __init__(
        self,
        worker_id: int,
        queue: TargetQueue,
        aggregator: ResultAggregator,
        config: PoolConfig,
        check_fn: CheckFn,
        on_outcome: OutcomeCallback | None = None,
    ) -> None:
        super().__init__(name=f"sitecheck-worker-{worker_id}", daemon=True)
        self.worker_id = worker_id
        self.queue = queue
        self.aggregator = aggregator
        self.config = config
        self.check_fn = check_fn
        self.on_outcome = on_outcome
        self.processed = 0

    def run(self) -> None:
        logger.debug("Worker %s starting", self.worker_id)
        while True:
            target = self.queue.dequeue()
            if target is CLOSED:
                break

            outcome = self._check(target)
            self.aggregator.record(outcome)
            self.processed += 1
            self._emit(outcome)
        logger.debug("Worker %s stopped after %s targets", self.worker_id, self.processed)

    def _check(self, target: str) -> CheckOutcome:
        try:
            return self.check_fn(
                target,
                timeout_s=self.config.timeout_s,
                retries=self.config.retries,
            )
        except Exception as exc:
            logger.exception("Worker %s crashed while checking %s", self.worker_id, target)
            return CheckOutcome.failure(
                target, f"Worker error: {exc.__class__.__name__}: {exc}"
            )

    def _emit(self, outcome: CheckOutcome) -> None:
        if self.on_outcome is None:
            return
        try:
            self.on_outcome(outcome)
        except Exception as exc:
            # Progress output must never cost a recorded outcome.
            logger.warning("Progress callback failed for %s: %s", outcome.url, exc)


class WorkerPool:
    """
    Fixed set of worker threads checking targets concurrently.

    ``run()`` starts ``config.worker_count`` workers, feeds them every target,
    closes the queue and joins them. The returned list holds exactly one
    outcome per input target, in completion order.
    """

    def __init__(
        self,
        config: PoolConfig,
        check_fn: CheckFn | None = None,
        on_outcome: OutcomeCallback | None = None,
    ) -> None:
        self.config = config
        self.check_fn = check_fn or run_http
        self.on_outcome = on_outcome

    def run(self, targets: Sequence[str]) -> list[CheckOutcome]:
        queue = TargetQueue()
        aggregator = ResultAggregator()

        workers = [
            Worker(
                worker_id=i,
                queue=queue,
                aggregator=aggregator,
                config=self.config,
                check_fn=self.check_fn,
                on_outcome=self.on_outcome,
            )
            for i in range(self.config.worker_count)
        ]
        for worker in workers:
            worker.start()

        for target in targets:
            self._enqueue(queue, aggregator, target)
        queue.close()

        for worker in workers:
            worker.join()

        outcomes = aggregator.snapshot()
        return outcomes + self._missing_outcomes(targets, outcomes)

    @staticmethod
    def _enqueue(queue: TargetQueue, aggregator: ResultAggregator, target: str) -> None:
        try:
            queue.enqueue(target)
        except TargetQueueClosed as exc:
            logger.warning("Failed to send %s to worker threads: %s", target, exc)
            aggregator.record(CheckOutcome.failure(target, f"Failed to enqueue target: {exc}"))

    @staticmethod
    def _missing_outcomes(
        targets: Sequence[str], outcomes: list[CheckOutcome]
    ) -> list[CheckOutcome]:
        missing = Counter(targets) - Counter(o.url for o in outcomes)
        if not missing:
            return []

        logger.warning(
            "%s targets finished without an outcome: %s",
            sum(missing.values()),
            ", ".join(sorted(missing)),
        )
        return [
            CheckOutcome.failure(url, "Worker exited before recording an outcome")
            for url, count in missing.items()
            for _ in range(count)
        ]
