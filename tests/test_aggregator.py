import threading
import unittest
from datetime import timedelta

from sitecheck.aggregator import ResultAggregator
from sitecheck.checks.results import CheckOutcome


class ResultAggregatorTests(unittest.TestCase):
    def test_concurrent_records_are_all_kept(self) -> None:
        agg = ResultAggregator()

        def write(worker: int) -> None:
            for i in range(100):
                agg.record(CheckOutcome.success(f"http://w{worker}-{i}.test", 200, timedelta(0)))

        threads = [threading.Thread(target=write, args=(n,)) for n in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        snap = agg.snapshot()
        self.assertEqual(len(snap), 1000)
        self.assertEqual(len({o.url for o in snap}), 1000)

    def test_snapshot_is_a_copy(self) -> None:
        agg = ResultAggregator()
        agg.record(CheckOutcome.failure("http://a.test", "Connection error: refused"))

        snap = agg.snapshot()
        snap.clear()

        self.assertEqual(len(agg.snapshot()), 1)


if __name__ == "__main__":
    unittest.main()
