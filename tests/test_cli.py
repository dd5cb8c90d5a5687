import io
import json
import logging
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from sitecheck.cli import build_parser, main, resolve_log_level, resolve_pool_config
from sitecheck.models import Defaults, PoolConfig

RECORD = {
    "url": "http://a.test",
    "status_code": 200,
    "response_time_ms": 12,
    "timestamp": "2026-10-19T08:15:02.123456Z",
    "error": None,
}


class CliTests(unittest.TestCase):
    def test_no_targets_and_no_file_prints_usage(self) -> None:
        with patch("sys.stderr", new_callable=io.StringIO) as err:
            self.assertEqual(main([]), 2)

        self.assertIn("usage:", err.getvalue())

    def test_unreadable_file_and_nothing_else_is_not_an_error(self) -> None:
        with patch("sitecheck.cli.run_checks") as run_mock, patch(
            "sys.stderr", new_callable=io.StringIO
        ) as err, self.assertLogs("sitecheck.cli", level="WARNING") as logs:
            code = main(["--file", "/nonexistent/sitecheck/urls.txt"])

        self.assertEqual(code, 0)
        run_mock.assert_not_called()
        self.assertIn("No URLs to check.", err.getvalue())
        self.assertIn("Could not read URLs from file", logs.output[0])

    def test_runs_checks_and_writes_report(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            url_file = Path(td) / "urls.txt"
            url_file.write_text("# list\nhttp://b.test\n")
            output = Path(td) / "out" / "status.json"

            with patch("sitecheck.cli.run_checks", return_value=[RECORD]) as run_mock, patch(
                "sys.stdout", new_callable=io.StringIO
            ) as out:
                code = main(
                    [
                        "http://a.test",
                        "--file",
                        str(url_file),
                        "--workers",
                        "3",
                        "--timeout",
                        "2",
                        "--retries",
                        "1",
                        "--output",
                        str(output),
                    ]
                )

            self.assertEqual(code, 0)
            self.assertEqual(json.loads(output.read_text()), [RECORD])
            self.assertIn(f"Results saved to {output}", out.getvalue())

        targets, config = run_mock.call_args.args
        self.assertEqual(targets, ["http://a.test", "http://b.test"])
        self.assertEqual(config, PoolConfig(worker_count=3, timeout_s=2, retries=1))

    def test_invalid_worker_count_exits_with_usage_error(self) -> None:
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as ctx:
                main(["http://a.test", "--workers", "0"])

        self.assertEqual(ctx.exception.code, 2)

    def test_report_write_failure_exits_nonzero(self) -> None:
        with patch("sitecheck.cli.run_checks", return_value=[RECORD]), patch(
            "sitecheck.cli.write_report", side_effect=OSError("disk full")
        ), patch("sys.stderr", new_callable=io.StringIO) as err:
            code = main(["http://a.test", "--output", "status.json"])

        self.assertEqual(code, 1)
        self.assertIn("Error writing to status.json: disk full", err.getvalue())

    def test_unknown_log_level_falls_back_to_info(self) -> None:
        with patch("sitecheck.cli.settings.SITECHECK_LOG_LEVEL", "verbose"), patch(
            "sys.stderr", new_callable=io.StringIO
        ), self.assertLogs("sitecheck.cli", level="WARNING") as logs:
            code = main(["--file", "/nonexistent/sitecheck/urls.txt"])

        self.assertEqual(code, 0)
        self.assertIn("Unknown log level 'verbose'", logs.output[0])


class ResolveLogLevelTests(unittest.TestCase):
    def test_known_and_unknown_levels(self) -> None:
        self.assertEqual(resolve_log_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_log_level(" WARNING "), logging.WARNING)
        self.assertIsNone(resolve_log_level("verbose"))


class ResolvePoolConfigTests(unittest.TestCase):
    def test_flags_win_over_file_defaults(self) -> None:
        args = build_parser().parse_args(["http://a.test", "--workers", "2"])
        cfg = resolve_pool_config(args, Defaults(workers=6, timeout_s=1.5, retries=4))

        self.assertEqual(cfg, PoolConfig(worker_count=2, timeout_s=1.5, retries=4))

    def test_environment_defaults_fill_the_rest(self) -> None:
        args = build_parser().parse_args(["http://a.test"])
        with patch("sitecheck.cli.settings.SITECHECK_WORKERS", 5), patch(
            "sitecheck.cli.settings.SITECHECK_TIMEOUT_S", 7.0
        ), patch("sitecheck.cli.settings.SITECHECK_RETRIES", 1):
            cfg = resolve_pool_config(args, Defaults())

        self.assertEqual(cfg, PoolConfig(worker_count=5, timeout_s=7.0, retries=1))


if __name__ == "__main__":
    unittest.main()
