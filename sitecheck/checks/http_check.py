from __future__ import annotations

import time
from datetime import timedelta

import requests

from sitecheck.checks.results import CheckOutcome
from sitecheck.clients.http_client import HttpClient, HttpClientError

# Fixed delay between a failed attempt and the next one.
BACKOFF_S = 0.1


def describe_error(exc: requests.RequestException, timeout_s: float) -> str:
    if isinstance(exc, requests.Timeout):
        return f"Request timed out after {timeout_s:g}s: {exc}"
    if isinstance(exc, requests.ConnectionError):
        return f"Connection error: {exc}"
    return f"Request error: {exc.__class__.__name__}: {exc}"


def run_http(url: str, timeout_s: float, retries: int = 0) -> CheckOutcome:
    """
    Probe ``url`` with up to ``retries + 1`` GET attempts.

    Any HTTP response counts as reachable, whatever its status class, and
    stops the loop. Transport failures are retried after ``BACKOFF_S`` until
    the budget is spent. Elapsed time covers every attempt and backoff.
    """
    try:
        client = HttpClient(timeout_s)
    except HttpClientError as exc:
        return CheckOutcome.failure(url, f"Failed to create HTTP client: {exc}")

    attempts = max(retries, 0) + 1
    status_code: int | None = None
    error = "Initial check not attempted"

    with client:
        start = time.perf_counter()
        for attempt in range(attempts):
            try:
                status_code = client.get_status(url)
                break
            except requests.RequestException as exc:
                error = describe_error(exc, client.timeout_s)

            if attempt < attempts - 1:
                time.sleep(BACKOFF_S)
        elapsed = timedelta(seconds=time.perf_counter() - start)

    if status_code is not None:
        return CheckOutcome.success(url, status_code, elapsed)
    return CheckOutcome.failure(url, error, elapsed)
