from __future__ import annotations

import math
import threading
from typing import Any

import requests


class HttpClientError(RuntimeError):
    pass


class DeadlineExceeded(requests.Timeout):
    pass


def _validate_timeout(timeout_s: float) -> float:
    try:
        value = float(timeout_s)
    except (TypeError, ValueError) as exc:
        raise HttpClientError(f"invalid timeout {timeout_s!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise HttpClientError(f"timeout must be a finite positive number, got {timeout_s!r}")
    return value


class HttpClient:
    """
    Thin wrapper over a requests session with a per-request deadline.

    requests only bounds the connect and each socket read, so every request
    runs on its own daemon thread and the caller waits at most ``timeout_s``
    for it. A request still running at the deadline is abandoned together
    with its session, which the request thread closes once it finishes.
    """

    def __init__(self, timeout_s: float) -> None:
        self.timeout_s = _validate_timeout(timeout_s)
        self._session = requests.Session()

    def get_status(self, url: str) -> int:
        session = self._session
        result: dict[str, Any] = {}
        done = threading.Event()
        abandoned = threading.Event()

        def attempt() -> None:
            try:
                # Only the status line matters, so the body is never downloaded.
                resp = session.get(url, timeout=self.timeout_s, stream=True)
                try:
                    result["status_code"] = resp.status_code
                finally:
                    resp.close()
            except Exception as exc:
                result["error"] = exc
            finally:
                done.set()
                if abandoned.is_set():
                    session.close()

        threading.Thread(target=attempt, name="sitecheck-request", daemon=True).start()

        if not done.wait(self.timeout_s):
            abandoned.set()
            self._session = requests.Session()
            if done.is_set():
                session.close()
            raise DeadlineExceeded(f"no response from {url} within {self.timeout_s:g}s")

        if "error" in result:
            raise result["error"]
        return result["status_code"]

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
