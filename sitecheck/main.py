import logging
import threading
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from sitecheck.api_schemas import (
    CheckRunRequest,
    CheckRunResponse,
    ConfigResponse,
    HealthResponse,
)
from sitecheck.checks.results import CheckOutcome
from sitecheck.config import settings
from sitecheck.formatting import format_outcome
from sitecheck.models import PoolConfig
from sitecheck.ops_logic import summarize_records, utcnow_iso
from sitecheck.runner import run_checks

logger = logging.getLogger(__name__)


class LatestReport:
    def __init__(self) -> None:
        self._payload: dict[str, Any] | None = None
        self._lock = threading.Lock()

    def set(self, payload: dict[str, Any]) -> None:
        with self._lock:
            self._payload = payload

    def get(self) -> dict[str, Any] | None:
        with self._lock:
            return self._payload


latest = LatestReport()


def _log_outcome(outcome: CheckOutcome) -> None:
    logger.info("%s", format_outcome(outcome))


app = FastAPI(
    title="Sitecheck",
    version="1.0.0",
    description=(
        "Concurrent HTTP(S) liveness checker: probes a list of endpoints with a "
        "bounded worker pool, retry and timeout policy, and returns one record per target."
    ),
)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["system"],
    summary="Health Check",
    description="Liveness endpoint used by probes and orchestration.",
)
def health():
    return {"status": "ok"}


@app.get(
    "/config",
    response_model=ConfigResponse,
    tags=["system"],
    summary="Current Effective Config",
    description="Default pool settings applied when a request leaves them out.",
)
def config():
    return {
        "workers": settings.SITECHECK_WORKERS,
        "timeout_s": settings.SITECHECK_TIMEOUT_S,
        "retries": settings.SITECHECK_RETRIES,
        "report_path": settings.SITECHECK_REPORT_PATH,
    }


@app.post(
    "/api/checks",
    response_model=CheckRunResponse,
    tags=["checks"],
    summary="Run Checks",
    description="Checks every target concurrently and returns one record per target.",
)
def run_checks_endpoint(request: CheckRunRequest):
    try:
        pool_config = PoolConfig(
            worker_count=request.workers or settings.SITECHECK_WORKERS,
            timeout_s=request.timeout_s or settings.SITECHECK_TIMEOUT_S,
            retries=settings.SITECHECK_RETRIES if request.retries is None else request.retries,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=f"invalid pool settings: {exc}") from exc

    targets = [t.strip() for t in request.targets if t.strip()]
    records = run_checks(targets, pool_config, on_outcome=_log_outcome)

    payload = {
        "generated_at": utcnow_iso(),
        **summarize_records(records),
        "note": None if targets else "nothing to check",
        "results": records,
    }
    latest.set(payload)
    return payload


@app.get(
    "/api/reports/latest",
    response_model=CheckRunResponse,
    tags=["checks"],
    summary="Latest Report",
    description="Report produced by the most recent run.",
)
def latest_report():
    payload = latest.get()
    if payload is None:
        raise HTTPException(status_code=404, detail="No checks have been run yet")
    return payload
