from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable


def serialize_ts(dt: datetime | None) -> str | None:
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def utcnow_iso() -> str:
    return serialize_ts(datetime.now(timezone.utc)) or ""


def summarize_records(records: Iterable[dict[str, Any]]) -> dict[str, Any]:
    total = 0
    reachable = 0
    failed_urls: list[str] = []

    for record in records:
        total += 1
        if record.get("status_code") is not None:
            reachable += 1
        else:
            failed_urls.append(record["url"])

    return {
        "count": total,
        "reachable": reachable,
        "failed": len(failed_urls),
        "failed_urls": failed_urls,
    }
