from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def _resolve_path(raw_path: str | Path) -> Path:
    p = Path(raw_path).expanduser()
    if p.is_absolute():
        return p
    return Path.cwd() / p


def write_report(path: str | Path, records: list[dict[str, Any]]) -> Path:
    target = _resolve_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
    return target
