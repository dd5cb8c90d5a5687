from __future__ import annotations

from pathlib import Path

import yaml

from sitecheck.models import TargetFile

YAML_SUFFIXES = {".yml", ".yaml"}


def parse_target_lines(text: str) -> list[str]:
    targets: list[str] = []
    for line in text.splitlines():
        trimmed = line.strip()
        if trimmed and not trimmed.startswith("#"):
            targets.append(trimmed)
    return targets


def load_target_file(path: Path) -> TargetFile:
    """
    Read a URL list.

    ``.yml``/``.yaml`` files hold ``targets`` plus optional ``defaults``;
    anything else is plain text, one URL per line, ``#`` for comments.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No such file: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
        if isinstance(data, list):
            data = {"targets": data}
        return TargetFile.model_validate(data)

    return TargetFile(targets=parse_target_lines(text))
