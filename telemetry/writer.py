"""Telemetry writers for epoch history and run summaries."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping


def write_history(path: str | Path, records: Iterable[Mapping[str, object]]) -> int:
    """Write one JSON object per line and return the number of records."""
    target = _prepare(path)
    count = 0
    with target.open("w", encoding="utf-8") as handle:
        for record in records:
            handle.write(json.dumps(record, default=_json_fallback))
            handle.write("\n")
            count += 1
    return count


def write_summary(path: str | Path, summary: Mapping[str, Any]) -> None:
    target = _prepare(path)
    with target.open("w", encoding="utf-8") as handle:
        json.dump(summary, handle, indent=2, sort_keys=True, default=_json_fallback)
        handle.write("\n")


def _prepare(path: str | Path) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def _json_fallback(obj):
    # numpy scalars and arrays
    if hasattr(obj, "tolist"):
        return obj.tolist()
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"object of type {type(obj)!r} is not JSON serializable")
