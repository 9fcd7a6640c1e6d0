"""JSON export helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from liftlog.core.storage import KeyValueStore


def write_json(path: Path, payload: Any) -> Path:
    """Write payload as pretty JSON and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n")
    return path


def _decode(raw: str) -> Any:
    # Plain string values (unit, last gym date) are stored unquoted.
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def store_snapshot(store: KeyValueStore) -> Dict[str, Any]:
    """Decode every stored blob into one JSON-ready mapping."""
    snapshot: Dict[str, Any] = {}
    for key in sorted(store.keys()):
        raw = store.get_item(key)
        if raw is not None:
            snapshot[key] = _decode(raw)
    return snapshot
