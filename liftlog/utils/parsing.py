"""Parsing helpers for imported files and numeric options."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


def load_exercise_input(file_path: Path) -> List[Dict[str, Any]]:
    """Load exercise rows from a YAML or JSON file.

    Accepts a list of ``{name, category}`` objects, a single object, or a
    mapping of category -> list of names.
    """
    text = file_path.read_text()
    if file_path.suffix.lower() in {".yaml", ".yml"}:
        raw_data = yaml.safe_load(text)
    else:
        raw_data = json.loads(text)

    if isinstance(raw_data, list):
        return [item for item in raw_data if isinstance(item, dict)]
    if isinstance(raw_data, dict):
        if "name" in raw_data:
            return [raw_data]
        rows: List[Dict[str, Any]] = []
        for category, names in raw_data.items():
            if isinstance(names, list):
                rows.extend({"name": str(name), "category": str(category)} for name in names)
        return rows
    return []


def safe_float(value: Optional[str]) -> Optional[float]:
    """Parse a float, returning None for blank or non-finite input."""
    if value is None or not str(value).strip():
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None
