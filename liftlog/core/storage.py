"""Key-value persistence for liftlog data.

Every piece of user data lives under a string key as a JSON blob, the same
shape a device key-value store would hold. Callers receive the store
explicitly; nothing in here keeps global state.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from liftlog.core.constants import DEFAULT_UNIT, EXERCISES_KEY, UNIT_KEY, UNITS, WEIGHTS_KEY
from liftlog.core.models import Exercise, WeightSample, WeightsByDate

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised when the backing store cannot be read or written."""


class KeyValueStore(ABC):
    """Minimal string key-value interface."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        ...

    @abstractmethod
    def keys(self) -> List[str]:
        ...

    def clear(self) -> None:
        for key in self.keys():
            self.remove_item(key)


class MemoryStore(KeyValueStore):
    """In-process store, mainly for tests."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._data)


class JsonFileStore(KeyValueStore):
    """Store backed by one JSON object file of string values."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            loaded = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Failed to read store {self.path}: {exc}") from exc
        if not isinstance(loaded, dict):
            raise StorageError(f"Store {self.path} must contain a JSON object")
        return {str(key): value for key, value in loaded.items() if isinstance(value, str)}

    def _write(self, data: Dict[str, str]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n")
            tmp_path.replace(self.path)
        except OSError as exc:
            raise StorageError(f"Failed to write store {self.path}: {exc}") from exc

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)
        logger.debug("Saved key %s to %s", key, self.path)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def keys(self) -> List[str]:
        return list(self._read())

    def clear(self) -> None:
        self._write({})


def load_json(store: KeyValueStore, key: str, default: Any) -> Any:
    """Load and parse one JSON blob, falling back to default."""
    raw = store.get_item(key)
    if raw is None:
        return default
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning("Ignoring unreadable value for %s: %s", key, exc)
        return default


def save_json(store: KeyValueStore, key: str, payload: Any) -> None:
    store.set_item(key, json.dumps(payload))


def week_start_key(date_str: str) -> str:
    """Return the Monday (YYYY-MM-DD) of the week containing date_str."""
    day = datetime.strptime(date_str[:10], "%Y-%m-%d").date()
    return (day - timedelta(days=day.weekday())).isoformat()


def load_weights(store: KeyValueStore) -> WeightsByDate:
    """Load all stored weights grouped by week key and exercise."""
    loaded = load_json(store, WEIGHTS_KEY, {})
    if not isinstance(loaded, dict):
        logger.warning("Ignoring malformed %s payload", WEIGHTS_KEY)
        return {}
    return {str(key): entry for key, entry in loaded.items() if isinstance(entry, dict)}


def save_weight(store: KeyValueStore, exercise_id: str, date_str: str, weight_lbs: float) -> WeightSample:
    """Record a weight under the Monday key of the week it was logged in."""
    week_key = week_start_key(date_str)
    weights = load_weights(store)
    weights.setdefault(week_key, {})[exercise_id] = weight_lbs
    save_json(store, WEIGHTS_KEY, weights)
    return WeightSample(exercise_id=exercise_id, date_key=week_key, weight_lbs=weight_lbs)


def remove_exercise_weights(store: KeyValueStore, exercise_id: str) -> int:
    """Drop every sample of an exercise; returns how many were removed."""
    weights = load_weights(store)
    removed = 0
    for entry in weights.values():
        if entry.pop(exercise_id, None) is not None:
            removed += 1
    if removed:
        save_json(store, WEIGHTS_KEY, {key: entry for key, entry in weights.items() if entry})
    return removed


def load_unit(store: KeyValueStore, default: str = DEFAULT_UNIT) -> str:
    unit = store.get_item(UNIT_KEY)
    if unit in UNITS:
        return str(unit)
    return default if default in UNITS else DEFAULT_UNIT


def save_unit(store: KeyValueStore, unit: str) -> None:
    if unit not in UNITS:
        raise ValueError(f"Unsupported unit: {unit}")
    store.set_item(UNIT_KEY, unit)


def load_exercises(store: KeyValueStore) -> List[Exercise]:
    loaded = load_json(store, EXERCISES_KEY, [])
    if not isinstance(loaded, list):
        return []
    return [Exercise.from_dict(item) for item in loaded if isinstance(item, dict)]


def save_exercises(store: KeyValueStore, exercises: Iterable[Exercise]) -> None:
    save_json(store, EXERCISES_KEY, [exercise.to_dict() for exercise in exercises])
