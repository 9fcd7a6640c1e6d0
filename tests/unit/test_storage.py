from __future__ import annotations

import json
from pathlib import Path

import pytest

from liftlog.core.constants import UNIT_KEY, WEIGHTS_KEY
from liftlog.core.models import Exercise
from liftlog.core.storage import (
    JsonFileStore,
    MemoryStore,
    StorageError,
    load_exercises,
    load_json,
    load_unit,
    load_weights,
    remove_exercise_weights,
    save_exercises,
    save_unit,
    save_weight,
    week_start_key,
)


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        ("2025-06-23", "2025-06-23"),
        ("2025-06-25", "2025-06-23"),
        ("2025-06-29", "2025-06-23"),
        ("2025-06-30", "2025-06-30"),
        ("2025-01-01", "2024-12-30"),
    ],
)
def test_week_start_key_is_monday(day: str, expected: str) -> None:
    assert week_start_key(day) == expected


def test_save_weight_groups_by_week(store: MemoryStore) -> None:
    assert save_weight(store, "bench-press", "2025-01-08", 100.0).date_key == "2025-01-06"
    save_weight(store, "squat", "2025-01-10", 135.0)
    save_weight(store, "bench-press", "2025-01-11", 102.5)

    assert load_weights(store) == {"2025-01-06": {"bench-press": 102.5, "squat": 135.0}}


def test_load_weights_ignores_malformed_payload(store: MemoryStore) -> None:
    store.set_item(WEIGHTS_KEY, "{not json")
    assert load_weights(store) == {}
    store.set_item(WEIGHTS_KEY, json.dumps(["oops"]))
    assert load_weights(store) == {}
    store.set_item(WEIGHTS_KEY, json.dumps({"2025-01-06": {"e1": 1}, "2025-01-13": 5}))
    assert load_weights(store) == {"2025-01-06": {"e1": 1}}


def test_remove_exercise_weights_drops_empty_weeks(store: MemoryStore) -> None:
    save_weight(store, "bench-press", "2025-01-06", 100.0)
    save_weight(store, "squat", "2025-01-06", 135.0)
    save_weight(store, "bench-press", "2025-01-13", 105.0)

    assert remove_exercise_weights(store, "bench-press") == 2
    assert load_weights(store) == {"2025-01-06": {"squat": 135.0}}
    assert remove_exercise_weights(store, "bench-press") == 0


def test_unit_round_trip_and_fallback(store: MemoryStore) -> None:
    assert load_unit(store) == "lbs"
    assert load_unit(store, default="kg") == "kg"
    assert load_unit(store, default="stone") == "lbs"

    save_unit(store, "kg")
    assert load_unit(store) == "kg"

    store.set_item(UNIT_KEY, "stone")
    assert load_unit(store) == "lbs"


def test_save_unit_rejects_unknown(store: MemoryStore) -> None:
    with pytest.raises(ValueError):
        save_unit(store, "stone")


def test_exercises_round_trip(store: MemoryStore) -> None:
    exercises = [Exercise(id="bench-press", name="Bench Press", category="Chest")]
    save_exercises(store, exercises)
    assert load_exercises(store) == exercises


def test_load_json_falls_back_on_bad_json(store: MemoryStore) -> None:
    store.set_item("thing", "not json")
    assert load_json(store, "thing", []) == []
    assert load_json(store, "missing", {"a": 1}) == {"a": 1}


def test_memory_store_clear() -> None:
    store = MemoryStore({"a": "1", "b": "2"})
    store.remove_item("a")
    store.remove_item("missing")
    assert store.keys() == ["b"]
    store.clear()
    assert store.keys() == []


def test_json_file_store_persists(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "store.json"
    store = JsonFileStore(path)
    assert store.keys() == []

    store.set_item("unit", "kg")
    store.set_item("gymStreak", "3")

    reopened = JsonFileStore(path)
    assert reopened.get_item("unit") == "kg"
    assert sorted(reopened.keys()) == ["gymStreak", "unit"]
    assert not path.with_name("store.json.tmp").exists()

    reopened.remove_item("unit")
    assert reopened.get_item("unit") is None
    reopened.clear()
    assert json.loads(path.read_text()) == {}


def test_json_file_store_skips_non_string_values(write_temp_json) -> None:
    path = write_temp_json("store.json", {"unit": "kg", "gymStreak": 3})
    assert JsonFileStore(path).keys() == ["unit"]


def test_json_file_store_rejects_corrupt_file(write_temp_text) -> None:
    path = write_temp_text("store.json", "{broken")
    with pytest.raises(StorageError):
        JsonFileStore(path).get_item("unit")


def test_json_file_store_rejects_non_object(write_temp_json) -> None:
    path = write_temp_json("store.json", ["unit"])
    with pytest.raises(StorageError):
        JsonFileStore(path).keys()
