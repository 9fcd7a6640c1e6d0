from __future__ import annotations

import json
from datetime import date

import pytest

from liftlog.core.constants import BODY_WEIGHT_KEY
from liftlog.core.diet import (
    delete_food,
    food_totals,
    load_body_weights,
    load_food_log,
    record_body_weight,
    upsert_food,
)
from liftlog.core.storage import MemoryStore


def test_upsert_food_adds_and_replaces(store: MemoryStore) -> None:
    oats = upsert_food(store, "Oats", "80", 300.0, protein=10.0)
    eggs = upsert_food(store, "Eggs", "2", 150.0, unit="pcs", protein=12.0, fat=10.0)
    assert oats.id != eggs.id
    assert [entry.name for entry in load_food_log(store)] == ["Oats", "Eggs"]

    upsert_food(store, "Oats", "100", 375.0, entry_id=oats.id)
    entries = load_food_log(store)
    assert [entry.name for entry in entries] == ["Oats", "Eggs"]
    assert entries[0].amount == "100"
    assert entries[0].calories == 375.0
    assert entries[0].protein is None
    assert entries[1].unit == "pcs"


@pytest.mark.parametrize(
    ("name", "amount", "calories"),
    [("", "80", 300.0), ("Oats", "  ", 300.0), ("Oats", "80", float("nan"))],
)
def test_upsert_food_validates(store: MemoryStore, name: str, amount: str, calories: float) -> None:
    with pytest.raises(ValueError):
        upsert_food(store, name, amount, calories)


def test_upsert_food_unknown_id(store: MemoryStore) -> None:
    with pytest.raises(ValueError):
        upsert_food(store, "Oats", "80", 300.0, entry_id="missing")


def test_delete_food(store: MemoryStore) -> None:
    entry = upsert_food(store, "Rice", "200", 260.0)
    assert delete_food(store, "missing") is False
    assert delete_food(store, entry.id) is True
    assert load_food_log(store) == []


def test_food_totals_treats_missing_macros_as_zero(store: MemoryStore) -> None:
    upsert_food(store, "Oats", "80", 300.0, protein=10.0, carbs=54.0)
    upsert_food(store, "Eggs", "2", 150.0, protein=12.0, fat=10.0)
    totals = food_totals(load_food_log(store))
    assert totals == {"calories": 450.0, "protein": 22.0, "fat": 10.0, "carbs": 54.0}
    assert food_totals([]) == {"calories": 0.0, "protein": 0.0, "fat": 0.0, "carbs": 0.0}


def test_record_body_weight_replaces_same_day(store: MemoryStore) -> None:
    record_body_weight(store, 80.5, today=date(2025, 1, 6))
    record_body_weight(store, 81.0, today=date(2025, 1, 7))
    record_body_weight(store, 80.0, today=date(2025, 1, 6))

    entries = load_body_weights(store)
    assert [(entry.date, entry.weight) for entry in entries] == [("2025-01-06", 80.0), ("2025-01-07", 81.0)]


def test_record_body_weight_rejects_non_finite(store: MemoryStore) -> None:
    with pytest.raises(ValueError):
        record_body_weight(store, float("inf"))


def test_load_body_weights_skips_bad_rows(store: MemoryStore) -> None:
    store.set_item(
        BODY_WEIGHT_KEY,
        json.dumps(
            [
                {"date": "2025-01-06", "weight": "80.5"},
                {"date": "2025-01-07", "weight": "heavy"},
                {"weight": 70},
                "junk",
            ]
        ),
    )
    entries = load_body_weights(store)
    assert [(entry.date, entry.weight) for entry in entries] == [("2025-01-06", 80.5)]
