"""Food log and body-weight tracking."""

from __future__ import annotations

import math
import time
from datetime import date
from typing import Dict, Iterable, List, Optional

from liftlog.core.constants import BODY_WEIGHT_KEY, FOOD_LOG_KEY
from liftlog.core.models import BodyWeightEntry, FoodEntry
from liftlog.core.storage import KeyValueStore, load_json, save_json


def load_food_log(store: KeyValueStore) -> List[FoodEntry]:
    loaded = load_json(store, FOOD_LOG_KEY, [])
    if not isinstance(loaded, list):
        return []
    return [FoodEntry.from_dict(item) for item in loaded if isinstance(item, dict)]


def save_food_log(store: KeyValueStore, entries: Iterable[FoodEntry]) -> None:
    save_json(store, FOOD_LOG_KEY, [entry.to_dict() for entry in entries])


def _new_id(taken: Iterable[str]) -> str:
    # Millisecond timestamps, bumped past ids already in the log.
    used = set(taken)
    stamp = int(time.time() * 1000)
    while str(stamp) in used:
        stamp += 1
    return str(stamp)


def upsert_food(
    store: KeyValueStore,
    name: str,
    amount: str,
    calories: float,
    unit: str = "g",
    protein: Optional[float] = None,
    fat: Optional[float] = None,
    carbs: Optional[float] = None,
    entry_id: Optional[str] = None,
) -> FoodEntry:
    """Add a food entry, or replace the entry with ``entry_id`` in place."""
    clean_name = name.strip()
    clean_amount = amount.strip()
    if not clean_name or not clean_amount:
        raise ValueError("Food name and amount are required")
    if not math.isfinite(calories):
        raise ValueError("Calories must be a finite number")

    entries = load_food_log(store)
    food = FoodEntry(
        id=entry_id or _new_id(entry.id for entry in entries),
        name=clean_name,
        amount=clean_amount,
        unit=unit.strip() or "g",
        calories=calories,
        protein=protein,
        fat=fat,
        carbs=carbs,
    )

    if entry_id:
        if not any(entry.id == entry_id for entry in entries):
            raise ValueError(f"Unknown food entry: {entry_id}")
        entries = [food if entry.id == entry_id else entry for entry in entries]
    else:
        entries.append(food)

    save_food_log(store, entries)
    return food


def delete_food(store: KeyValueStore, entry_id: str) -> bool:
    entries = load_food_log(store)
    remaining = [entry for entry in entries if entry.id != entry_id]
    if len(remaining) == len(entries):
        return False
    save_food_log(store, remaining)
    return True


def food_totals(entries: Iterable[FoodEntry]) -> Dict[str, float]:
    """Sum calories and macros; missing macros count as 0."""
    totals = {"calories": 0.0, "protein": 0.0, "fat": 0.0, "carbs": 0.0}
    for entry in entries:
        totals["calories"] += entry.calories
        totals["protein"] += entry.protein or 0.0
        totals["fat"] += entry.fat or 0.0
        totals["carbs"] += entry.carbs or 0.0
    return totals


def load_body_weights(store: KeyValueStore) -> List[BodyWeightEntry]:
    loaded = load_json(store, BODY_WEIGHT_KEY, [])
    if not isinstance(loaded, list):
        return []
    entries: List[BodyWeightEntry] = []
    for item in loaded:
        if not isinstance(item, dict) or not isinstance(item.get("date"), str):
            continue
        try:
            weight = float(item.get("weight"))
        except (TypeError, ValueError):
            continue
        if math.isfinite(weight):
            entries.append(BodyWeightEntry(date=item["date"], weight=weight))
    return entries


def record_body_weight(store: KeyValueStore, weight: float, today: Optional[date] = None) -> BodyWeightEntry:
    """Log today's body weight, replacing an earlier entry for the same day."""
    if not math.isfinite(weight):
        raise ValueError("Body weight must be a finite number")

    entry = BodyWeightEntry(date=(today or date.today()).isoformat(), weight=weight)
    entries = load_body_weights(store)
    for index, existing in enumerate(entries):
        if existing.date == entry.date:
            entries[index] = entry
            break
    else:
        entries.append(entry)

    save_json(store, BODY_WEIGHT_KEY, [item.to_dict() for item in entries])
    return entry
