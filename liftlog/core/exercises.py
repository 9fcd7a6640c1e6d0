"""Exercise catalogue management."""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any, Dict, Iterable, List, Optional

from liftlog.core.constants import CATEGORIES
from liftlog.core.models import Exercise
from liftlog.core.storage import KeyValueStore, load_exercises, remove_exercise_weights, save_exercises
from liftlog.utils.text import slugify

logger = logging.getLogger(__name__)


def normalize_category(category: Any) -> str:
    """Match a category case-insensitively against the known list.

    Values read from import files may not be strings; they are compared by
    their text form.
    """
    if category is None:
        return "Other"
    text = str(category).strip()
    if not text:
        return "Other"
    for known in CATEGORIES:
        if known.lower() == text.lower():
            return known
    raise ValueError(f"Unknown category '{category}'. Expected one of: {', '.join(CATEGORIES)}")


def _unique_id(name: str, taken: Iterable[str]) -> str:
    base = slugify(name)
    used = set(taken)
    candidate = base
    suffix = 2
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    return candidate


def find_exercise(exercises: Iterable[Exercise], ref: str) -> Optional[Exercise]:
    """Look up an exercise by id, falling back to a case-insensitive name match."""
    items = list(exercises)
    for exercise in items:
        if exercise.id == ref:
            return exercise
    lowered = ref.strip().lower()
    for exercise in items:
        if exercise.name.lower() == lowered:
            return exercise
    return None


def add_exercise(store: KeyValueStore, name: str, category: Optional[str] = None) -> Exercise:
    clean_name = name.strip()
    if not clean_name:
        raise ValueError("Exercise name must not be blank")

    exercises = load_exercises(store)
    exercise = Exercise(
        id=_unique_id(clean_name, (item.id for item in exercises)),
        name=clean_name,
        category=normalize_category(category),
    )
    exercises.append(exercise)
    save_exercises(store, exercises)
    logger.debug("Added exercise %s (%s)", exercise.id, exercise.category)
    return exercise


def rename_exercise(store: KeyValueStore, ref: str, new_name: str) -> Exercise:
    clean_name = new_name.strip()
    if not clean_name:
        raise ValueError("Exercise name must not be blank")

    exercises = load_exercises(store)
    exercise = find_exercise(exercises, ref)
    if exercise is None:
        raise ValueError(f"Unknown exercise: {ref}")
    exercise.name = clean_name
    save_exercises(store, exercises)
    return exercise


def remove_exercise(store: KeyValueStore, ref: str, purge_weights: bool = False) -> Exercise:
    exercises = load_exercises(store)
    exercise = find_exercise(exercises, ref)
    if exercise is None:
        raise ValueError(f"Unknown exercise: {ref}")
    save_exercises(store, [item for item in exercises if item.id != exercise.id])
    if purge_weights:
        removed = remove_exercise_weights(store, exercise.id)
        logger.debug("Removed %d weight samples for %s", removed, exercise.id)
    return exercise


def import_exercises(store: KeyValueStore, rows: Iterable[Dict[str, Any]]) -> List[Exercise]:
    """Add exercises from parsed rows, skipping names that already exist.

    All rows are validated before the catalogue is saved; a bad row raises
    ``ValueError`` and nothing is written.
    """
    exercises = load_exercises(store)
    added: List[Exercise] = []
    for row in rows:
        name = str(row.get("name") or "").strip()
        if not name:
            continue
        if find_exercise(exercises, name) is not None:
            logger.info("Skipping existing exercise %s", name)
            continue
        exercise = Exercise(
            id=_unique_id(name, (item.id for item in exercises)),
            name=name,
            category=normalize_category(row.get("category")),
        )
        exercises.append(exercise)
        added.append(exercise)

    if added:
        save_exercises(store, exercises)
    return added


def group_by_category(exercises: Iterable[Exercise]) -> "OrderedDict[str, List[Exercise]]":
    """Group exercises in the canonical category order, dropping empty groups."""
    groups: "OrderedDict[str, List[Exercise]]" = OrderedDict((category, []) for category in CATEGORIES)
    for exercise in exercises:
        groups.setdefault(exercise.category, []).append(exercise)
    return OrderedDict((category, items) for category, items in groups.items() if items)
