"""Weight history aggregation for charts and growth reports."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from liftlog.core.models import Exercise, GrowthPoint, HistoryPoint


def _entries(weights_by_date: Any) -> Dict[str, Mapping[str, Any]]:
    if not isinstance(weights_by_date, Mapping):
        return {}
    return {
        str(key): entry
        for key, entry in weights_by_date.items()
        if isinstance(entry, Mapping)
    }


def _sample(entry: Mapping[str, Any], exercise_id: str) -> Optional[float]:
    value = entry.get(exercise_id)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _parse_day(key: str) -> Optional[date]:
    try:
        return datetime.strptime(key[:10], "%Y-%m-%d").date()
    except ValueError:
        return None


def weekly_history(weights_by_date: Any, exercise_id: str) -> List[HistoryPoint]:
    """One point per date key holding a sample, labelled MM-DD."""
    entries = _entries(weights_by_date)
    history: List[HistoryPoint] = []
    for key in sorted(entries):
        value = _sample(entries[key], exercise_id)
        if value is None:
            continue
        history.append(HistoryPoint(label=key[5:], value=value))
    return history


def monthly_history(weights_by_date: Any, exercise_id: str) -> List[HistoryPoint]:
    """One point per month; the chronologically last sample of a month wins."""
    entries = _entries(weights_by_date)
    buckets: Dict[str, float] = {}
    for key in sorted(entries):
        value = _sample(entries[key], exercise_id)
        if value is None:
            continue
        buckets[key[:7]] = value
    return [HistoryPoint(label=month[5:7], value=buckets[month]) for month in sorted(buckets)]


def daily_history(
    weights_by_date: Any,
    exercise_id: str,
    days: int,
    today: Optional[date] = None,
) -> List[HistoryPoint]:
    """Dense trailing window of ``days`` points ending today.

    Each day carries the most recent sample recorded on or before it; days
    before the first sample are 0.
    """
    if days <= 0:
        return []

    now = today or date.today()
    samples: List[Tuple[date, str, float]] = []
    for key, entry in _entries(weights_by_date).items():
        day = _parse_day(key)
        value = _sample(entry, exercise_id)
        if day is None or value is None:
            continue
        samples.append((day, key, value))
    samples.sort()

    start = now - timedelta(days=days - 1)
    current: float = 0
    cursor = 0
    history: List[HistoryPoint] = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        while cursor < len(samples) and samples[cursor][0] <= day:
            current = samples[cursor][2]
            cursor += 1
        history.append(HistoryPoint(label=day.strftime("%m-%d"), value=current))
    return history


def latest_weight(weights_by_date: Any, exercise_id: str) -> Optional[float]:
    """Most recently recorded weight for an exercise, if any."""
    entries = _entries(weights_by_date)
    for key in sorted(entries, reverse=True):
        value = _sample(entries[key], exercise_id)
        if value is not None:
            return value
    return None


def recorded_exercise_ids(weights_by_date: Any) -> Set[str]:
    """Exercise ids that appear anywhere in the weight history."""
    used: Set[str] = set()
    for entry in _entries(weights_by_date).values():
        used.update(str(key) for key in entry)
    return used


def _pct(old: float, new: float) -> float:
    return (new - old) / old * 100 if old > 0 else 0.0


def _compare(
    exercises: Iterable[Exercise],
    old_entry: Mapping[str, Any],
    new_entry: Mapping[str, Any],
) -> List[GrowthPoint]:
    points: List[GrowthPoint] = []
    for exercise in exercises:
        old = _sample(old_entry, exercise.id) or 0
        new = _sample(new_entry, exercise.id) or 0
        points.append(GrowthPoint(label=exercise.name, value=_pct(old, new)))
    return points


def growth(weights_by_date: Any, exercises: Iterable[Exercise], mode: str = "weekly") -> List[GrowthPoint]:
    """Percent growth per exercise between two points of the history.

    ``weekly`` compares the last two date keys, ``monthly`` the last two
    months (a month is represented by its last date key), ``overall`` the
    first and last date keys.
    """
    entries = _entries(weights_by_date)
    keys = sorted(entries)

    if mode == "weekly":
        if len(keys) < 2:
            return []
        return _compare(exercises, entries[keys[-2]], entries[keys[-1]])

    if mode == "monthly":
        by_month: Dict[str, Mapping[str, Any]] = {}
        for key in keys:
            by_month[key[:7]] = entries[key]
        months = sorted(by_month)
        if len(months) < 2:
            return []
        return _compare(exercises, by_month[months[-2]], by_month[months[-1]])

    if mode == "overall":
        if not keys:
            return []
        return _compare(exercises, entries[keys[0]], entries[keys[-1]])

    raise ValueError(f"Unsupported growth mode: {mode}")


def average_growth(points: List[GrowthPoint]) -> float:
    return sum(point.value for point in points) / (len(points) or 1)
