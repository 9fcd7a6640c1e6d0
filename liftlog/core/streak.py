"""Gym streak tracking and per-day workout plans."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from liftlog.core.constants import DAYS_KEY, LAST_GYM_KEY, PLANS_KEY, STREAK_KEY
from liftlog.core.models import PlanExercise, WorkoutPlan
from liftlog.core.storage import KeyValueStore, load_json, save_json


def load_streak(store: KeyValueStore) -> Dict[str, Any]:
    """Return streak count, last gym date and completed days."""
    raw_streak = store.get_item(STREAK_KEY)
    try:
        streak = int(raw_streak) if raw_streak else 0
    except ValueError:
        streak = 0

    days = load_json(store, DAYS_KEY, [])
    return {
        "streak": streak,
        "last_gym_date": store.get_item(LAST_GYM_KEY) or "",
        "completed_days": [str(day) for day in days] if isinstance(days, list) else [],
    }


def start_gym_day(store: KeyValueStore, today: Optional[date] = None) -> Dict[str, Any]:
    """Mark today as a gym day. Returns the streak state and whether it changed."""
    today_str = (today or date.today()).isoformat()
    state = load_streak(store)
    if state["last_gym_date"] == today_str:
        return {**state, "started": False}

    state["streak"] += 1
    state["last_gym_date"] = today_str
    state["completed_days"] = state["completed_days"] + [today_str]

    store.set_item(STREAK_KEY, str(state["streak"]))
    store.set_item(LAST_GYM_KEY, today_str)
    save_json(store, DAYS_KEY, state["completed_days"])
    return {**state, "started": True}


def week_dates(anchor: Optional[date] = None) -> List[str]:
    """The seven dates of the Sunday-started week containing anchor."""
    day = anchor or date.today()
    sunday = day - timedelta(days=(day.weekday() + 1) % 7)
    return [(sunday + timedelta(days=offset)).isoformat() for offset in range(7)]


def streak_progress(streak: int, goal: int) -> float:
    if goal <= 0:
        return 100.0
    return min(streak / goal * 100, 100.0)


def load_plans(store: KeyValueStore) -> Dict[str, WorkoutPlan]:
    loaded = load_json(store, PLANS_KEY, {})
    if not isinstance(loaded, dict):
        return {}
    return {
        str(day): WorkoutPlan.from_dict(plan)
        for day, plan in loaded.items()
        if isinstance(plan, dict)
    }


def _save_plans(store: KeyValueStore, plans: Dict[str, WorkoutPlan]) -> None:
    save_json(store, PLANS_KEY, {day: plan.to_dict() for day, plan in plans.items()})


def set_plan(
    store: KeyValueStore,
    day: str,
    is_gym_day: bool,
    workout_type: str = "",
    notes: str = "",
    exercises: Optional[List[str]] = None,
) -> WorkoutPlan:
    plans = load_plans(store)
    plan = WorkoutPlan(
        is_gym_day=is_gym_day,
        workout_type=workout_type,
        notes=notes,
        exercises=[PlanExercise(name=name) for name in exercises or [] if name.strip()],
    )
    plans[day] = plan
    _save_plans(store, plans)
    return plan


def toggle_plan_exercise(store: KeyValueStore, day: str, name: str) -> WorkoutPlan:
    """Flip the done flag of one planned exercise."""
    plans = load_plans(store)
    plan = plans.get(day)
    if plan is None:
        raise ValueError(f"No plan for {day}")
    for item in plan.exercises:
        if item.name.lower() == name.strip().lower():
            item.done = not item.done
            break
    else:
        raise ValueError(f"Exercise '{name}' is not planned for {day}")
    _save_plans(store, plans)
    return plan


def gym_days(plans: Dict[str, WorkoutPlan]) -> List[str]:
    return sorted(day for day, plan in plans.items() if plan.is_gym_day)
