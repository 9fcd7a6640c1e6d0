"""Lightweight data models used across commands."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional

WeightsByDate = Dict[str, Dict[str, float]]


@dataclass(frozen=True)
class WeightSample:
    """One recorded weight, always in pounds."""

    exercise_id: str
    date_key: str
    weight_lbs: float


@dataclass(frozen=True)
class HistoryPoint:
    """Display-ready chart sample."""

    label: str
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "value": self.value}


@dataclass(frozen=True)
class ChartScale:
    """Y-axis step, rounded maximum and section count for a chart."""

    step: float
    rounded_max: float
    sections: int


@dataclass(frozen=True)
class GrowthPoint:
    label: str
    value: float


@dataclass
class Exercise:
    id: str
    name: str
    category: str = "Other"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Exercise":
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or "Unnamed"),
            category=str(data.get("category") or "Other"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CardioLog:
    """A saved cardio session; ``time_millis`` is kept for pace math."""

    id: str
    time_millis: int
    distance: float
    date: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CardioLog":
        return cls(
            id=str(data.get("id") or ""),
            time_millis=int(data.get("timeMillis") or 0),
            distance=float(data.get("distance") or 0.0),
            date=str(data.get("date") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timeMillis": self.time_millis,
            "distance": self.distance,
            "date": self.date,
        }


@dataclass
class FoodEntry:
    id: str
    name: str
    amount: str
    unit: str
    calories: float
    protein: Optional[float] = None
    fat: Optional[float] = None
    carbs: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FoodEntry":
        def _optional(key: str) -> Optional[float]:
            value = data.get(key)
            return float(value) if value is not None else None

        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            amount=str(data.get("amount") or ""),
            unit=str(data.get("unit") or "g"),
            calories=float(data.get("calories") or 0.0),
            protein=_optional("protein"),
            fat=_optional("fat"),
            carbs=_optional("carbs"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class BodyWeightEntry:
    date: str
    weight: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PlanExercise:
    name: str
    done: bool = False


@dataclass
class WorkoutPlan:
    """Plan for one calendar day."""

    is_gym_day: bool = False
    workout_type: str = ""
    notes: str = ""
    exercises: List[PlanExercise] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WorkoutPlan":
        exercises = [
            PlanExercise(name=str(item.get("name") or ""), done=bool(item.get("done")))
            for item in data.get("exercises") or []
            if isinstance(item, Mapping)
        ]
        return cls(
            is_gym_day=bool(data.get("isGymDay")),
            workout_type=str(data.get("workoutType") or ""),
            notes=str(data.get("notes") or ""),
            exercises=exercises,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isGymDay": self.is_gym_day,
            "workoutType": self.workout_type,
            "notes": self.notes,
            "exercises": [{"name": item.name, "done": item.done} for item in self.exercises],
        }
