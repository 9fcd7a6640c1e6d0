"""Static constants and mappings for liftlog."""

from __future__ import annotations

LBS_PER_KG = 2.20462

UNITS = ("lbs", "kg")
DEFAULT_UNIT = "lbs"

# unit -> (step, window, ceiling)
STEP_CONFIG = {
    "lbs": (2.5, 50.0, 1000.0),
    "kg": (1.0, 25.0, 206.0),
}

# Y-axis tiers: (upper bound exclusive, step); last tier applies above all bounds.
CHART_STEP_TIERS = {
    "lbs": [(15, 2.5), (50, 5), (135, 10), (225, 25), (315, 50)],
    "kg": [(7, 1), (23, 2.5), (61, 5), (102, 10), (143, 20)],
}
CHART_STEP_FALLBACK = {"lbs": 100, "kg": 50}

CATEGORIES = [
    "Back",
    "Biceps",
    "Chest",
    "Triceps",
    "Shoulders",
    "Core",
    "Quadriceps",
    "Hamstrings",
    "Calves",
    "Glutes",
    "Other",
]

GROWTH_MODES = ("weekly", "monthly", "overall")

# Storage keys
WEIGHTS_KEY = "exerciseWeights"
EXERCISES_KEY = "exercises"
UNIT_KEY = "unit"
CARDIO_KEY = "cardioLogs"
FOOD_LOG_KEY = "diet_food_log"
BODY_WEIGHT_KEY = "diet_weight_log"
STREAK_KEY = "gymStreak"
LAST_GYM_KEY = "lastGymDate"
DAYS_KEY = "completedDays"
PLANS_KEY = "workoutPlans"

DEFAULT_STREAK_GOAL = 5
DEFAULT_DAILY_WINDOW = 7
DEFAULT_CHART_POINTS = 6
DEFAULT_RECENT_DAYS = 7
