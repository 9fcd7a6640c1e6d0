"""Weight unit conversion and picker step generation.

Weights are always stored in pounds. Kilograms only exist as a display
projection, so both conversions round to the granularity the picker shows:
whole kilograms and 2.5 lb plates. The round trip lbs -> kg -> lbs is lossy.
"""

from __future__ import annotations

import math
from typing import List

from liftlog.core.constants import (
    CHART_STEP_FALLBACK,
    CHART_STEP_TIERS,
    LBS_PER_KG,
    STEP_CONFIG,
)
from liftlog.core.models import ChartScale


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def round_to_step(value: float, step: float) -> float:
    """Round value to the nearest multiple of step (halves round up)."""
    return _round_half_up(value / step) * step


def to_kilograms(weight_lbs: float) -> int:
    """Convert pounds to whole kilograms."""
    return int(_round_half_up(weight_lbs / LBS_PER_KG))


def to_pounds(weight_kg: float) -> float:
    """Convert kilograms to pounds rounded to the nearest 2.5 lb."""
    return round_to_step(weight_kg * LBS_PER_KG, 2.5)


def _unit_key(unit: str) -> str:
    return "kg" if unit == "kg" else "lbs"


def display_weight(weight_lbs: float, unit: str) -> float:
    """Project a stored pound value into the display unit."""
    if _unit_key(unit) == "kg":
        return to_kilograms(weight_lbs)
    return weight_lbs


def to_canonical(display_value: float, unit: str) -> float:
    """Convert a picker value in the display unit back to stored pounds."""
    if _unit_key(unit) == "kg":
        return to_pounds(display_value)
    return round_to_step(display_value, 2.5)


def step_values(current_display_weight: float = 0, unit: str = "lbs") -> List[float]:
    """Candidate picker values centered on the current display weight."""
    step, window, ceiling = STEP_CONFIG[_unit_key(unit)]

    low = max(0.0, current_display_weight - window)
    high = min(current_display_weight + window, ceiling)
    if low > high:
        return [min(low, ceiling)]

    count = int(math.floor((high - low) / step + 1e-9)) + 1
    values = [round(low + index * step, 1) for index in range(count)]
    if not values:
        values.append(0.0)
    return values


def chart_scale(max_value: float, unit: str) -> ChartScale:
    """Pick a y-axis step for the largest plotted value."""
    key = _unit_key(unit)
    step: float = CHART_STEP_FALLBACK[key]
    for bound, tier_step in CHART_STEP_TIERS[key]:
        if max_value < bound:
            step = tier_step
            break

    rounded_max = math.ceil(max_value / step) * step
    return ChartScale(step=step, rounded_max=rounded_max, sections=int(round(rounded_max / step)))
