"""Formatting helpers used by exports and console output."""

from __future__ import annotations

from typing import Optional


def format_number(value: Optional[float]) -> str:
    """Drop a trailing .0 so whole weights print as integers."""
    if value is None:
        return "-"
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return f"{number:.1f}"


def format_weight(value: Optional[float], unit: str) -> str:
    if value is None:
        return "N/A"
    return f"{format_number(value)} {unit}"


def format_percent(value: float) -> str:
    return f"{value:+.1f}%"


def format_macros(protein: Optional[float], fat: Optional[float], carbs: Optional[float]) -> str:
    return (
        f"Protein: {format_number(protein or 0)}g | "
        f"Fat: {format_number(fat or 0)}g | "
        f"Carbs: {format_number(carbs or 0)}g"
    )
