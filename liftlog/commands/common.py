"""Shared command helpers."""

from __future__ import annotations

import json
from typing import Any, List, Tuple

import typer

from liftlog.core.exercises import find_exercise
from liftlog.core.models import Exercise
from liftlog.core.state import CLIState
from liftlog.core.storage import load_exercises, load_unit


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return
    state.console.print_json(data=payload)


def display_unit(state: CLIState) -> str:
    """Stored unit preference, falling back to the configured default."""
    default = str(state.config.get("defaults", {}).get("unit", "lbs"))
    return load_unit(state.store, default=default)


def validate_unit(value: str) -> str:
    if value not in {"lbs", "kg"}:
        raise typer.BadParameter("unit must be one of: lbs, kg")
    return value


def require_exercise(state: CLIState, ref: str) -> Tuple[Exercise, List[Exercise]]:
    """Resolve an exercise by id or name or fail with a usage error."""
    exercises = load_exercises(state.store)
    exercise = find_exercise(exercises, ref)
    if exercise is None:
        raise typer.BadParameter(
            f"Unknown exercise '{ref}'. Add it first with: liftlog exercise add"
        )
    return exercise, exercises
