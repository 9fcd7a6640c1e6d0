"""Exercise weight commands."""

from __future__ import annotations

import logging
import math
from typing import Optional

import typer
from rich.table import Table

from liftlog.commands.common import (
    display_unit,
    get_state,
    print_json_payload,
    require_exercise,
    validate_unit,
)
from liftlog.core.exercises import group_by_category
from liftlog.core.history import latest_weight
from liftlog.core.storage import load_exercises, load_weights, save_weight
from liftlog.core.units import display_weight, step_values, to_canonical, to_kilograms, to_pounds
from liftlog.utils.date_ranges import resolve_day, validate_date
from liftlog.utils.formatting import format_number, format_weight

logger = logging.getLogger(__name__)

app = typer.Typer(help="Record and inspect exercise weights")


@app.command("set")
def set_command(
    ctx: typer.Context,
    exercise_ref: str = typer.Argument(..., help="Exercise id or name"),
    value: float = typer.Argument(..., help="Weight in the display unit"),
    unit: Optional[str] = typer.Option(None, help="Unit of VALUE: lbs|kg (default: stored unit)"),
    on_date: Optional[str] = typer.Option(None, "--date", help="Date YYYY-MM-DD", callback=validate_date),
) -> None:
    """Record a weight for the week containing DATE (default today)."""
    state = get_state(ctx)
    active_unit = validate_unit(unit) if unit else display_unit(state)
    if not math.isfinite(value) or value < 0:
        raise typer.BadParameter("weight must be a finite, non-negative number")

    exercise, _ = require_exercise(state, exercise_ref)
    try:
        weight_lbs = to_canonical(value, active_unit)
    except OverflowError:
        raise typer.BadParameter(f"weight {value} is out of range")
    day = resolve_day(on_date)
    sample = save_weight(state.store, exercise.id, day.isoformat(), weight_lbs)
    week_key = sample.date_key
    logger.debug("Stored %s lbs for %s under %s", weight_lbs, exercise.id, week_key)

    payload = {
        "exercise": exercise.to_dict(),
        "week": week_key,
        "weight_lbs": weight_lbs,
        "display": {"value": display_weight(weight_lbs, active_unit), "unit": active_unit},
    }
    if state.json_output:
        print_json_payload(state, payload)
        return
    if state.plain_output:
        typer.echo(f"{exercise.id}\t{week_key}\t{format_number(weight_lbs)}")
        return
    state.console.print(
        f"Saved {exercise.name}: {format_weight(display_weight(weight_lbs, active_unit), active_unit)} "
        f"(week of {week_key})"
    )


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Show the latest weight of every exercise, grouped by category."""
    state = get_state(ctx)
    unit = display_unit(state)
    weights = load_weights(state.store)
    exercises = load_exercises(state.store)

    rows = []
    for category, items in group_by_category(exercises).items():
        for exercise in items:
            latest = latest_weight(weights, exercise.id)
            rows.append(
                {
                    "id": exercise.id,
                    "name": exercise.name,
                    "category": category,
                    "weight_lbs": latest,
                    "display": display_weight(latest or 0, unit),
                }
            )

    if state.json_output:
        print_json_payload(state, {"unit": unit, "exercises": rows})
        return

    if state.plain_output:
        typer.echo(f"id\tname\tcategory\tweight_{unit}")
        for row in rows:
            typer.echo(f"{row['id']}\t{row['name']}\t{row['category']}\t{format_number(row['display'])}")
        return

    if not rows:
        state.console.print("No exercises yet. Add one with: liftlog exercise add NAME")
        return

    table = Table(title=f"Current weights ({unit})")
    table.add_column("Category")
    table.add_column("Exercise")
    table.add_column("Weight", justify="right")
    for row in rows:
        table.add_row(row["category"], row["name"], format_weight(row["display"], unit))
    state.console.print(table)


@app.command("steps")
def steps_command(
    ctx: typer.Context,
    exercise_ref: str = typer.Argument(..., help="Exercise id or name"),
    unit: Optional[str] = typer.Option(None, help="Display unit: lbs|kg (default: stored unit)"),
) -> None:
    """List picker values around the exercise's current weight."""
    state = get_state(ctx)
    active_unit = validate_unit(unit) if unit else display_unit(state)
    exercise, _ = require_exercise(state, exercise_ref)

    current = display_weight(latest_weight(load_weights(state.store), exercise.id) or 0, active_unit)
    values = step_values(current, active_unit)

    if state.json_output:
        print_json_payload(state, {"exercise": exercise.id, "unit": active_unit, "current": current, "values": values})
        return

    if state.plain_output:
        for item in values:
            marker = "*" if item == current else ""
            typer.echo(f"{format_number(item)}{marker}")
        return

    rendered = " ".join(
        f"[bold cyan]{format_number(item)}[/bold cyan]" if item == current else format_number(item)
        for item in values
    )
    state.console.print(f"{exercise.name} ({active_unit}), current {format_number(current)}")
    state.console.print(rendered)


@app.command("convert")
def convert_command(
    ctx: typer.Context,
    value: float = typer.Argument(..., help="Weight to convert"),
    to: str = typer.Option("kg", "--to", help="Target unit: lbs|kg"),
) -> None:
    """Convert a weight using the picker's rounding rules."""
    state = get_state(ctx)
    target = validate_unit(to)
    if not math.isfinite(value):
        raise typer.BadParameter("weight must be a finite number")
    try:
        converted = to_kilograms(value) if target == "kg" else to_pounds(value)
    except OverflowError:
        raise typer.BadParameter(f"weight {value} is out of range")
    source = "lbs" if target == "kg" else "kg"

    if state.json_output:
        print_json_payload(state, {"value": value, "from": source, "to": target, "result": converted})
        return
    if state.plain_output:
        typer.echo(format_number(converted))
        return
    state.console.print(f"{format_weight(value, source)} = {format_weight(converted, target)}")
