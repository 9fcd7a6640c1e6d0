"""Weight history and growth commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table

from liftlog.commands.common import display_unit, get_state, print_json_payload, require_exercise
from liftlog.core.config import config_int
from liftlog.core.constants import DEFAULT_CHART_POINTS, DEFAULT_DAILY_WINDOW, GROWTH_MODES
from liftlog.core.history import average_growth, daily_history, growth, monthly_history, weekly_history
from liftlog.core.models import Exercise, HistoryPoint
from liftlog.core.state import CLIState
from liftlog.core.storage import load_exercises, load_weights
from liftlog.core.units import chart_scale, display_weight
from liftlog.exporters.markdown import history_to_markdown
from liftlog.utils.date_ranges import resolve_day, validate_date
from liftlog.utils.formatting import format_number, format_percent
from liftlog.utils.text import truncate_label

app = typer.Typer(help="Weight history for charts")


def _project(points: List[HistoryPoint], unit: str) -> List[HistoryPoint]:
    return [HistoryPoint(label=point.label, value=display_weight(point.value, unit)) for point in points]


def _write_output(output_file: Path, content: str) -> None:
    try:
        output_file.write_text(content)
    except OSError as exc:
        typer.echo(f"Could not write {output_file}: {exc}")
        raise typer.Exit(code=1)


def _render(
    state: CLIState,
    exercise: Exercise,
    view: str,
    points: List[HistoryPoint],
    output_format: str,
    output_file: Optional[Path],
) -> None:
    if output_format not in {"table", "json", "markdown"}:
        raise typer.BadParameter("--format must be one of: table, json, markdown")

    unit = display_unit(state)
    projected = _project(points, unit)
    scale = chart_scale(max([point.value for point in projected] + [0]), unit)
    payload = {
        "exercise": exercise.to_dict(),
        "view": view,
        "unit": unit,
        "points": [point.to_dict() for point in projected],
        "scale": {"step": scale.step, "max": scale.rounded_max, "sections": scale.sections},
    }

    if state.json_output or output_format == "json":
        if output_file:
            _write_output(output_file, json.dumps(payload, indent=2) + "\n")
        print_json_payload(state, payload)
        return

    if output_format == "markdown":
        markdown = history_to_markdown(exercise.name, view, unit, projected, scale)
        if output_file:
            _write_output(output_file, markdown)
        state.console.print(markdown)
        return

    if state.plain_output:
        typer.echo(f"label\t{unit}")
        for point in projected:
            typer.echo(f"{point.label}\t{format_number(point.value)}")
        return

    if not projected:
        state.console.print(f"No recorded weights for {exercise.name}")
        return

    table = Table(title=f"{exercise.name}: {view} ({unit})")
    table.add_column("Label")
    table.add_column("Weight", justify="right")
    for point in projected:
        table.add_row(point.label, format_number(point.value))
    state.console.print(table)
    state.console.print(f"Axis: step {format_number(scale.step)}, max {format_number(scale.rounded_max)}")


@app.command("weekly")
def weekly_command(
    ctx: typer.Context,
    exercise_ref: str = typer.Argument(..., help="Exercise id or name"),
    last: Optional[int] = typer.Option(None, help="Keep only the last N weeks (0 = all)"),
    output_format: str = typer.Option("table", "--format", help="Output format: table|json|markdown"),
    output_file: Optional[Path] = typer.Option(None, help="Write result to file"),
) -> None:
    """One point per recorded week."""
    state = get_state(ctx)
    exercise, _ = require_exercise(state, exercise_ref)
    keep = last if last is not None else config_int(state.config, "history", "chart_points", DEFAULT_CHART_POINTS)

    points = weekly_history(load_weights(state.store), exercise.id)
    if keep > 0:
        points = points[-keep:]
    _render(state, exercise, "weekly", points, output_format, output_file)


@app.command("monthly")
def monthly_command(
    ctx: typer.Context,
    exercise_ref: str = typer.Argument(..., help="Exercise id or name"),
    output_format: str = typer.Option("table", "--format", help="Output format: table|json|markdown"),
    output_file: Optional[Path] = typer.Option(None, help="Write result to file"),
) -> None:
    """One point per month, keeping the month's last recorded weight."""
    state = get_state(ctx)
    exercise, _ = require_exercise(state, exercise_ref)
    points = monthly_history(load_weights(state.store), exercise.id)
    _render(state, exercise, "monthly", points, output_format, output_file)


@app.command("daily")
def daily_command(
    ctx: typer.Context,
    exercise_ref: str = typer.Argument(..., help="Exercise id or name"),
    days: Optional[int] = typer.Option(None, help="Window length in days"),
    end_date: Optional[str] = typer.Option(None, help="Last day of the window YYYY-MM-DD", callback=validate_date),
    output_format: str = typer.Option("table", "--format", help="Output format: table|json|markdown"),
    output_file: Optional[Path] = typer.Option(None, help="Write result to file"),
) -> None:
    """Dense day-by-day series, carrying the last weight forward."""
    state = get_state(ctx)
    exercise, _ = require_exercise(state, exercise_ref)
    window = days if days is not None else config_int(state.config, "history", "daily_window", DEFAULT_DAILY_WINDOW)
    if window <= 0:
        raise typer.BadParameter("--days must be positive")

    points = daily_history(load_weights(state.store), exercise.id, window, today=resolve_day(end_date))
    _render(state, exercise, "daily", points, output_format, output_file)


@app.command("growth")
def growth_command(
    ctx: typer.Context,
    mode: str = typer.Option("weekly", help="Compare: weekly|monthly|overall"),
) -> None:
    """Percent growth per exercise."""
    if mode not in GROWTH_MODES:
        raise typer.BadParameter(f"mode must be one of: {', '.join(GROWTH_MODES)}")

    state = get_state(ctx)
    points = growth(load_weights(state.store), load_exercises(state.store), mode=mode)
    payload = {
        "mode": mode,
        "points": [{"label": point.label, "value": round(point.value, 1)} for point in points],
        "average": round(average_growth(points), 1) if mode == "overall" and points else None,
    }

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo("exercise\tgrowth_pct")
        for point in points:
            typer.echo(f"{point.label}\t{point.value:.1f}")
        return

    if not points:
        state.console.print(f"Not enough history for {mode} growth")
        return

    table = Table(title=f"Growth ({mode})")
    table.add_column("Exercise")
    table.add_column("Growth", justify="right")
    for point in points:
        table.add_row(truncate_label(point.label, 18), format_percent(point.value))
    state.console.print(table)
    if payload["average"] is not None:
        state.console.print(f"Average overall growth: {format_percent(payload['average'])}")
