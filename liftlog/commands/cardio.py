"""Cardio logging commands."""

from __future__ import annotations

from datetime import date

import typer
from rich.table import Table

from liftlog.commands.common import get_state, print_json_payload
from liftlog.core.cardio import (
    add_log,
    calculate_pace,
    format_input_time,
    format_stopwatch,
    load_logs,
    parse_time_input,
    recent_logs,
)
from liftlog.core.config import config_int
from liftlog.core.constants import DEFAULT_RECENT_DAYS

app = typer.Typer(help="Log cardio sessions")


@app.command("log")
def log_command(
    ctx: typer.Context,
    time_text: str = typer.Argument(..., metavar="TIME", help="Elapsed time mm:ss"),
    distance: float = typer.Argument(..., help="Distance covered"),
) -> None:
    """Save a cardio session for today."""
    state = get_state(ctx)
    try:
        entry = add_log(state.store, parse_time_input(time_text), distance)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))

    pace = calculate_pace(entry.time_millis, entry.distance)
    if state.json_output:
        print_json_payload(state, {**entry.to_dict(), "pace": pace})
        return
    if state.plain_output:
        typer.echo(f"{entry.date}\t{format_input_time(entry.time_millis)}\t{entry.distance:.2f}\t{pace}")
        return
    state.console.print(
        f"Saved: {format_stopwatch(entry.time_millis)} over {entry.distance:.2f} (pace {pace})"
    )


@app.command("list")
def list_command(
    ctx: typer.Context,
    show_all: bool = typer.Option(False, "--all", help="Show every session, not just recent ones"),
) -> None:
    """List recent cardio sessions with pace."""
    state = get_state(ctx)
    logs = load_logs(state.store)
    if not show_all:
        days = config_int(state.config, "cardio", "recent_days", DEFAULT_RECENT_DAYS)
        logs = recent_logs(logs, days=days, today=date.today())

    rows = [
        {
            **log.to_dict(),
            "time": format_input_time(log.time_millis),
            "pace": calculate_pace(log.time_millis, log.distance),
        }
        for log in logs
    ]

    if state.json_output:
        print_json_payload(state, {"logs": rows})
        return

    if state.plain_output:
        typer.echo("date\ttime\tdistance\tpace")
        for row in rows:
            typer.echo(f"{row['date']}\t{row['time']}\t{row['distance']:.2f}\t{row['pace']}")
        return

    table = Table(title=f"Cardio ({len(rows)} sessions)")
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Distance", justify="right")
    table.add_column("Pace")
    for row in rows:
        table.add_row(row["date"], row["time"], f"{row['distance']:.2f}", row["pace"])
    state.console.print(table)
