"""Gym streak and workout plan commands."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

import typer
from rich.table import Table

from liftlog.commands.common import get_state, print_json_payload
from liftlog.core.config import config_int
from liftlog.core.constants import DEFAULT_STREAK_GOAL
from liftlog.core.streak import (
    gym_days,
    load_plans,
    load_streak,
    set_plan,
    start_gym_day,
    streak_progress,
    toggle_plan_exercise,
    week_dates,
)
from liftlog.utils.date_ranges import resolve_day, validate_date

app = typer.Typer(help="Gym streak and workout plans")


@app.command("start")
def start_command(ctx: typer.Context) -> None:
    """Mark today as a gym day and extend the streak."""
    state = get_state(ctx)
    result = start_gym_day(state.store, today=date.today())

    if state.json_output:
        print_json_payload(state, result)
        return
    if not result["started"]:
        state.console.print(f"Already logged today. Streak: {result['streak']}")
        return
    state.console.print(f"{result['streak']}-day streak!")


@app.command("status")
def status_command(
    ctx: typer.Context,
    week_of: Optional[str] = typer.Option(None, help="Show the week containing YYYY-MM-DD", callback=validate_date),
) -> None:
    """Show streak progress and the week's completed days."""
    state = get_state(ctx)
    streak_state = load_streak(state.store)
    goal = config_int(state.config, "gym", "streak_goal", DEFAULT_STREAK_GOAL)
    today = date.today().isoformat()
    dates = week_dates(resolve_day(week_of))
    completed = set(streak_state["completed_days"])

    payload = {
        "streak": streak_state["streak"],
        "goal": goal,
        "progress_pct": streak_progress(streak_state["streak"], goal),
        "last_gym_date": streak_state["last_gym_date"],
        "week": [{"date": day, "done": day in completed} for day in dates],
    }

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo(f"streak\t{payload['streak']}")
        typer.echo(f"goal\t{goal}")
        for row in payload["week"]:
            typer.echo(f"{row['date']}\t{'done' if row['done'] else '-'}")
        return

    state.console.print(
        f"{payload['streak']} / {goal} days ({payload['progress_pct']:.0f}%)"
    )
    table = Table(title="This week")
    for day in dates:
        table.add_column(day[5:] + ("*" if day == today else ""))
    table.add_row(*["x" if day in completed else "" for day in dates])
    state.console.print(table)


@app.command("plan-set")
def plan_set_command(
    ctx: typer.Context,
    day: str = typer.Argument(..., help="Date YYYY-MM-DD", callback=validate_date),
    gym_day: bool = typer.Option(True, "--gym/--rest", help="Gym day or rest day"),
    workout_type: str = typer.Option("", "--type", help="Workout type, e.g. Push"),
    notes: str = typer.Option("", help="Free-form notes"),
    exercises: Optional[List[str]] = typer.Option(None, "--exercise", help="Planned exercise (repeatable)"),
) -> None:
    """Create or replace the plan for a day."""
    state = get_state(ctx)
    plan = set_plan(state.store, day, gym_day, workout_type=workout_type, notes=notes, exercises=exercises)

    if state.json_output:
        print_json_payload(state, {"date": day, **plan.to_dict()})
        return
    label = "Gym Day" if plan.is_gym_day else "Rest Day"
    state.console.print(f"Saved plan for {day}: {label}")


@app.command("plan-show")
def plan_show_command(
    ctx: typer.Context,
    day: Optional[str] = typer.Argument(None, help="Date YYYY-MM-DD (default: list gym days)", callback=validate_date),
) -> None:
    """Show one day's plan, or list planned gym days."""
    state = get_state(ctx)
    plans = load_plans(state.store)

    if day is None:
        days = gym_days(plans)
        if state.json_output:
            print_json_payload(state, {"gym_days": days})
            return
        for item in days:
            if state.plain_output:
                typer.echo(item)
            else:
                state.console.print(f"{item}: {plans[item].workout_type or 'Gym Day'}")
        return

    plan = plans.get(day)
    if state.json_output:
        print_json_payload(state, {"date": day, **plan.to_dict()} if plan else {"date": day, "plan": None})
        return
    if plan is None:
        state.console.print(f"No plan for {day}")
        return

    state.console.print(f"{'Gym Day' if plan.is_gym_day else 'Rest Day'} - {day}")
    if plan.workout_type:
        state.console.print(f"Workout Type: {plan.workout_type}")
    if plan.notes:
        state.console.print(f"Notes: {plan.notes}")
    for item in plan.exercises:
        state.console.print(f"[{'x' if item.done else ' '}] {item.name}", markup=False)


@app.command("plan-toggle")
def plan_toggle_command(
    ctx: typer.Context,
    day: str = typer.Argument(..., help="Date YYYY-MM-DD", callback=validate_date),
    name: str = typer.Argument(..., help="Planned exercise name"),
) -> None:
    """Toggle whether a planned exercise is done."""
    state = get_state(ctx)
    try:
        plan = toggle_plan_exercise(state.store, day, name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))

    if state.json_output:
        print_json_payload(state, {"date": day, **plan.to_dict()})
        return
    done = sum(1 for item in plan.exercises if item.done)
    state.console.print(f"{done}/{len(plan.exercises)} done for {day}")
