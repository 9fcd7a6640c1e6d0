"""Exercise catalogue commands."""

from __future__ import annotations

import json
from pathlib import Path

import typer
import yaml
from rich.table import Table

from liftlog.commands.common import get_state, print_json_payload
from liftlog.core.constants import CATEGORIES
from liftlog.core.exercises import (
    add_exercise,
    group_by_category,
    import_exercises,
    remove_exercise,
    rename_exercise,
)
from liftlog.core.storage import load_exercises
from liftlog.utils.parsing import load_exercise_input

app = typer.Typer(help="Manage the exercise list")


@app.command("add")
def add_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Exercise name"),
    category: str = typer.Option("Other", help=f"Category: {'|'.join(CATEGORIES)}"),
) -> None:
    """Add an exercise."""
    state = get_state(ctx)
    try:
        exercise = add_exercise(state.store, name, category)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))

    if state.json_output:
        print_json_payload(state, exercise.to_dict())
        return
    if state.plain_output:
        typer.echo(f"{exercise.id}\t{exercise.name}\t{exercise.category}")
        return
    state.console.print(f"Added {exercise.name} [{exercise.category}] as {exercise.id}")


@app.command("list")
def list_command(ctx: typer.Context) -> None:
    """List exercises grouped by category."""
    state = get_state(ctx)
    groups = group_by_category(load_exercises(state.store))

    if state.json_output:
        payload = {category: [item.to_dict() for item in items] for category, items in groups.items()}
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo("id\tname\tcategory")
        for items in groups.values():
            for item in items:
                typer.echo(f"{item.id}\t{item.name}\t{item.category}")
        return

    if not groups:
        state.console.print("No exercises yet.")
        return

    table = Table(title="Exercises")
    table.add_column("Category")
    table.add_column("Name")
    table.add_column("Id")
    for category, items in groups.items():
        for item in items:
            table.add_row(category, item.name, item.id)
    state.console.print(table)


@app.command("rename")
def rename_command(
    ctx: typer.Context,
    exercise_ref: str = typer.Argument(..., help="Exercise id or name"),
    new_name: str = typer.Argument(..., help="New display name"),
) -> None:
    """Rename an exercise; its id and history are kept."""
    state = get_state(ctx)
    try:
        exercise = rename_exercise(state.store, exercise_ref, new_name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))

    if state.json_output:
        print_json_payload(state, exercise.to_dict())
        return
    state.console.print(f"Renamed {exercise.id} to {exercise.name}")


@app.command("remove")
def remove_command(
    ctx: typer.Context,
    exercise_ref: str = typer.Argument(..., help="Exercise id or name"),
    purge: bool = typer.Option(False, "--purge", help="Also delete recorded weights"),
) -> None:
    """Remove an exercise from the list."""
    state = get_state(ctx)
    try:
        exercise = remove_exercise(state.store, exercise_ref, purge_weights=purge)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))

    if state.json_output:
        print_json_payload(state, {"removed": exercise.to_dict(), "purged": purge})
        return
    state.console.print(f"Removed {exercise.name}")


@app.command("import")
def import_command(
    ctx: typer.Context,
    file_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML or JSON exercise list"),
) -> None:
    """Import exercises from a YAML/JSON file."""
    state = get_state(ctx)
    try:
        rows = load_exercise_input(file_path)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Could not parse {file_path}: {exc}")

    try:
        added = import_exercises(state.store, rows)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))

    if state.json_output:
        print_json_payload(state, {"imported": [item.to_dict() for item in added]})
        return
    state.console.print(f"Imported {len(added)} exercises")
