"""Diet and body-weight commands."""

from __future__ import annotations

from typing import Optional

import typer
from rich.table import Table

from liftlog.commands.common import get_state, print_json_payload
from liftlog.core.diet import (
    delete_food,
    food_totals,
    load_body_weights,
    load_food_log,
    record_body_weight,
    upsert_food,
)
from liftlog.utils.formatting import format_macros, format_number

app = typer.Typer(help="Track food and body weight")


@app.command("add-food")
def add_food_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Food name"),
    amount: str = typer.Argument(..., help="Amount, e.g. 150"),
    calories: float = typer.Option(..., help="Calories (kcal)"),
    unit: str = typer.Option("g", help="Amount unit: g, oz, cup, ..."),
    protein: Optional[float] = typer.Option(None, help="Protein (g)"),
    fat: Optional[float] = typer.Option(None, help="Fat (g)"),
    carbs: Optional[float] = typer.Option(None, help="Carbs (g)"),
    entry_id: Optional[str] = typer.Option(None, "--id", help="Update the entry with this id"),
) -> None:
    """Add a food entry, or update one with --id."""
    state = get_state(ctx)
    try:
        entry = upsert_food(
            state.store,
            name=name,
            amount=amount,
            calories=calories,
            unit=unit,
            protein=protein,
            fat=fat,
            carbs=carbs,
            entry_id=entry_id,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc))

    if state.json_output:
        print_json_payload(state, entry.to_dict())
        return
    if state.plain_output:
        typer.echo(f"{entry.id}\t{entry.name}\t{format_number(entry.calories)}")
        return
    verb = "Updated" if entry_id else "Added"
    state.console.print(f"{verb} {entry.name} ({format_number(entry.calories)} kcal) as {entry.id}")


@app.command("foods")
def foods_command(ctx: typer.Context) -> None:
    """List the food log with totals."""
    state = get_state(ctx)
    entries = load_food_log(state.store)
    totals = food_totals(entries)

    if state.json_output:
        print_json_payload(state, {"foods": [entry.to_dict() for entry in entries], "totals": totals})
        return

    if state.plain_output:
        typer.echo("id\tname\tamount\tcalories\tprotein\tfat\tcarbs")
        for entry in entries:
            typer.echo(
                f"{entry.id}\t{entry.name}\t{entry.amount}{entry.unit}\t{format_number(entry.calories)}\t"
                f"{format_number(entry.protein or 0)}\t{format_number(entry.fat or 0)}\t{format_number(entry.carbs or 0)}"
            )
        typer.echo(
            f"total\t\t\t{format_number(totals['calories'])}\t{format_number(totals['protein'])}\t"
            f"{format_number(totals['fat'])}\t{format_number(totals['carbs'])}"
        )
        return

    table = Table(title="Food log")
    table.add_column("Id")
    table.add_column("Food")
    table.add_column("kcal", justify="right")
    table.add_column("Macros")
    for entry in entries:
        table.add_row(
            entry.id,
            f"{entry.name} - {entry.amount}{entry.unit}",
            format_number(entry.calories),
            format_macros(entry.protein, entry.fat, entry.carbs),
        )
    state.console.print(table)
    state.console.print(
        f"Total: {format_number(totals['calories'])} kcal | "
        f"{format_macros(totals['protein'], totals['fat'], totals['carbs'])}"
    )


@app.command("remove-food")
def remove_food_command(
    ctx: typer.Context,
    entry_id: str = typer.Argument(..., help="Food entry id"),
) -> None:
    """Delete a food entry."""
    state = get_state(ctx)
    if not delete_food(state.store, entry_id):
        raise typer.BadParameter(f"Unknown food entry: {entry_id}")
    if state.json_output:
        print_json_payload(state, {"removed": entry_id})
        return
    state.console.print(f"Removed {entry_id}")


@app.command("body-weight")
def body_weight_command(
    ctx: typer.Context,
    weight: float = typer.Argument(..., help="Body weight (lbs)"),
) -> None:
    """Record today's body weight (replaces an earlier entry for today)."""
    state = get_state(ctx)
    try:
        entry = record_body_weight(state.store, weight)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))

    if state.json_output:
        print_json_payload(state, entry.to_dict())
        return
    state.console.print(f"Body weight {format_number(entry.weight)} lbs on {entry.date}")


@app.command("body-weights")
def body_weights_command(ctx: typer.Context) -> None:
    """Show the body-weight trend."""
    state = get_state(ctx)
    entries = load_body_weights(state.store)

    if state.json_output:
        print_json_payload(state, {"entries": [entry.to_dict() for entry in entries]})
        return

    if state.plain_output:
        typer.echo("date\tweight")
        for entry in entries:
            typer.echo(f"{entry.date}\t{format_number(entry.weight)}")
        return

    table = Table(title="Body weight (lbs)")
    table.add_column("Date")
    table.add_column("Weight", justify="right")
    for entry in entries:
        table.add_row(entry.date, format_number(entry.weight))
    state.console.print(table)
