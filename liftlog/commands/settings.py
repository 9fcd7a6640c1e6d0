"""Settings commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from liftlog.commands.common import display_unit, get_state, print_json_payload, validate_unit
from liftlog.core.config import default_config, save_config
from liftlog.core.storage import save_unit

app = typer.Typer(help="Preferences and data management")


@app.command("unit")
def unit_command(
    ctx: typer.Context,
    value: Optional[str] = typer.Argument(None, help="New unit: lbs|kg (omit to show)"),
    toggle: bool = typer.Option(False, "--toggle", help="Switch between lbs and kg"),
) -> None:
    """Show or change the display unit."""
    state = get_state(ctx)
    current = display_unit(state)

    if toggle:
        new_unit = "kg" if current == "lbs" else "lbs"
    elif value is not None:
        new_unit = validate_unit(value)
    else:
        new_unit = current

    if new_unit != current:
        save_unit(state.store, new_unit)

    if state.json_output:
        print_json_payload(state, {"unit": new_unit, "changed": new_unit != current})
        return
    if state.plain_output:
        typer.echo(new_unit)
        return
    state.console.print(f"Unit: {new_unit.upper()}")


@app.command("clear")
def clear_command(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete all stored data."""
    state = get_state(ctx)
    if not yes:
        typer.confirm(
            "Delete all data? This resets all weight, cardio and diet logs.",
            abort=True,
        )
    state.store.clear()
    if state.json_output:
        print_json_payload(state, {"cleared": True})
        return
    state.console.print("All data cleared")


@app.command("init-config")
def init_config_command(
    ctx: typer.Context,
    path: Optional[Path] = typer.Option(None, help="Where to write the config (default: --config path)"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a config file populated with the defaults."""
    state = get_state(ctx)
    target = path or state.config_path
    if target.exists() and not force:
        typer.echo(f"Config already exists at {target} (use --force to overwrite)")
        raise typer.Exit(code=1)

    written = save_config(default_config(), target)
    if state.json_output:
        print_json_payload(state, {"config_path": str(written)})
        return
    state.console.print(f"Wrote {written}")
