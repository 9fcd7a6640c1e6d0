"""Entry point for liftlog."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from liftlog import __version__
from liftlog.commands import cardio as cardio_commands
from liftlog.commands import diet as diet_commands
from liftlog.commands import exercises as exercise_commands
from liftlog.commands import gym as gym_commands
from liftlog.commands import history as history_commands
from liftlog.commands import settings as settings_commands
from liftlog.commands import weights as weight_commands
from liftlog.commands.export import export_command
from liftlog.core.config import ConfigError, default_config_path, load_config, resolve_store_path
from liftlog.core.state import CLIState
from liftlog.core.storage import JsonFileStore, StorageError

app = typer.Typer(
    add_completion=False,
    help="Track lifting weights, cardio, diet and gym streaks",
    invoke_without_command=True,
)


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    if quiet:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
        force=True,
    )


@app.callback()
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output JSON where available"),
    plain_output: bool = typer.Option(
        False,
        "--plain",
        help="Output plain text (no rich formatting/tables)",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Quiet output"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Initialize global CLI state."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if json_output and plain_output:
        typer.echo("Options --json and --plain are mutually exclusive.")
        raise typer.Exit(code=2)

    _configure_logging(verbose, quiet)

    cfg_path = (config or default_config_path()).expanduser().resolve()
    try:
        cfg = load_config(cfg_path)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}")
        raise typer.Exit(code=2)

    store = JsonFileStore(resolve_store_path(cfg))
    try:
        store.keys()
    except StorageError as exc:
        typer.echo(f"Storage error: {exc}")
        raise typer.Exit(code=1)
    logging.getLogger(__name__).debug("Using store %s", store.path)

    console = Console(
        quiet=quiet,
        no_color=plain_output,
        log_time=False,
        log_path=False,
    )
    ctx.obj = CLIState(
        json_output=(json_output and not plain_output),
        plain_output=plain_output,
        verbose=verbose,
        quiet=quiet,
        config_path=cfg_path,
        config=cfg,
        console=console,
        store=store,
    )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


app.add_typer(weight_commands.app, name="weight")
app.add_typer(exercise_commands.app, name="exercise")
app.add_typer(history_commands.app, name="history")
app.add_typer(cardio_commands.app, name="cardio")
app.add_typer(diet_commands.app, name="diet")
app.add_typer(gym_commands.app, name="gym")
app.add_typer(settings_commands.app, name="settings")
app.command("export")(export_command)


def main() -> None:
    """Console script entrypoint."""
    try:
        app()
    except StorageError as exc:
        typer.echo(f"Storage error: {exc}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
