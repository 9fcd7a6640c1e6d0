"""Export stored data to external formats."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import typer

from liftlog.commands.common import display_unit, get_state, print_json_payload
from liftlog.core.config import resolve_output_dir
from liftlog.core.history import recorded_exercise_ids, weekly_history
from liftlog.core.models import HistoryPoint
from liftlog.core.state import CLIState
from liftlog.core.storage import load_exercises, load_weights
from liftlog.core.units import chart_scale, display_weight
from liftlog.exporters.json_export import store_snapshot, write_json
from liftlog.exporters.markdown import history_to_markdown, write_history_markdown


def _write_exports(state: CLIState, out_dir: Path, export_format: str) -> Tuple[Optional[Path], List[str]]:
    out_dir.mkdir(parents=True, exist_ok=True)

    json_path: Optional[Path] = None
    if export_format in {"json", "both"}:
        json_path = write_json(out_dir / "liftlog.json", store_snapshot(state.store))

    markdown_files: List[str] = []
    if export_format in {"markdown", "both"}:
        unit = display_unit(state)
        weights = load_weights(state.store)
        used = recorded_exercise_ids(weights)
        for exercise in load_exercises(state.store):
            if exercise.id not in used:
                continue
            points = [
                HistoryPoint(label=point.label, value=display_weight(point.value, unit))
                for point in weekly_history(weights, exercise.id)
            ]
            scale = chart_scale(max([point.value for point in points] + [0]), unit)
            content = history_to_markdown(exercise.name, "weekly", unit, points, scale)
            markdown_files.append(str(write_history_markdown(out_dir / "history", exercise.id, "weekly", content)))
    return json_path, markdown_files


def export_command(
    ctx: typer.Context,
    output_dir: Optional[Path] = typer.Option(None, help="Output directory for exports"),
    export_format: str = typer.Option("both", "--format", help="Export format: json|markdown|both"),
) -> None:
    """Export all data as JSON and weekly history as markdown."""
    if export_format not in {"json", "markdown", "both"}:
        raise typer.BadParameter("--format must be one of: json, markdown, both")

    state = get_state(ctx)
    out_dir = resolve_output_dir(state.config, explicit=output_dir)
    try:
        json_path, markdown_files = _write_exports(state, out_dir, export_format)
    except OSError as exc:
        typer.echo(f"Export failed: {exc}")
        raise typer.Exit(code=1)

    payload = {
        "output_dir": str(out_dir),
        "json_file": str(json_path) if json_path else None,
        "markdown_files": markdown_files,
    }

    if state.json_output:
        print_json_payload(state, payload)
        return
    if state.plain_output:
        typer.echo(f"output_dir\t{out_dir}")
        typer.echo(f"markdown_files\t{len(markdown_files)}")
        return
    state.console.print(f"Exported to: {out_dir}")
    state.console.print(f"History reports: {len(markdown_files)}")
