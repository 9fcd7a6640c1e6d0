"""Markdown report export for weight history."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from liftlog.core.models import ChartScale, HistoryPoint
from liftlog.utils.formatting import format_number


def history_to_markdown(
    exercise_name: str,
    view: str,
    unit: str,
    points: Iterable[HistoryPoint],
    scale: ChartScale,
) -> str:
    """Render a history series as a markdown table with frontmatter."""
    rows = list(points)
    title_yaml = exercise_name.replace('"', '\\"')
    lines: List[str] = [
        "---",
        f'exercise: "{title_yaml}"',
        f'view: "{view}"',
        f'unit: "{unit}"',
        f"points: {len(rows)}",
        "---",
        "",
        f"# {exercise_name} ({view})",
        "",
        f"- **Unit:** {unit}",
        f"- **Axis step:** {format_number(scale.step)}",
        f"- **Axis max:** {format_number(scale.rounded_max)}",
        "",
    ]

    if not rows:
        lines.append("No recorded weights")
        lines.append("")
        return "\n".join(lines)

    lines.extend(["| Label | Weight |", "|-------|--------|"])
    for point in rows:
        lines.append(f"| {point.label} | {format_number(point.value)} |")
    lines.append("")
    return "\n".join(lines)


def write_history_markdown(output_dir: Path, exercise_id: str, view: str, content: str) -> Path:
    """Write one history report named after the exercise id and return its path."""
    out_path = output_dir / f"{exercise_id}-{view}.md"
    output_dir.mkdir(parents=True, exist_ok=True)
    out_path.write_text(content)
    return out_path
