from __future__ import annotations

import json
from pathlib import Path

from liftlog.core.models import ChartScale, HistoryPoint
from liftlog.core.storage import MemoryStore, save_weight
from liftlog.exporters.json_export import store_snapshot, write_json
from liftlog.exporters.markdown import history_to_markdown, write_history_markdown


def test_history_to_markdown_contains_frontmatter_and_table() -> None:
    points = [HistoryPoint(label="01-06", value=100), HistoryPoint(label="01-13", value=102.5)]
    output = history_to_markdown('Bench "Flat"', "weekly", "lbs", points, ChartScale(step=10, rounded_max=110, sections=11))
    assert output.startswith("---\n")
    assert 'exercise: "Bench \\"Flat\\""' in output
    assert "points: 2" in output
    assert "- **Axis max:** 110" in output
    assert "| 01-06 | 100 |" in output
    assert "| 01-13 | 102.5 |" in output


def test_history_to_markdown_without_points() -> None:
    output = history_to_markdown("Squat", "monthly", "kg", [], ChartScale(step=1, rounded_max=0, sections=0))
    assert "No recorded weights" in output
    assert "| Label |" not in output


def test_write_history_markdown_uses_exercise_id(tmp_path: Path) -> None:
    first = write_history_markdown(tmp_path / "history", "bench-press", "weekly", "# one\n")
    second = write_history_markdown(tmp_path / "history", "bench-press-2", "weekly", "# two\n")
    assert first == tmp_path / "history" / "bench-press-weekly.md"
    assert second == tmp_path / "history" / "bench-press-2-weekly.md"
    assert first.read_text() == "# one\n"
    assert second.read_text() == "# two\n"


def test_store_snapshot_decodes_blobs(tmp_path: Path) -> None:
    store = MemoryStore()
    save_weight(store, "bench-press", "2025-01-08", 100.0)
    store.set_item("unit", "kg")
    store.set_item("gymStreak", "3")

    snapshot = store_snapshot(store)
    assert snapshot == {
        "exerciseWeights": {"2025-01-06": {"bench-press": 100.0}},
        "gymStreak": 3,
        "unit": "kg",
    }

    path = write_json(tmp_path / "out" / "liftlog.json", snapshot)
    assert json.loads(path.read_text()) == snapshot
