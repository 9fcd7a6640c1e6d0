from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pytest
from typer.testing import CliRunner

from liftlog.core.storage import MemoryStore


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def sample_weights() -> Dict[str, Dict[str, float]]:
    return {
        "2025-01-06": {"bench-press": 100, "squat": 135},
        "2025-01-13": {"bench-press": 105},
        "2025-01-27": {"bench-press": 110, "squat": 145},
        "2025-02-03": {"squat": 150},
    }


@pytest.fixture()
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the CLI at a throwaway store and a missing config file."""
    store_path = tmp_path / "store.json"
    monkeypatch.setenv("LIFTLOG_STORE", str(store_path))
    monkeypatch.setenv("LIFTLOG_CONFIG_FILE", str(tmp_path / "config.toml"))
    monkeypatch.setenv("LIFTLOG_DATA_DIR", str(tmp_path / "data"))
    return store_path


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2) + "\n")
        return path

    return _write


@pytest.fixture()
def write_temp_text(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n")
        return path

    return _write
