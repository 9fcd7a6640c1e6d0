"""Configuration loading and persistence."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]

from liftlog.core.constants import (
    DEFAULT_CHART_POINTS,
    DEFAULT_DAILY_WINDOW,
    DEFAULT_RECENT_DAYS,
    DEFAULT_STREAK_GOAL,
    DEFAULT_UNIT,
)


class ConfigError(RuntimeError):
    """Raised when config file parsing fails."""


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_path(path_str: str) -> Path:
    """Expand user/env vars and return absolute path."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_data_dir() -> Path:
    """Resolve XDG-style data directory with env override."""
    raw = os.getenv("LIFTLOG_DATA_DIR", "~/.local/share/liftlog")
    return expand_path(raw)


def default_config_path() -> Path:
    """Get default config file path."""
    raw = os.getenv("LIFTLOG_CONFIG_FILE", "~/.config/liftlog/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    data_dir = default_data_dir()
    return {
        "storage": {
            "path": str(data_dir / "store.json"),
        },
        "defaults": {
            "unit": DEFAULT_UNIT,
        },
        "history": {
            "daily_window": DEFAULT_DAILY_WINDOW,
            "chart_points": DEFAULT_CHART_POINTS,
        },
        "gym": {
            "streak_goal": DEFAULT_STREAK_GOAL,
        },
        "cardio": {
            "recent_days": DEFAULT_RECENT_DAYS,
        },
        "export": {
            "default_directory": "./liftlog-export",
        },
    }


def _read_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text()
    try:
        if suffix in {".toml", ""}:
            loaded = tomllib.loads(text)
        else:
            loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults."""
    cfg_path = path or default_config_path()
    cfg = _default_config()

    if cfg_path.exists():
        cfg = _deep_merge(cfg, _read_config(cfg_path))

    return cfg


def _toml_literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    raise TypeError(f"Unsupported TOML value type: {type(value)!r}")


def _dict_to_toml(data: Dict[str, Any]) -> str:
    """Render top-level scalars, then one [section] table per nested mapping."""
    blocks: List[str] = []
    top = [
        f"{key} = {_toml_literal(value)}"
        for key, value in data.items()
        if value is not None and not isinstance(value, dict)
    ]
    if top:
        blocks.append("\n".join(top))

    for section, values in data.items():
        if not isinstance(values, dict):
            continue
        lines = [f"[{section}]"]
        lines.extend(f"{key} = {_toml_literal(value)}" for key, value in values.items() if value is not None)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def save_config(config: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """Save configuration to disk as TOML (default) or JSON."""
    cfg_path = path or default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    if cfg_path.suffix.lower() == ".json":
        cfg_path.write_text(json.dumps(config, indent=2) + "\n")
        return cfg_path

    cfg_path.write_text(_dict_to_toml(config).strip() + "\n")
    return cfg_path


def default_config() -> Dict[str, Any]:
    return _default_config()


def resolve_store_path(config: Dict[str, Any]) -> Path:
    """Resolve the key-value store file from env/config."""
    raw = os.getenv("LIFTLOG_STORE") or config.get("storage", {}).get("path")
    if not raw:
        raw = str(default_data_dir() / "store.json")
    return expand_path(raw)


def resolve_output_dir(config: Dict[str, Any], explicit: Optional[Path] = None) -> Path:
    """Resolve output directory with CLI override first."""
    if explicit is not None:
        return explicit.expanduser().resolve()
    raw = os.getenv("LIFTLOG_OUTPUT_DIR") or config.get("export", {}).get(
        "default_directory",
        "./liftlog-export",
    )
    return expand_path(raw)


def config_int(config: Dict[str, Any], section: str, key: str, default: int) -> int:
    """Read an integer setting, falling back to default on bad values."""
    value = config.get(section, {}).get(key, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
