"""
Load and validate edge arc view configuration from JSON.
Keys: fill_color, arc_length, arc_fill_length, arc_mode_clear_blend, arc_location.
Missing keys take the defaults from edgearc/core/config.py.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

from matplotlib.colors import is_color_like

from edgearc.core.types import EdgeArcConfig
from edgearc.core.view import coerce_edge

CONFIG_KEYS: tuple[str, ...] = (
    "fill_color",
    "arc_length",
    "arc_fill_length",
    "arc_mode_clear_blend",
    "arc_location",
)


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _as_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise ValueError(f"'{key}' must be true or false, got {value!r}")


def parse_config(data: dict[str, Any]) -> EdgeArcConfig:
    """
    Build an EdgeArcConfig from a plain dict.
    Raises ValueError on unknown keys, wrong types or an unrecognised colour.
    """
    if not isinstance(data, dict):
        raise ValueError("Config must be a JSON object")
    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(unknown)}")

    cfg = EdgeArcConfig()
    if "fill_color" in data:
        color = data["fill_color"]
        if not isinstance(color, str) or not is_color_like(color):
            raise ValueError(f"'fill_color' is not a valid colour: {color!r}")
        cfg.fill_color = color
    if "arc_length" in data:
        length = data["arc_length"]
        if isinstance(length, bool) or not isinstance(length, (int, float)) or math.isnan(length):
            raise ValueError(f"'arc_length' must be a number, got {length!r}")
        cfg.arc_length = float(length)
    if "arc_fill_length" in data:
        cfg.arc_fill_length = _as_bool("arc_fill_length", data["arc_fill_length"])
    if "arc_mode_clear_blend" in data:
        cfg.arc_mode_clear_blend = _as_bool("arc_mode_clear_blend", data["arc_mode_clear_blend"])
    if "arc_location" in data:
        cfg.arc_location = coerce_edge(data["arc_location"])
    return cfg


def load_config(path: str | Path, repo_root: Path | None = None) -> EdgeArcConfig:
    """
    Read a JSON config file and return a validated EdgeArcConfig.
    Raises FileNotFoundError if path is missing, ValueError if content is invalid.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Config file not found: {resolved}")
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {resolved}: {e}") from e
    return parse_config(data)


def config_to_dict(cfg: EdgeArcConfig) -> dict[str, Any]:
    """Inverse of parse_config; arc_location as its name."""
    return {
        "fill_color": cfg.fill_color,
        "arc_length": cfg.arc_length,
        "arc_fill_length": cfg.arc_fill_length,
        "arc_mode_clear_blend": cfg.arc_mode_clear_blend,
        "arc_location": cfg.arc_location.value,
    }
