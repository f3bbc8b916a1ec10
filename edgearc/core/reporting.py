"""
Create reports/<run_name>/ and write arc.json (exact schema), run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from edgearc.core.config import (
    ACOS_CLAMP,
    ARC_SAMPLES,
    RENDER_DPI,
    REPORTS_DIR,
    SCHEMA_VERSION,
)
from edgearc.core.error_codes import BAND_CLIPPED, user_message
from edgearc.core.io import config_to_dict
from edgearc.core.types import ArcDrawing, EdgeArcConfig, Size


def arc_to_dict(
    size: Size,
    config: EdgeArcConfig,
    drawing: ArcDrawing | None,
    noop_key: str | None = None,
    validation: tuple[bool, float] | None = None,
) -> dict:
    """
    Exact structure for arc.json. result.drawn is False for a no-op draw.
    validation is validate_band's (ok, measured_depth); it adds result.visible_depth
    and a warning when the band inside the rect does not match the effective depth.
    """
    out = {
        "schema_version": SCHEMA_VERSION,
        "input": {
            "width": size.width,
            "height": size.height,
            "edge": config.arc_location.value,
            "requested_depth": config.arc_length,
            "fill_to_edge": config.arc_fill_length,
        },
        "result": {"drawn": drawing is not None},
        "warnings": [],
    }
    if drawing is None:
        out["result"]["effective_depth"] = 0.0
        out["warnings"].append(user_message(noop_key))
        return out
    p = drawing.path
    out["result"].update(
        {
            "effective_depth": drawing.effective_depth,
            "center": {"x": p.center[0], "y": p.center[1]},
            "radius": p.radius,
            "start_angle": p.start_angle,
            "end_angle": p.end_angle,
            "line_width": p.line_width,
            "clockwise": p.clockwise,
            "blend": drawing.blend,
        }
    )
    if validation is not None:
        ok, visible_depth = validation
        out["result"]["visible_depth"] = visible_depth
        if not ok:
            out["warnings"].append(user_message(BAND_CLIPPED))
    return out


def run_metadata_dict(run_name: str, size: Size, config: EdgeArcConfig, scale: int) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "size": {"width": size.width, "height": size.height},
        "view": config_to_dict(config),
        "scale": scale,
        "config": {
            "ACOS_CLAMP": ACOS_CLAMP,
            "ARC_SAMPLES": ARC_SAMPLES,
            "RENDER_DPI": RENDER_DPI,
            "SCHEMA_VERSION": SCHEMA_VERSION,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_arc_json(report_dir: Path, data: dict) -> Path:
    """Write arc.json to report_dir. Returns path to file."""
    path = report_dir / "arc.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    size: Size,
    config: EdgeArcConfig,
    scale: int = 1,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, size, config, scale)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
