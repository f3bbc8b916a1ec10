"""
Central configuration for edge arc drawing.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- View defaults -----
DEFAULT_FILL_COLOR: str = "white"
"""Colour of the filled rect (clear mode) or of the stroked band (normal mode)."""

DEFAULT_ARC_LENGTH: float = 10.0
"""Requested arc depth (sagitta) when arc_fill_length is off."""

DEFAULT_ARC_FILL_LENGTH: bool = False
"""When True the depth is the full cross dimension of the rect."""

DEFAULT_ARC_MODE_CLEAR_BLEND: bool = True
"""When True the rect is filled and the arc stroke cuts it out."""

DEFAULT_ARC_LOCATION: str = "bottom"
"""Edge the arc spans: top, right, bottom or left."""

# ----- Inspector mapping -----
INSPECTOR_MAX_VALUE: int = 3
"""Largest integer accepted for arc_location; larger values clamp to it."""

# ----- Geometry -----
ACOS_CLAMP: float = 1.0
"""acos argument is clamped to [-ACOS_CLAMP, ACOS_CLAMP] to avoid NaN angles."""

ARC_SAMPLES: int = 257
"""Points per sampled arc; odd so the arc midpoint is always a sample."""

VALIDATE_TOLERANCE: float = 0.05
"""Relative tolerance for band depth / symmetry checks."""

# ----- Rendering -----
DEFAULT_WIDTH: float = 320.0
DEFAULT_HEIGHT: float = 120.0
RENDER_DPI: int = 100
RENDER_BACKGROUND: str = "none"
"""PNG background; "none" keeps the cut-out area transparent."""

DEBUG_COLORS: dict[str, str] = {
    "rect": "black",
    "circle": "tab:orange",
    "centerline": "tab:blue",
    "center": "tab:red",
}

# ----- Reports -----
REPORTS_DIR: str = "reports"
SCHEMA_VERSION: str = "1.0"

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Root log level for CLI and UI. Set env LOG_LEVEL=DEBUG for no-op traces."""
