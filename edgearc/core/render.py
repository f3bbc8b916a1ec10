"""
Matplotlib PNG rendering of an ArcDrawing: edge_arc.png, debug.png.
The PNG background is transparent so a blend-clear cutout shows through.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Circle
from shapely.geometry.base import BaseGeometry

from edgearc.core.config import DEBUG_COLORS, RENDER_BACKGROUND, RENDER_DPI
from edgearc.core.geometry import arc_points, band_polygon, cutout_polygon
from edgearc.core.types import ArcDrawing, Size

logger = logging.getLogger(__name__)


def painted_region(drawing: ArcDrawing) -> BaseGeometry:
    """Area left in fill_color: rect minus band (clear) or the band itself (normal)."""
    if drawing.blend == "clear":
        return cutout_polygon(drawing.size, drawing.path)
    return band_polygon(drawing.size, drawing.path)


def _new_fig(size: Size, scale: int, margin: float = 0.0) -> tuple[plt.Figure, plt.Axes]:
    # Rect units map 1:1 to pixels at scale 1
    w = max(1.0, (size.width + 2 * margin) * scale)
    h = max(1.0, (size.height + 2 * margin) * scale)
    fig = plt.figure(figsize=(w / RENDER_DPI, h / RENDER_DPI), dpi=RENDER_DPI)
    ax = fig.add_axes([0, 0, 1, 1])  # full-canvas axes
    ax.set_xlim(-margin, size.width + margin)
    ax.set_ylim(size.height + margin, -margin)  # y down
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    return fig, ax


def _draw_polygon(ax: plt.Axes, geom: BaseGeometry, color: str, alpha: float = 1.0) -> None:
    if geom is None or geom.is_empty:
        return
    if geom.geom_type == "Polygon":
        xy = np.array(geom.exterior.coords)
        ax.fill(xy[:, 0], xy[:, 1], facecolor=color, edgecolor="none", linewidth=0, alpha=alpha)
    else:
        for g in getattr(geom, "geoms", []):
            if g.geom_type in ("Polygon", "MultiPolygon"):
                _draw_polygon(ax, g, color, alpha)


def _save(fig: plt.Figure, target) -> None:
    fig.savefig(target, dpi=RENDER_DPI, facecolor=RENDER_BACKGROUND, transparent=True)
    plt.close(fig)


def render_drawing(drawing: ArcDrawing, output_path: str | Path, scale: int = 1) -> Path:
    """Render the drawing to PNG. scale multiplies output resolution (1x, 2x, 4x)."""
    fig, ax = _new_fig(drawing.size, scale)
    _draw_polygon(ax, painted_region(drawing), drawing.fill_color)
    out = Path(output_path)
    _save(fig, out)
    logger.info("Wrote %s", out)
    return out


def render_drawing_bytes(drawing: ArcDrawing, scale: int = 1) -> bytes:
    """Same as render_drawing, returned as PNG bytes."""
    fig, ax = _new_fig(drawing.size, scale)
    _draw_polygon(ax, painted_region(drawing), drawing.fill_color)
    buf = io.BytesIO()
    _save(fig, buf)
    return buf.getvalue()


def render_debug(drawing: ArcDrawing, output_path: str | Path, scale: int = 1) -> Path:
    """
    Debug overlay: painted region (faded), rect outline, full circle of radius R,
    stroke centre-line and circle center (when it falls near the rect).
    """
    size = drawing.size
    margin = 0.1 * max(size.width, size.height)
    fig, ax = _new_fig(size, scale, margin=margin)
    _draw_polygon(ax, painted_region(drawing), drawing.fill_color, alpha=0.5)

    ax.plot(
        [0, size.width, size.width, 0, 0],
        [0, 0, size.height, size.height, 0],
        color=DEBUG_COLORS["rect"], linewidth=1,
    )
    path = drawing.path
    ax.add_patch(
        Circle(path.center, path.circle_radius, fill=False,
               linestyle="--", linewidth=1, edgecolor=DEBUG_COLORS["circle"])
    )
    xy = arc_points(path)
    ax.plot(xy[:, 0], xy[:, 1], color=DEBUG_COLORS["centerline"], linewidth=1.5)
    ax.scatter([path.center[0]], [path.center[1]], s=12, color=DEBUG_COLORS["center"], zorder=5)

    out = Path(output_path)
    _save(fig, out)
    logger.info("Wrote %s", out)
    return out
