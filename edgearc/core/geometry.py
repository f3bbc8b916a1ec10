"""
Geometry helpers: arc sampling, stroke region, band and cutout polygons.
Coordinates are rect-local with y pointing down; angles follow the same
convention, so a clockwise sweep is an increasing angle.
"""

from __future__ import annotations

import math

import numpy as np
from shapely.geometry import Polygon, box
from shapely.geometry.base import BaseGeometry

from edgearc.core.config import ARC_SAMPLES
from edgearc.core.types import ArcPath, Size


def sweep_angles(path: ArcPath) -> tuple[float, float]:
    """
    (start, end) with end unwrapped so that a linear sweep from start to end
    follows the path direction (end >= start when clockwise).
    """
    start, end = path.start_angle, path.end_angle
    if path.clockwise:
        while end < start:
            end += 2.0 * math.pi
    else:
        while end > start:
            end -= 2.0 * math.pi
    return start, end


def sweep_extent(path: ArcPath) -> float:
    """Absolute angle swept by the path (radians)."""
    start, end = sweep_angles(path)
    return abs(end - start)


def arc_points(path: ArcPath, n: int = ARC_SAMPLES, radius: float | None = None) -> np.ndarray:
    """
    Sample the arc as (n, 2) points from start to end angle.
    radius defaults to the path radius (the stroke centre-line).
    """
    if n < 2:
        n = 2
    r = path.radius if radius is None else radius
    start, end = sweep_angles(path)
    t = np.linspace(start, end, n)
    cx, cy = path.center
    return np.column_stack((cx + r * np.cos(t), cy + r * np.sin(t)))


def rect_polygon(size: Size) -> Polygon:
    """Rect with origin (0, 0)."""
    if size.width <= 0 or size.height <= 0:
        return Polygon()
    return box(0.0, 0.0, size.width, size.height)


def stroke_polygon(path: ArcPath, n: int = ARC_SAMPLES) -> Polygon:
    """
    Region covered by stroking the path with butt caps: the annular sector
    between radius - line_width/2 and radius + line_width/2. When the inner
    radius reaches zero the region is a plain sector anchored at the center.
    """
    outer_r = path.radius + path.line_width / 2.0
    inner_r = max(0.0, path.radius - path.line_width / 2.0)
    if outer_r <= 0:
        return Polygon()
    outer = arc_points(path, n, radius=outer_r)
    if inner_r <= 0:
        ring = np.vstack((np.array([path.center]), outer))
    else:
        inner = arc_points(path, n, radius=inner_r)[::-1]
        ring = np.vstack((outer, inner))
    poly = Polygon(ring)
    if not poly.is_valid:
        poly = poly.buffer(0)
    return poly


def band_polygon(size: Size, path: ArcPath) -> BaseGeometry:
    """Stroke region clipped to the rect: the circular segment along the edge."""
    rect = rect_polygon(size)
    if rect.is_empty:
        return Polygon()
    return rect.intersection(stroke_polygon(path))


def cutout_polygon(size: Size, path: ArcPath) -> BaseGeometry:
    """What stays painted after a blend-clear stroke: rect minus band."""
    rect = rect_polygon(size)
    if rect.is_empty:
        return Polygon()
    return rect.difference(stroke_polygon(path))
