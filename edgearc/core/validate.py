"""
Validate that a stroked arc produces the expected band inside the rect.
Return (ok, measured_depth).
"""

from __future__ import annotations

from shapely.geometry.base import BaseGeometry

from edgearc.core.config import VALIDATE_TOLERANCE
from edgearc.core.geometry import band_polygon
from edgearc.core.types import ArcPath, Edge, Size


def measured_depth(band: BaseGeometry, size: Size, edge: Edge) -> float:
    """Extent of the band on the cross axis, measured from the arc's edge."""
    if band is None or band.is_empty:
        return 0.0
    minx, miny, maxx, maxy = band.bounds
    if edge is Edge.TOP:
        return float(maxy)
    if edge is Edge.BOTTOM:
        return float(size.height - miny)
    if edge is Edge.LEFT:
        return float(maxx)
    return float(size.width - minx)


def _span_offset(band: BaseGeometry, size: Size, edge: Edge) -> float:
    """Distance of the band centroid from the rect center line on the span axis."""
    c = band.centroid
    if edge.is_horizontal:
        return abs(c.x - size.width / 2.0)
    return abs(c.y - size.height / 2.0)


def validate_band(
    size: Size,
    edge: Edge,
    path: ArcPath,
    expected_depth: float,
    tolerance: float = VALIDATE_TOLERANCE,
) -> tuple[bool, float]:
    """
    True if the band (stroke clipped to rect) reaches expected_depth and is
    symmetric about the span center line, both within tolerance (relative).
    Also returns the measured depth.
    """
    band = band_polygon(size, path)
    depth = measured_depth(band, size, edge)
    if band.is_empty or expected_depth <= 0:
        return False, depth
    depth_ok = abs(depth - expected_depth) <= tolerance * expected_depth
    symmetric = _span_offset(band, size, edge) <= tolerance * size.span(edge)
    return bool(depth_ok and symmetric), depth
