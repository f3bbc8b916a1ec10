"""
Arc geometry: clamp the requested depth (sagitta) to the rect and compute the
circular arc that spans the chosen edge with that depth.

For a chord of length S with sagitta d the circle radius is
R = d/2 + S^2 / (8d). The path is built with radius R/2 and line width R, so
the stroked band covers the sector from the circle center out to R and its
intersection with the rect is a circular segment of depth d.
"""

from __future__ import annotations

import logging
import math

from edgearc.core.config import ACOS_CLAMP
from edgearc.core.error_codes import DEGENERATE_RECT, NON_POSITIVE_DEPTH
from edgearc.core.types import ArcPath, ArcSpec, Edge, Size

logger = logging.getLogger(__name__)


def is_degenerate(size: Size) -> bool:
    """True when either dimension is zero, negative or not finite."""
    for v in (size.width, size.height):
        if not math.isfinite(v) or v <= 0:
            return True
    return False


def clamp_depth(
    size: Size,
    edge: Edge,
    requested_depth: float,
    fill_to_edge: bool = False,
) -> float:
    """
    Effective arc depth for the edge: the cross dimension when fill_to_edge,
    else requested_depth; never more than half the span. A requested depth larger
    than the cross dimension is kept; the rect clips the visible band.
    Returns 0.0 when nothing should be drawn (non-positive depth or degenerate rect).
    """
    if is_degenerate(size):
        return 0.0
    span = size.span(edge)
    depth = size.cross(edge) if fill_to_edge else float(requested_depth)
    if math.isnan(depth):
        return 0.0
    depth = min(depth, span / 2.0)
    if depth <= 0:
        return 0.0
    return depth


def noop_reason(
    size: Size,
    edge: Edge,
    requested_depth: float,
    fill_to_edge: bool = False,
) -> str | None:
    """Error key explaining why clamp_depth returns 0.0, or None if the arc is drawn."""
    if is_degenerate(size):
        return DEGENERATE_RECT
    if clamp_depth(size, edge, requested_depth, fill_to_edge) <= 0:
        return NON_POSITIVE_DEPTH
    return None


def circle_radius(span: float, depth: float) -> float:
    """Radius of the circle whose chord of length span has sagitta depth."""
    return depth / 2.0 + (span * span) / (8.0 * depth)


def _half_sweep(span: float, radius: float) -> float:
    """acos(S / 2R) with the argument clamped so rounding never yields NaN."""
    x = span / (2.0 * radius)
    x = max(-ACOS_CLAMP, min(ACOS_CLAMP, x))
    return math.acos(x)


def compute_arc(size: Size, edge: Edge, effective_depth: float) -> ArcPath:
    """
    Arc path for an already clamped depth.
    Raises ValueError on a degenerate rect or non-positive depth; use
    arc_for_spec for the no-op-aware entrypoint.
    """
    if is_degenerate(size):
        raise ValueError(f"Degenerate rect: {size.width} x {size.height}")
    d = float(effective_depth)
    if not d > 0:
        raise ValueError(f"Arc depth must be positive, got {effective_depth}")

    s = size.span(edge)
    r = circle_radius(s, d)
    a = _half_sweep(s, r)

    if edge is Edge.TOP:
        center = (s / 2.0, d - r)
        start, end = a, math.pi - a
    elif edge is Edge.BOTTOM:
        center = (s / 2.0, (size.height - d) + r)
        start, end = math.pi + a, 2.0 * math.pi - a
    elif edge is Edge.LEFT:
        center = (d - r, s / 2.0)
        start, end = 1.5 * math.pi + a, 0.5 * math.pi - a
    elif edge is Edge.RIGHT:
        center = ((size.width - d) + r, s / 2.0)
        start, end = 0.5 * math.pi + a, 1.5 * math.pi - a
    else:
        raise ValueError(f"Unknown edge: {edge!r}")

    return ArcPath(
        center=center,
        radius=r / 2.0,
        start_angle=start,
        end_angle=end,
        line_width=r,
        clockwise=True,
    )


def arc_for_spec(size: Size, spec: ArcSpec) -> ArcPath | None:
    """Clamp then compute. Returns None when the draw is a no-op."""
    depth = clamp_depth(size, spec.edge, spec.requested_depth, spec.fill_to_edge)
    if depth <= 0:
        logger.debug(
            "Edge arc skipped (%s): size=%sx%s edge=%s depth=%s",
            noop_reason(size, spec.edge, spec.requested_depth, spec.fill_to_edge),
            size.width, size.height, spec.edge.value, spec.requested_depth,
        )
        return None
    return compute_arc(size, spec.edge, depth)
