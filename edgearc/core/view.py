"""
Edge arc view adapter: holds the configurable fields and turns a draw request
for a given rect size into an ArcDrawing plan (or None for a no-op).
Renderers (render.py, render_svg.py) consume the plan.
"""

from __future__ import annotations

import logging

from edgearc.core.arc import clamp_depth, compute_arc
from edgearc.core.config import INSPECTOR_MAX_VALUE
from edgearc.core.types import ArcDrawing, Edge, EdgeArcConfig, Size

logger = logging.getLogger(__name__)

# Integer mapping used by property editors that only handle numbers.
INSPECTOR_EDGES: tuple[Edge, ...] = (Edge.TOP, Edge.RIGHT, Edge.BOTTOM, Edge.LEFT)


def edge_from_inspector(value: int) -> Edge:
    """Map 0..3 to TOP, RIGHT, BOTTOM, LEFT; out-of-range values clamp."""
    idx = max(0, min(INSPECTOR_MAX_VALUE, int(value)))
    return INSPECTOR_EDGES[idx]


def edge_to_inspector(edge: Edge) -> int:
    return INSPECTOR_EDGES.index(edge)


def coerce_edge(value: Edge | str | int) -> Edge:
    """Accept an Edge, an edge name ("top", "Left", ...) or an inspector integer."""
    if isinstance(value, Edge):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid arc location: {value!r}")
    if isinstance(value, int):
        return edge_from_inspector(value)
    if isinstance(value, str):
        s = value.strip().lower()
        if s.isdigit():
            return edge_from_inspector(int(s))
        try:
            return Edge(s)
        except ValueError:
            raise ValueError(
                f"Invalid arc location: {value!r}. Use one of: "
                + ", ".join(e.value for e in Edge)
            ) from None
    raise ValueError(f"Invalid arc location: {value!r}")


class EdgeArcView:
    """
    Rect view with an arc cut out of (or stroked along) one edge.
    Each draw() recomputes the arc from the current fields; nothing is cached.
    """

    def __init__(self, config: EdgeArcConfig | None = None) -> None:
        self.config = config if config is not None else EdgeArcConfig()

    @property
    def fill_color(self) -> str:
        return self.config.fill_color

    @fill_color.setter
    def fill_color(self, value: str) -> None:
        self.config.fill_color = value

    @property
    def arc_length(self) -> float:
        return self.config.arc_length

    @arc_length.setter
    def arc_length(self, value: float) -> None:
        self.config.arc_length = float(value)

    @property
    def arc_fill_length(self) -> bool:
        return self.config.arc_fill_length

    @arc_fill_length.setter
    def arc_fill_length(self, value: bool) -> None:
        self.config.arc_fill_length = bool(value)

    @property
    def arc_mode_clear_blend(self) -> bool:
        return self.config.arc_mode_clear_blend

    @arc_mode_clear_blend.setter
    def arc_mode_clear_blend(self, value: bool) -> None:
        self.config.arc_mode_clear_blend = bool(value)

    @property
    def arc_location(self) -> Edge:
        return self.config.arc_location

    @arc_location.setter
    def arc_location(self, value: Edge | str | int) -> None:
        self.config.arc_location = coerce_edge(value)

    def effective_depth(self, size: Size) -> float:
        cfg = self.config
        return clamp_depth(size, cfg.arc_location, cfg.arc_length, cfg.arc_fill_length)

    def draw(self, size: Size) -> ArcDrawing | None:
        """
        Draw plan for a rect of the given size, or None when there is nothing
        to draw (non-positive depth or degenerate rect).
        """
        cfg = self.config
        depth = self.effective_depth(size)
        if depth <= 0:
            logger.debug("Nothing to draw for %sx%s at %s", size.width, size.height, cfg.arc_location.value)
            return None
        path = compute_arc(size, cfg.arc_location, depth)
        clear = cfg.arc_mode_clear_blend
        return ArcDrawing(
            size=size,
            edge=cfg.arc_location,
            path=path,
            effective_depth=depth,
            fill_color=cfg.fill_color,
            fill_rect=clear,
            blend="clear" if clear else "normal",
        )
