"""
Dataclasses for edge arc inputs, the computed arc path and the draw plan.
Schema of arc.json follows ArcPath; see edgearc/core/reporting.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from edgearc.core.config import (
    DEFAULT_ARC_FILL_LENGTH,
    DEFAULT_ARC_LENGTH,
    DEFAULT_ARC_LOCATION,
    DEFAULT_ARC_MODE_CLEAR_BLEND,
    DEFAULT_FILL_COLOR,
)


BlendMode = Literal["clear", "normal"]


class Edge(str, Enum):
    """Side of the rectangle the arc spans."""
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def is_horizontal(self) -> bool:
        """True for TOP/BOTTOM, where the span runs along the width."""
        return self in (Edge.TOP, Edge.BOTTOM)


@dataclass(frozen=True)
class Size:
    """Rectangle size; origin is (0, 0) and y grows downwards."""
    width: float
    height: float

    def span(self, edge: Edge) -> float:
        return self.width if edge.is_horizontal else self.height

    def cross(self, edge: Edge) -> float:
        return self.height if edge.is_horizontal else self.width


@dataclass(frozen=True)
class ArcSpec:
    """Requested arc: edge, sagitta and fill-to-edge override."""
    edge: Edge
    requested_depth: float
    fill_to_edge: bool = False


@dataclass(frozen=True)
class ArcPath:
    """
    Stroked arc. radius is half the circle radius and line_width is the full
    circle radius, so the stroke covers the sector from the center out to R.
    """
    center: tuple[float, float]  # (x, y)
    radius: float
    start_angle: float
    end_angle: float
    line_width: float
    clockwise: bool = True

    @property
    def circle_radius(self) -> float:
        """Outer radius of the stroked band (R)."""
        return self.radius + self.line_width / 2.0


@dataclass
class EdgeArcConfig:
    """Configurable fields of the edge arc view."""
    fill_color: str = DEFAULT_FILL_COLOR
    arc_length: float = DEFAULT_ARC_LENGTH
    arc_fill_length: bool = DEFAULT_ARC_FILL_LENGTH
    arc_mode_clear_blend: bool = DEFAULT_ARC_MODE_CLEAR_BLEND
    arc_location: Edge = Edge(DEFAULT_ARC_LOCATION)


@dataclass
class ArcDrawing:
    """
    Draw plan handed to a renderer.
    fill_rect: paint the whole rect with fill_color first.
    blend: "clear" strokes the path as an eraser, "normal" with fill_color.
    """
    size: Size
    edge: Edge
    path: ArcPath
    effective_depth: float
    fill_color: str
    fill_rect: bool
    blend: BlendMode
