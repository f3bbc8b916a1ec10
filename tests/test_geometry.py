"""
Deterministic tests for geometry: arc sampling, stroke region, band/cutout
polygons and band validation.
"""

from __future__ import annotations

import math

import pytest

from edgearc.core.arc import clamp_depth, compute_arc
from edgearc.core.geometry import (
    arc_points,
    band_polygon,
    cutout_polygon,
    rect_polygon,
    stroke_polygon,
    sweep_extent,
)
from edgearc.core.types import ArcPath, Edge, Size
from edgearc.core.validate import validate_band


def _segment_area(r: float, d: float) -> float:
    return r * r * math.acos((r - d) / r) - (r - d) * math.sqrt(2 * r * d - d * d)


def test_outer_arc_ends_on_rect_corners_top(size_100x50: Size) -> None:
    path = compute_arc(size_100x50, Edge.TOP, 10.0)
    xy = arc_points(path, radius=path.circle_radius)
    # clockwise in y-down space: right corner first
    assert tuple(xy[0]) == pytest.approx((100.0, 0.0), abs=1e-6)
    assert tuple(xy[-1]) == pytest.approx((0.0, 0.0), abs=1e-6)
    # deepest point in the middle
    mid = xy[len(xy) // 2]
    assert tuple(mid) == pytest.approx((50.0, 10.0), abs=1e-6)


def test_outer_arc_ends_on_rect_corners_left() -> None:
    size = Size(60.0, 100.0)
    path = compute_arc(size, Edge.LEFT, 10.0)
    xy = arc_points(path, radius=path.circle_radius)
    assert tuple(xy[0]) == pytest.approx((0.0, 0.0), abs=1e-6)
    assert tuple(xy[-1]) == pytest.approx((0.0, 100.0), abs=1e-6)
    assert tuple(xy[len(xy) // 2]) == pytest.approx((10.0, 50.0), abs=1e-6)


@pytest.mark.parametrize("edge", list(Edge))
def test_sweep_is_same_for_all_edges(size_100x50: Size, edge: Edge) -> None:
    d = 10.0
    path = compute_arc(size_100x50, edge, d)
    s = size_100x50.span(edge)
    expected = math.pi - 2 * math.acos(s / (2 * path.circle_radius))
    assert sweep_extent(path) == pytest.approx(expected)


@pytest.mark.parametrize("edge", list(Edge))
def test_band_reaches_depth(size_100x50: Size, edge: Edge) -> None:
    depth = clamp_depth(size_100x50, edge, 12.0)
    path = compute_arc(size_100x50, edge, depth)
    ok, measured = validate_band(size_100x50, edge, path, depth)
    assert ok is True
    assert measured == pytest.approx(depth, rel=1e-3)


def test_band_area_is_circular_segment(size_100x50: Size) -> None:
    path = compute_arc(size_100x50, Edge.TOP, 10.0)
    band = band_polygon(size_100x50, path)
    assert band.area == pytest.approx(_segment_area(130.0, 10.0), rel=1e-3)


@pytest.mark.parametrize("edge", list(Edge))
def test_band_and_cutout_partition_rect(size_100x50: Size, edge: Edge) -> None:
    path = compute_arc(size_100x50, edge, 8.0)
    band = band_polygon(size_100x50, path)
    cut = cutout_polygon(size_100x50, path)
    assert band.area + cut.area == pytest.approx(rect_polygon(size_100x50).area, rel=1e-6)
    assert band.intersection(cut).area == pytest.approx(0.0, abs=1e-6)


def test_stroke_polygon_annular_sector() -> None:
    path = ArcPath(center=(0.0, 0.0), radius=10.0, start_angle=0.0, end_angle=math.pi / 2, line_width=4.0)
    poly = stroke_polygon(path)
    expected = (math.pi / 2) / 2 * (12.0 ** 2 - 8.0 ** 2)
    assert poly.is_valid
    assert poly.area == pytest.approx(expected, rel=1e-3)


def test_counter_clockwise_sweep() -> None:
    path = ArcPath(center=(0.0, 0.0), radius=1.0, start_angle=0.0, end_angle=math.pi / 2, line_width=0.5, clockwise=False)
    assert sweep_extent(path) == pytest.approx(1.5 * math.pi)


def test_rect_polygon_degenerate_is_empty() -> None:
    assert rect_polygon(Size(0.0, 10.0)).is_empty


def test_validate_band_wrong_depth(size_100x50: Size) -> None:
    path = compute_arc(size_100x50, Edge.BOTTOM, 10.0)
    ok, measured = validate_band(size_100x50, Edge.BOTTOM, path, 20.0)
    assert ok is False
    assert measured == pytest.approx(10.0, rel=1e-3)
