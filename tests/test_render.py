"""
PNG and SVG rendering: files are written, cut-out pixels are transparent,
SVG uses a native arc with the computed stroke width.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import matplotlib.image as mpimg
import pytest

from edgearc.core.geometry import band_polygon, rect_polygon
from edgearc.core.render import painted_region, render_debug, render_drawing, render_drawing_bytes
from edgearc.core.render_svg import arc_to_svg_d, export_svg
from edgearc.core.types import Edge, EdgeArcConfig, Size
from edgearc.core.view import EdgeArcView

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def _drawing(size: Size, edge: Edge, clear: bool = True):
    view = EdgeArcView(EdgeArcConfig(fill_color="black", arc_length=20.0, arc_location=edge, arc_mode_clear_blend=clear))
    drawing = view.draw(size)
    assert drawing is not None
    return drawing


def test_painted_region_clear_vs_normal(size_100x50: Size) -> None:
    clear = _drawing(size_100x50, Edge.TOP, clear=True)
    normal = _drawing(size_100x50, Edge.TOP, clear=False)
    band = band_polygon(size_100x50, clear.path)
    assert painted_region(clear).area == pytest.approx(rect_polygon(size_100x50).area - band.area, rel=1e-6)
    assert painted_region(normal).area == pytest.approx(band.area, rel=1e-6)


def test_render_drawing_writes_png(tmp_path: Path, size_100x50: Size) -> None:
    out = render_drawing(_drawing(size_100x50, Edge.BOTTOM), tmp_path / "edge_arc.png")
    assert out.exists()
    assert out.read_bytes()[:8] == PNG_MAGIC


def test_clear_mode_cutout_is_transparent(tmp_path: Path, size_100x50: Size) -> None:
    out = render_drawing(_drawing(size_100x50, Edge.TOP), tmp_path / "top.png")
    img = mpimg.imread(str(out))
    assert img.shape[0] == 50 and img.shape[1] == 100
    # inside the arc near the top edge: erased
    assert img[2, 50, 3] == pytest.approx(0.0, abs=0.05)
    # far from the arc: painted
    assert img[45, 50, 3] == pytest.approx(1.0, abs=0.05)
    assert img[5, 2, 3] == pytest.approx(1.0, abs=0.05)


def test_normal_mode_paints_band_only(tmp_path: Path, size_100x50: Size) -> None:
    out = render_drawing(_drawing(size_100x50, Edge.TOP, clear=False), tmp_path / "band.png")
    img = mpimg.imread(str(out))
    assert img[2, 50, 3] == pytest.approx(1.0, abs=0.05)
    assert img[45, 50, 3] == pytest.approx(0.0, abs=0.05)


def test_render_scale_multiplies_resolution(tmp_path: Path, size_100x50: Size) -> None:
    out = render_drawing(_drawing(size_100x50, Edge.LEFT), tmp_path / "x2.png", scale=2)
    img = mpimg.imread(str(out))
    assert img.shape[0] == 100 and img.shape[1] == 200


def test_render_drawing_bytes(size_100x50: Size) -> None:
    data = render_drawing_bytes(_drawing(size_100x50, Edge.RIGHT))
    assert data[:8] == PNG_MAGIC


def test_render_debug_writes_png(tmp_path: Path, size_100x50: Size) -> None:
    out = render_debug(_drawing(size_100x50, Edge.LEFT), tmp_path / "debug.png")
    assert out.exists()
    assert out.read_bytes()[:8] == PNG_MAGIC


def test_arc_to_svg_d_top(size_100x50: Size) -> None:
    drawing = _drawing(size_100x50, Edge.TOP)
    d = arc_to_svg_d(drawing.path)
    assert d.startswith("M ")
    parts = d.split()
    # A rx ry rotation large-arc sweep x y
    a_idx = parts.index("A")
    assert float(parts[a_idx + 1]) == pytest.approx(drawing.path.radius, abs=1e-3)
    assert parts[a_idx + 4] == "0"
    assert parts[a_idx + 5] == "1"


@pytest.mark.parametrize("clear", [True, False])
def test_export_svg(tmp_path: Path, size_100x50: Size, clear: bool) -> None:
    drawing = _drawing(size_100x50, Edge.BOTTOM, clear=clear)
    out = export_svg(drawing, tmp_path / "edge_arc.svg")
    root = ET.parse(out).getroot()
    assert root.tag.endswith("svg")
    assert root.get("viewBox") == "0 0 100.00 50.00"
    ns = {"svg": "http://www.w3.org/2000/svg"}
    masks = root.findall(".//svg:mask", ns)
    assert bool(masks) is clear
    strokes = [p for p in root.iter() if p.tag.endswith("path")]
    assert len(strokes) == 1
    assert float(strokes[0].get("stroke-width")) == pytest.approx(drawing.path.line_width, abs=1e-3)


def test_export_svg_converts_matplotlib_colours(tmp_path: Path, size_100x50: Size) -> None:
    view = EdgeArcView(EdgeArcConfig(fill_color="tab:orange", arc_length=20.0, arc_mode_clear_blend=False))
    out = export_svg(view.draw(size_100x50), tmp_path / "orange.svg")
    stroke = [p for p in ET.parse(out).getroot().iter() if p.tag.endswith("path")][0]
    assert stroke.get("stroke") == "#ff7f0e"
    assert stroke.get("stroke-opacity") == "1"


def test_export_svg_clear_mode_fill_is_hex(tmp_path: Path, size_100x50: Size) -> None:
    view = EdgeArcView(EdgeArcConfig(fill_color="C0", arc_length=20.0))
    out = export_svg(view.draw(size_100x50), tmp_path / "c0.svg")
    rects = [r for r in ET.parse(out).getroot().iter() if r.tag.endswith("rect") and r.get("mask")]
    assert rects[0].get("fill") == "#1f77b4"
