"""
Export an ArcDrawing as self-contained SVG using a native arc (A) command.
Clear mode fills the rect and erases the stroked arc through a mask.
"""

from __future__ import annotations

import logging
import math
import xml.etree.ElementTree as ET
from pathlib import Path

from matplotlib.colors import to_hex, to_rgba

from edgearc.core.geometry import sweep_extent
from edgearc.core.types import ArcDrawing, ArcPath

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


def arc_to_svg_d(path: ArcPath) -> str:
    """Arc path as SVG path d (M ... A ...). Sweep flag 1 is clockwise in y-down space."""
    cx, cy = path.center
    r = path.radius
    x0 = cx + r * math.cos(path.start_angle)
    y0 = cy + r * math.sin(path.start_angle)
    x1 = cx + r * math.cos(path.end_angle)
    y1 = cy + r * math.sin(path.end_angle)
    large = 1 if sweep_extent(path) > math.pi else 0
    sweep = 1 if path.clockwise else 0
    return f"M {x0:.4f} {y0:.4f} A {r:.4f} {r:.4f} 0 {large} {sweep} {x1:.4f} {y1:.4f}"


def svg_color(color: str) -> tuple[str, float]:
    """Any matplotlib colour as (#rrggbb, opacity) that SVG renderers understand."""
    return to_hex(color, keep_alpha=False), float(to_rgba(color)[3])


def _stroke_attrs(path: ArcPath, color: str) -> dict[str, str]:
    hex_color, opacity = svg_color(color)
    return {
        "d": arc_to_svg_d(path),
        "fill": "none",
        "stroke": hex_color,
        "stroke-opacity": f"{opacity:g}",
        "stroke-width": f"{path.line_width:.4f}",
        "stroke-linecap": "butt",
    }


def build_svg(drawing: ArcDrawing) -> ET.Element:
    """SVG element tree for the drawing; viewBox is the rect."""
    w, h = drawing.size.width, drawing.size.height
    fill_hex, fill_opacity = svg_color(drawing.fill_color)
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": f"{w:.2f}",
            "height": f"{h:.2f}",
            "viewBox": f"0 0 {w:.2f} {h:.2f}",
        },
    )
    if drawing.blend == "clear":
        defs = ET.SubElement(root, "defs")
        mask = ET.SubElement(defs, "mask", {"id": "arc-cutout", "maskUnits": "userSpaceOnUse"})
        ET.SubElement(mask, "rect", {"x": "0", "y": "0", "width": f"{w:.2f}", "height": f"{h:.2f}", "fill": "white"})
        ET.SubElement(mask, "path", _stroke_attrs(drawing.path, "black"))
        ET.SubElement(
            root,
            "rect",
            {
                "x": "0",
                "y": "0",
                "width": f"{w:.2f}",
                "height": f"{h:.2f}",
                "fill": fill_hex,
                "fill-opacity": f"{fill_opacity:g}",
                "mask": "url(#arc-cutout)",
            },
        )
    else:
        if drawing.fill_rect:
            ET.SubElement(root, "rect", {"x": "0", "y": "0", "width": f"{w:.2f}", "height": f"{h:.2f}", "fill": fill_hex, "fill-opacity": f"{fill_opacity:g}"})
        ET.SubElement(root, "path", _stroke_attrs(drawing.path, drawing.fill_color))
    return root


def svg_string(drawing: ArcDrawing) -> str:
    out_str = ET.tostring(build_svg(drawing), encoding="unicode", method="xml")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + out_str


def export_svg(drawing: ArcDrawing, out_path: str | Path) -> Path:
    """Write the SVG to out_path and return it."""
    out = Path(out_path)
    out.write_text(svg_string(drawing), encoding="utf-8")
    logger.info("Wrote %s", out)
    return out
