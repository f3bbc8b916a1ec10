"""
Streamlit preview: sidebar with the view fields and rect size, live PNG
preview, arc metrics, downloads (PNG, SVG, arc.json).
Run with: streamlit run edgearc/ui/app.py
"""

from __future__ import annotations

import json
import logging

from edgearc.core.config import (
    DEFAULT_ARC_FILL_LENGTH,
    DEFAULT_ARC_LENGTH,
    DEFAULT_ARC_LOCATION,
    DEFAULT_ARC_MODE_CLEAR_BLEND,
    DEFAULT_FILL_COLOR,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    LOG_LEVEL,
)

# Configure logging from env (e.g. LOG_LEVEL=DEBUG for development)
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))

import streamlit as st
from matplotlib.colors import to_hex

from edgearc.core.arc import noop_reason
from edgearc.core.render import render_drawing_bytes
from edgearc.core.render_svg import svg_string
from edgearc.core.reporting import arc_to_dict
from edgearc.core.types import Edge, EdgeArcConfig, Size
from edgearc.core.validate import validate_band
from edgearc.core.view import EdgeArcView
from edgearc.ui import components as ui_components
from edgearc.ui.help_text import (
    GLOSSARY_MD,
    TOOLTIP_ARC_LENGTH,
    TOOLTIP_CLEAR_BLEND,
    TOOLTIP_FILL_LENGTH,
    TOOLTIP_LOCATION,
    TOOLTIP_SCALE,
)

_EDGES = [e.value for e in Edge]


def _sidebar() -> tuple[Size, EdgeArcConfig, int]:
    st.sidebar.header("Rect")
    width = st.sidebar.number_input("Width", min_value=0.0, value=DEFAULT_WIDTH, step=10.0)
    height = st.sidebar.number_input("Height", min_value=0.0, value=DEFAULT_HEIGHT, step=10.0)

    st.sidebar.header("Arc")
    location = st.sidebar.selectbox(
        "Arc location", _EDGES, index=_EDGES.index(DEFAULT_ARC_LOCATION), help=TOOLTIP_LOCATION
    )
    arc_length = st.sidebar.number_input(
        "Arc length", value=DEFAULT_ARC_LENGTH, step=1.0, help=TOOLTIP_ARC_LENGTH
    )
    fill_length = st.sidebar.checkbox("Fill length", value=DEFAULT_ARC_FILL_LENGTH, help=TOOLTIP_FILL_LENGTH)
    clear_blend = st.sidebar.checkbox("Clear blend", value=DEFAULT_ARC_MODE_CLEAR_BLEND, help=TOOLTIP_CLEAR_BLEND)
    fill_color = st.sidebar.color_picker("Fill colour", value=to_hex(DEFAULT_FILL_COLOR))
    scale = st.sidebar.selectbox("Render scale", [1, 2, 4], index=0, help=TOOLTIP_SCALE)

    cfg = EdgeArcConfig(
        fill_color=fill_color,
        arc_length=float(arc_length),
        arc_fill_length=fill_length,
        arc_mode_clear_blend=clear_blend,
        arc_location=Edge(location),
    )
    return Size(float(width), float(height)), cfg, int(scale)


def main() -> None:
    st.set_page_config(page_title="Edge arc", layout="wide")
    st.title("Edge arc preview")
    size, cfg, scale = _sidebar()

    drawing = EdgeArcView(cfg).draw(size)
    key = None
    validation = None
    if drawing is None:
        key = noop_reason(size, cfg.arc_location, cfg.arc_length, cfg.arc_fill_length)
    else:
        validation = validate_band(size, drawing.edge, drawing.path, drawing.effective_depth)
    arc_data = arc_to_dict(size, cfg, drawing, key, validation)

    left, right = st.columns([2, 1])
    with left:
        ui_components.render_warnings(arc_data["warnings"])
        if drawing is not None:
            png = render_drawing_bytes(drawing, scale=scale)
            st.image(png, caption=f"{cfg.arc_location.value} · {drawing.blend}")
            ui_components.centered_download("Download edge_arc.png", png, "edge_arc.png", "image/png", "dl_png")
            ui_components.centered_download(
                "Download edge_arc.svg", svg_string(drawing).encode("utf-8"), "edge_arc.svg", "image/svg+xml", "dl_svg"
            )
    with right:
        ui_components.render_metrics(arc_data)
        ui_components.centered_download(
            "Download arc.json", json.dumps(arc_data, indent=2).encode("utf-8"), "arc.json", "application/json", "dl_json"
        )

    with st.expander("Help & glossary"):
        st.markdown(GLOSSARY_MD)


main()
