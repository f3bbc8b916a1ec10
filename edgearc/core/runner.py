"""
CLI entrypoint: build the view config, draw for the given rect size, render,
export. Writes arc.json and run_metadata.json always; PNG/SVG only when the
arc is drawn.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from edgearc.core.arc import noop_reason
from edgearc.core.config import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    LOG_LEVEL,
    REPORTS_DIR,
)
from edgearc.core.error_codes import user_message
from edgearc.core.io import config_to_dict, load_config, parse_config
from edgearc.core.render import render_debug, render_drawing
from edgearc.core.render_svg import export_svg
from edgearc.core.reporting import (
    arc_to_dict,
    ensure_report_dir,
    write_arc_json,
    write_run_metadata_json,
)
from edgearc.core.types import EdgeArcConfig, Size
from edgearc.core.validate import validate_band
from edgearc.core.view import EdgeArcView

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Draw an arc cutout or band along one edge of a rect.")
    p.add_argument("--width", type=float, default=DEFAULT_WIDTH, help="Rect width")
    p.add_argument("--height", type=float, default=DEFAULT_HEIGHT, help="Rect height")
    p.add_argument("--config", type=str, default=None, help="JSON view config (fields below override it)")
    p.add_argument("--edge", type=str, default=None, help="top, right, bottom, left or 0-3")
    p.add_argument("--arc-length", type=float, default=None, dest="arc_length", help="Arc depth (sagitta)")
    p.add_argument(
        "--fill-to-edge",
        action=argparse.BooleanOptionalAction,
        default=None,
        dest="fill_to_edge",
        help="Use the full cross dimension as depth (--no-fill-to-edge turns a config value off)",
    )
    p.add_argument(
        "--clear-blend",
        action=argparse.BooleanOptionalAction,
        default=None,
        dest="clear_blend",
        help="Cut the band out (--no-clear-blend strokes it with the fill colour)",
    )
    p.add_argument("--fill-color", type=str, default=None, dest="fill_color", help="Fill / stroke colour")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--scale", type=int, default=1, choices=(1, 2, 4), help="PNG resolution multiplier")
    p.add_argument("--svg", action="store_true", help="Also write edge_arc.svg")
    p.add_argument("--debug", action="store_true", help="Also write debug.png")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace, repo_root: Path) -> EdgeArcConfig:
    """Config file first (if any), then explicit CLI fields on top."""
    cfg = load_config(args.config, repo_root=repo_root) if args.config else EdgeArcConfig()
    data = config_to_dict(cfg)
    overrides = {
        "arc_location": args.edge,
        "arc_length": args.arc_length,
        "arc_fill_length": args.fill_to_edge,
        "arc_mode_clear_blend": args.clear_blend,
        "fill_color": args.fill_color,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    return parse_config(data)


def run(argv: list[str] | None = None) -> list[Path]:
    """Parse argv, draw and write outputs. Returns the written paths."""
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    cfg = build_config(args, repo_root)
    size = Size(args.width, args.height)
    view = EdgeArcView(cfg)
    drawing = view.draw(size)

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    key = None
    validation = None
    if drawing is None:
        key = noop_reason(size, cfg.arc_location, cfg.arc_length, cfg.arc_fill_length)
        logger.warning(user_message(key))
    else:
        validation = validate_band(size, drawing.edge, drawing.path, drawing.effective_depth)
        if not validation[0]:
            logger.warning("Visible band depth %.3f differs from effective depth %.3f", validation[1], drawing.effective_depth)
    written = [
        write_arc_json(report_dir, arc_to_dict(size, cfg, drawing, key, validation)),
        write_run_metadata_json(report_dir, args.run_name, size, cfg, args.scale),
    ]
    if drawing is not None:
        written.append(render_drawing(drawing, report_dir / "edge_arc.png", scale=args.scale))
        if args.svg:
            written.append(export_svg(drawing, report_dir / "edge_arc.svg"))
        if args.debug:
            written.append(render_debug(drawing, report_dir / "debug.png", scale=args.scale))

    for p in written:
        print(p)
    print("Drawn:", drawing is not None)
    return written


def main() -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    run()


if __name__ == "__main__":
    main()
