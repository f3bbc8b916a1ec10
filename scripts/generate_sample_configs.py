#!/usr/bin/env python3
"""
Generate sample view configs (one per edge and mode) for trying the CLI:

    edgearc --config samples/bottom_clear.json --svg

Categories:
  <edge>_clear.json      cut-out with the default arc length
  <edge>_band.json       stroked band, red
  <edge>_fill.json       cut-out with fill length (full cross dimension)
"""

from __future__ import annotations

import json
from pathlib import Path

from edgearc.core.io import config_to_dict
from edgearc.core.types import Edge, EdgeArcConfig

OUTPUT_DIR = Path(__file__).parent.parent / "samples"


def save_config(filename: str, cfg: EdgeArcConfig) -> None:
    """Save config as JSON."""
    path = OUTPUT_DIR / filename
    path.write_text(json.dumps(config_to_dict(cfg), indent=2), encoding="utf-8")
    print(f"Created: {path.name}")


def main() -> None:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    count = 0
    for edge in Edge:
        save_config(f"{edge.value}_clear.json", EdgeArcConfig(arc_location=edge, arc_length=24.0))
        save_config(
            f"{edge.value}_band.json",
            EdgeArcConfig(arc_location=edge, arc_length=24.0, arc_mode_clear_blend=False, fill_color="#d62728"),
        )
        save_config(f"{edge.value}_fill.json", EdgeArcConfig(arc_location=edge, arc_fill_length=True))
        count += 3
    print(f"Generated {count} configs in {OUTPUT_DIR}")


if __name__ == "__main__":
    main()
