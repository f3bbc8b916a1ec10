"""
Config loading: JSON file to EdgeArcConfig, validation errors, defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from edgearc.core.io import config_to_dict, load_config, parse_config
from edgearc.core.types import Edge, EdgeArcConfig


def test_load_config_full(tmp_path: Path) -> None:
    p = tmp_path / "view.json"
    p.write_text(
        json.dumps(
            {
                "fill_color": "#336699",
                "arc_length": 24,
                "arc_fill_length": True,
                "arc_mode_clear_blend": False,
                "arc_location": "top",
            }
        ),
        encoding="utf-8",
    )
    cfg = load_config(p)
    assert cfg.fill_color == "#336699"
    assert cfg.arc_length == 24.0
    assert cfg.arc_fill_length is True
    assert cfg.arc_mode_clear_blend is False
    assert cfg.arc_location is Edge.TOP


def test_load_config_relative_to_repo_root(tmp_path: Path) -> None:
    (tmp_path / "view.json").write_text("{}", encoding="utf-8")
    cfg = load_config("view.json", repo_root=tmp_path)
    assert cfg == EdgeArcConfig()


def test_missing_keys_use_defaults() -> None:
    cfg = parse_config({"arc_length": 5})
    assert cfg.arc_length == 5.0
    assert cfg.arc_location is Edge.BOTTOM
    assert cfg.arc_mode_clear_blend is True


def test_inspector_integer_location() -> None:
    assert parse_config({"arc_location": 5}).arc_location is Edge.LEFT


@pytest.mark.parametrize(
    "data",
    [
        {"arc_radius": 3},
        {"fill_color": "not-a-colour"},
        {"arc_length": "10"},
        {"arc_length": True},
        {"arc_fill_length": "yes"},
        {"arc_location": "middle"},
    ],
)
def test_parse_config_rejects_invalid(data: dict) -> None:
    with pytest.raises(ValueError):
        parse_config(data)


def test_parse_config_rejects_non_object() -> None:
    with pytest.raises(ValueError):
        parse_config([1, 2])  # type: ignore[arg-type]


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.json")


def test_load_config_bad_json(tmp_path: Path) -> None:
    p = tmp_path / "bad.json"
    p.write_text("{arc_length: 3", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)


def test_config_to_dict_roundtrip() -> None:
    cfg = EdgeArcConfig(fill_color="black", arc_length=3.5, arc_location=Edge.RIGHT)
    assert parse_config(config_to_dict(cfg)) == cfg
