from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from rasterkit.core.color import Color
from rasterkit.core.shapes import ShapeKind
from rasterkit.settings.schema import SceneSettings
from rasterkit.settings.values import SHAPE_COUNTS, load_values


def test_defaults_come_from_values_yml() -> None:
    s = SceneSettings()
    assert s.size == (1000, 1000)
    assert s.background_color == Color(0, 0, 0, 255)
    assert s.counts == SHAPE_COUNTS
    assert s.count(ShapeKind.CIRCLE) == 50
    assert s.output == "image.png"
    assert s.seed is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 1},
        {"height": 0},
        {"background": (0, 0, 0, 256)},
        {"background": (0, 0, 0)},
        {"counts": {"hexagon": 1}},
        {"counts": {"circle": -1}},
        {"backend": "opengl"},
    ],
)
def test_invalid_settings_rejected(kwargs: dict) -> None:
    with pytest.raises(ValidationError):
        SceneSettings(**kwargs)


def test_counts_normalized_and_missing_kinds_zero() -> None:
    s = SceneSettings(counts={" Circle ": 2})
    assert s.counts == {"circle": 2}
    assert s.count(ShapeKind.CIRCLE) == 2
    assert s.count(ShapeKind.CUBE) == 0


def test_load_values_missing_file_falls_back(tmp_path: Path) -> None:
    vals = load_values(tmp_path / "nope.yml")
    assert vals["canvas_size"] == (1000, 1000)
    assert vals["counts"]["circle"] == 50


def test_load_values_malformed_yaml_falls_back(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    p = tmp_path / "values.yml"
    p.write_text("canvas: [unterminated\n")
    with caplog.at_level(logging.WARNING, logger="rasterkit.settings.values"):
        vals = load_values(p)
    assert vals["backend"] == "pillow"
    assert vals["canvas_size"] == (1000, 1000)
    assert "using built-in defaults" in caplog.text


def test_load_values_non_mapping_falls_back(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    p = tmp_path / "values.yml"
    p.write_text("- 1\n- 2\n")
    with caplog.at_level(logging.WARNING, logger="rasterkit.settings.values"):
        vals = load_values(p)
    assert vals["counts"]["circle"] == 50
    assert "is not a mapping" in caplog.text


def test_load_values_partial_override(tmp_path: Path) -> None:
    p = tmp_path / "values.yml"
    p.write_text(
        "canvas:\n"
        "  width: 640\n"
        "  background: [1, 2, 3, 4]\n"
        "scene:\n"
        "  counts:\n"
        "    circle: 5\n"
        "    hexagon: 9\n"
        "output:\n"
        "  backend: pygame\n"
    )
    vals = load_values(p)
    assert vals["canvas_size"] == (640, 1000)
    assert vals["background"] == [1, 2, 3, 4]
    assert vals["counts"]["circle"] == 5
    assert "hexagon" not in vals["counts"]
    assert vals["backend"] == "pygame"
    assert vals["output"] == "image.png"
