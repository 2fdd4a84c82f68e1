"""Packaged default values loaded from YAML.

The master source is ``values.yml`` in this package. On import we parse it
with PyYAML; a missing or malformed file falls back to the hard-coded
literals below (logged at WARNING) so rendering still works.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

BACKENDS: Tuple[str, ...] = ("pillow", "pygame")

# --- Fallback literals -----------------------------------------------------
_FALLBACK_CANVAS_SIZE = (1000, 1000)
_FALLBACK_BACKGROUND = [0, 0, 0, 255]
_FALLBACK_COUNTS = {
    "point": 1,
    "line": 1,
    "rectangle": 1,
    "triangle": 1,
    "circle": 50,
    "cube": 1,
    "pentagon": 1,
}
_FALLBACK_OUTPUT = "image.png"
_FALLBACK_BACKEND = "pillow"


def _int_or(v: Any, default: int) -> int:
    if isinstance(v, bool):
        return default
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def load_values(path: Path = _YAML_PATH) -> Dict[str, Any]:
    """Parse *path* and return the merged defaults.

    Unknown keys are ignored; wrongly typed entries keep their fallback.
    """
    canvas_size = _FALLBACK_CANVAS_SIZE
    background: List[int] = list(_FALLBACK_BACKGROUND)
    counts: Dict[str, int] = dict(_FALLBACK_COUNTS)
    output = _FALLBACK_OUTPUT
    backend = _FALLBACK_BACKEND

    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("could not load %s, using built-in defaults: %s", path, e)
        raw = {}
    if not isinstance(raw, dict):
        logger.warning("%s is not a mapping, using built-in defaults", path)
        raw = {}

    canvas = raw.get("canvas", {})
    if isinstance(canvas, dict):
        canvas_size = (
            _int_or(canvas.get("width"), canvas_size[0]),
            _int_or(canvas.get("height"), canvas_size[1]),
        )
        bg = canvas.get("background")
        if isinstance(bg, list) and len(bg) == 4:
            background = [_int_or(c, d) for c, d in zip(bg, background)]

    scene = raw.get("scene", {})
    if isinstance(scene, dict) and isinstance(scene.get("counts"), dict):
        for kind, n in scene["counts"].items():
            if kind in counts:
                counts[kind] = _int_or(n, counts[kind])

    out = raw.get("output", {})
    if isinstance(out, dict):
        if isinstance(out.get("path"), str):
            output = out["path"]
        if out.get("backend") in BACKENDS:
            backend = out["backend"]

    return {
        "canvas_size": canvas_size,
        "background": background,
        "counts": counts,
        "output": output,
        "backend": backend,
    }


_values = load_values()

CANVAS_SIZE: Tuple[int, int] = _values["canvas_size"]
BACKGROUND: List[int] = _values["background"]
SHAPE_COUNTS: Dict[str, int] = _values["counts"]
OUTPUT_PATH: str = _values["output"]
BACKEND: str = _values["backend"]

__all__ = [
    "BACKENDS",
    "BACKEND",
    "BACKGROUND",
    "CANVAS_SIZE",
    "OUTPUT_PATH",
    "SHAPE_COUNTS",
    "load_values",
]
