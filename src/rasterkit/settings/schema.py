"""Pydantic model for scene settings."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from rasterkit.core.color import Color
from rasterkit.core.shapes import ShapeKind

from .values import (
    BACKEND,
    BACKENDS,
    BACKGROUND,
    CANVAS_SIZE,
    OUTPUT_PATH,
    SHAPE_COUNTS,
)


class SceneSettings(BaseModel):
    """Settings for a rendered random scene.

    Parameters
    ----------
    width, height: Canvas size in pixels. Random coordinates are drawn from
        ``[1, width)`` and ``[1, height)`` so both must be at least 2.
    background: RGBA fill applied before drawing.
    counts: Number of random shapes per kind (``point``, ``line``,
        ``rectangle``, ``triangle``, ``circle``, ``cube``, ``pentagon``).
        Kinds missing from the mapping are not drawn.
    backend: ``pillow`` (image buffer) or ``pygame`` (offscreen surface).
    output: PNG path written after rendering.
    seed: Optional seed for the scene's random source. None draws from
        fresh OS entropy.
    """

    width: int = Field(default=CANVAS_SIZE[0])
    height: int = Field(default=CANVAS_SIZE[1])
    background: Tuple[int, int, int, int] = Field(default=tuple(BACKGROUND))
    counts: Dict[str, int] = Field(default_factory=lambda: dict(SHAPE_COUNTS))
    backend: str = Field(default=BACKEND)
    output: str = Field(default=OUTPUT_PATH)
    seed: Optional[int] = Field(default=None)

    @field_validator("width", "height")
    @classmethod
    def _chk_size(cls, v: int) -> int:
        if v < 2:
            raise ValueError("canvas width and height must be >= 2 px")
        return v

    @field_validator("background")
    @classmethod
    def _chk_background(
        cls, v: Tuple[int, int, int, int]
    ) -> Tuple[int, int, int, int]:
        if any(not 0 <= c <= 255 for c in v):
            raise ValueError("background channels must be in [0, 255]")
        return v

    @field_validator("counts")
    @classmethod
    def _chk_counts(cls, v: Dict[str, int]) -> Dict[str, int]:
        allowed = {k.value for k in ShapeKind}
        out: Dict[str, int] = {}
        for kind, n in v.items():
            key = kind.strip().lower()
            if key not in allowed:
                raise ValueError(
                    f"unknown shape kind {kind!r}: must be one of "
                    + ", ".join(k.value for k in ShapeKind)
                )
            if n < 0:
                raise ValueError(f"count for {key} must be >= 0")
            out[key] = n
        return out

    @field_validator("backend")
    @classmethod
    def _chk_backend(cls, v: str) -> str:
        if v not in BACKENDS:
            raise ValueError("invalid backend: must be one of " + ", ".join(BACKENDS))
        return v

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def background_color(self) -> Color:
        return Color(*self.background)

    def count(self, kind: ShapeKind) -> int:
        return self.counts.get(kind.value, 0)
