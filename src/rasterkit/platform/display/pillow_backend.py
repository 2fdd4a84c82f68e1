"""Pillow image-buffer DisplayBackend.

Pixels land in an in-memory RGBA ``PIL.Image``; ``save_png`` encodes it.
No display or SDL is required, so this is the default backend for scripted
renders.

Bounds policy: writes outside ``[0, width) x [0, height)`` are dropped
silently and counted as clipped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Tuple

from PIL import Image

from rasterkit.core.color import Color
from rasterkit.render.surface import DisplayBackend, PixelStats, Surface

logger = logging.getLogger(__name__)


class _ImageSurface(Surface):
    def __init__(self, image: Image.Image, stats: PixelStats) -> None:
        self._w, self._h = image.size
        self._px: Any = image.load()
        self._stats = stats

    def display(self, x: int, y: int, color: Color) -> None:
        if 0 <= x < self._w and 0 <= y < self._h:
            r, g, b, a = color
            self._px[x, y] = (int(r), int(g), int(b), int(a))
            self._stats.written += 1
        else:
            self._stats.clipped += 1


class PillowDisplayBackend(DisplayBackend):
    def __init__(
        self,
        size: Tuple[int, int] = (1000, 1000),
        background: Color = Color(0, 0, 0, 255),
    ) -> None:
        w, h = int(size[0]), int(size[1])
        if w <= 0 or h <= 0:
            raise ValueError(f"image size must be positive, got {w}x{h}")
        self._width, self._height = w, h
        self._image = Image.new("RGBA", (w, h), tuple(background))
        self.stats = PixelStats()

    @property
    def image(self) -> Image.Image:
        return self._image

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def clear(self, color: Color) -> None:
        r, g, b, a = color
        box = (0, 0, self._width, self._height)
        self._image.paste((int(r), int(g), int(b), int(a)), box)

    def begin_frame(self) -> Surface:
        self.stats.reset()
        return _ImageSurface(self._image, self.stats)

    def end_frame(self) -> None:
        logger.debug(
            "frame done: %d pixels written, %d clipped",
            self.stats.written,
            self.stats.clipped,
        )

    def pixel(self, x: int, y: int) -> Color:
        r, g, b, a = self._image.getpixel((x, y))
        return Color(int(r), int(g), int(b), int(a))

    def save_png(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._image.save(path, format="PNG")
        logger.info("saved %dx%d frame to %s", self._width, self._height, path)
