"""Pygame-based DisplayBackend with headless (offscreen) support.

This module implements a pixel Surface and DisplayBackend using pygame.
It's suitable for deterministic, headless tests by setting the environment
variable SDL_VIDEODRIVER=dummy before importing pygame.

Bounds policy: writes outside ``[0, width) x [0, height)`` are dropped
silently and counted as clipped.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from rasterkit.platform.display.pygame_backend import PygameDisplayBackend

    backend = PygameDisplayBackend(size=(320, 480))
    backend.clear((0, 0, 0, 255))
    surface = backend.begin_frame()
    Line(Point(10, 10), Point(310, 10), rgba(255, 255, 0)).draw(surface)
    backend.end_frame()
    backend.save_png("/tmp/frame.png")
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Tuple

from rasterkit.core.color import Color
from rasterkit.render.surface import DisplayBackend, PixelStats, Surface

logger = logging.getLogger(__name__)

pg: Any = None
try:  # pragma: no cover - import guard for environments without SDL
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


def _pygame_color(c: Color) -> Tuple[int, int, int, int]:
    r, g, b, a = c
    return int(r), int(g), int(b), int(a)


class _PygameSurface(Surface):
    def __init__(self, surface: Any, stats: PixelStats) -> None:
        self._surface = surface
        self._w, self._h = surface.get_size()
        self._stats = stats

    def display(self, x: int, y: int, color: Color) -> None:
        if 0 <= x < self._w and 0 <= y < self._h:
            self._surface.set_at((x, y), _pygame_color(color))
            self._stats.written += 1
        else:
            self._stats.clipped += 1


class PygameDisplayBackend(DisplayBackend):
    """Pygame implementation of DisplayBackend with offscreen surface.

    Automatically initializes pygame with an offscreen display if the
    environment variable SDL_VIDEODRIVER is set to "dummy". Otherwise, a
    regular window may be created depending on the platform.
    """

    def __init__(
        self, size: Tuple[int, int] = (1000, 1000), *, create_window: bool = False
    ) -> None:
        local_pg = pg
        if local_pg is None:
            raise RuntimeError(
                "pygame is not available. "
                "Ensure it is installed and that SDL is configured."
            )

        if os.environ.get("SDL_VIDEODRIVER") == "dummy":
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

        if not local_pg.get_init():
            local_pg.init()

        self._width, self._height = int(size[0]), int(size[1])
        self._window_surface = None
        if create_window and os.environ.get("SDL_VIDEODRIVER") != "dummy":
            try:
                self._window_surface = local_pg.display.set_mode(
                    (self._width, self._height)
                )
            except local_pg.error:
                logger.warning(
                    "window creation failed; falling back to offscreen. "
                    "Check SDL_VIDEODRIVER and display permissions."
                )
                self._window_surface = None

        # Offscreen surface with per-pixel alpha
        self._surface = local_pg.Surface(
            (self._width, self._height), flags=local_pg.SRCALPHA
        )
        self.stats = PixelStats()

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def clear(self, color: Color) -> None:
        self._surface.fill(_pygame_color(color))

    def begin_frame(self) -> Surface:
        self.stats.reset()
        return _PygameSurface(self._surface, self.stats)

    def end_frame(self) -> None:
        logger.debug(
            "frame done: %d pixels written, %d clipped",
            self.stats.written,
            self.stats.clipped,
        )
        # If we have a window, blit the offscreen buffer and flip
        local_pg = pg
        if self._window_surface is not None and local_pg is not None:
            self._window_surface.blit(self._surface, (0, 0))
            local_pg.display.flip()
        return None

    def pixel(self, x: int, y: int) -> Color:
        r, g, b, a = self._surface.get_at((x, y))
        return Color(int(r), int(g), int(b), int(a))

    def save_png(self, path: str) -> None:
        local_pg = pg
        if local_pg is None:  # pragma: no cover - should not happen at runtime
            raise RuntimeError("pygame is not available")
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        local_pg.image.save(self._surface, path)
        logger.info("saved %dx%d frame to %s", self._width, self._height, path)

    def run_until_closed(self) -> None:
        """Block until the window is closed or Escape/q is pressed.

        Returns immediately when no window was created.
        """
        local_pg = pg
        if self._window_surface is None or local_pg is None:
            return
        while True:
            ev = local_pg.event.wait()
            if ev.type == local_pg.QUIT:
                break
            if ev.type == local_pg.KEYDOWN and ev.key in (
                local_pg.K_ESCAPE,
                local_pg.K_q,
            ):
                break
        local_pg.display.quit()
