from __future__ import annotations

import logging
import os
import random
from pathlib import Path

# Ensure headless before importing pygame backend
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from rasterkit.core.color import random_color, rgba  # noqa: E402
from rasterkit.core.shapes import Circle, Point  # noqa: E402
from rasterkit.platform.display.pygame_backend import (  # noqa: E402
    PygameDisplayBackend,
)


def test_pygame_display_and_clip() -> None:
    backend = PygameDisplayBackend(size=(16, 16))
    backend.clear(rgba(0, 0, 0))
    surface = backend.begin_frame()
    surface.display(4, 5, rgba(255, 0, 0))
    surface.display(-1, 5, rgba(255, 0, 0))
    surface.display(4, 16, rgba(255, 0, 0))
    backend.end_frame()
    assert backend.pixel(4, 5) == rgba(255, 0, 0)
    assert backend.pixel(5, 5) == rgba(0, 0, 0)
    assert backend.stats.written == 1
    assert backend.stats.clipped == 2


def test_pygame_circle_and_save(tmp_path: Path) -> None:
    backend = PygameDisplayBackend(size=(32, 32))
    backend.clear(rgba(0, 0, 0))
    circle = Circle(Point(16, 16), 10)
    circle.draw(backend.begin_frame(), rng=random.Random(3))
    backend.end_frame()
    assert backend.pixel(16, 6) == random_color(random.Random(3))
    assert backend.pixel(16, 16) == rgba(0, 0, 0)

    out = tmp_path / "out" / "circle.png"
    backend.save_png(str(out))
    assert out.exists()
    assert backend.size() == (32, 32)


def test_run_until_closed_without_window_returns() -> None:
    backend = PygameDisplayBackend(size=(8, 8), create_window=True)
    backend.run_until_closed()


def test_end_frame_logs_pixel_counts(caplog) -> None:
    backend = PygameDisplayBackend(size=(4, 4))
    surface = backend.begin_frame()
    surface.display(0, 0, rgba(9, 9, 9))
    surface.display(0, -1, rgba(9, 9, 9))
    surface.display(9, 9, rgba(9, 9, 9))
    logname = "rasterkit.platform.display.pygame_backend"
    with caplog.at_level(logging.DEBUG, logger=logname):
        backend.end_frame()
    assert "frame done: 1 pixels written, 2 clipped" in caplog.text
