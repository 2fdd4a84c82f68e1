"""Scene composition: ordered shape collections rendered onto a backend."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Tuple

from rasterkit.core.color import Color
from rasterkit.core.rng import RandomSource, resolve
from rasterkit.core.shapes import Shape, ShapeKind
from rasterkit.render.surface import DisplayBackend, Surface
from rasterkit.settings.schema import SceneSettings

logger = logging.getLogger(__name__)

__all__ = ["Scene", "ShapeKind", "random_scene", "render_scene", "make_backend"]


@dataclass(frozen=True, slots=True)
class Scene:
    shapes: Tuple[Shape, ...] = ()
    background: Color = Color(0, 0, 0, 255)

    def add(self, *shapes: Shape) -> "Scene":
        return Scene(self.shapes + tuple(shapes), self.background)

    def kinds(self) -> Counter[str]:
        return Counter(type(s).__name__.lower() for s in self.shapes)

    def draw(self, surface: Surface, rng: RandomSource | None = None) -> None:
        """Draw every shape in insertion order.

        Per-draw colours are sampled from *rng* as each shape is drawn, so a
        seeded source reproduces the same image.
        """
        src = resolve(rng)
        for shape in self.shapes:
            shape.draw(surface, src)


def random_scene(
    settings: SceneSettings, rng: RandomSource | None = None
) -> Scene:
    """Build ``settings.counts[kind]`` random shapes of each kind.

    Kinds are generated in :class:`ShapeKind` order. Raises ``ValueError``
    when the canvas is too small for a requested kind.
    """
    src = resolve(rng)
    w, h = settings.size
    shapes: list[Shape] = []
    for kind in ShapeKind:
        n = settings.count(kind)
        factory = kind.shape_type
        shapes.extend(factory.random(w, h, src) for _ in range(n))
    scene = Scene(tuple(shapes), settings.background_color)
    summary = ", ".join(f"{k}={n}" for k, n in sorted(scene.kinds().items()))
    logger.info(
        "generated %d shapes on a %dx%d canvas (%s)",
        len(shapes),
        w,
        h,
        summary or "empty",
    )
    return scene


def render_scene(
    scene: Scene, backend: DisplayBackend, rng: RandomSource | None = None
) -> None:
    """Clear *backend* to the scene background, draw, and end the frame."""
    backend.clear(scene.background)
    surface = backend.begin_frame()
    scene.draw(surface, rng)
    backend.end_frame()


def make_backend(
    settings: SceneSettings, *, create_window: bool = False
) -> DisplayBackend:
    """Return the display backend named by ``settings.backend``."""
    if settings.backend == "pygame":
        from rasterkit.platform.display.pygame_backend import PygameDisplayBackend

        return PygameDisplayBackend(settings.size, create_window=create_window)

    from rasterkit.platform.display.pillow_backend import PillowDisplayBackend

    if create_window:
        logger.warning("the pillow backend has no window; rendering offscreen")
    return PillowDisplayBackend(settings.size, settings.background_color)
