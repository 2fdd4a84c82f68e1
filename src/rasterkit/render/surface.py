"""Framework-agnostic Surface and DisplayBackend protocols.

Shapes only need a Surface: a single ``display`` operation that sets one
pixel. Backends (Pillow, pygame) own the pixel storage, the frame lifecycle
and PNG output, and decide what happens to writes outside the canvas.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple

from rasterkit.core.color import Color


class Surface(Protocol):
    def display(self, x: int, y: int, color: Color) -> None:
        """Set pixel (x, y) to *color*. Must not raise for out-of-bounds."""
        ...


class DisplayBackend(Protocol):
    def size(self) -> Tuple[int, int]:
        ...

    def clear(self, color: Color) -> None:
        ...

    def begin_frame(self) -> Surface:
        ...

    def end_frame(self) -> None:
        ...

    def save_png(self, path: str) -> None:
        ...


@dataclass(slots=True)
class PixelStats:
    """Per-frame counters kept by the shipped backends."""

    written: int = 0
    clipped: int = 0

    def reset(self) -> None:
        self.written = 0
        self.clipped = 0
