"""RGBA colour value and random colour generation."""

from __future__ import annotations

from typing import NamedTuple

from .rng import RandomSource, resolve

__all__ = ["Color", "rgba", "random_color", "OPAQUE"]

OPAQUE = 255


class Color(NamedTuple):
    """8-bit RGBA colour.

    A plain tuple subclass so it unpacks like the ``(r, g, b, a)`` tuples
    pygame and Pillow accept. Use :func:`rgba` to build a checked value.
    """

    r: int
    g: int
    b: int
    a: int = OPAQUE


def rgba(r: int, g: int, b: int, a: int = OPAQUE) -> Color:
    """Return a :class:`Color` after checking every channel is in [0, 255]."""
    for name, v in (("r", r), ("g", g), ("b", b), ("a", a)):
        if not isinstance(v, int) or isinstance(v, bool):
            raise ValueError(f"colour channel {name} must be an int, got {v!r}")
        if not 0 <= v <= 255:
            raise ValueError(f"colour channel {name} out of range [0, 255]: {v}")
    return Color(r, g, b, a)


def random_color(rng: RandomSource | None = None) -> Color:
    """Return a uniformly random, fully opaque colour.

    Three independent ``randint(0, 255)`` draws, in r, g, b order.
    """
    src = resolve(rng)
    r = src.randint(0, 255)
    g = src.randint(0, 255)
    b = src.randint(0, 255)
    return Color(r, g, b, OPAQUE)
