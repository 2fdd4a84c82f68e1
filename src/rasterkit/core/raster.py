"""Rasterization algorithms for lines, circles and regular pentagons.

All coordinates are integer pixels with the origin at the top-left and y
growing downwards. Functions return plain lists of ``(x, y)`` tuples and
have no side effects; shapes feed the results to a Surface.
"""

from __future__ import annotations

from math import cos, floor, radians, sin, trunc
from typing import List, Tuple

__all__ = [
    "Pixel",
    "round_half_away",
    "div_trunc",
    "line_pixels",
    "circle_pixels",
    "pentagon_vertices",
    "PENTAGON_TURN_DEG",
]

Pixel = Tuple[int, int]

PENTAGON_TURN_DEG: float = 72.0


def round_half_away(v: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's built-in ``round`` uses banker's rounding, which would bias
    lines passing exactly through pixel boundaries towards even pixels.

    Args:
        v: Value to round.
    Returns:
        Nearest integer; ``x.5`` maps to ``x + 1`` for positive values and
        ``-(x + 1)`` for negative ones.
    """
    if v >= 0.0:
        return int(floor(v + 0.5))
    return -int(floor(-v + 0.5))


def div_trunc(n: int, d: int) -> int:
    """Integer division truncating toward zero (``-3 / 2 -> -1``)."""
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d > 0) else -q


def line_pixels(x1: int, y1: int, x2: int, y2: int) -> List[Pixel]:
    """Pixels of the segment (x1, y1)-(x2, y2) via a symmetric DDA.

    The walk takes ``max(|dx|, |dy|) + 1`` samples so both endpoints are
    always emitted. A zero-length segment yields exactly one pixel.

    Args:
        x1: Start x.
        y1: Start y.
        x2: End x.
        y2: End y.
    Returns:
        Ordered list of pixels from start to end.
    """
    dx = x2 - x1
    dy = y2 - y1
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return [(x1, y1)]

    x_inc = dx / steps
    y_inc = dy / steps
    x = float(x1)
    y = float(y1)
    out: List[Pixel] = []
    for _ in range(steps + 1):
        out.append((round_half_away(x), round_half_away(y)))
        x += x_inc
        y += y_inc
    return out


def circle_pixels(cx: int, cy: int, r: int) -> List[Pixel]:
    """Contour pixels of a circle using the half-pixel-centre test.

    Starting at the top of the circle (x = 0, y = -r), the row moves one step
    inwards whenever the midpoint ``(x, y + 0.5)`` falls outside the true
    radius. Each iteration emits the 8 reflections of (x, y), so the result
    holds duplicates on the axes and diagonals; consumers that need a set
    should deduplicate.

    Args:
        cx: Centre x.
        cy: Centre y.
        r: Radius in pixels (>= 0).
    Returns:
        List of pixels, 8 per iteration; ``[(cx, cy)]`` when r == 0.
    """
    if r < 0:
        raise ValueError(f"radius must be >= 0, got {r}")
    if r == 0:
        return [(cx, cy)]

    r_sq = float(r * r)
    x = 0
    y = -r
    out: List[Pixel] = []
    while x < -y:
        y_mid = y + 0.5
        if x * x + y_mid * y_mid > r_sq:
            y += 1

        out.extend(
            (
                (cx + x, cy + y),
                (cx - x, cy + y),
                (cx - x, cy - y),
                (cx + x, cy - y),
                (cx - y, cy - x),
                (cx - y, cy + x),
                (cx + y, cy - x),
                (cx + y, cy + x),
            )
        )
        x += 1
    return out


def pentagon_vertices(x: int, y: int, side: int) -> List[Pixel]:
    """Vertices of a pentagon walked from (x, y) with a fixed side length.

    The heading starts along +x and turns by 72 degrees per leg. Each leg's
    offset is truncated toward zero independently, so the sixth vertex only
    lands near the first.

    Args:
        x: Start x.
        y: Start y.
        side: Leg length in pixels.
    Returns:
        Six vertices: the start followed by the end of each of the 5 legs.
    """
    pts: List[Pixel] = [(x, y)]
    cur_x, cur_y = x, y
    for i in range(5):
        theta = radians(PENTAGON_TURN_DEG * i)
        cur_x += trunc(side * cos(theta))
        cur_y += trunc(side * sin(theta))
        pts.append((cur_x, cur_y))
    return pts
