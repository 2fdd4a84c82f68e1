from __future__ import annotations

import pytest

from rasterkit.core.raster import (
    circle_pixels,
    div_trunc,
    line_pixels,
    pentagon_vertices,
    round_half_away,
)


@pytest.mark.parametrize(
    "v, expected",
    [
        (0.0, 0),
        (0.5, 1),
        (1.49, 1),
        (2.5, 3),
        (-0.5, -1),
        (-1.5, -2),
        (-1.49, -1),
    ],
)
def test_round_half_away(v: float, expected: int) -> None:
    assert round_half_away(v) == expected


@pytest.mark.parametrize(
    "n, d, expected",
    [(3, 2, 1), (-3, 2, -1), (-4, 2, -2), (0, 2, 0), (3, -2, -1), (-5, -2, 2)],
)
def test_div_trunc_rounds_toward_zero(n: int, d: int, expected: int) -> None:
    assert div_trunc(n, d) == expected


def test_line_degenerate_single_pixel() -> None:
    assert line_pixels(3, 4, 3, 4) == [(3, 4)]


def test_line_horizontal() -> None:
    assert line_pixels(0, 0, 5, 0) == [(x, 0) for x in range(6)]


def test_line_vertical_reversed() -> None:
    assert line_pixels(0, 5, 0, 0) == [(0, y) for y in range(5, -1, -1)]


def test_line_diagonal() -> None:
    assert line_pixels(0, 0, 3, 3) == [(0, 0), (1, 1), (2, 2), (3, 3)]


def test_line_shallow_rounds_halves_away_from_zero() -> None:
    # y advances by exactly 0.5 per step
    assert line_pixels(0, 0, 4, 2) == [(0, 0), (1, 1), (2, 1), (3, 2), (4, 2)]


def test_line_negative_coordinates() -> None:
    pts = line_pixels(-2, -2, 2, -4)
    assert pts[0] == (-2, -2)
    assert pts[-1] == (2, -4)
    assert len(pts) == 5


def test_circle_radius_zero_is_center() -> None:
    assert circle_pixels(7, 9, 0) == [(7, 9)]


def test_circle_radius_one() -> None:
    pts = circle_pixels(10, 10, 1)
    assert set(pts) == {(10, 9), (10, 11), (9, 10), (11, 10)}


def test_circle_emits_eight_per_iteration() -> None:
    for r in (1, 2, 5, 17):
        assert len(circle_pixels(0, 0, r)) % 8 == 0


def test_circle_touches_axis_extremes() -> None:
    pts = set(circle_pixels(0, 0, 6))
    assert {(0, -6), (0, 6), (-6, 0), (6, 0)} <= pts


def test_circle_negative_radius_rejected() -> None:
    with pytest.raises(ValueError):
        circle_pixels(0, 0, -1)


def test_pentagon_vertices_side_10() -> None:
    # Offsets truncate toward zero: (10,0) (3,9) (-8,5) (-8,-5) (3,-9)
    assert pentagon_vertices(0, 0, 10) == [
        (0, 0),
        (10, 0),
        (13, 9),
        (5, 14),
        (-3, 9),
        (0, 0),
    ]


def test_pentagon_vertices_zero_side() -> None:
    assert pentagon_vertices(4, 4, 0) == [(4, 4)] * 6
