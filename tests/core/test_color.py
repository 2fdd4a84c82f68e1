from __future__ import annotations

import random

import pytest

from rasterkit.core.color import OPAQUE, Color, random_color, rgba
from rasterkit.core.rng import default_source, require_range, resolve


def test_random_color_is_opaque_and_in_range(rng: random.Random) -> None:
    for _ in range(500):
        c = random_color(rng)
        assert c.a == OPAQUE == 255
        assert all(0 <= ch <= 255 for ch in (c.r, c.g, c.b))


def test_random_color_draws_three_channels_in_order() -> None:
    class _Scripted:
        def __init__(self) -> None:
            self.calls: list[tuple[int, int]] = []
            self._vals = iter([10, 20, 30])

        def randint(self, a: int, b: int) -> int:
            self.calls.append((a, b))
            return next(self._vals)

        def randrange(self, start: int, stop: int) -> int:  # pragma: no cover
            raise AssertionError("not used")

    src = _Scripted()
    assert random_color(src) == Color(10, 20, 30, 255)
    assert src.calls == [(0, 255)] * 3


def test_random_color_reproducible_with_seed() -> None:
    assert random_color(random.Random(5)) == random_color(random.Random(5))


def test_random_color_defaults_to_process_source() -> None:
    c = random_color()
    assert c.a == 255


def test_color_unpacks_like_rgba_tuple() -> None:
    r, g, b, a = rgba(1, 2, 3)
    assert (r, g, b, a) == (1, 2, 3, 255)
    assert tuple(Color(4, 5, 6, 7)) == (4, 5, 6, 7)


@pytest.mark.parametrize(
    "channels", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300), (1.5, 0, 0), (True, 0, 0)]
)
def test_rgba_rejects_bad_channels(channels: tuple) -> None:
    with pytest.raises(ValueError):
        rgba(*channels)


def test_resolve_prefers_explicit_source(rng: random.Random) -> None:
    assert resolve(rng) is rng
    assert resolve(None) is default_source()


def test_require_range_rejects_empty() -> None:
    require_range(1, 2, "x")
    with pytest.raises(ValueError, match="radius"):
        require_range(0, 0, "radius")
