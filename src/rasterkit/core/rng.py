"""Random source abstraction for shape factories and colour generation.

This module provides a RandomSource protocol that can be satisfied by the
standard library's :class:`random.Random` or by any deterministic stand-in,
so factories and per-draw colours can be driven from a seeded source in
tests and scripted renders.

Usage examples:

Process-wide source:
    rng = default_source()
    x = rng.randrange(1, 640)

Seeded source:
    rng = random.Random(1234)
    p = Point.random(640, 480, rng=rng)

The core never seeds the process-wide source; seeding is the caller's job.
"""

from __future__ import annotations

import random
from typing import Protocol

__all__ = [
    "RandomSource",
    "default_source",
    "resolve",
    "require_range",
]


class RandomSource(Protocol):
    """Protocol for integer random sources."""

    def randint(self, a: int, b: int) -> int:
        """Return a uniform integer N with a <= N <= b."""
        ...

    def randrange(self, start: int, stop: int) -> int:
        """Return a uniform integer N with start <= N < stop."""
        ...


_PROCESS_SOURCE = random.Random()


def default_source() -> RandomSource:
    """Return the process-wide random source."""
    return _PROCESS_SOURCE


def resolve(rng: RandomSource | None) -> RandomSource:
    """Return *rng* or the process-wide source when None."""
    return rng if rng is not None else _PROCESS_SOURCE


def require_range(start: int, stop: int, what: str) -> None:
    """Reject an empty half-open range ``[start, stop)``.

    Raises:
        ValueError: when ``stop <= start``.
    """
    if stop <= start:
        raise ValueError(
            f"cannot draw a random {what}: empty range [{start}, {stop})"
        )
