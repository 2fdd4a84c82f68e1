from __future__ import annotations

import random
from pathlib import Path
from typing import Iterator

import pytest

from rasterkit.core.color import Color


class RecordingSurface:
    """Surface that records every pixel write in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int, Color]] = []

    def display(self, x: int, y: int, color: Color) -> None:
        self.calls.append((x, y, color))

    @property
    def pixels(self) -> list[tuple[int, int]]:
        return [(x, y) for x, y, _ in self.calls]

    @property
    def pixel_set(self) -> set[tuple[int, int]]:
        return {(x, y) for x, y, _ in self.calls}

    @property
    def colors(self) -> set[Color]:
        return {c for _, _, c in self.calls}


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def rasterkit_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.setenv("RASTERKIT_HOME", str(tmp_path / "home"))
    yield tmp_path / "home"
