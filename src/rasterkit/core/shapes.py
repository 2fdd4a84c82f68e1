"""Drawable shapes and their random factories.

Every shape is an immutable value object implementing the :class:`Drawable`
contract:

* ``draw(surface, rng=None)`` writes the shape's pixels to *surface*.
* ``color(rng=None)`` returns the colour used for the next draw.

Each variant states its colour strategy in ``color_mode``. ``PER_DRAW``
shapes (Point, Triangle, Circle) pick a fresh random colour on every draw;
``STORED`` shapes (Line, Rectangle, Cube, Pentagon) carry a colour chosen
once at construction and can be recoloured with ``with_color``.

Composite shapes decompose into :class:`Line` segments and reuse its
rasterizer, drawing every edge in one shared colour.

Example:
    rng = random.Random(7)
    surface = backend.begin_frame()
    shapes = [Circle.random(640, 480, rng=rng), Cube.random(640, 480, rng=rng)]
    for shape in shapes:
        shape.draw(surface, rng=rng)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, List, Protocol, Tuple, Union

from .color import Color, random_color
from .raster import Pixel, circle_pixels, div_trunc, line_pixels, pentagon_vertices
from .rng import RandomSource, require_range, resolve

if TYPE_CHECKING:  # pragma: no cover - typing only
    from rasterkit.render.surface import Surface

__all__ = [
    "ColorMode",
    "Drawable",
    "Point",
    "Line",
    "Rectangle",
    "Triangle",
    "Circle",
    "Cube",
    "Pentagon",
    "Shape",
    "ShapeKind",
]


class ColorMode(Enum):
    """How a shape obtains its colour."""

    PER_DRAW = "per_draw"
    STORED = "stored"


class Drawable(Protocol):
    color_mode: ClassVar[ColorMode]

    def draw(self, surface: Surface, rng: RandomSource | None = None) -> None:
        ...

    def color(self, rng: RandomSource | None = None) -> Color:
        ...


def _check_envelope(width: int, height: int) -> None:
    # Coordinates are drawn from [1, width) and [1, height)
    require_range(1, width, "x coordinate")
    require_range(1, height, "y coordinate")


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int

    color_mode: ClassVar[ColorMode] = ColorMode.PER_DRAW

    @classmethod
    def random(
        cls, width: int, height: int, rng: RandomSource | None = None
    ) -> "Point":
        """Return a point with x in [1, width) and y in [1, height)."""
        _check_envelope(width, height)
        src = resolve(rng)
        x = src.randrange(1, width)
        y = src.randrange(1, height)
        return cls(x, y)

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def color(self, rng: RandomSource | None = None) -> Color:
        return random_color(rng)

    def draw(self, surface: Surface, rng: RandomSource | None = None) -> None:
        surface.display(self.x, self.y, self.color(rng))


@dataclass(frozen=True, slots=True)
class Line:
    start: Point
    end: Point
    stroke: Color

    color_mode: ClassVar[ColorMode] = ColorMode.STORED

    @classmethod
    def random(
        cls, width: int, height: int, rng: RandomSource | None = None
    ) -> "Line":
        """Return a line between two random points with a random colour."""
        _check_envelope(width, height)
        a = Point.random(width, height, rng)
        b = Point.random(width, height, rng)
        return cls(a, b, a.color(rng))

    def color(self, rng: RandomSource | None = None) -> Color:
        return self.stroke

    def with_color(self, color: Color) -> "Line":
        return replace(self, stroke=color)

    def pixels(self) -> List[Pixel]:
        return line_pixels(self.start.x, self.start.y, self.end.x, self.end.y)

    def draw(self, surface: Surface, rng: RandomSource | None = None) -> None:
        for x, y in self.pixels():
            surface.display(x, y, self.stroke)


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle outline from two opposite corners.

    ``c`` and ``d`` are derived from ``a`` and ``b`` at construction:
    ``c = (a.x, b.y)`` and ``d = (b.x, a.y)``. Edges run a -> c -> b -> d -> a.
    """

    a: Point
    b: Point
    stroke: Color
    c: Point = field(init=False)
    d: Point = field(init=False)

    color_mode: ClassVar[ColorMode] = ColorMode.STORED

    def __post_init__(self) -> None:
        object.__setattr__(self, "c", Point(self.a.x, self.b.y))
        object.__setattr__(self, "d", Point(self.b.x, self.a.y))

    @classmethod
    def new(
        cls,
        a: Point,
        b: Point,
        *,
        stroke: Color | None = None,
        rng: RandomSource | None = None,
    ) -> "Rectangle":
        """Build a rectangle, picking a random colour when *stroke* is None."""
        return cls(a, b, stroke if stroke is not None else random_color(rng))

    @classmethod
    def random(
        cls, width: int, height: int, rng: RandomSource | None = None
    ) -> "Rectangle":
        _check_envelope(width, height)
        a = Point.random(width, height, rng)
        b = Point.random(width, height, rng)
        return cls.new(a, b, rng=rng)

    def color(self, rng: RandomSource | None = None) -> Color:
        return self.stroke

    def with_color(self, color: Color) -> "Rectangle":
        return replace(self, stroke=color)

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        return (self.a, self.b, self.c, self.d)

    def edges(self) -> Tuple[Line, Line, Line, Line]:
        s = self.stroke
        return (
            Line(self.a, self.c, s),
            Line(self.c, self.b, s),
            Line(self.b, self.d, s),
            Line(self.d, self.a, s),
        )

    def draw(self, surface: Surface, rng: RandomSource | None = None) -> None:
        for edge in self.edges():
            edge.draw(surface)


@dataclass(frozen=True, slots=True)
class Triangle:
    a: Point
    b: Point
    c: Point

    color_mode: ClassVar[ColorMode] = ColorMode.PER_DRAW

    @classmethod
    def random(
        cls, width: int, height: int, rng: RandomSource | None = None
    ) -> "Triangle":
        _check_envelope(width, height)
        return cls(
            Point.random(width, height, rng),
            Point.random(width, height, rng),
            Point.random(width, height, rng),
        )

    def color(self, rng: RandomSource | None = None) -> Color:
        return random_color(rng)

    def edges(self, stroke: Color) -> Tuple[Line, Line, Line]:
        # a -> c -> b -> a
        return (
            Line(self.a, self.c, stroke),
            Line(self.c, self.b, stroke),
            Line(self.b, self.a, stroke),
        )

    def draw(self, surface: Surface, rng: RandomSource | None = None) -> None:
        stroke = self.color(rng)
        for edge in self.edges(stroke):
            edge.draw(surface)


@dataclass(frozen=True, slots=True)
class Circle:
    center: Point
    radius: int

    color_mode: ClassVar[ColorMode] = ColorMode.PER_DRAW

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"radius must be >= 0, got {self.radius}")

    @classmethod
    def random(
        cls, width: int, height: int, rng: RandomSource | None = None
    ) -> "Circle":
        """Return a circle with a random centre and radius in [0, min(w, h) // 2)."""
        _check_envelope(width, height)
        max_radius = min(width, height) // 2
        require_range(0, max_radius, "radius")
        center = Point.random(width, height, rng)
        radius = resolve(rng).randrange(0, max_radius)
        return cls(center, radius)

    def color(self, rng: RandomSource | None = None) -> Color:
        return random_color(rng)

    def pixels(self) -> List[Pixel]:
        return circle_pixels(self.center.x, self.center.y, self.radius)

    def draw(self, surface: Surface, rng: RandomSource | None = None) -> None:
        stroke = self.color(rng)
        for x, y in self.pixels():
            surface.display(x, y, stroke)


@dataclass(frozen=True, slots=True)
class Cube:
    """Wireframe cube illusion: two rectangles plus four connectors.

    The back rectangle is the front one shifted by ``depth``, which is half
    the signed corner difference (truncated toward zero) with y inverted so
    the back face recedes up and away.
    """

    a: Point
    b: Point
    stroke: Color
    front: Rectangle = field(init=False)
    back: Rectangle = field(init=False)
    lines: Tuple[Line, ...] = field(init=False)

    color_mode: ClassVar[ColorMode] = ColorMode.STORED

    def __post_init__(self) -> None:
        dx, dy = self.depth
        object.__setattr__(self, "front", Rectangle(self.a, self.b, self.stroke))
        object.__setattr__(
            self,
            "back",
            Rectangle(self.a.offset(dx, dy), self.b.offset(dx, dy), self.stroke),
        )
        object.__setattr__(
            self,
            "lines",
            self.front.edges() + self.back.edges() + self.connectors(),
        )

    @classmethod
    def new(
        cls,
        a: Point,
        b: Point,
        *,
        stroke: Color | None = None,
        rng: RandomSource | None = None,
    ) -> "Cube":
        return cls(a, b, stroke if stroke is not None else random_color(rng))

    @classmethod
    def random(
        cls, width: int, height: int, rng: RandomSource | None = None
    ) -> "Cube":
        _check_envelope(width, height)
        a = Point.random(width, height, rng)
        b = Point.random(width, height, rng)
        return cls.new(a, b, rng=rng)

    @property
    def depth(self) -> Tuple[int, int]:
        return (
            div_trunc(self.a.x - self.b.x, 2),
            -div_trunc(self.a.y - self.b.y, 2),
        )

    def color(self, rng: RandomSource | None = None) -> Color:
        return self.stroke

    def with_color(self, color: Color) -> "Cube":
        return replace(self, stroke=color)

    def connectors(self) -> Tuple[Line, Line, Line, Line]:
        s = self.stroke
        f, k = self.front, self.back
        return (
            Line(f.a, k.a, s),
            Line(f.b, k.b, s),
            Line(f.c, k.c, s),
            Line(f.d, k.d, s),
        )

    def draw(self, surface: Surface, rng: RandomSource | None = None) -> None:
        for line in self.lines:
            line.draw(surface)


@dataclass(frozen=True, slots=True)
class Pentagon:
    """Five-sided closed chain walked from ``start`` with a fixed side length.

    Closure is approximate: each leg's offset is truncated independently so
    the last leg may end a pixel or two away from ``start``.
    """

    start: Point
    side: int
    stroke: Color
    lines: Tuple[Line, ...] = field(init=False)

    color_mode: ClassVar[ColorMode] = ColorMode.STORED

    def __post_init__(self) -> None:
        if self.side < 0:
            raise ValueError(f"side must be >= 0, got {self.side}")
        verts = pentagon_vertices(self.start.x, self.start.y, self.side)
        pts = [Point(x, y) for x, y in verts]
        legs = tuple(Line(p, q, self.stroke) for p, q in zip(pts, pts[1:]))
        object.__setattr__(self, "lines", legs)

    @classmethod
    def new(
        cls,
        start: Point,
        side: int,
        *,
        stroke: Color | None = None,
        rng: RandomSource | None = None,
    ) -> "Pentagon":
        return cls(start, side, stroke if stroke is not None else random_color(rng))

    @classmethod
    def random(
        cls, width: int, height: int, rng: RandomSource | None = None
    ) -> "Pentagon":
        """Return a pentagon with side length in [1, min(w, h) // 3)."""
        _check_envelope(width, height)
        max_side = min(width, height) // 3
        require_range(1, max_side, "side length")
        start = Point.random(width, height, rng)
        side = resolve(rng).randrange(1, max_side)
        return cls.new(start, side, rng=rng)

    def color(self, rng: RandomSource | None = None) -> Color:
        return self.stroke

    def with_color(self, color: Color) -> "Pentagon":
        return replace(self, stroke=color)

    def draw(self, surface: Surface, rng: RandomSource | None = None) -> None:
        for line in self.lines:
            line.draw(surface)


Shape = Union[Point, Line, Rectangle, Triangle, Circle, Cube, Pentagon]


class ShapeKind(str, Enum):
    """Identifiers for the shape variants, as used in settings and the CLI."""

    POINT = "point"
    LINE = "line"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    CIRCLE = "circle"
    CUBE = "cube"
    PENTAGON = "pentagon"

    @property
    def shape_type(self) -> type:
        return _SHAPE_TYPES[self]


_SHAPE_TYPES = {
    ShapeKind.POINT: Point,
    ShapeKind.LINE: Line,
    ShapeKind.RECTANGLE: Rectangle,
    ShapeKind.TRIANGLE: Triangle,
    ShapeKind.CIRCLE: Circle,
    ShapeKind.CUBE: Cube,
    ShapeKind.PENTAGON: Pentagon,
}
