"""Core geometry: colours, random sources, rasterizers and shapes."""

from .color import Color, random_color, rgba
from .rng import RandomSource, default_source
from .shapes import (
    Circle,
    ColorMode,
    Cube,
    Drawable,
    Line,
    Pentagon,
    Point,
    Rectangle,
    Shape,
    ShapeKind,
    Triangle,
)

__all__ = [
    "Circle",
    "Color",
    "ColorMode",
    "Cube",
    "Drawable",
    "Line",
    "Pentagon",
    "Point",
    "RandomSource",
    "Rectangle",
    "Shape",
    "ShapeKind",
    "Triangle",
    "default_source",
    "random_color",
    "rgba",
]
