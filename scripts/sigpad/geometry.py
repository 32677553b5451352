"""Geometry value types shared by the smoother, path model and rasterizer.

Points and path segments are immutable named tuples so a published path
(a plain tuple of segments) can be handed to another thread as-is.
"""

import math
from dataclasses import dataclass
from typing import NamedTuple, Union

from PIL import ImageColor

from sigpad.errors import InvalidPoint

DEFAULT_COLOR = (0, 0, 0, 255)
# 6 dp at a fixed density of 1.0
DEFAULT_THICKNESS = 6.0

ROUND = "round"


class Point(NamedTuple):
    x: float
    y: float


class MoveTo(NamedTuple):
    point: Point


class LineTo(NamedTuple):
    point: Point


class QuadraticTo(NamedTuple):
    control: Point
    end: Point


Segment = Union[MoveTo, LineTo, QuadraticTo]
Path = tuple  # tuple[Segment, ...]

EMPTY_PATH: Path = ()


def as_point(value) -> Point:
    """Coerce an (x, y) pair into a Point, rejecting non-finite coordinates."""
    try:
        x, y = value
        x, y = float(x), float(y)
    except (TypeError, ValueError) as exc:
        raise InvalidPoint(f"Not a 2D point: {value!r}") from exc
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidPoint(f"Point coordinates must be finite, got ({x}, {y})")
    return Point(x, y)


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def segment_end(segment: Segment) -> Point:
    """Return the pen position after drawing a segment."""
    if isinstance(segment, QuadraticTo):
        return segment.end
    return segment.point


def _normalize_color(color) -> tuple:
    if isinstance(color, str):
        return ImageColor.getcolor(color, "RGBA")
    channels = tuple(int(c) for c in color)
    if len(channels) == 3:
        channels += (255,)
    if len(channels) != 4 or any(not 0 <= c <= 255 for c in channels):
        raise ValueError(f"Color must be an RGB or RGBA tuple of 0-255 values, got {color!r}")
    return channels


@dataclass(frozen=True)
class StrokeStyle:
    """How a path is stroked. Caps and joins are always round."""

    color: tuple = DEFAULT_COLOR
    thickness: float = DEFAULT_THICKNESS
    cap: str = ROUND
    join: str = ROUND

    def __post_init__(self):
        object.__setattr__(self, "color", _normalize_color(self.color))
        thickness = float(self.thickness)
        if not math.isfinite(thickness) or thickness < 0:
            raise ValueError(f"Stroke thickness must be a finite non-negative number, got {self.thickness!r}")
        object.__setattr__(self, "thickness", thickness)
        if self.cap != ROUND or self.join != ROUND:
            raise ValueError("Only round caps and joins are supported")


class BoundingBox(NamedTuple):
    """Inclusive pixel rectangle enclosing every content pixel."""

    x_min: int
    y_min: int
    x_max: int
    y_max: int

    @property
    def width(self) -> int:
        return self.x_max - self.x_min + 1

    @property
    def height(self) -> int:
        return self.y_max - self.y_min + 1

    def as_crop_box(self) -> tuple:
        """Pillow-style (left, upper, right, lower) box with exclusive right/lower."""
        return (self.x_min, self.y_min, self.x_max + 1, self.y_max + 1)
