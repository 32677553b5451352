"""Rasterize a signature path into an RGBA image with Pillow.

Quadratic curves are flattened into polylines, each sub-path is stroked as
one polyline with rounded joins (thin strokes get a disc at each vertex
where Pillow leaves the joint square), and a filled disc is stamped at both ends
to give round caps. A sub-path of zero length therefore renders as a dot.

Rendering is deterministic: the same path, size and style always produce a
pixel-identical image.
"""

import logging
import math

from PIL import Image, ImageColor, ImageDraw

from sigpad.errors import AllocationFailure
from sigpad.geometry import LineTo, MoveTo, Point, QuadraticTo, StrokeStyle, distance

logger = logging.getLogger(__name__)

MODE = "RGBA"
BACKGROUND = (0, 0, 0, 0)

# Flattening resolution: roughly one line piece per FLATTEN_STEP_PX of
# control polygon length, never more than MAX_FLATTEN_STEPS per curve.
FLATTEN_STEP_PX = 2.0
MAX_FLATTEN_STEPS = 32

DEFAULT_MAX_PIXELS = Image.MAX_IMAGE_PIXELS or 1 << 28

# Pillow only rounds line joints for widths above this.
PILLOW_CURVE_JOINT_MIN_WIDTH = 5


def flatten_quadratic(p0: Point, p1: Point, p2: Point, steps: int = None) -> list:
    """Flatten a quadratic Bezier curve into points after p0, ending at p2.

    B(t) = (1-t)^2 * p0 + 2*(1-t)*t * p1 + t^2 * p2, for t in (0, 1]
    """
    if steps is None:
        length = distance(p0, p1) + distance(p1, p2)
        steps = min(MAX_FLATTEN_STEPS, max(1, math.ceil(length / FLATTEN_STEP_PX)))
    pts = []
    for i in range(1, steps + 1):
        t = i / steps
        mt = 1 - t
        x = mt * mt * p0.x + 2 * mt * t * p1.x + t * t * p2.x
        y = mt * mt * p0.y + 2 * mt * t * p1.y + t * t * p2.y
        pts.append(Point(x, y))
    return pts


def subpaths(path) -> list:
    """Split a path into polylines, one per MoveTo."""
    polylines = []
    current = None
    for segment in path:
        if isinstance(segment, MoveTo):
            current = [segment.point]
            polylines.append(current)
            continue
        if current is None:
            # Drawing without a MoveTo starts from the origin.
            current = [Point(0.0, 0.0)]
            polylines.append(current)
        if isinstance(segment, LineTo):
            current.append(segment.point)
        elif isinstance(segment, QuadraticTo):
            current.extend(flatten_quadratic(current[-1], segment.control, segment.end))
        else:
            raise TypeError(f"Not a path segment: {segment!r}")
    return polylines


def _dedupe(points) -> list:
    out = [points[0]]
    for p in points[1:]:
        if p != out[-1]:
            out.append(p)
    return out


def _stamp_cap(draw, point, radius, color):
    draw.ellipse(
        [point.x - radius, point.y - radius, point.x + radius, point.y + radius],
        fill=color,
    )


def _stroke_polyline(draw, polyline, style: StrokeStyle):
    width = max(1, int(round(style.thickness)))
    color = style.color
    points = _dedupe(polyline)

    if width == 1:
        if len(points) == 1:
            draw.point(points[0], fill=color)
        else:
            draw.line(points, fill=color, width=1)
        return

    radius = width / 2
    if len(points) > 1:
        draw.line(points, fill=color, width=width, joint="curve")
        if width < PILLOW_CURVE_JOINT_MIN_WIDTH:
            for vertex in points[1:-1]:
                _stamp_cap(draw, vertex, radius, color)
    _stamp_cap(draw, points[0], radius, color)
    if len(points) > 1:
        _stamp_cap(draw, points[-1], radius, color)


def render(path, width: int, height: int, style: StrokeStyle = None,
           max_pixels: int = DEFAULT_MAX_PIXELS, background=BACKGROUND) -> Image.Image:
    """Render a path into a new width x height RGBA image filled with background.

    Width or height <= 0 gives a zero-area image. An image larger than
    max_pixels raises AllocationFailure without allocating anything.
    """
    style = style or StrokeStyle()
    if isinstance(background, str):
        background = ImageColor.getcolor(background, MODE)
    width, height = max(int(width), 0), max(int(height), 0)

    if max_pixels is not None and width * height > max_pixels:
        raise AllocationFailure(
            f"Bitmap of {width}x{height} exceeds the {max_pixels} pixel limit"
        )
    try:
        image = Image.new(MODE, (width, height), background)
    except MemoryError as exc:
        raise AllocationFailure(f"Could not allocate a {width}x{height} bitmap") from exc

    if width == 0 or height == 0 or not path:
        return image

    draw = ImageDraw.Draw(image)
    drawn = 0
    for polyline in subpaths(path):
        # A lone MoveTo positions the pen without drawing anything.
        if len(polyline) < 2:
            continue
        _stroke_polyline(draw, polyline, style)
        drawn += 1
    logger.debug("rendered %d sub-paths into %dx%d", drawn, width, height)
    return image
