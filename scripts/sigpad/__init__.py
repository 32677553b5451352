"""Signature pad core: stroke smoothing, path snapshots, rasterizing and trimming."""

from sigpad.errors import (
    AllocationFailure,
    GestureStateError,
    InvalidDimensions,
    InvalidPoint,
    MalformedPath,
    SignaturePadError,
)
from sigpad.geometry import (
    BoundingBox,
    LineTo,
    MoveTo,
    Point,
    QuadraticTo,
    StrokeStyle,
)
from sigpad.pad import SignaturePad
from sigpad.path_model import PathModel
from sigpad.rasterize import render
from sigpad.stroke import GestureState, StrokeSmoother, smooth_points
from sigpad.trimming import TRANSPARENT, find_bounding_box, trim

__all__ = [
    "AllocationFailure",
    "BoundingBox",
    "GestureState",
    "GestureStateError",
    "InvalidDimensions",
    "InvalidPoint",
    "LineTo",
    "MalformedPath",
    "MoveTo",
    "PathModel",
    "Point",
    "QuadraticTo",
    "SignaturePad",
    "SignaturePadError",
    "StrokeSmoother",
    "StrokeStyle",
    "TRANSPARENT",
    "find_bounding_box",
    "render",
    "smooth_points",
    "trim",
]
