"""Incremental stroke smoothing driven by an explicit gesture state machine.

Each raw sample P_i after the down point becomes a quadratic curve whose
control point is the previous sample and whose end point is the midpoint
between the previous sample and P_i. The resulting path passes through the
midpoints of consecutive samples, which hides the jitter of discrete
pointer sampling.

    IDLE --start--> DOWN --moved past slop--> DRAGGING --end/cancel--> IDLE
                      |
                      +--end/cancel (never moved past slop)--> tap --> IDLE
"""

import enum
import logging
import math

from sigpad.errors import GestureStateError
from sigpad.geometry import LineTo, MoveTo, QuadraticTo, as_point, distance, midpoint

logger = logging.getLogger(__name__)

# Android's default touch slop is 8 dp; density is fixed at 1.0 here.
DEFAULT_TOUCH_SLOP = 8.0


class GestureState(enum.Enum):
    IDLE = "idle"
    DOWN = "down"
    DRAGGING = "dragging"


class StrokeSmoother:
    """Turn one pointer gesture at a time into path segments.

    Every event method returns the list of segments it produced; the caller
    appends them to a PathModel. Samples that arrive while the gesture is
    still within slop are held back and emitted, in order, as soon as the
    gesture turns into a drag, so a drag of n samples always yields one
    MoveTo followed by n - 1 QuadraticTo segments.
    """

    def __init__(self, slop: float = DEFAULT_TOUCH_SLOP):
        if not math.isfinite(slop) or slop < 0:
            raise ValueError(f"slop must be a finite non-negative number, got {slop}")
        self.slop = float(slop)
        self._state = GestureState.IDLE
        self._down = None
        self._previous = None
        self._held = []

    @property
    def state(self) -> GestureState:
        return self._state

    @property
    def active(self) -> bool:
        return self._state is not GestureState.IDLE

    def start(self, point) -> list:
        if self.active:
            raise GestureStateError(f"Cannot start a stroke while {self._state.value}")
        down = as_point(point)
        self._state = GestureState.DOWN
        self._down = down
        self._previous = down
        self._held = []
        logger.debug("stroke down at (%.1f, %.1f)", down.x, down.y)
        return [MoveTo(down)]

    def extend(self, point) -> list:
        if not self.active:
            raise GestureStateError("Cannot extend a stroke that was never started")
        sample = as_point(point)

        if self._state is GestureState.DOWN:
            if distance(self._down, sample) <= self.slop:
                self._held.append(sample)
                return []
            logger.debug("stroke exceeded slop %.1f, dragging", self.slop)
            self._state = GestureState.DRAGGING
            samples = self._held + [sample]
            self._held = []
        else:
            samples = [sample]

        segments = []
        for current in samples:
            segments.append(QuadraticTo(self._previous, midpoint(self._previous, current)))
            self._previous = current
        return segments

    def end(self) -> list:
        """Finish the gesture. A gesture that never left slop becomes a dot."""
        segments = []
        if self._state is GestureState.DOWN:
            segments.append(LineTo(self._down))
            logger.debug("stroke released within slop, drawing tap")
        self._state = GestureState.IDLE
        self._down = None
        self._previous = None
        self._held = []
        return segments

    # Cancellation keeps whatever was already drawn.
    cancel = end


def smooth_points(points, slop: float = DEFAULT_TOUCH_SLOP) -> list:
    """Smooth a complete stroke given as a sequence of (x, y) samples."""
    points = list(points)
    if not points:
        return []
    smoother = StrokeSmoother(slop)
    segments = smoother.start(points[0])
    for point in points[1:]:
        segments.extend(smoother.extend(point))
    segments.extend(smoother.end())
    return segments
