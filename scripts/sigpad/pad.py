"""SignaturePad: the boundary a UI layer drives.

The UI forwards pointer events (start/extend/end), asks for a bitmap when
it wants to redraw, and calls export_trimmed when the user is done.
Rendering reads one published path snapshot, so it may run on another
thread while input keeps arriving.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor

from sigpad.errors import InvalidDimensions
from sigpad.geometry import StrokeStyle
from sigpad.path_model import PathModel
from sigpad.rasterize import DEFAULT_MAX_PIXELS, render
from sigpad.stroke import DEFAULT_TOUCH_SLOP, StrokeSmoother
from sigpad.trimming import TRANSPARENT, trim

logger = logging.getLogger(__name__)


def _check_dimension(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidDimensions(f"{name} must be >= 0, got {value}")


class SignaturePad:
    """State holder for one signature surface.

    Args:
        style: Stroke style used when render_to_bitmap is called without one.
        slop: Distance a gesture must move before it counts as a drag.
        max_pixels: Largest bitmap render_to_bitmap will allocate.
        background: Canvas color for render_to_bitmap, and the color treated
            as blank when trimming.
    """

    def __init__(self, style: StrokeStyle = None, slop: float = DEFAULT_TOUCH_SLOP,
                 max_pixels: int = DEFAULT_MAX_PIXELS, background=TRANSPARENT):
        self.style = style or StrokeStyle()
        self.max_pixels = max_pixels
        self.background = background
        self._smoother = StrokeSmoother(slop)
        self._path = PathModel()
        self._bitmap = None
        self._executor = None

    # --- gesture input ---

    def start_stroke(self, point):
        self._path.append(self._smoother.start(point))

    def extend_stroke(self, point):
        self._path.append(self._smoother.extend(point))

    def end_stroke(self):
        self._path.append(self._smoother.end())

    def cancel_stroke(self):
        """Interrupted gesture; whatever was drawn so far stays."""
        self._path.append(self._smoother.cancel())

    @property
    def gesture_state(self):
        return self._smoother.state

    # --- path ---

    def get_current_path(self) -> tuple:
        return self._path.current_snapshot()

    @property
    def path_version(self) -> int:
        return self._path.version

    def is_empty(self) -> bool:
        return self._path.is_empty()

    def clear(self):
        """Reset to an empty signature. Any gesture in progress is dropped."""
        self._smoother.end()
        self._path.clear()
        self._bitmap = None

    # --- rendering ---

    @property
    def signature_bitmap(self):
        """The image produced by the most recent render_to_bitmap call."""
        return self._bitmap

    def render_to_bitmap(self, width: int, height: int, style: StrokeStyle = None):
        _check_dimension("width", width)
        _check_dimension("height", height)
        bitmap = render(
            self._path.current_snapshot(), width, height,
            style or self.style, max_pixels=self.max_pixels, background=self.background,
        )
        self._bitmap = bitmap
        return bitmap

    # --- export ---

    def export_trimmed(self, bitmap=None, trim_blank_space: bool = True):
        """Crop a bitmap (default: the last rendered one) to its content.

        Returns None for a blank signature.
        """
        if bitmap is None:
            bitmap = self._bitmap
        result = trim(bitmap, self.background, trim_blank_space)
        if result is None:
            logger.info("signature is blank, nothing to export")
        return result

    def export_trimmed_async(self, bitmap=None, trim_blank_space: bool = True) -> Future:
        """Run export_trimmed on a background worker.

        The returned Future can be waited on with result(), or awaited from
        asyncio via asyncio.wrap_future. There is no cancellation of a scan
        in flight; callers that lose interest just drop the future.
        """
        if bitmap is None:
            bitmap = self._bitmap
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="sigpad-trim")
        return self._executor.submit(self.export_trimmed, bitmap, trim_blank_space)

    def close(self):
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
