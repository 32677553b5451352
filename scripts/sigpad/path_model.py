"""Accumulated signature path with snapshot-replace publishing.

The live path is never exposed. Every append builds a new tuple holding the
whole accumulated path and rebinds the published reference in one step, so
a reader on another thread always gets a complete, immutable path without
taking a lock.
"""

import logging
import threading

from sigpad.errors import MalformedPath
from sigpad.geometry import EMPTY_PATH, LineTo, MoveTo, QuadraticTo

logger = logging.getLogger(__name__)

_SEGMENT_TYPES = (MoveTo, LineTo, QuadraticTo)


class PathModel:
    def __init__(self):
        self._write_lock = threading.Lock()
        self._snapshot = EMPTY_PATH
        self._version = 0

    @property
    def version(self) -> int:
        """Incremented on every publish; lets renderers skip unchanged paths."""
        return self._version

    def current_snapshot(self) -> tuple:
        return self._snapshot

    def is_empty(self) -> bool:
        return not self._snapshot

    def __len__(self):
        return len(self._snapshot)

    def append(self, segments) -> tuple:
        """Append segments and publish the new snapshot, which is returned."""
        segments = tuple(segments)
        for segment in segments:
            if not isinstance(segment, _SEGMENT_TYPES):
                raise TypeError(f"Not a path segment: {segment!r}")
        if not segments:
            return self._snapshot

        with self._write_lock:
            current = self._snapshot
            if not current and not isinstance(segments[0], MoveTo):
                raise MalformedPath(
                    f"Path must start with MoveTo, got {type(segments[0]).__name__}"
                )
            published = current + segments
            self._snapshot = published
            self._version += 1
        return published

    def clear(self) -> tuple:
        with self._write_lock:
            self._snapshot = EMPTY_PATH
            self._version += 1
        logger.debug("path cleared")
        return EMPTY_PATH
