"""Exceptions raised at the signature pad boundary.

A blank signature is not an error: trimming an empty bitmap returns None.
"""


class SignaturePadError(Exception):
    """Base class for all signature pad errors."""


class InvalidPoint(SignaturePadError, ValueError):
    """A pointer sample had a NaN, infinite or non-numeric coordinate."""


class InvalidDimensions(SignaturePadError, ValueError):
    """A negative width or height was requested for a bitmap."""


class AllocationFailure(SignaturePadError, MemoryError):
    """The requested bitmap is too large to allocate."""


class GestureStateError(SignaturePadError, RuntimeError):
    """A gesture event arrived in a state that cannot accept it."""


class MalformedPath(SignaturePadError, ValueError):
    """A drawing segment was appended before the path's first MoveTo."""
