# slicekit/errors.py


class SliceError(Exception):
    """Base class for all slicekit errors."""

    pass


class ConstructionError(SliceError, ValueError):
    """Requested capacity is smaller than the requested length."""


class RangeError(SliceError, IndexError):
    """Slice bounds fall outside the buffer."""


class SliceIndexError(SliceError, IndexError):
    """Element index outside the visible length."""


class UnsupportedOperationError(SliceError, TypeError):
    """Structural mutation attempted on a read-only view."""
