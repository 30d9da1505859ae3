# slicekit/__init__.py
import logging

from slicekit.config import SliceSettings, configure, get_settings
from slicekit.core import (
    Buffer,
    ReadonlySlice,
    Slice,
    allocate,
    from_array,
    make,
    to_slice,
    wrap,
)
from slicekit.errors import (
    ConstructionError,
    RangeError,
    SliceError,
    SliceIndexError,
    UnsupportedOperationError,
)
from slicekit.types import End, Full, Segment, SliceTo

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Slice",
    "ReadonlySlice",
    "Buffer",
    "Segment",
    "SliceTo",
    "End",
    "Full",
    "make",
    "to_slice",
    "from_array",
    "allocate",
    "wrap",
    "SliceSettings",
    "configure",
    "get_settings",
    "SliceError",
    "ConstructionError",
    "RangeError",
    "SliceIndexError",
    "UnsupportedOperationError",
]
