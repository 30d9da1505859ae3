# slicekit/core/__init__.py
from slicekit.core.buffer import Buffer, allocate, wrap
from slicekit.core.factory import from_array, make, to_slice
from slicekit.core.readonly import ReadonlySlice
from slicekit.core.slice import Slice

__all__ = [
    "Buffer",
    "allocate",
    "wrap",
    "Slice",
    "ReadonlySlice",
    "make",
    "to_slice",
    "from_array",
]
