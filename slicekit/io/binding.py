# slicekit/io/binding.py
"""
Zero-copy I/O against a slice's backing buffer.

Reader and writer functions receive (array, offset, count): the backing
ndarray, the physical offset of the slice and its length. They must touch
only array[offset:offset + count].

The async variants suspend while the supplied function runs. The caller must
keep every view aliasing the buffer from mutating it until they finish.
"""

import logging
from typing import Awaitable, BinaryIO, Callable, Optional

import numpy as np

from slicekit.core.view import BaseSlice
from slicekit.errors import UnsupportedOperationError

logger = logging.getLogger(__name__)

ReadFn = Callable[[np.ndarray, int, int], int]
WriteFn = Callable[[np.ndarray, int, int], Optional[int]]
AsyncReadFn = Callable[[np.ndarray, int, int], Awaitable[int]]
AsyncWriteFn = Callable[[np.ndarray, int, int], Awaitable[Optional[int]]]


def _require(fn: object, name: str) -> None:
    if fn is None:
        raise TypeError(f"{name}() argument fn was None")


def _require_writable(view: BaseSlice, name: str) -> None:
    if view._readonly:
        raise UnsupportedOperationError(
            f"{name}() cannot read into a {type(view).__name__}"
        )


def read_with(view: BaseSlice, readf: ReadFn) -> int:
    """
    Reads into the slice using `readf`.
    Returns the number of elements read, as reported by `readf`.
    """
    _require(readf, "read_with")
    _require_writable(view, "read_with")
    return readf(view.buffer.data, view.offset, len(view))


def write_with(view: BaseSlice, writef: WriteFn) -> int:
    """
    Hands len(view) elements to `writef`.
    Returns the count `writef` reports, or len(view) when it reports nothing.
    """
    _require(writef, "write_with")
    written = writef(view.buffer.data, view.offset, len(view))
    return len(view) if written is None else written


async def read_async_with(view: BaseSlice, readf: AsyncReadFn) -> int:
    _require(readf, "read_async_with")
    _require_writable(view, "read_async_with")
    return await readf(view.buffer.data, view.offset, len(view))


async def write_async_with(view: BaseSlice, writef: AsyncWriteFn) -> int:
    _require(writef, "write_async_with")
    written = await writef(view.buffer.data, view.offset, len(view))
    return len(view) if written is None else written


def _region_bytes(array: np.ndarray, offset: int, count: int) -> memoryview:
    if array.dtype == object:
        raise TypeError("Object buffers cannot be bound to a byte stream")
    return memoryview(array[offset : offset + count]).cast("B")


def read_from(view: BaseSlice, stream: BinaryIO) -> int:
    """
    Fills the slice from a binary stream with readinto().
    Returns the number of whole elements read.
    """

    def readf(array: np.ndarray, offset: int, count: int) -> int:
        n = stream.readinto(_region_bytes(array, offset, count)) or 0
        if n % array.itemsize:
            logger.debug("[read_from] partial element: %d bytes", n)
        return n // array.itemsize

    return read_with(view, readf)


def write_to(view: BaseSlice, stream: BinaryIO) -> int:
    """Writes the slice's bytes to a binary stream. Returns elements written."""

    def writef(array: np.ndarray, offset: int, count: int) -> int:
        n = stream.write(_region_bytes(array, offset, count))
        return count if n is None else n // array.itemsize

    return write_with(view, writef)
