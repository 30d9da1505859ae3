# slicekit/core/view.py
from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any, Generic, Iterator, List, MutableSequence, TypeVar

import numpy as np

from slicekit.core.buffer import Buffer, allocate, check_cast, type_name
from slicekit.errors import (
    ConstructionError,
    RangeError,
    SliceIndexError,
    UnsupportedOperationError,
)
from slicekit.types import ElementType, Segment, SliceTo

T = TypeVar("T")


class BaseSlice(Generic[T], Sequence):
    """
    Addressing shared by Slice and ReadonlySlice: an (offset, length) window
    into a Buffer. Element i of the view lives in slot offset + i.

    Accepted constructor forms:
        BaseSlice(length)                   new buffer, capacity == length
        BaseSlice(length, capacity)         new buffer with slack
        BaseSlice(buffer, start, stop)      window over an existing buffer,
                                            negative stop counts from its end
    """

    __slots__ = ("_buffer", "_offset", "_len")

    _readonly = False

    def __init__(
        self,
        source: Any,
        *args: int,
        element_type: ElementType | None = None,
    ) -> None:
        if source is None:
            raise TypeError(f"{type(self).__name__} argument source was None")

        if isinstance(source, Buffer):
            if len(args) != 2:
                raise TypeError(
                    f"{type(self).__name__}(buffer, start, stop) takes exactly "
                    f"two bounds, got {len(args)}"
                )
            self._bind(source, args[0], args[1])
            return

        if len(args) > 1:
            raise TypeError(
                f"{type(self).__name__}(length, capacity) takes at most one "
                f"capacity, got {len(args)} arguments"
            )

        length = operator.index(source)
        capacity = operator.index(args[0]) if args else length
        if length < 0:
            raise ConstructionError(
                f"{type(self).__name__} length must not be negative: {length}"
            )
        if capacity < length:
            raise ConstructionError(
                f"{type(self).__name__} capacity ({capacity}) must not be "
                f"smaller than length ({length})"
            )

        self._buffer = allocate(capacity, element_type)
        self._offset = 0
        self._len = length

    def _bind(self, buffer: Buffer, start: int, stop: int) -> None:
        start = operator.index(start)
        stop = operator.index(stop)
        if stop > buffer.capacity:
            raise RangeError(
                f"Stop index {stop} is beyond the buffer capacity {buffer.capacity}"
            )
        if stop < 0:
            stop = buffer.capacity + stop
        if start < 0 or start > stop:
            raise RangeError(
                f"Invalid window [{start}, {stop}) over a buffer of {buffer.capacity}"
            )

        self._buffer = buffer
        self._offset = start
        self._len = stop - start

    def _rebind(self, start: int, stop: int):
        """New view of the same kind over this view's buffer."""
        return type(self)(self._buffer, start, stop)

    # ADDRESSING

    @property
    def capacity(self) -> int:
        """Slots available from offset to the physical end of the buffer."""
        return self._buffer.capacity - self._offset

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def buffer(self) -> Buffer:
        return self._buffer

    @property
    def element_type(self) -> ElementType:
        return self._buffer.element_type

    def aliases(self, other: BaseSlice) -> bool:
        """True if both views reference the same buffer."""
        return self._buffer is other._buffer

    def _region(self) -> np.ndarray:
        return self._buffer.data[self._offset : self._offset + self._len]

    def _check_index(self, index: Any) -> int:
        i = operator.index(index)
        if i < 0 or i >= self._len:
            raise SliceIndexError(
                f"Index {i} out of range for {type(self).__name__} of length {self._len}"
            )
        return i

    def __len__(self) -> int:
        return self._len

    def __getitem__(self, key: Any):
        if isinstance(key, slice):
            if key.step is not None and key.step != 1:
                raise ValueError("Slices do not support a step")
            start = 0 if key.start is None else key.start
            stop = SliceTo.END if key.stop is None else key.stop
            return self.slice(start, stop)

        i = self._check_index(key)
        return self._buffer.data.item(self._offset + i)

    def slice(self, start: int, stop: int | SliceTo = SliceTo.END):
        """
        Re-slices this view without copying.

        stop may be an index relative to this view, a negative index counted
        from the physical end of the buffer, End (current length) or Full
        (capacity, exposing the slack).
        """
        start = operator.index(start)
        if start < 0:
            raise RangeError(f"Slice start must not be below zero: {start}")
        if start > self.capacity:
            raise RangeError(
                f"Slice start {start} is beyond the capacity {self.capacity}"
            )

        if isinstance(stop, SliceTo):
            stop = self._len if stop is SliceTo.END else self.capacity
        else:
            stop = operator.index(stop)
            if stop < 0:
                stop = self.capacity + stop

        if stop > self.capacity:
            raise RangeError(
                f"Slice stop {stop} is beyond the capacity {self.capacity}"
            )
        if stop < start:
            raise RangeError(f"Slice stop {stop} is before start {start}")

        return self._rebind(self._offset + start, self._offset + stop)

    # ORDERED CONTAINER

    def __iter__(self) -> Iterator[T]:
        data = self._buffer.data
        for i in range(self._offset, self._offset + self._len):
            yield data.item(i)

    def __reversed__(self) -> Iterator[T]:
        data = self._buffer.data
        for i in range(self._offset + self._len - 1, self._offset - 1, -1):
            yield data.item(i)

    def __contains__(self, item: Any) -> bool:
        return self.index_of(item) != -1

    def index_of(self, item: Any) -> int:
        """Returns the index of the item or -1 if it wasn't found."""
        for i, value in enumerate(self):
            if value == item:
                return i
        return -1

    def copy_into(self, target: MutableSequence | np.ndarray, dest_offset: int = 0) -> None:
        """Copies every element into `target` starting at `dest_offset`."""
        if target is None:
            raise TypeError("copy_into() argument target was None")
        if dest_offset < 0 or dest_offset + self._len > len(target):
            raise RangeError(
                f"Cannot copy {self._len} elements into a target of "
                f"{len(target)} at offset {dest_offset}"
            )

        end = dest_offset + self._len
        if isinstance(target, np.ndarray):
            target[dest_offset:end] = self._region()
        else:
            target[dest_offset:end] = list(self)

    def copy_to(self, dst: BaseSlice) -> int:
        """
        Copies into `dst`, limited to the length of the shorter view.
        Overlapping windows of one buffer copy as if through a temporary.

        Returns the number of elements copied.
        """
        if dst is None:
            raise TypeError("copy_to() argument dst was None")
        if dst._readonly:
            raise UnsupportedOperationError(
                f"Cannot copy into a {type(dst).__name__}"
            )

        check_cast(self._buffer.data.dtype, dst._buffer, "copy_to")

        n = min(self._len, dst._len)
        dst._buffer.data[dst._offset : dst._offset + n] = self._region()[:n]
        return n

    # CONVERSION

    def to_array(self) -> np.ndarray:
        """
        Returns the contents as an ndarray. Only copies if the view covers
        part of its buffer.
        """
        if self._offset == 0 and self._len == self._buffer.capacity:
            return self._buffer.data
        return self._region().copy()

    def to_segment(self) -> Segment:
        return Segment(self._buffer.data, self._offset, self._len)

    def to_list(self) -> List[T]:
        return list(self)

    # OBJECT OVERRIDES

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseSlice):
            return NotImplemented
        if self._len != other._len:
            return False

        for a, b in zip(self, other):
            if not a == b:
                return False
        return True

    def __hash__(self) -> int:
        # Offset participates, so equal views at different offsets can
        # hash differently.
        hc = 0
        hc ^= self._offset
        hc ^= self._len
        for item in self:
            hc ^= hash(item)
        return hc

    def __repr__(self) -> str:
        body = ", ".join(str(item) for item in self)
        return f"{type(self).__name__}<{type_name(self.element_type)}>[{body}]"
