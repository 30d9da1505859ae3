# slicekit/core/slice.py
from __future__ import annotations

import logging
import operator
from typing import Any, TypeVar

from slicekit.config import get_settings
from slicekit.core.buffer import allocate, check_cast, check_value, from_items
from slicekit.core.readonly import ReadonlySlice
from slicekit.core.view import BaseSlice
from slicekit.errors import SliceIndexError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Slice(BaseSlice[T]):
    """
    Mutable window into a Buffer that can be resliced into new windows over
    the same data.

    Element writes go straight to the shared buffer and are visible through
    every view aliasing the same slots. append() reuses the slack between
    length and capacity when it fits, so its result may alias this view.
    insert/remove_at/add/remove/clear instead rebuild an exact-size buffer
    and repoint this view at it.
    """

    __slots__ = ()

    def __setitem__(self, key: Any, value: T) -> None:
        if isinstance(key, slice):
            raise TypeError("Slice assignment is not supported, use copy_to()")
        i = self._check_index(key)
        check_value(value, self._buffer, "__setitem__")
        self._buffer.data[self._offset + i] = value

    def __delitem__(self, key: Any) -> None:
        self.remove_at(key)

    # GROWTH

    def append(self, *items: Any) -> Slice[T]:
        """
        Returns a new slice with the provided slice (or items) appended.

        Fits in the slack: writes into this buffer and the result aliases it.
        Otherwise: copies both into a new buffer with room to grow.

        Raises TypeError if the appended elements would lose data when
        stored as this slice's element type.
        """
        if len(items) == 1 and isinstance(items[0], BaseSlice):
            other = items[0]
        else:
            other = Slice(from_items(items), 0, len(items))
        check_cast(other._buffer.data.dtype, self._buffer, "append")

        size = self._len
        new_len = size + len(other)

        if new_len <= self.capacity:
            start = self._offset + size
            self._buffer.data[start : self._offset + new_len] = other._region()
            return Slice(self._buffer, self._offset, self._offset + new_len)

        new_cap = new_len * get_settings().growth_factor
        buffer = allocate(new_cap, self.element_type)
        buffer.data[:size] = self._region()
        buffer.data[size:new_len] = other._region()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "[append] reallocated %d -> %d (length %d)",
                self._buffer.capacity,
                new_cap,
                new_len,
            )

        return Slice(buffer, 0, new_len)

    # LIST MUTATION

    def insert(self, index: int, item: T) -> None:
        index = operator.index(index)
        if index < 0 or index > self._len:
            raise self._index_error(index, "insert")
        check_value(item, self._buffer, "insert")

        region = self._region()
        buffer = allocate(self._len + 1, self.element_type)
        buffer.data[:index] = region[:index]
        buffer.data[index] = item
        buffer.data[index + 1 :] = region[index:]
        self._adopt(buffer, "insert")

    def remove_at(self, index: int) -> None:
        i = self._check_index(index)

        region = self._region()
        buffer = allocate(self._len - 1, self.element_type)
        buffer.data[:i] = region[:i]
        buffer.data[i:] = region[i + 1 :]
        self._adopt(buffer, "remove_at")

    def add(self, item: T) -> None:
        self.insert(self._len, item)

    def remove(self, item: T) -> bool:
        """Removes the first equal item. Returns False if none was found."""
        i = self.index_of(item)
        if i == -1:
            return False
        self.remove_at(i)
        return True

    def clear(self) -> None:
        self._adopt(allocate(0, self.element_type), "clear")

    def _adopt(self, buffer, op: str) -> None:
        logger.debug(
            "[%s] rebuilt buffer %d -> %d", op, self._buffer.capacity, buffer.capacity
        )
        self._buffer = buffer
        self._offset = 0
        self._len = buffer.capacity

    def _index_error(self, index: int, op: str) -> SliceIndexError:
        return SliceIndexError(
            f"{op}: index {index} out of range for Slice of length {self._len}"
        )

    # COPIES

    def clone(self) -> Slice[T]:
        """
        Copies the slice. Not identical: the capacity of the copy is only the
        current length.
        """
        copy = Slice(self._len, element_type=self.element_type)
        self.copy_to(copy)
        return copy

    def as_readonly(self) -> ReadonlySlice[T]:
        return ReadonlySlice(self)
