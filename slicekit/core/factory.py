# slicekit/core/factory.py
from typing import Any, Iterable, TypeVar

import numpy as np

from slicekit.core.buffer import from_items, wrap
from slicekit.core.slice import Slice
from slicekit.types import ElementType

T = TypeVar("T")


def make(*items: T, element_type: ElementType | None = None) -> Slice[T]:
    """
    Creates a new slice with the provided items as its whole buffer.
    The element type is taken from the items unless given.
    """
    buffer = from_items(items, element_type)
    return Slice(buffer, 0, buffer.capacity)


def to_slice(
    iterable: Iterable[T], element_type: ElementType | None = None
) -> Slice[T]:
    """Consumes `iterable` once, in order, into a new slice."""
    if iterable is None:
        raise TypeError("to_slice() argument iterable was None")
    return make(*list(iterable), element_type=element_type)


def from_array(array: np.ndarray, element_type: Any = None) -> Slice[Any]:
    """Wraps an existing 1-D ndarray as a slice without copying it."""
    buffer = wrap(array, element_type)
    return Slice(buffer, 0, buffer.capacity)
