# slicekit/core/buffer.py
from typing import Any, Dict, Sequence

import numpy as np

from slicekit.config import get_settings
from slicekit.errors import ConstructionError
from slicekit.types import ElementType

TYPE_MAP: Dict[type, str] = {
    int: "i8",
    float: "f8",
    bool: "?",
    complex: "c16",
}

# Python scalar types in widening order, used to pick one type for mixed items.
NUMERIC_ORDER = (bool, int, float, complex)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Buffer:
    """
    Fixed-capacity, zero-initialized storage shared by any number of views.
    Never resized: growth always allocates a new Buffer.
    """

    __slots__ = ("data", "element_type")

    def __init__(self, data: np.ndarray, element_type: ElementType):
        if data.ndim != 1:
            raise ValueError(f"Buffer data must be 1-D, got shape {data.shape}")
        if not data.flags.c_contiguous:
            raise ValueError("Buffer data must be C-contiguous, got a strided array")
        self.data = data
        self.element_type = element_type

    @property
    def capacity(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"Buffer<{type_name(self.element_type)}>(capacity={self.capacity})"


def resolve_dtype(element_type: ElementType) -> np.dtype:
    """Map a Python or NumPy element type to the dtype used for storage."""
    if isinstance(element_type, np.dtype):
        return element_type

    if element_type in TYPE_MAP:
        return np.dtype(TYPE_MAP[element_type])

    if isinstance(element_type, type) and issubclass(element_type, np.generic):
        return np.dtype(element_type)

    return np.dtype(object)


def type_name(element_type: ElementType) -> str:
    if isinstance(element_type, np.dtype):
        return element_type.name
    return getattr(element_type, "__name__", str(element_type))


def allocate(capacity: int, element_type: ElementType | None = None) -> Buffer:
    """Allocates a zero-initialized buffer holding `capacity` elements."""
    if capacity < 0:
        raise ConstructionError(f"Buffer capacity must not be negative: {capacity}")

    if element_type is None:
        element_type = get_settings().default_element_type

    dtype = resolve_dtype(element_type)
    if dtype == object:
        data = _object_zeros(capacity, element_type)
    else:
        data = np.zeros(capacity, dtype=dtype)

    return Buffer(data, element_type)


def from_items(
    items: Sequence[Any], element_type: ElementType | None = None
) -> Buffer:
    """Allocates a buffer sized exactly to `items` and fills it in order."""
    if element_type is None:
        element_type = infer_element_type(items)

    buffer = allocate(len(items), element_type)
    if buffer.data.dtype == object:
        # Element-wise so tuples and lists stay single elements.
        for i, item in enumerate(items):
            buffer.data[i] = item
    elif items:
        buffer.data[:] = items

    return buffer


def wrap(array: np.ndarray, element_type: ElementType | None = None) -> Buffer:
    """Adopts an existing 1-D ndarray as a buffer. Does not copy."""
    if array is None:
        raise TypeError("wrap() argument array was None")

    if element_type is None:
        element_type = _element_type_of(array.dtype)

    return Buffer(array, element_type)


def infer_element_type(items: Sequence[Any]) -> ElementType:
    if not items:
        return get_settings().default_element_type

    kinds = {type(item) for item in items}
    if kinds <= set(NUMERIC_ORDER):
        widest = max(kinds, key=NUMERIC_ORDER.index)
        if widest is int and not all(
            INT64_MIN <= item <= INT64_MAX for item in items
        ):
            return object
        return widest

    if len(kinds) == 1:
        return kinds.pop()
    return object


def _element_type_of(dtype: np.dtype) -> ElementType:
    for py_type, code in TYPE_MAP.items():
        if dtype == np.dtype(code):
            return py_type
    if dtype == object:
        return object
    return dtype.type


def _object_zeros(capacity: int, element_type: ElementType) -> np.ndarray:
    """
    Fills each slot with its own element_type() when the type can be built
    without arguments, else with None.
    """
    data = np.full(capacity, None, dtype=object)
    if capacity == 0 or element_type is object or not callable(element_type):
        return data

    try:
        data[0] = element_type()
    except TypeError:
        return data

    for i in range(1, capacity):
        data[i] = element_type()
    return data


def check_cast(src: np.dtype, buffer: Buffer, op: str) -> None:
    """Raises TypeError unless `src` values fit `buffer` without changing kind."""
    if not np.can_cast(src, buffer.data.dtype, casting="same_kind"):
        raise TypeError(
            f"{op}: cannot store {src} elements in a "
            f"{type_name(buffer.element_type)} buffer without losing data"
        )


def check_value(value: Any, buffer: Buffer, op: str) -> None:
    """check_cast() for a single element."""
    if buffer.data.dtype == object:
        return
    check_cast(np.asarray(value).dtype, buffer, op)
