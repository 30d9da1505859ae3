# slicekit/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Type, TypeAlias, Union

import numpy as np

ElementType: TypeAlias = Union[Type[Any], np.dtype]


class SliceTo(str, Enum):
    """Symbolic stop bounds for sub-slicing."""

    END = "end"
    FULL = "full"


# slice[0:End] == slice[0:len(slice)]
End = SliceTo.END
# slice[0:Full] == slice[0:slice.capacity]
Full = SliceTo.FULL


@dataclass(frozen=True, slots=True)
class Segment:
    """
    Bounded region descriptor: `count` elements of `array` starting at
    `offset`. Holds the same array as the view it came from.
    """

    array: np.ndarray
    offset: int
    count: int

    def view(self) -> np.ndarray:
        """Read-only ndarray over the region. Never copies."""
        region = self.array[self.offset : self.offset + self.count]
        region.flags.writeable = False
        return region

    def __iter__(self) -> Iterator[Any]:
        for i in range(self.offset, self.offset + self.count):
            yield self.array.item(i)

    def __len__(self) -> int:
        return self.count
