# slicekit/core/readonly.py
from __future__ import annotations

from typing import Any, NoReturn, TypeVar

from slicekit.core.view import BaseSlice
from slicekit.errors import UnsupportedOperationError
from slicekit.types import ElementType

T = TypeVar("T")


class ReadonlySlice(BaseSlice[T]):
    """
    Non-mutating perspective on a buffer window. Built from a Slice it shares
    that slice's buffer, so writes made through the Slice stay visible here.
    """

    __slots__ = ()

    _readonly = True

    def __init__(
        self,
        source: Any,
        *args: int,
        element_type: ElementType | None = None,
    ) -> None:
        if isinstance(source, BaseSlice):
            if args:
                raise TypeError("ReadonlySlice(slice) takes no bounds")
            self._buffer = source._buffer
            self._offset = source._offset
            self._len = source._len
            return

        super().__init__(source, *args, element_type=element_type)

    def _unsupported(self, op: str) -> NoReturn:
        raise UnsupportedOperationError(f"ReadonlySlice does not support {op}()")

    def __setitem__(self, key: Any, value: Any) -> NoReturn:
        self._unsupported("__setitem__")

    def __delitem__(self, key: Any) -> NoReturn:
        self._unsupported("__delitem__")

    def append(self, *items: Any) -> NoReturn:
        self._unsupported("append")

    def insert(self, index: int, item: Any) -> NoReturn:
        self._unsupported("insert")

    def remove_at(self, index: int) -> NoReturn:
        self._unsupported("remove_at")

    def add(self, item: Any) -> NoReturn:
        self._unsupported("add")

    def remove(self, item: Any) -> NoReturn:
        self._unsupported("remove")

    def clear(self) -> NoReturn:
        self._unsupported("clear")
