# slicekit/io/__init__.py
from slicekit.io.binding import (
    read_async_with,
    read_from,
    read_with,
    write_async_with,
    write_to,
    write_with,
)

__all__ = [
    "read_with",
    "write_with",
    "read_async_with",
    "write_async_with",
    "read_from",
    "write_to",
]
