"""Forward-only cursor over an in-memory TNEF buffer."""

from __future__ import annotations

import struct

from .errors import UnexpectedEof

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


class ByteCursor:
    """Slice fixed-size or declared-length spans off the front of a buffer.

    Spans are ``memoryview`` slices of the caller's buffer; nothing is copied,
    so the buffer must stay alive and unmodified while spans are in use.
    """

    __slots__ = ("_view", "_pos")

    def __init__(self, buffer: bytes | bytearray | memoryview) -> None:
        self._view = memoryview(buffer).cast("B")
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._view) - self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._view)

    def take(self, size: int) -> memoryview:
        if size > self.remaining:
            raise UnexpectedEof(size, self.remaining)
        chunk = self._view[self._pos : self._pos + size]
        self._pos += size
        return chunk

    def take_u8(self) -> int:
        return self.take(1)[0]

    def take_u16(self) -> int:
        return _U16.unpack(self.take(2))[0]

    def take_u32(self) -> int:
        return _U32.unpack(self.take(4))[0]
