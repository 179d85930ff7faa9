"""A cursor over a byte string for decoding SCALE data."""

from __future__ import annotations


class Reader:
    """Reads bytes one after another from an in-memory buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def read_byte(self) -> int:
        """Read one byte and advance."""
        if self._pos >= len(self._data):
            raise ValueError("reader: out of bounds")
        value = self._data[self._pos]
        self._pos += 1
        return value

    def read_bytes(self, n: int) -> bytes:
        """Read ``n`` bytes and advance."""
        if n < 0:
            raise ValueError(f"reader: negative length {n}")
        end = self._pos + n
        if end > len(self._data):
            raise ValueError(f"reader: out of bounds for {n} bytes")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    @property
    def pos(self) -> int:
        """The current offset into the buffer."""
        return self._pos