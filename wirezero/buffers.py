"""Byte buffers that protocol buffer messages are written into."""

from __future__ import annotations

from typing import Union

__all__ = ["BufferFullError", "GrowableBuffer", "FixedSizeBuffer"]

_BytesLike = Union[bytes, bytearray, memoryview]


class BufferFullError(BufferError):
    """An operation needs more space than a fixed-size buffer has."""

    def __init__(self, message: str = "fixed size data store exhausted") -> None:
        super().__init__(message)


def _check_erase(start: int, end: int, size: int, *, allow_empty: bool) -> None:
    if not 0 <= start <= size or not 0 <= end <= size:
        raise ValueError(f"range [{start}, {end}) outside buffer of size {size}")
    if end < start or (end == start and not allow_empty):
        raise ValueError(f"invalid range [{start}, {end})")


class GrowableBuffer:
    """A buffer that grows as data is added.

    When given a bytearray the buffer writes into that object directly,
    appending to whatever it already holds; other bytes-like data is copied.
    """

    def __init__(self, data: _BytesLike | None = None) -> None:
        if isinstance(data, bytearray):
            self._data = data
        else:
            self._data = bytearray(data or b"")

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"GrowableBuffer({bytes(self._data)!r})"

    def append(self, data: _BytesLike) -> None:
        """Append the given bytes."""
        self._data += data

    def append_zeros(self, count: int) -> None:
        """Append ``count`` zero bytes."""
        if count < 0:
            raise ValueError("count must not be negative")
        self._data += bytes(count)

    def resize(self, size: int) -> None:
        """Shrink the buffer to ``size`` bytes, which must be smaller."""
        if not 0 <= size < len(self._data):
            raise ValueError(f"new size {size} not below current size {len(self._data)}")
        del self._data[size:]

    def reserve_additional(self, size: int) -> None:
        """Announce that ``size`` more bytes will follow.

        A bytearray manages its own growth, so this only checks the hint.
        """
        if size < 0:
            raise ValueError("size must not be negative")

    def erase_range(self, start: int, end: int) -> None:
        """Remove the bytes in ``[start, end)``, moving later bytes down."""
        _check_erase(start, end, len(self._data), allow_empty=True)
        del self._data[start:end]

    def view(self, pos: int) -> memoryview:
        """A writable view from ``pos`` to the end of the data.

        Release the view (or use it in a ``with`` block) before the buffer
        changes size again.
        """
        if not 0 <= pos <= len(self._data):
            raise ValueError(f"position {pos} outside buffer of size {len(self._data)}")
        return memoryview(self._data)[pos:]

    def push_back(self, byte: int) -> None:
        """Append a single byte."""
        self._data.append(byte)


class FixedSizeBuffer:
    """A buffer of fixed capacity; running out of space raises BufferFullError."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data = bytearray(capacity)
        self._size = 0

    def capacity(self) -> int:
        """The number of bytes the buffer was created with."""
        return len(self._data)

    def __len__(self) -> int:
        return self._size

    def __bytes__(self) -> bytes:
        return bytes(self._data[:self._size])

    def __repr__(self) -> str:
        return f"FixedSizeBuffer(size={self._size}, capacity={len(self._data)})"

    def _ensure_room(self, count: int) -> None:
        if self._size + count > len(self._data):
            raise BufferFullError()

    def append(self, data: _BytesLike) -> None:
        """Append the given bytes."""
        count = len(data)
        self._ensure_room(count)
        self._data[self._size:self._size + count] = data
        self._size += count

    def append_zeros(self, count: int) -> None:
        """Append ``count`` zero bytes."""
        if count < 0:
            raise ValueError("count must not be negative")
        self._ensure_room(count)
        self._data[self._size:self._size + count] = bytes(count)
        self._size += count

    def resize(self, size: int) -> None:
        """Shrink the used part of the buffer to ``size`` bytes."""
        if not 0 <= size < self._size:
            raise ValueError(f"new size {size} not below current size {self._size}")
        self._size = size

    def reserve_additional(self, size: int) -> None:
        """Accept a size hint; a fixed buffer has nothing to reserve."""
        if size < 0:
            raise ValueError("size must not be negative")

    def erase_range(self, start: int, end: int) -> None:
        """Remove the bytes in ``[start, end)``, moving later bytes down."""
        _check_erase(start, end, self._size, allow_empty=False)
        tail = self._data[end:self._size]
        self._data[start:start + len(tail)] = tail
        self._size -= end - start

    def view(self, pos: int) -> memoryview:
        """A writable view from ``pos`` to the end of the used bytes."""
        if not 0 <= pos <= self._size:
            raise ValueError(f"position {pos} outside buffer of size {self._size}")
        return memoryview(self._data)[pos:self._size]

    def push_back(self, byte: int) -> None:
        """Append a single byte."""
        self._ensure_room(1)
        self._data[self._size] = byte
        self._size += 1