"""Ranges over the elements of packed repeated fields."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from typing import Any, Union

from .data_view import DataView
from .exceptions import InvalidLengthError
from .varint import decode_varint, decode_zigzag64, skip_varint

__all__ = [
    "PackedRange",
    "FixedRange",
    "VarintRange",
    "SVarintRange",
    "count_varints",
]

_Data = Union[bytes, bytearray, memoryview, DataView]


def _as_memory(data: _Data) -> memoryview:
    if isinstance(data, DataView):
        return data.memory
    return memoryview(data).cast("B").toreadonly()


def _cast(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def count_varints(data: _Data) -> int:
    """Count the varints in ``data`` without decoding them.

    Every varint has exactly one byte with the high bit clear.
    """
    return sum(1 for byte in _as_memory(data) if byte < 0x80)


class PackedRange:
    """A consumable range over the elements of a packed field.

    Iterating yields the elements from the current front to the end
    without changing the range; ``drop_front`` advances the front.
    """

    def __init__(self, data: _Data = b"") -> None:
        self._data = _as_memory(data)
        self._pos = 0

    def _decode_at(self, pos: int) -> tuple[Any, int]:
        raise NotImplementedError

    def _skip_at(self, pos: int) -> int:
        return self._decode_at(pos)[1]

    def _count(self) -> int:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Any]:
        pos = self._pos
        end = len(self._data)
        while pos < end:
            value, pos = self._decode_at(pos)
            yield value

    def __len__(self) -> int:
        return self._count()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self._data[self._pos:])!r})"

    def empty(self) -> bool:
        """Return True if no elements are left."""
        return self._pos >= len(self._data)

    def front(self) -> Any:
        """Return the first element; the range must not be empty."""
        if self.empty():
            raise IndexError("front() on empty range")
        return self._decode_at(self._pos)[0]

    def drop_front(self) -> None:
        """Remove the first element; the range must not be empty."""
        if self.empty():
            raise IndexError("drop_front() on empty range")
        self._pos = self._skip_at(self._pos)

    def swap(self, other: PackedRange) -> None:
        """Exchange the contents of this range with ``other``."""
        if type(self) is not type(other):
            raise TypeError(
                f"cannot swap {type(self).__name__} with {type(other).__name__}"
            )
        mine = dict(vars(self))
        vars(self).clear()
        vars(self).update(vars(other))
        vars(other).clear()
        vars(other).update(mine)


class FixedRange(PackedRange):
    """Elements of fixed size, little-endian, described by a struct format
    character such as ``"I"``, ``"i"``, ``"Q"``, ``"q"``, ``"f"`` or ``"d"``.
    """

    def __init__(self, data: _Data = b"", value_format: str = "I") -> None:
        super().__init__(data)
        self._struct = struct.Struct("<" + value_format)
        if len(self._data) % self._struct.size:
            raise InvalidLengthError()

    def _decode_at(self, pos: int) -> tuple[Any, int]:
        size = self._struct.size
        return self._struct.unpack_from(self._data, pos)[0], pos + size

    def _skip_at(self, pos: int) -> int:
        return pos + self._struct.size

    def _count(self) -> int:
        return (len(self._data) - self._pos) // self._struct.size


class VarintRange(PackedRange):
    """Varint elements cast to integers of ``bits`` width."""

    def __init__(self, data: _Data = b"", bits: int = 64, signed: bool = False) -> None:
        super().__init__(data)
        if bits <= 0:
            raise ValueError("bits must be positive")
        self._bits = bits
        self._signed = signed

    def _raw_at(self, pos: int) -> tuple[int, int]:
        return decode_varint(self._data, pos)

    def _convert(self, raw: int) -> int:
        return _cast(raw, self._bits, self._signed)

    def _decode_at(self, pos: int) -> tuple[Any, int]:
        raw, nxt = self._raw_at(pos)
        return self._convert(raw), nxt

    def _skip_at(self, pos: int) -> int:
        return skip_varint(self._data, pos)

    def _count(self) -> int:
        return count_varints(self._data[self._pos:])


class SVarintRange(VarintRange):
    """ZigZag-encoded varint elements, signed integers of ``bits`` width."""

    def __init__(self, data: _Data = b"", bits: int = 64) -> None:
        super().__init__(data, bits, True)

    def _convert(self, raw: int) -> int:
        return _cast(decode_zigzag64(raw), self._bits, True)