"""Varint and zigzag encoding and decoding."""

from __future__ import annotations

from typing import Any

from .exceptions import EndOfBufferError, VarintTooLongError

__all__ = [
    "MAX_VARINT_LENGTH",
    "decode_varint",
    "skip_varint",
    "encode_varint",
    "add_varint_to_buffer",
    "length_of_varint",
    "encode_zigzag32",
    "encode_zigzag64",
    "decode_zigzag32",
    "decode_zigzag64",
]

#: The maximum length in bytes of a 64 bit varint.
MAX_VARINT_LENGTH = 64 // 7 + 1

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def decode_varint(data: bytes | bytearray | memoryview, pos: int = 0) -> tuple[int, int]:
    """Decode a 64 bit varint starting at ``pos``.

    Returns the value and the position just after the varint. Raises
    VarintTooLongError if it does not fit into 64 bits and EndOfBufferError
    if the data ends inside the varint.
    """
    end = len(data)
    if pos < end and data[pos] < 0x80:
        return data[pos], pos + 1

    value = 0
    if end - pos >= MAX_VARINT_LENGTH:
        for index in range(MAX_VARINT_LENGTH):
            byte = data[pos + index]
            if index == MAX_VARINT_LENGTH - 1:
                value |= (byte & 0x01) << 63
            else:
                value |= (byte & 0x7F) << (7 * index)
            if byte < 0x80:
                return value, pos + index + 1
        raise VarintTooLongError()

    shift = 0
    p = pos
    while p != end and data[p] >= 0x80:
        value |= (data[p] & 0x7F) << shift
        shift += 7
        p += 1
    if p == end:
        raise EndOfBufferError()
    value |= data[p] << shift
    return value & _UINT64_MASK, p + 1


def skip_varint(data: bytes | bytearray | memoryview, pos: int = 0) -> int:
    """Return the position just after the varint starting at ``pos``."""
    end = len(data)
    p = pos
    while p != end and data[p] >= 0x80:
        p += 1
    if p - pos >= MAX_VARINT_LENGTH:
        raise VarintTooLongError()
    if p == end:
        raise EndOfBufferError()
    return p + 1


def encode_varint(value: int) -> bytes:
    """Encode an integer as a varint; negative values wrap to 64 bits."""
    value &= _UINT64_MASK
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def add_varint_to_buffer(buffer: Any, value: int) -> None:
    """Append the varint encoding of ``value`` to ``buffer``.

    The buffer is either an object with a ``push_back(byte)`` method or a
    mutable byte sequence such as a bytearray.
    """
    encoded = encode_varint(value)
    push_back = getattr(buffer, "push_back", None)
    if push_back is not None:
        for byte in encoded:
            push_back(byte)
    else:
        buffer.extend(encoded)


def length_of_varint(value: int) -> int:
    """Return the number of bytes the varint encoding of ``value`` takes."""
    value &= _UINT64_MASK
    length = 1
    while value >= 0x80:
        value >>= 7
        length += 1
    return length


def encode_zigzag32(value: int) -> int:
    """ZigZag encode a 32 bit signed integer."""
    value = _to_signed(value, 32)
    return ((value << 1) ^ (value >> 31)) & _UINT32_MASK


def encode_zigzag64(value: int) -> int:
    """ZigZag encode a 64 bit signed integer."""
    value = _to_signed(value, 64)
    return ((value << 1) ^ (value >> 63)) & _UINT64_MASK


def decode_zigzag32(value: int) -> int:
    """Decode a 32 bit ZigZag-encoded integer."""
    value &= _UINT32_MASK
    return _to_signed((value >> 1) ^ -(value & 1), 32)


def decode_zigzag64(value: int) -> int:
    """Decode a 64 bit ZigZag-encoded integer."""
    value &= _UINT64_MASK
    return _to_signed((value >> 1) ^ -(value & 1), 64)