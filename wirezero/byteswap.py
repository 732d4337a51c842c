"""Byte order reversal of fixed-size values."""

from __future__ import annotations

import struct

__all__ = [
    "byteswap32",
    "byteswap64",
    "byteswap_int32",
    "byteswap_int64",
    "byteswap_float",
    "byteswap_double",
]


def _swap_unsigned(value: int, size: int) -> int:
    value &= (1 << (8 * size)) - 1
    return int.from_bytes(value.to_bytes(size, "little"), "big")


def _swap_signed(value: int, size: int) -> int:
    bits = 8 * size
    swapped = _swap_unsigned(value, size)
    if swapped >> (bits - 1):
        swapped -= 1 << bits
    return swapped


def byteswap32(value: int) -> int:
    """Reverse the bytes of an unsigned 32 bit value."""
    return _swap_unsigned(value, 4)


def byteswap64(value: int) -> int:
    """Reverse the bytes of an unsigned 64 bit value."""
    return _swap_unsigned(value, 8)


def byteswap_int32(value: int) -> int:
    """Reverse the bytes of a signed 32 bit value."""
    return _swap_signed(value, 4)


def byteswap_int64(value: int) -> int:
    """Reverse the bytes of a signed 64 bit value."""
    return _swap_signed(value, 8)


def byteswap_float(value: float) -> float:
    """Reverse the bytes of a value stored as a 4 byte float."""
    return struct.unpack("<f", struct.pack(">f", value))[0]


def byteswap_double(value: float) -> float:
    """Reverse the bytes of a value stored as an 8 byte double."""
    return struct.unpack("<d", struct.pack(">d", value))[0]