"""Low-level types of the protocol buffer wire format and version data."""

from __future__ import annotations

import enum

__all__ = [
    "WireType",
    "tag_and_type",
    "version_tuple",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    "VERSION_CODE",
    "VERSION_STRING",
]

VERSION_MAJOR = 1
VERSION_MINOR = 7
VERSION_PATCH = 1
VERSION_CODE = VERSION_MAJOR * 10000 + VERSION_MINOR * 100 + VERSION_PATCH
VERSION_STRING = "1.7.1"

_UINT32_MASK = 0xFFFFFFFF


class WireType(enum.IntEnum):
    """How a field's value is encoded on the wire."""

    VARINT = 0  # int32/64, uint32/64, sint32/64, bool, enum
    FIXED64 = 1  # fixed64, sfixed64, double
    LENGTH_DELIMITED = 2  # string, bytes, nested messages, packed fields
    FIXED32 = 5  # fixed32, sfixed32, float
    UNKNOWN = 99  # default before any field has been read


def tag_and_type(tag: int, wire_type: WireType | int) -> int:
    """Combine a tag and a wire type into one 32 bit key, as on the wire."""
    return ((int(tag) << 3) | int(wire_type)) & _UINT32_MASK


def version_tuple() -> tuple[int, int, int]:
    """Return the version as (major, minor, patch)."""
    return (VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH)