"""Exceptions raised while reading or writing protocol buffer data."""

from __future__ import annotations

__all__ = [
    "PbfError",
    "VarintTooLongError",
    "UnknownWireTypeError",
    "EndOfBufferError",
    "InvalidTagError",
    "InvalidLengthError",
]


class PbfError(Exception):
    """Base class of every error raised explicitly by this package."""

    message = "pbf exception"

    def __str__(self) -> str:
        return self.message


class VarintTooLongError(PbfError):
    """A varint is longer than a 64 bit value allows; the data is corrupt."""

    message = "varint too long exception"


class UnknownWireTypeError(PbfError):
    """The wire type of a field is not one of the known wire types."""

    message = "unknown pbf field type exception"


class EndOfBufferError(PbfError):
    """Not enough bytes are left in the buffer to read a field."""

    message = "end of buffer exception"


class InvalidTagError(PbfError):
    """A tag is 0, in the reserved range 19000-19999, or above 2**29 - 1."""

    message = "invalid tag exception"


class InvalidLengthError(PbfError):
    """The length of a packed field does not fit the size of its elements."""

    message = "invalid length exception"