"""Building blocks for the protocol buffer wire format: varints, zigzag,
byte swapping, byte views, output buffers and packed-field ranges."""

__version__ = "1.7.1"

__all__ = [
    "buffers",
    "byteswap",
    "data_view",
    "exceptions",
    "iterators",
    "types",
    "varint",
]