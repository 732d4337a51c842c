# wirezero

Small, dependency-free building blocks for the protocol buffer wire format:
varints, zigzag encoding, byte order reversal, byte views, output buffers and
ranges over packed repeated fields. You work with field tags, wire types and
raw bytes directly.

## Installation

```
pip install wirezero
```

For development, install the test extra and run the suite with pytest:

```
pip install -e ".[test]"
pytest
```

## Modules

- `wirezero.exceptions`: `PbfError` and its subclasses `VarintTooLongError`,
  `UnknownWireTypeError`, `EndOfBufferError`, `InvalidTagError` and
  `InvalidLengthError`. Each one's `str()` is a fixed message, for example
  `"end of buffer exception"`.
- `wirezero.types`: the `WireType` enumeration (`VARINT`, `FIXED64`,
  `LENGTH_DELIMITED`, `FIXED32`, `UNKNOWN`), `tag_and_type(tag, wire_type)`,
  which packs a tag and a wire type into one 32 bit key, `version_tuple()`
  and the `VERSION_*` constants.
- `wirezero.varint`: `encode_varint`, `decode_varint`, `skip_varint`,
  `add_varint_to_buffer`, `length_of_varint`, `MAX_VARINT_LENGTH` and the
  32 and 64 bit zigzag functions `encode_zigzag32`, `encode_zigzag64`,
  `decode_zigzag32` and `decode_zigzag64`.
- `wirezero.byteswap`: `byteswap32`, `byteswap64`, `byteswap_int32`,
  `byteswap_int64`, `byteswap_float` and `byteswap_double`.
- `wirezero.data_view`: `DataView`, a window on a bytes-like object (a `str`
  is encoded as UTF-8). Views compare by content; when one is a prefix of the
  other the shorter sorts first. `compare()` returns -1, 0 or 1, and
  `memory` gives a read-only `memoryview`.
- `wirezero.buffers`: `GrowableBuffer`, which writes straight into a given
  `bytearray` or copies other bytes, and `FixedSizeBuffer`, which raises
  `BufferFullError` when a write would go beyond its capacity. Both offer
  `append`, `append_zeros`, `push_back`, `resize` (shrink only),
  `erase_range`, `reserve_additional` and `view`.
- `wirezero.iterators`: `FixedRange` (little-endian elements given by a
  `struct` format character), `VarintRange`, `SVarintRange` (zigzag) and
  `count_varints`. Ranges support iteration, `len()`, `empty()`, `front()`,
  `drop_front()` and `swap()`; `front()` and `drop_front()` on an empty range
  raise `IndexError`. A `FixedRange` whose data is not a whole number of
  elements raises `InvalidLengthError`.

## Example

```python
import struct

from wirezero.buffers import BufferFullError, FixedSizeBuffer
from wirezero.data_view import DataView
from wirezero.iterators import FixedRange, VarintRange
from wirezero.types import WireType, tag_and_type
from wirezero.varint import decode_varint, encode_varint, encode_zigzag64

# Key for field 1 holding a varint, followed by the value 150.
key = tag_and_type(1, WireType.VARINT)
payload = encode_varint(key) + encode_varint(150)

value, pos = decode_varint(payload, 1)
assert value == 150 and pos == len(payload)

# Signed values go through zigzag before they become varints.
assert encode_zigzag64(-1) == 1

# Read the body of a packed repeated uint32 field.
packed = encode_varint(10) + encode_varint(300) + encode_varint(7)
values = VarintRange(packed, 32, False)
assert len(values) == 3
assert list(values) == [10, 300, 7]

# Packed fixed32 values.
assert list(FixedRange(struct.pack("<3I", 1, 2, 3), "I")) == [1, 2, 3]

# Views compare byte-wise.
assert DataView(b"abc") < DataView(b"abcd")

# A fixed-size buffer refuses to overflow.
buf = FixedSizeBuffer(4)
buf.append(b"abcd")
try:
    buf.push_back(1)
except BufferFullError:
    pass
```

Decoding functions take a bytes-like object and a position and return the
decoded value together with the position just after it. Truncated input
raises `EndOfBufferError`; a varint that runs past ten bytes raises
`VarintTooLongError`.

## What it does not do

There is no message reader or writer here: nothing walks the fields of a
message, validates tags while reading, or writes tagged fields, nested
messages or packed fields into a buffer. Those are left to code built on
these pieces. There is also no schema compiler and no command-line tool.