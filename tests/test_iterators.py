import struct

import pytest

from wirezero.data_view import DataView
from wirezero.exceptions import EndOfBufferError, InvalidLengthError
from wirezero.iterators import (
    FixedRange,
    SVarintRange,
    VarintRange,
    count_varints,
)
from wirezero.varint import encode_varint, encode_zigzag64


def _varints(values):
    return b"".join(encode_varint(v) for v in values)


def test_default_constructed_range_is_empty():
    r = VarintRange()
    assert r.empty()
    assert len(r) == 0
    assert list(r) == []


def test_front_and_drop_front_on_empty_raise():
    r = VarintRange(b"", 32)
    with pytest.raises(IndexError):
        r.front()
    with pytest.raises(IndexError):
        r.drop_front()


def test_varint_front_drop_sequence():
    r = VarintRange(_varints([1, 4, 9, 16, 25]), 32)
    assert not r.empty()
    assert len(r) == 5
    assert r.front() == 1
    r.drop_front()
    assert r.front() == 4
    r.drop_front()
    assert len(r) == 3
    assert r.front() == 9
    r.drop_front()
    assert r.front() == 16
    r.drop_front()
    assert r.front() == 25
    r.drop_front()
    assert r.empty()
    assert len(r) == 0
    with pytest.raises(IndexError):
        r.front()


def test_varint_pinned_bytes():
    assert list(VarintRange(b"\xac\x02\x01")) == [300, 1]


def test_iteration_does_not_consume():
    r = VarintRange(_varints([17, 200, 0]))
    assert list(r) == [17, 200, 0]
    assert list(r) == [17, 200, 0]


def test_varint_signed_int32():
    values = [17, 200, 0, 1, 2**31 - 1, -200, -1, -(2**31)]
    r = VarintRange(_varints(values), 32, True)
    assert list(r) == values


def test_varint_uint64_max():
    r = VarintRange(_varints([2**64 - 1, 0]), 64, False)
    assert list(r) == [2**64 - 1, 0]


def test_svarint_values():
    values = [17, 200, 0, 1, 2**63 - 1, -200, -1, -(2**63)]
    data = _varints(encode_zigzag64(v) for v in values)
    assert list(SVarintRange(data, 64)) == values


def test_svarint_pinned_bytes():
    assert list(SVarintRange(b"\x00\x01\x02\x03", 32)) == [0, -1, 1, -2]


def test_truncated_varint_raises():
    r = VarintRange(b"\x05\x80", 32)
    assert r.front() == 5
    with pytest.raises(EndOfBufferError):
        list(r)


def test_fixed_uint32():
    data = struct.pack("<5I", 17, 200, 0, 1, 2**32 - 1)
    r = FixedRange(data, "I")
    assert len(r) == 5
    assert list(r) == [17, 200, 0, 1, 2**32 - 1]


def test_fixed_sfixed64():
    values = [17, 200, 0, 1, 2**63 - 1, -200, -1, -(2**63)]
    r = FixedRange(struct.pack("<8q", *values), "q")
    assert list(r) == values
    r.drop_front()
    r.drop_front()
    assert len(r) == 6
    assert r.front() == 0


def test_fixed_float():
    r = FixedRange(struct.pack("<2f", 17.34, 1.0), "f")
    first, second = list(r)
    assert first == pytest.approx(17.34, rel=1e-6)
    assert second == 1.0


def test_fixed_invalid_length():
    with pytest.raises(InvalidLengthError):
        FixedRange(b"\x00\x00\x00", "I")


def test_unaligned_data_view():
    raw = b"\x00" + struct.pack("<2d", 4.893, -9232.33)
    r = FixedRange(DataView(raw, 1), "d")
    assert list(r) == [4.893, -9232.33]


def test_swap_ranges():
    a = VarintRange(_varints([1, 2, 3]), 32)
    b = VarintRange()
    b.swap(a)
    assert list(b) == [1, 2, 3]
    assert a.empty()
    assert len(a) == 0


def test_swap_different_types_raises():
    with pytest.raises(TypeError):
        VarintRange().swap(FixedRange(b"", "I"))


def test_count_varints():
    assert count_varints(b"\x80\x01\x05") == 2
    assert count_varints(b"") == 0
    assert count_varints(_varints([300, 2**64 - 1, 7])) == 3