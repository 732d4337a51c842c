import enum

import pytest

from wirezero.types import VERSION_STRING, WireType, tag_and_type, version_tuple


def test_tag_and_type_matches_wire_key_bytes():
    assert tag_and_type(1, WireType.VARINT) == 0x08
    assert tag_and_type(1, WireType.LENGTH_DELIMITED) == 0x0A


@pytest.mark.parametrize("tag", [1, 2, 200, 18999, 20000, (1 << 29) - 1])
@pytest.mark.parametrize(
    "wire_type",
    [WireType.VARINT, WireType.FIXED64, WireType.LENGTH_DELIMITED, WireType.FIXED32],
)
def test_tag_and_type_round_trip(tag, wire_type):
    key = tag_and_type(tag, wire_type)
    assert key >> 3 == tag
    assert WireType(key & 0x7) is wire_type


def test_tag_and_type_accepts_enum_tags():
    class Msg(enum.IntEnum):
        f = 3

    assert tag_and_type(Msg.f, WireType.FIXED32) == tag_and_type(3, WireType.FIXED32)


def test_tag_and_type_accepts_plain_int_wire_type():
    assert tag_and_type(7, 1) == tag_and_type(7, WireType.FIXED64)


def test_tag_and_type_distinguishes_wire_types():
    keys = {tag_and_type(5, wt) for wt in WireType if wt is not WireType.UNKNOWN}
    assert len(keys) == 4


def test_wire_type_lookup():
    assert WireType(99) is WireType.UNKNOWN
    assert WireType(5) is WireType.FIXED32
    with pytest.raises(ValueError):
        WireType(3)


def test_version_tuple():
    assert version_tuple() == (1, 7, 1)
    assert ".".join(str(part) for part in version_tuple()) == VERSION_STRING