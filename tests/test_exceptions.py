import pytest

from wirezero.exceptions import (
    EndOfBufferError,
    InvalidLengthError,
    InvalidTagError,
    PbfError,
    UnknownWireTypeError,
    VarintTooLongError,
)


def test_message_for_pbf_exception():
    assert str(PbfError()) == "pbf exception"


def test_message_for_varint_too_long():
    assert str(VarintTooLongError()) == "varint too long exception"


def test_message_for_unknown_wire_type():
    assert str(UnknownWireTypeError()) == "unknown pbf field type exception"


def test_message_for_end_of_buffer():
    assert str(EndOfBufferError()) == "end of buffer exception"


def test_message_for_invalid_tag():
    assert str(InvalidTagError()) == "invalid tag exception"


def test_message_for_invalid_length():
    assert str(InvalidLengthError()) == "invalid length exception"


@pytest.mark.parametrize(
    "cls, text",
    [
        (VarintTooLongError, "varint too long exception"),
        (UnknownWireTypeError, "unknown pbf field type exception"),
        (EndOfBufferError, "end of buffer exception"),
        (InvalidTagError, "invalid tag exception"),
        (InvalidLengthError, "invalid length exception"),
    ],
)
def test_subclasses_derive_from_base(cls, text):
    err = cls()
    assert issubclass(cls, PbfError)
    assert isinstance(err, PbfError)
    assert str(err) == text