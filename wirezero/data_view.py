"""A non-owning view on a range of bytes."""

from __future__ import annotations

from typing import Union

__all__ = ["DataView"]

_BytesLike = Union[bytes, bytearray, memoryview]


def _as_bytes(value: object) -> bytes | None:
    if isinstance(value, DataView):
        return bytes(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return None


class DataView:
    """A window of ``length`` bytes into ``data`` starting at ``start``.

    ``data`` may be any bytes-like object or a str, which is encoded as
    UTF-8. Without ``length`` the view runs to the end of the data.
    Views compare by content: a view that is a prefix of another sorts
    before it, otherwise the first differing byte decides.
    """

    __slots__ = ("_data", "_start", "_length")

    def __init__(
        self,
        data: _BytesLike | str = b"",
        start: int = 0,
        length: int | None = None,
    ) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        total = len(data)
        if length is None:
            length = total - start
        if start < 0 or length < 0 or start + length > total:
            raise ValueError(
                f"view [{start}, {start + length}) outside data of size {total}"
            )
        self._data = data
        self._start = start
        self._length = length

    @property
    def memory(self) -> memoryview:
        """A read-only memoryview on the bytes of this view."""
        view = memoryview(self._data)[self._start:self._start + self._length]
        return view.toreadonly()

    def __len__(self) -> int:
        return self._length

    def __bytes__(self) -> bytes:
        return bytes(self._data[self._start:self._start + self._length])

    def __repr__(self) -> str:
        return f"DataView({bytes(self)!r})"

    def empty(self) -> bool:
        """Return True if the view holds no bytes."""
        return self._length == 0

    def compare(self, other: DataView | _BytesLike) -> int:
        """Return 0 if equal, -1 if this view sorts first, 1 otherwise."""
        mine = bytes(self)
        theirs = _as_bytes(other)
        if theirs is None:
            raise TypeError(f"cannot compare DataView with {type(other).__name__}")
        return (mine > theirs) - (mine < theirs)

    def swap(self, other: DataView) -> None:
        """Exchange the contents of this view with ``other``."""
        self._data, other._data = other._data, self._data
        self._start, other._start = other._start, self._start
        self._length, other._length = other._length, self._length

    def __eq__(self, other: object) -> bool:
        theirs = _as_bytes(other)
        if theirs is None:
            return NotImplemented
        return len(self) == len(theirs) and bytes(self) == theirs

    def __lt__(self, other: object) -> bool:
        if _as_bytes(other) is None:
            return NotImplemented
        return self.compare(other) < 0  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if _as_bytes(other) is None:
            return NotImplemented
        return self.compare(other) <= 0  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if _as_bytes(other) is None:
            return NotImplemented
        return self.compare(other) > 0  # type: ignore[arg-type]

    def __ge__(self, other: object) -> bool:
        if _as_bytes(other) is None:
            return NotImplemented
        return self.compare(other) >= 0  # type: ignore[arg-type]

    def __hash__(self) -> int:
        return hash(bytes(self))