"""Read-only window views over an owned gradient buffer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Iterator, List, Tuple


class WindowView(Sequence):
    """Zero-copy view of ``data[start:end]``.

    The backing tuple is immutable, so a view stays valid for as long as it
    is referenced, regardless of how far the producing gradient has advanced.
    """

    __slots__ = ("_data", "_start", "_end")

    def __init__(self, data: Tuple[Any, ...], start: int, end: int) -> None:
        self._data = data
        self._start = start
        self._end = end

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def bounds(self) -> Tuple[int, int]:
        return self._start, self._end

    def __len__(self) -> int:
        return self._end - self._start

    def __getitem__(self, index):
        if isinstance(index, slice):
            positions = range(self._start, self._end)[index]
            if positions.step == 1:
                return WindowView(self._data, positions.start, max(positions.start, positions.stop))
            return tuple(self._data[i] for i in positions)
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("window index out of range")
        return self._data[self._start + index]

    def __iter__(self) -> Iterator[Any]:
        for i in range(self._start, self._end):
            yield self._data[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WindowView):
            return self.to_tuple() == other.to_tuple()
        if isinstance(other, (list, tuple)):
            return self.to_tuple() == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __bytes__(self) -> bytes:
        return bytes(self.to_tuple())

    def __repr__(self) -> str:
        return f"WindowView({list(self)!r}, start={self._start}, end={self._end})"

    def to_tuple(self) -> Tuple[Any, ...]:
        return self._data[self._start:self._end]

    def to_list(self) -> List[Any]:
        return list(self.to_tuple())

    def join(self, separator: str = "") -> str:
        """Concatenate a window of strings, e.g. characters taken from text."""

        return separator.join(self.to_tuple())
