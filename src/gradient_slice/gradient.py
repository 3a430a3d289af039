"""Lazy enumeration of every contiguous window of a sequence, width by width."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Optional

import numpy as np

from .views import WindowView

logger = logging.getLogger(__name__)


def _own(sequence: Iterable[Any]) -> Any:
    if isinstance(sequence, np.ndarray):
        owned = np.array(sequence, copy=True)
        owned.setflags(write=False)
        return owned
    return tuple(sequence)


class WindowGradient:
    """Cursor producing all contiguous windows of an owned input.

    Windows come out one pass per width: every offset of width 1 in
    increasing order, then every offset of width 2, and so on up to the
    input length or the configured ``max_width``. An input of length ``N``
    yields ``N * (N + 1) / 2`` windows.

    Each window is a read-only view into the owned buffer rather than a
    copy. Generic input is held as a tuple and yields :class:`WindowView`
    objects; ``numpy.ndarray`` input is held as a non-writeable array and
    yields array slices. Because the buffer never changes, a view remains
    valid after later advances; copy it out (``list(view)``, ``view.join()``,
    ``bytes(view)``, ``arr.copy()``) only when an independent value is needed.

    Equality compares the input, the cursor and the cap. The hash covers only
    the input and the cap, so a gradient keeps its hash while it advances.
    """

    def __init__(self, sequence: Iterable[Any]) -> None:
        self._input = _own(sequence)
        self._start = 0
        self._end = 0
        self._width = 1
        self._wide = True
        self._max_width: Optional[int] = None
        self._capped = False
        self._drained = False

    def with_max_width(self, width: int) -> "WindowGradient":
        """Return a copy of this gradient that stops after passes of ``width``."""

        g = self.clone()
        g._max_width = int(width)
        return g

    def clone(self) -> "WindowGradient":
        g = WindowGradient.__new__(WindowGradient)
        g._input = self._input
        g._start = self._start
        g._end = self._end
        g._width = self._width
        g._wide = self._wide
        g._max_width = self._max_width
        g._capped = self._capped
        g._drained = self._drained
        return g

    __copy__ = clone

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._capped:
            raise StopIteration
        if self.finished():
            if not self._drained:
                self._drained = True
                logger.debug("gradient exhausted at width=%d length=%d", self._width, len(self._input))
            raise StopIteration

        end = self._end + 1
        width = self._width
        wide = self._wide
        if not wide:
            wide = True
            width += 1
            end = width
        start = end - width
        if end == len(self._input):
            wide = False

        if self._max_width is not None and width > self._max_width:
            self._capped = True
            logger.debug("gradient capped at max_width=%d", self._max_width)
            raise StopIteration

        self._start, self._end, self._width, self._wide = start, end, width, wide
        if not wide:
            logger.debug("completed pass width=%d length=%d", width, len(self._input))
        return self.window()

    def finished(self) -> bool:
        """True once no further windows can be produced."""

        length = len(self._input)
        if length == 0:
            return True
        return self._end == length and self._width == length

    def start(self) -> int:
        return self._start

    def end(self) -> int:
        return self._end

    def width(self) -> int:
        return self._width

    def max_width(self) -> Optional[int]:
        return self._max_width

    def len(self) -> int:
        return len(self._input)

    def __len__(self) -> int:
        return len(self._input)

    def range(self) -> range:
        return range(self._start, self._end)

    def window(self) -> Any:
        """Return a view of the current window ``input[start:end]``."""

        if isinstance(self._input, np.ndarray):
            return self._input[self._start:self._end]
        return WindowView(self._input, self._start, self._end)

    def input(self) -> Any:
        """Return a copy of the full owned input."""

        if isinstance(self._input, np.ndarray):
            return self._input.copy()
        return list(self._input)

    def _state(self) -> tuple:
        return (self._start, self._end, self._width, self._wide, self._max_width, self._capped)

    def _input_key(self) -> Any:
        if isinstance(self._input, np.ndarray):
            return (self._input.dtype.str, self._input.shape, self._input.tobytes())
        return self._input

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WindowGradient):
            return NotImplemented
        if self._state() != other._state():
            return False
        if isinstance(self._input, np.ndarray) or isinstance(other._input, np.ndarray):
            return self._input_key() == other._input_key()
        return self._input == other._input

    def __hash__(self) -> int:
        return hash((self._input_key(), self._max_width))

    def __repr__(self) -> str:
        return (
            f"WindowGradient(len={len(self._input)}, start={self._start}, end={self._end}, "
            f"width={self._width}, max_width={self._max_width})"
        )


def gradient(sequence: Iterable[Any], max_width: Optional[int] = None) -> WindowGradient:
    """Build a :class:`WindowGradient`, optionally capped at ``max_width``."""

    g = WindowGradient(sequence)
    if max_width is not None:
        g = g.with_max_width(max_width)
    return g


def expected_window_count(length: int, max_width: Optional[int] = None) -> int:
    """Number of windows a gradient over ``length`` items produces."""

    if length <= 0:
        return 0
    widest = length if max_width is None else min(int(max_width), length)
    if widest < 1:
        return 0
    return widest * (2 * length - widest + 1) // 2


def window_bounds(length: int, max_width: Optional[int] = None) -> np.ndarray:
    """Return the ``[start, end)`` pairs of every window in gradient order.

    The result is a ``(k, 2)`` integer array where ``k`` equals
    :func:`expected_window_count`.
    """

    widest = length if max_width is None else min(int(max_width), length)
    if length <= 0 or widest < 1:
        return np.empty((0, 2), dtype=np.intp)
    passes = []
    for width in range(1, widest + 1):
        starts = np.arange(length - width + 1, dtype=np.intp)
        passes.append(np.column_stack((starts, starts + width)))
    return np.concatenate(passes)
