"""Group items into fixed-size tuples: chunks, sliding windows and circular windows."""

from __future__ import annotations

from collections import deque
from itertools import cycle, islice
from typing import Any, Deque, Iterable, List, Optional, Tuple

_EMPTY = object()


def _check_size(n: int) -> None:
    if n < 1:
        raise ValueError("tuple size must be at least 1")


class TupleBuffer:
    """The items left over when the source ran out before filling a tuple."""

    def __init__(self, items: Iterable[Any]) -> None:
        self._items: Deque[Any] = deque(items)

    def __iter__(self) -> "TupleBuffer":
        return self

    def __next__(self) -> Any:
        if not self._items:
            raise StopIteration
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class Tuples:
    """Yield consecutive, non-overlapping tuples of ``n`` items.

    Items that do not fill a last tuple are kept and can be had from
    :meth:`into_buffer` once the iteration has ended.
    """

    def __init__(self, iterable: Iterable[Any], n: int) -> None:
        _check_size(n)
        self._iter = iter(iterable)
        self._n = n
        self._done = False
        self._leftover: List[Any] = []

    def __iter__(self) -> "Tuples":
        return self

    def __next__(self) -> Tuple[Any, ...]:
        chunk = [] if self._done else list(islice(self._iter, self._n))
        if len(chunk) == self._n:
            return tuple(chunk)
        self._done = True
        self._leftover = chunk
        raise StopIteration

    def into_buffer(self) -> TupleBuffer:
        """Return the items that were too few to make up a tuple."""
        return TupleBuffer(self._leftover)


class TupleWindows:
    """Yield every contiguous window of ``n`` items as a tuple."""

    def __init__(self, iterable: Iterable[Any], n: int) -> None:
        _check_size(n)
        self._iter = iter(iterable)
        self._n = n
        self._last: Optional[Tuple[Any, ...]] = None
        if n != 1:
            # Prime with a duplicated first item so that every step is a shift.
            first = next(self._iter, _EMPTY)
            if first is not _EMPTY:
                rest = list(islice(self._iter, n - 2))
                if len(rest) == n - 2:
                    self._last = (first, first, *rest)

    def __iter__(self) -> "TupleWindows":
        return self

    def __next__(self) -> Tuple[Any, ...]:
        if self._n == 1:
            return (next(self._iter),)
        if self._last is None:
            raise StopIteration
        item = next(self._iter)
        self._last = self._last[1:] + (item,)
        return self._last


class CircularTupleWindows:
    """Yield one window of ``n`` items per source item, wrapping around the end."""

    def __init__(self, iterable: Iterable[Any], n: int) -> None:
        _check_size(n)
        items = list(iterable)
        self._windows = islice(TupleWindows(cycle(items), n), len(items))

    def __iter__(self) -> "CircularTupleWindows":
        return self

    def __next__(self) -> Tuple[Any, ...]:
        return next(self._windows)


def tuples(iterable: Iterable[Any], n: int) -> Tuples:
    """Group the items of ``iterable`` into tuples of ``n``."""
    return Tuples(iterable, n)


def tuple_windows(iterable: Iterable[Any], n: int) -> TupleWindows:
    """Iterate over all contiguous windows of ``n`` items."""
    return TupleWindows(iterable, n)


def circular_tuple_windows(iterable: Iterable[Any], n: int) -> CircularTupleWindows:
    """Iterate over windows of ``n`` items starting at each item, wrapping around."""
    return CircularTupleWindows(iterable, n)