"""Pad an iterable to a minimum length using a filler function."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from iteradapt.size_hint import SizeHint, max_hint, of

_EMPTY = object()


class PadUsing:
    """Yield the items of an iterable, then ``filler(position)`` up to ``minimum`` items."""

    def __init__(self, iterable: Iterable[Any], minimum: int, filler: Callable[[int], Any]) -> None:
        if minimum < 0:
            raise ValueError("minimum must not be negative")
        self._iter = iter(iterable)
        self._min = minimum
        self._pos = 0
        self._filler = filler

    def __iter__(self) -> "PadUsing":
        return self

    def __next__(self) -> Any:
        item = next(self._iter, _EMPTY)
        if item is _EMPTY:
            if self._pos >= self._min:
                raise StopIteration
            item = self._filler(self._pos)
        self._pos += 1
        return item

    def size_hint(self) -> SizeHint:
        tail = max(self._min - self._pos, 0)
        return max_hint(of(self._iter), (tail, tail))


def pad_using(iterable: Iterable[Any], minimum: int, filler: Callable[[int], Any]) -> PadUsing:
    """Pad ``iterable`` to at least ``minimum`` items with ``filler(index)``."""
    return PadUsing(iterable, minimum, filler)