"""Zip two iterables that must have the same length."""

from __future__ import annotations

from typing import Any, Iterable, Tuple

from iteradapt.size_hint import SizeHint, min_hint, of

_EMPTY = object()


class LengthMismatchError(ValueError):
    """Raised when one iterable ends before the other."""


class ZipEq:
    """Iterate two iterables in lock step, raising if their lengths differ."""

    def __init__(self, i: Iterable[Any], j: Iterable[Any]) -> None:
        self._a = iter(i)
        self._b = iter(j)

    def __iter__(self) -> "ZipEq":
        return self

    def __next__(self) -> Tuple[Any, Any]:
        a = next(self._a, _EMPTY)
        b = next(self._b, _EMPTY)
        if a is _EMPTY and b is _EMPTY:
            raise StopIteration
        if a is _EMPTY or b is _EMPTY:
            raise LengthMismatchError("zip_eq() reached end of one iterator before the other")
        return a, b

    def size_hint(self) -> SizeHint:
        return min_hint(of(self._a), of(self._b))


def zip_eq(i: Iterable[Any], j: Iterable[Any]) -> ZipEq:
    """Iterate ``i`` and ``j`` in lock step; raise if they differ in length."""
    return ZipEq(i, j)