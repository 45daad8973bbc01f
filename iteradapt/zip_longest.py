"""Zip two iterables until both are exhausted."""

from __future__ import annotations

from typing import Any, Iterable

from iteradapt.merge_join import Both, EitherOrBoth, Left, Right
from iteradapt.size_hint import SizeHint, max_hint, of

_EMPTY = object()


class _Fused:
    __slots__ = ("_iter", "_done")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter = iter(iterable)
        self._done = False

    def next(self) -> Any:
        if self._done:
            return _EMPTY
        try:
            return next(self._iter)
        except StopIteration:
            self._done = True
            return _EMPTY

    def size_hint(self) -> SizeHint:
        return (0, 0) if self._done else of(self._iter)


class ZipLongest:
    """Yield ``Both`` while both sides have items, then ``Left`` or ``Right``."""

    def __init__(self, a: Iterable[Any], b: Iterable[Any]) -> None:
        self._a = _Fused(a)
        self._b = _Fused(b)

    def __iter__(self) -> "ZipLongest":
        return self

    def __next__(self) -> EitherOrBoth:
        a, b = self._a.next(), self._b.next()
        if a is _EMPTY and b is _EMPTY:
            raise StopIteration
        if b is _EMPTY:
            return Left(a)
        if a is _EMPTY:
            return Right(b)
        return Both(a, b)

    def size_hint(self) -> SizeHint:
        return max_hint(self._a.size_hint(), self._b.size_hint())


def zip_longest(a: Iterable[Any], b: Iterable[Any]) -> ZipLongest:
    """Iterate ``a`` and ``b`` together until both are exhausted."""
    return ZipLongest(a, b)