"""Merge-join two sorted iterables into Left, Right and Both items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar, Union

from iteradapt.size_hint import SizeHint, add_scalar, of

L = TypeVar("L")
R = TypeVar("R")

_EMPTY = object()


@dataclass(frozen=True)
class Left(Generic[L]):
    """A value present only on the left side."""

    value: L


@dataclass(frozen=True)
class Right(Generic[R]):
    """A value present only on the right side."""

    value: R


@dataclass(frozen=True)
class Both(Generic[L, R]):
    """A pair of values, one from each side."""

    left: L
    right: R


EitherOrBoth = Union[Left, Right, Both]


class _PutBack:
    """A fused iterator with a single put-back slot."""

    __slots__ = ("_iter", "_top", "_done")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter = iter(iterable)
        self._top: Any = _EMPTY
        self._done = False

    def next(self) -> Any:
        if self._top is not _EMPTY:
            value, self._top = self._top, _EMPTY
            return value
        if self._done:
            return _EMPTY
        try:
            return next(self._iter)
        except StopIteration:
            self._done = True
            return _EMPTY

    def put_back(self, value: Any) -> None:
        self._top = value

    def size_hint(self) -> SizeHint:
        sh = (0, 0) if self._done else of(self._iter)
        return add_scalar(sh, 0 if self._top is _EMPTY else 1)

    def drain(self) -> Iterator[Any]:
        while (value := self.next()) is not _EMPTY:
            yield value


class MergeJoinBy:
    """Iterator merging two ascending iterables using a three-way comparison.

    ``cmp_fn(left, right)`` returns a negative number, zero or a positive
    number when ``left`` orders before, equal to or after ``right``.
    """

    def __init__(self, left: Iterable[Any], right: Iterable[Any], cmp_fn: Callable[[Any, Any], int]) -> None:
        self._left = _PutBack(left)
        self._right = _PutBack(right)
        self._cmp = cmp_fn

    def __iter__(self) -> "MergeJoinBy":
        return self

    def _join(self, left: Any, right: Any) -> EitherOrBoth:
        order = self._cmp(left, right)
        if order == 0:
            return Both(left, right)
        if order < 0:
            self._right.put_back(right)
            return Left(left)
        self._left.put_back(left)
        return Right(right)

    def __next__(self) -> EitherOrBoth:
        left, right = self._left.next(), self._right.next()
        if left is _EMPTY and right is _EMPTY:
            raise StopIteration
        if right is _EMPTY:
            return Left(left)
        if left is _EMPTY:
            return Right(right)
        return self._join(left, right)

    def size_hint(self) -> SizeHint:
        a_lower, a_upper = self._left.size_hint()
        b_lower, b_upper = self._right.size_hint()
        upper = None
        if a_upper is not None and b_upper is not None:
            upper = add_scalar((0, a_upper), b_upper)[1]
        return max(a_lower, b_lower), upper

    def count(self) -> int:
        """Consume the iterator and return how many items it would yield."""
        total = 0
        while True:
            left, right = self._left.next(), self._right.next()
            if left is _EMPTY and right is _EMPTY:
                return total
            if right is _EMPTY:
                return total + 1 + sum(1 for _ in self._left.drain())
            if left is _EMPTY:
                return total + 1 + sum(1 for _ in self._right.drain())
            total += 1
            self._join(left, right)

    def last(self) -> Optional[EitherOrBoth]:
        """Consume the iterator and return its last item, or ``None``."""
        previous: Optional[EitherOrBoth] = None
        while True:
            left, right = self._left.next(), self._right.next()
            if left is _EMPTY and right is _EMPTY:
                return previous
            if right is _EMPTY:
                for left in self._left.drain():
                    pass
                return Left(left)
            if left is _EMPTY:
                for right in self._right.drain():
                    pass
                return Right(right)
            previous = self._join(left, right)

    def nth(self, n: int) -> Optional[EitherOrBoth]:
        """Skip ``n`` items and return the next one, or ``None`` past the end."""
        while True:
            if n == 0:
                return next(self, None)
            n -= 1
            left, right = self._left.next(), self._right.next()
            if left is _EMPTY and right is _EMPTY:
                return None
            if right is _EMPTY:
                rest = self._left.drain()
                value = next((v for i, v in enumerate(rest) if i == n), _EMPTY)
                return None if value is _EMPTY else Left(value)
            if left is _EMPTY:
                rest = self._right.drain()
                value = next((v for i, v in enumerate(rest) if i == n), _EMPTY)
                return None if value is _EMPTY else Right(value)
            self._join(left, right)


def merge_join_by(left: Iterable[Any], right: Iterable[Any], cmp_fn: Callable[[Any, Any], int]) -> MergeJoinBy:
    """Merge-join two ascending iterables with the comparison ``cmp_fn``."""
    return MergeJoinBy(left, right, cmp_fn)