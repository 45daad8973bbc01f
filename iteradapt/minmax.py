"""Find the minimum and maximum of an iterable in a single pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar, Union

T = TypeVar("T")

_EMPTY = object()


@dataclass(frozen=True)
class NoElements:
    """The iterable was empty."""

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def into_option(self) -> Optional[Tuple[Any, Any]]:
        """There is no ``(min, max)`` pair; return ``None``."""
        pair = tuple(self)
        return pair if pair else None


@dataclass(frozen=True)
class OneElement(Generic[T]):
    """The iterable held exactly one item, which is both minimum and maximum."""

    value: T

    def into_option(self) -> Tuple[T, T]:
        """Return ``(value, value)``."""
        return self.value, self.value


@dataclass(frozen=True)
class MinMax(Generic[T]):
    """The iterable held several items; ``min`` does not order after ``max``."""

    min: T
    max: T

    def into_option(self) -> Tuple[T, T]:
        """Return ``(min, max)``."""
        return self.min, self.max


MinMaxResult = Union[NoElements, OneElement, MinMax]

_LessThan = Callable[[Any, Any, Any, Any], bool]


def _minmax_impl(iterable: Iterable[Any], key_for: Callable[[Any], Any], lt: _LessThan) -> MinMaxResult:
    """Look at items in pairs so that two items cost three comparisons.

    The minimum is the first of the smallest items, the maximum the last of
    the largest.
    """
    it = iter(iterable)
    x = next(it, _EMPTY)
    if x is _EMPTY:
        return NoElements()
    y = next(it, _EMPTY)
    if y is _EMPTY:
        return OneElement(x)

    xk, yk = key_for(x), key_for(y)
    if lt(y, x, yk, xk):
        lo, lo_key, hi, hi_key = y, yk, x, xk
    else:
        lo, lo_key, hi, hi_key = x, xk, y, yk

    for first in it:
        second = next(it, _EMPTY)
        first_key = key_for(first)
        if second is _EMPTY:
            if lt(first, lo, first_key, lo_key):
                lo = first
            elif not lt(first, hi, first_key, hi_key):
                hi = first
            break
        second_key = key_for(second)
        if not lt(second, first, second_key, first_key):
            small, small_key, big, big_key = first, first_key, second, second_key
        else:
            small, small_key, big, big_key = second, second_key, first, first_key
        if lt(small, lo, small_key, lo_key):
            lo, lo_key = small, small_key
        if not lt(big, hi, big_key, hi_key):
            hi, hi_key = big, big_key

    return MinMax(lo, hi)


def minmax(iterable: Iterable[T]) -> MinMaxResult:
    """Minimum and maximum of ``iterable`` using ``<`` on the items."""
    return _minmax_impl(iterable, lambda _: None, lambda a, b, _ak, _bk: a < b)


def minmax_by_key(iterable: Iterable[T], key: Callable[[T], Any]) -> MinMaxResult:
    """Minimum and maximum of ``iterable`` comparing ``key(item)``."""
    return _minmax_impl(iterable, key, lambda _a, _b, ak, bk: ak < bk)


def minmax_by(iterable: Iterable[T], compare: Callable[[T, T], int]) -> MinMaxResult:
    """Minimum and maximum using a three-way ``compare(a, b)`` returning <0, 0 or >0."""
    return _minmax_impl(iterable, lambda _: None, lambda a, b, _ak, _bk: compare(a, b) < 0)


def _as_option(result: MinMaxResult) -> Optional[Tuple[Any, Any]]:
    return result.into_option()