"""Zip any number of iterables into tuples, and split tuples back apart."""

from __future__ import annotations

from functools import reduce
from typing import Any, Iterable, List, Tuple

from iteradapt.size_hint import USIZE_MAX, SizeHint, min_hint, of


class MultiZip:
    """Iterate several iterables in lock step, yielding tuples.

    Iterators are advanced in order and iteration stops at the first one that
    is exhausted, so earlier iterators may have given one more item.
    """

    def __init__(self, iterables: Iterable[Iterable[Any]]) -> None:
        self._iters = tuple(iter(it) for it in iterables)

    def __iter__(self) -> "MultiZip":
        return self

    def __next__(self) -> Tuple[Any, ...]:
        if not self._iters:
            raise StopIteration
        items = []
        for it in self._iters:
            items.append(next(it))
        return tuple(items)

    def size_hint(self) -> SizeHint:
        if not self._iters:
            return 0, 0
        return reduce(lambda acc, it: min_hint(of(it), acc), self._iters, (USIZE_MAX, None))


def multizip(iterables: Iterable[Iterable[Any]]) -> MultiZip:
    """Zip the iterables in ``iterables`` into tuples."""
    return MultiZip(iterables)


def multiunzip(iterable: Iterable[Iterable[Any]], n: int) -> Tuple[List[Any], ...]:
    """Split an iterable of ``n``-tuples into ``n`` lists, one per column."""
    columns: Tuple[List[Any], ...] = tuple([] for _ in range(n))
    for row in iterable:
        row = tuple(row)
        if len(row) != n:
            raise ValueError(f"expected a tuple of {n} items, got {len(row)}")
        for column, value in zip(columns, row):
            column.append(value)
    return columns