"""Lazily generate every subset of an iterable's items."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from iteradapt.size_hint import USIZE_MAX, SizeHint, add_scalar, of, pow_scalar_base, sub_scalar

_MISSING = object()


class _Combinations:
    """``k``-combinations over a pool filled from the source only as needed."""

    def __init__(self, iterable: Iterable[Any], k: int) -> None:
        self._source = iter(iterable)
        self._source_done = False
        self.pool: List[Any] = []
        self.indices: List[int] = list(range(k))
        self.first = True
        self._prefill(k)

    def _fetch(self) -> bool:
        if self._source_done:
            return False
        item = next(self._source, _MISSING)
        if item is _MISSING:
            self._source_done = True
            return False
        self.pool.append(item)
        return True

    def _prefill(self, k: int) -> None:
        while len(self.pool) < k and self._fetch():
            pass

    @property
    def k(self) -> int:
        return len(self.indices)

    @property
    def n(self) -> int:
        return len(self.pool)

    def source_hint(self) -> SizeHint:
        return (0, 0) if self._source_done else of(self._source)

    def reset(self, k: int) -> None:
        self.first = True
        self.indices = list(range(k))
        self._prefill(k)

    def next(self) -> Optional[List[Any]]:
        indices = self.indices
        if self.first:
            if self.k > self.n:
                return None
            self.first = False
        elif not indices:
            return None
        else:
            i = len(indices) - 1
            if indices[i] == len(self.pool) - 1:
                self._fetch()
            while indices[i] == i + len(self.pool) - len(indices):
                if i == 0:
                    return None
                i -= 1
            indices[i] += 1
            for j in range(i + 1, len(indices)):
                indices[j] = indices[j - 1] + 1
        return [self.pool[x] for x in indices]


class Powerset:
    """Iterator over all subsets of an iterable, as lists, smallest first."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._combs = _Combinations(iterable, 0)
        self._pos = 0

    def __iter__(self) -> "Powerset":
        return self

    def __next__(self) -> List[Any]:
        combs = self._combs
        subset = combs.next()
        if subset is None and (combs.k < combs.n or combs.k == 0):
            combs.reset(combs.k + 1)
            subset = combs.next()
        if subset is None:
            raise StopIteration
        self._pos = min(self._pos + 1, USIZE_MAX)
        return subset

    def size_hint(self) -> SizeHint:
        src_total = add_scalar(self._combs.source_hint(), self._combs.n)
        self_total = pow_scalar_base(2, src_total)
        if self._pos < USIZE_MAX:
            return sub_scalar(self_total, self._pos)
        return 0, self_total[1]


def powerset(iterable: Iterable[Any]) -> Powerset:
    """Iterate over every subset of the items of ``iterable``."""
    return Powerset(iterable)