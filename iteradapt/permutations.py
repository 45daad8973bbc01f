"""Lazily generate the ``k``-permutations of an iterable's items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Union

from iteradapt.size_hint import USIZE_MAX, SizeHint

_MISSING = object()


@dataclass
class _UnknownStart:
    k: int


@dataclass
class _UnknownOngoing:
    k: int
    min_n: int


@dataclass
class _CompleteStart:
    n: int
    k: int


@dataclass
class _CompleteOngoing:
    indices: List[int]
    cycles: List[int]


class _Exhausted:
    pass


_EXHAUSTED = _Exhausted()

_Complete = Union[_CompleteStart, _CompleteOngoing, _Exhausted]
_State = Union[_UnknownStart, _UnknownOngoing, _CompleteStart, _CompleteOngoing, _Exhausted]


def _advance_complete(state: _Complete) -> _Complete:
    if isinstance(state, _Exhausted):
        return state
    if isinstance(state, _CompleteStart):
        n, k = state.n, state.k
        return _CompleteOngoing(list(range(n)), list(range(n - 1, n - k - 1, -1)))
    indices, cycles = state.indices, state.cycles
    n = len(indices)
    for i in reversed(range(len(cycles))):
        if cycles[i] == 0:
            cycles[i] = n - i - 1
            indices.append(indices.pop(i))
        else:
            j = n - cycles[i]
            indices[i], indices[j] = indices[j], indices[i]
            cycles[i] -= 1
            return state
    return _EXHAUSTED


def _remaining(state: _Complete) -> int:
    """Number of permutations still to come from a complete-length state."""
    if isinstance(state, _Exhausted):
        return 0
    if isinstance(state, _CompleteStart):
        n, k = state.n, state.k
        if n < k:
            return 0
        count = 1
        for factor in range(n - k + 1, n + 1):
            count *= factor
        return count
    count = 0
    radix_base = len(state.indices)
    for i, c in enumerate(state.cycles):
        count = count * (radix_base - i) + c
    return count


class Permutations:
    """Iterator over all ``k``-permutations of an iterable's items, as lists.

    Items are pulled from the source only as they are needed; the length of
    the source is discovered while iterating.
    """

    def __init__(self, iterable: Iterable[Any], k: int) -> None:
        if k < 0:
            raise ValueError("k must not be negative")
        self._source = iter(iterable)
        self._source_done = False
        self._vals: List[Any] = []
        self._state: _State
        if k == 0:
            # A single empty permutation, whatever the source holds.
            self._state = _CompleteStart(0, 0)
            return
        while len(self._vals) < k:
            if not self._fetch():
                self._state = _EXHAUSTED
                return
        self._state = _UnknownStart(k)

    def _fetch(self) -> bool:
        if self._source_done:
            return False
        item = next(self._source, _MISSING)
        if item is _MISSING:
            self._source_done = True
            return False
        self._vals.append(item)
        return True

    def _source_len(self) -> int:
        rest = 0 if self._source_done else sum(1 for _ in self._source)
        self._source_done = True
        return len(self._vals) + rest

    def _advance(self) -> None:
        state = self._state
        if isinstance(state, _UnknownStart):
            self._state = _UnknownOngoing(state.k, state.k)
        elif isinstance(state, _UnknownOngoing):
            if self._fetch():
                self._state = _UnknownOngoing(state.k, state.min_n + 1)
            else:
                n, k = state.min_n, state.k
                complete: _Complete = _CompleteStart(n, k)
                for _ in range(n - k + 2):
                    complete = _advance_complete(complete)
                self._state = complete
        else:
            self._state = _advance_complete(state)

    def __iter__(self) -> "Permutations":
        return self

    def __next__(self) -> List[Any]:
        self._advance()
        state = self._state
        if isinstance(state, _UnknownOngoing):
            picks = [*range(state.k - 1), state.min_n - 1]
            return [self._vals[i] for i in picks]
        if isinstance(state, _CompleteOngoing):
            return [self._vals[i] for i in state.indices[: len(state.cycles)]]
        raise StopIteration

    def count(self) -> int:
        """Consume the iterator and return how many permutations were left.

        Raises :class:`OverflowError` if the count exceeds a machine word.
        """
        state = self._state
        self._state = _EXHAUSTED
        if isinstance(state, _UnknownStart):
            total = _remaining(_CompleteStart(self._source_len(), state.k))
        elif isinstance(state, _UnknownOngoing):
            already = state.min_n - state.k + 1
            total = _remaining(_CompleteStart(self._source_len(), state.k)) - already
            if total + already > USIZE_MAX:
                raise OverflowError("iterator count greater than the maximum size")
        else:
            total = _remaining(state)
        if total > USIZE_MAX:
            raise OverflowError("iterator count greater than the maximum size")
        return total

    def size_hint(self) -> SizeHint:
        state = self._state
        if isinstance(state, (_UnknownStart, _UnknownOngoing)):
            return 0, None
        remaining = _remaining(state)
        if remaining > USIZE_MAX:
            return USIZE_MAX, None
        return remaining, remaining


def permutations(iterable: Iterable[Any], k: int) -> Permutations:
    """Iterate over all ``k``-permutations of the items of ``iterable``."""
    return Permutations(iterable, k)


def _peek_state_name(perms: Permutations) -> Optional[str]:
    return type(perms._state).__name__