"""Filter out items whose key, or which themselves, were seen before."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Set

from iteradapt.size_hint import SizeHint, of


class UniqueBy:
    """Yield items whose ``key(item)`` has not been seen, in order."""

    def __init__(self, iterable: Iterable[Any], key: Callable[[Any], Hashable]) -> None:
        self._iter = iter(iterable)
        self._key = key
        self._seen: Set[Hashable] = set()

    def __iter__(self) -> "UniqueBy":
        return self

    def __next__(self) -> Any:
        for item in self._iter:
            k = self._key(item)
            if k not in self._seen:
                self._seen.add(k)
                return item
        raise StopIteration

    def size_hint(self) -> SizeHint:
        low, hi = of(self._iter)
        return int(low > 0 and not self._seen), hi

    def count(self) -> int:
        """Consume the iterator and return how many items it would still yield."""
        before = len(self._seen)
        self._seen.update(map(self._key, self._iter))
        return len(self._seen) - before


class Unique:
    """Yield items not seen before, in order; items must be hashable."""

    def __init__(self, iterable: Iterable[Hashable]) -> None:
        self._inner = UniqueBy(iterable, lambda item: item)

    def __iter__(self) -> "Unique":
        return self

    def __next__(self) -> Any:
        return next(self._inner)

    def size_hint(self) -> SizeHint:
        return self._inner.size_hint()

    def count(self) -> int:
        """Consume the iterator and return how many items it would still yield."""
        return self._inner.count()


def unique_by(iterable: Iterable[Any], key: Callable[[Any], Hashable]) -> UniqueBy:
    """Drop items whose ``key`` was already produced by an earlier item."""
    return UniqueBy(iterable, key)


def unique(iterable: Iterable[Hashable]) -> Unique:
    """Drop items equal to an earlier item."""
    return Unique(iterable)