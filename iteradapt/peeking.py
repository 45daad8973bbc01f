"""Iterators that can hand out their next item only if it is accepted."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Callable, Iterable

_EMPTY = object()


class PeekingNext(Iterator):
    """An iterator with a conditional ``next``.

    ``peeking_next(accept)`` returns the next item if ``accept(item)`` is true
    and otherwise leaves it in place; it raises :class:`StopIteration` when
    the item is rejected or the iterator is exhausted. The default
    implementation needs a ``peek(default)`` method.
    """

    def peeking_next(self, accept: Callable[[Any], bool]) -> Any:
        """Return the next item if ``accept`` takes it, else raise StopIteration."""
        item = self.peek(_EMPTY)
        if item is not _EMPTY and not accept(item):
            raise StopIteration
        return next(self)


class Peekable(PeekingNext):
    """An iterator that can look at its next item without consuming it."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter = iter(iterable)
        self._peeked: Any = _EMPTY

    def __iter__(self) -> "Peekable":
        return self

    def __next__(self) -> Any:
        if self._peeked is not _EMPTY:
            item, self._peeked = self._peeked, _EMPTY
            return item
        return next(self._iter)

    def peek(self, default: Any = None) -> Any:
        """Return the next item without advancing, or ``default`` at the end."""
        if self._peeked is _EMPTY:
            self._peeked = next(self._iter, _EMPTY)
        return default if self._peeked is _EMPTY else self._peeked

    def peeking_next(self, accept: Callable[[Any], bool]) -> Any:
        """Return the next item if ``accept`` takes it, else raise StopIteration."""
        if self.peek(_EMPTY) is not _EMPTY and not accept(self._peeked):
            raise StopIteration
        return next(self)


class PeekingTakeWhile:
    """Take items while a predicate holds, leaving the first rejected one behind."""

    def __init__(self, iterator: Any, predicate: Callable[[Any], bool]) -> None:
        self._iter = iterator
        self._predicate = predicate

    def __iter__(self) -> "PeekingTakeWhile":
        return self

    def __next__(self) -> Any:
        return self._iter.peeking_next(self._predicate)


def peeking_take_while(iterator: Any, predicate: Callable[[Any], bool]) -> PeekingTakeWhile:
    """Yield items of ``iterator`` while ``predicate`` holds, without losing the first failure.

    ``iterator`` must provide ``peeking_next``.
    """
    if not callable(getattr(iterator, "peeking_next", None)):
        raise TypeError(f"{type(iterator).__name__} object does not support peeking_next")
    return PeekingTakeWhile(iterator, predicate)