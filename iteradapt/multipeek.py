"""An iterator that can peek several items ahead with a movable cursor."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterable

from iteradapt.peeking import PeekingNext
from iteradapt.size_hint import SizeHint, add_scalar, of

_EMPTY = object()


class MultiPeek(PeekingNext):
    """Peek repeatedly to look further ahead; ``next`` resets the peek cursor."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter = iter(iterable)
        self._buf: Deque[Any] = deque()
        self._index = 0

    def __iter__(self) -> "MultiPeek":
        return self

    def __next__(self) -> Any:
        self._index = 0
        if self._buf:
            return self._buf.popleft()
        return next(self._iter)

    def peek(self, default: Any = None) -> Any:
        """Return the item under the cursor and move the cursor one step on.

        At the end, return ``default`` and leave the cursor where it is.
        """
        if self._index < len(self._buf):
            item = self._buf[self._index]
        else:
            item = next(self._iter, _EMPTY)
            if item is _EMPTY:
                return default
            self._buf.append(item)
        self._index += 1
        return item

    def reset_peek(self) -> None:
        """Move the peek cursor back to the next item."""
        self._index = 0

    def peeking_next(self, accept: Callable[[Any], bool]) -> Any:
        """Return the next item if ``accept`` takes it, else raise StopIteration."""
        if not self._buf:
            item = self.peek(_EMPTY)
            if item is not _EMPTY and not accept(item):
                raise StopIteration
        elif not accept(self._buf[0]):
            raise StopIteration
        return next(self)

    def size_hint(self) -> SizeHint:
        return add_scalar(of(self._iter), len(self._buf))


def multipeek(iterable: Iterable[Any]) -> MultiPeek:
    """Wrap ``iterable`` so that several items can be peeked ahead."""
    return MultiPeek(iterable)