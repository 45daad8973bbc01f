"""An iterator that can peek at any item ahead without advancing."""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Any, Callable, Deque, Iterable

from iteradapt.peeking import PeekingNext
from iteradapt.size_hint import SizeHint, add_scalar, of

_EMPTY = object()


class PeekNth(PeekingNext):
    """Like :class:`Peekable`, with ``peek_nth`` to look ``n`` items ahead.

    Repeated peeks return the same item until ``next`` is called.
    """

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter = iter(iterable)
        self._buf: Deque[Any] = deque()

    def __iter__(self) -> "PeekNth":
        return self

    def __next__(self) -> Any:
        if self._buf:
            return self._buf.popleft()
        return next(self._iter)

    def peek(self, default: Any = None) -> Any:
        """Return the next item without advancing, or ``default`` at the end."""
        return self.peek_nth(0, default)

    def peek_nth(self, n: int, default: Any = None) -> Any:
        """Return the item ``n`` places ahead, or ``default`` past the end."""
        if n < 0:
            raise ValueError("n must not be negative")
        missing = n + 1 - len(self._buf)
        if missing > 0:
            self._buf.extend(islice(self._iter, missing))
        return self._buf[n] if n < len(self._buf) else default

    def peeking_next(self, accept: Callable[[Any], bool]) -> Any:
        """Return the next item if ``accept`` takes it, else raise StopIteration."""
        item = self.peek(_EMPTY)
        if item is _EMPTY or not accept(item):
            raise StopIteration
        return next(self)

    def size_hint(self) -> SizeHint:
        return add_scalar(of(self._iter), len(self._buf))


def peek_nth(iterable: Iterable[Any]) -> PeekNth:
    """Wrap ``iterable`` so that any item ahead can be peeked."""
    return PeekNth(iterable)