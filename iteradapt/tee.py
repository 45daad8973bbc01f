"""Split one iterator into two that both yield every item."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Iterable, Tuple

from iteradapt.size_hint import SizeHint, add_scalar, of


class _TeeBuffer:
    """State shared by the two halves; ``owner`` names the half that reads the backlog."""

    __slots__ = ("backlog", "iterator", "owner")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self.backlog: Deque[Any] = deque()
        self.iterator = iter(iterable)
        self.owner = False


class Tee:
    """One half of a pair of iterators that yield the same items."""

    def __init__(self, buffer: _TeeBuffer, ident: bool) -> None:
        self._buffer = buffer
        self._id = ident

    def __iter__(self) -> "Tee":
        return self

    def __next__(self) -> Any:
        buffer = self._buffer
        if buffer.owner == self._id and buffer.backlog:
            return buffer.backlog.popleft()
        item = next(buffer.iterator)
        buffer.backlog.append(item)
        buffer.owner = not self._id
        return item

    def size_hint(self) -> SizeHint:
        buffer = self._buffer
        sh = of(buffer.iterator)
        if buffer.owner == self._id:
            return add_scalar(sh, len(buffer.backlog))
        return sh


def tee(iterable: Iterable[Any]) -> Tuple[Tee, Tee]:
    """Return two iterators that each yield every item of ``iterable``."""
    buffer = _TeeBuffer(iterable)
    return Tee(buffer, True), Tee(buffer, False)