"""Tag each item with whether it is first, in the middle, last or the only one."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Tuple

from iteradapt.size_hint import SizeHint, add_scalar, of

_EMPTY = object()


class Position(Enum):
    """Where an item stands in the sequence."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"
    ONLY = "only"


class WithPosition:
    """Yield ``(position, item)`` pairs, looking one item ahead."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter = iter(iterable)
        self._handled_first = False
        self._peeked: Any = _EMPTY
        self._done = False

    def _pull(self) -> Any:
        if self._peeked is not _EMPTY:
            item, self._peeked = self._peeked, _EMPTY
            return item
        if self._done:
            return _EMPTY
        item = next(self._iter, _EMPTY)
        if item is _EMPTY:
            self._done = True
        return item

    def __iter__(self) -> "WithPosition":
        return self

    def __next__(self) -> Tuple[Position, Any]:
        item = self._pull()
        if item is _EMPTY:
            raise StopIteration
        self._peeked = self._pull()
        more = self._peeked is not _EMPTY
        if not self._handled_first:
            self._handled_first = True
            return (Position.FIRST if more else Position.ONLY), item
        return (Position.MIDDLE if more else Position.LAST), item

    def size_hint(self) -> SizeHint:
        sh = (0, 0) if self._done else of(self._iter)
        return add_scalar(sh, 0 if self._peeked is _EMPTY else 1)


def with_position(iterable: Iterable[Any]) -> WithPosition:
    """Pair each item of ``iterable`` with its :class:`Position`."""
    return WithPosition(iterable)