"""An iterator handle that can be cloned, all clones sharing one iterator."""

from __future__ import annotations

from typing import Any, Iterable

from iteradapt.size_hint import SizeHint, of


class _Shared:
    __slots__ = ("iterator", "busy")

    def __init__(self, iterable: Iterable[Any]) -> None:
        self.iterator = iter(iterable)
        self.busy = False


class RcIter:
    """A handle on a shared iterator; every clone advances the same iterator."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._shared = _Shared(iterable)

    def __iter__(self) -> "RcIter":
        return self

    def __next__(self) -> Any:
        shared = self._shared
        if shared.busy:
            raise RuntimeError("shared iterator re-entered while advancing")
        shared.busy = True
        try:
            return next(shared.iterator)
        finally:
            shared.busy = False

    def clone(self) -> "RcIter":
        """Return another handle on the same underlying iterator."""
        twin = RcIter.__new__(RcIter)
        twin._shared = self._shared
        return twin

    __copy__ = clone

    def size_hint(self) -> SizeHint:
        # Other handles may drain items at any time, so no lower bound holds.
        return 0, of(self._shared.iterator)[1]


def rciter(iterable: Iterable[Any]) -> RcIter:
    """Wrap ``iterable`` in a cloneable, shared iterator handle."""
    return RcIter(iterable)