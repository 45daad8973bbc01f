"""An iterator yielding one element a fixed number of times."""

from __future__ import annotations

from typing import Any

from iteradapt.size_hint import SizeHint


class RepeatN:
    """Yield ``element`` ``n`` times, dropping the reference after the last one."""

    def __init__(self, element: Any, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._element = element if n else None
        self._n = n

    def __iter__(self) -> "RepeatN":
        return self

    def __next__(self) -> Any:
        if self._n == 0:
            raise StopIteration
        self._n -= 1
        element = self._element
        if self._n == 0:
            self._element = None
        return element

    def __len__(self) -> int:
        return self._n

    def size_hint(self) -> SizeHint:
        return self._n, self._n


def repeat_n(element: Any, n: int) -> RepeatN:
    """Iterate over ``element`` ``n`` times."""
    return RepeatN(element, n)