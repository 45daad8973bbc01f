"""An iterator that accepts any number of items pushed back onto its front."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List

from iteradapt.peeking import PeekingNext
from iteradapt.size_hint import SizeHint, add_scalar, of


class PutBackN(PeekingNext):
    """Yield put-back items first, most recently put back first."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._top: List[Any] = []
        self._iter = iter(iterable)

    def __iter__(self) -> "PutBackN":
        return self

    def __next__(self) -> Any:
        if self._top:
            return self._top.pop()
        return next(self._iter)

    def put_back(self, x: Any) -> None:
        """Put ``x`` in front of the iterator."""
        self._top.append(x)

    def peeking_next(self, accept: Callable[[Any], bool]) -> Any:
        """Return the next item if ``accept`` takes it, else raise StopIteration."""
        item = next(self)
        if not accept(item):
            self.put_back(item)
            raise StopIteration
        return item

    def size_hint(self) -> SizeHint:
        return add_scalar(of(self._iter), len(self._top))


def put_back_n(iterable: Iterable[Any]) -> PutBackN:
    """Wrap ``iterable`` so that items can be put back in front of it."""
    return PutBackN(iterable)