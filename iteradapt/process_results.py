"""Run a function over the success values of an iterable of results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, TypeVar

from iteradapt.size_hint import SizeHint, of

T = TypeVar("T")
E = TypeVar("E")
R = TypeVar("R")

_NO_ERROR = object()


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful result holding ``value``."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed result holding ``error``."""

    error: E


class ResultError(Exception):
    """Raised by :func:`process_results` when the iterable produced an ``Err``."""

    def __init__(self, error: Any) -> None:
        super().__init__(error)
        self.error = error


class ProcessResults:
    """Yield the values of ``Ok`` items, stopping at the first ``Err``."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter = iter(iterable)
        self._error: Any = _NO_ERROR

    def __iter__(self) -> "ProcessResults":
        return self

    def __next__(self) -> Any:
        if self._error is not _NO_ERROR:
            raise StopIteration
        item = next(self._iter)
        if isinstance(item, Ok):
            return item.value
        if isinstance(item, Err):
            self._error = item.error
            raise StopIteration
        raise TypeError(f"expected Ok or Err, got {type(item).__name__}")

    def size_hint(self) -> SizeHint:
        return 0, of(self._iter)[1]

    def fold(self, init: Any, f: Callable[[Any, Any], Any]) -> Any:
        """Fold the remaining values with ``f``, starting from ``init``."""
        acc = init
        for value in self:
            acc = f(acc, value)
        return acc


def process_results(iterable: Iterable[Any], processor: Callable[[ProcessResults], R]) -> R:
    """Call ``processor`` on the ``Ok`` values of ``iterable`` and return its result.

    If an ``Err`` is reached, the values end there and :class:`ResultError`
    carrying that error is raised once ``processor`` returns.
    """
    adapter = ProcessResults(iterable)
    result = processor(adapter)
    if adapter._error is not _NO_ERROR:
        raise ResultError(adapter._error)
    return result