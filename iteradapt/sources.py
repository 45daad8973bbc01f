"""Iterators that produce items from functions and state, not from another iterator."""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple


class RepeatCall:
    """Call ``function`` with no arguments for every item, forever."""

    def __init__(self, function: Callable[[], Any]) -> None:
        self._function = function

    def __iter__(self) -> "RepeatCall":
        return self

    def __next__(self) -> Any:
        return self._function()


class Unfold:
    """Build items from a state with a step function.

    ``f(state)`` returns ``None`` to end the iteration, or a pair
    ``(item, next_state)``. The current state is available as ``state``.
    """

    def __init__(self, initial_state: Any, f: Callable[[Any], Optional[Tuple[Any, Any]]]) -> None:
        self.state = initial_state
        self._f = f

    def __iter__(self) -> "Unfold":
        return self

    def __next__(self) -> Any:
        step = self._f(self.state)
        if step is None:
            raise StopIteration
        item, self.state = step
        return item


class Iterate:
    """Yield a value, then ``f`` of it, then ``f`` of that, forever."""

    def __init__(self, initial_value: Any, f: Callable[[Any], Any]) -> None:
        self._state = initial_value
        self._f = f

    def __iter__(self) -> "Iterate":
        return self

    def __next__(self) -> Any:
        next_state = self._f(self._state)
        current, self._state = self._state, next_state
        return current


def repeat_call(function: Callable[[], Any]) -> RepeatCall:
    """Iterate over the results of calling ``function`` repeatedly."""
    return RepeatCall(function)


def unfold(initial_state: Any, f: Callable[[Any], Optional[Tuple[Any, Any]]]) -> Unfold:
    """Iterate by stepping ``initial_state`` with ``f`` until it returns ``None``."""
    return Unfold(initial_state, f)


def iterate(initial_value: Any, f: Callable[[Any], Any]) -> Iterate:
    """Iterate over ``initial_value``, ``f(initial_value)``, ``f(f(initial_value))`` and so on."""
    return Iterate(initial_value, f)