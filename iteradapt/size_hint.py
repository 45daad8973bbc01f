"""Arithmetic on size hints: ``(lower, upper)`` pairs bounding an iterator's length.

Bounds behave like machine-sized unsigned integers: lower bounds saturate at
:data:`USIZE_MAX`, and an upper bound that would overflow becomes ``None``,
meaning "unknown".
"""

from __future__ import annotations

import operator
from typing import Any, Iterable, Optional, Tuple

USIZE_MAX = 2**64 - 1
U32_MAX = 2**32 - 1

SizeHint = Tuple[int, Optional[int]]

_EXACT_ITERATOR_TYPES = frozenset(
    {
        type(iter([])),
        type(iter(())),
        type(iter(range(0))),
        type(iter(range(2**64))),
        type(iter("")),
        type(iter(b"")),
        type(iter(bytearray())),
        type(iter({})),
        type(iter({}.values())),
        type(iter({}.items())),
        type(iter(set())),
        type(reversed([])),
        type(reversed(range(0))),
    }
)


def _saturate(value: int) -> int:
    return min(value, USIZE_MAX)


def _checked(value: int) -> Optional[int]:
    return value if value <= USIZE_MAX else None


def _checked_pow(base: int, exp: int) -> Optional[int]:
    if base <= 1:
        return base**exp
    if exp >= 64:
        return None
    return _checked(base**exp)


def add(a: SizeHint, b: SizeHint) -> SizeHint:
    """Add two size hints."""
    upper = None
    if a[1] is not None and b[1] is not None:
        upper = _checked(a[1] + b[1])
    return _saturate(a[0] + b[0]), upper


def add_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Add ``x`` to both bounds of a size hint."""
    low, hi = sh
    return _saturate(low + x), None if hi is None else _checked(hi + x)


def sub_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Subtract ``x`` from both bounds, saturating at zero."""
    low, hi = sh
    return max(low - x, 0), None if hi is None else max(hi - x, 0)


def mul(a: SizeHint, b: SizeHint) -> SizeHint:
    """Multiply two size hints."""
    low = _saturate(a[0] * b[0])
    if a[1] is not None and b[1] is not None:
        hi = _checked(a[1] * b[1])
    elif a[1] == 0 or b[1] == 0:
        hi = 0
    else:
        hi = None
    return low, hi


def mul_scalar(sh: SizeHint, x: int) -> SizeHint:
    """Multiply both bounds of a size hint by ``x``."""
    low, hi = sh
    return _saturate(low * x), None if hi is None else _checked(hi * x)


def pow_scalar_base(base: int, exp: SizeHint) -> SizeHint:
    """Raise ``base`` to the power given by a size hint."""
    low = _checked_pow(base, min(exp[0], U32_MAX))
    hi = None if exp[1] is None else _checked_pow(base, min(exp[1], U32_MAX))
    return (USIZE_MAX if low is None else low), hi


def max_hint(a: SizeHint, b: SizeHint) -> SizeHint:
    """Bounds of the longer of two iterators."""
    upper = None
    if a[1] is not None and b[1] is not None:
        upper = max(a[1], b[1])
    return max(a[0], b[0]), upper


def min_hint(a: SizeHint, b: SizeHint) -> SizeHint:
    """Bounds of the shorter of two iterators."""
    if a[1] is not None and b[1] is not None:
        upper: Optional[int] = min(a[1], b[1])
    else:
        upper = a[1] if a[1] is not None else b[1]
    return min(a[0], b[0]), upper


def of(iterable: Any) -> SizeHint:
    """Best known size hint for an iterable or iterator."""
    size_hint = getattr(iterable, "size_hint", None)
    if callable(size_hint):
        return size_hint()
    if hasattr(iterable, "__len__"):
        try:
            n = len(iterable)
        except TypeError:
            pass
        else:
            return n, n
    if type(iterable) in _EXACT_ITERATOR_TYPES:
        n = operator.length_hint(iterable)
        return n, n
    return 0, None


def _of_all(iterables: Iterable[Any]) -> list:
    return [of(it) for it in iterables]