import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iteradapt.peeking import Peekable, PeekingNext, peeking_take_while
from iteradapt.put_back_n import put_back_n


class _Countdown(PeekingNext):
    def __init__(self, n):
        self._n = n

    def __next__(self):
        if self._n == 0:
            raise StopIteration
        self._n -= 1
        return self._n + 1

    def peek(self, default=None):
        return self._n if self._n else default


def test_peek_does_not_advance():
    it = Peekable([7, 8, 9])
    assert it.peek() == 7
    assert it.peek() == 7
    assert next(it) == 7
    assert list(it) == [8, 9]


def test_peek_default_on_empty():
    it = Peekable([])
    assert it.peek("none") == "none"
    assert it.peek() is None
    with pytest.raises(StopIteration):
        next(it)


def test_peeking_next_accepts_and_rejects():
    it = Peekable([1, 2])
    assert it.peeking_next(lambda x: x == 1) == 1
    with pytest.raises(StopIteration):
        it.peeking_next(lambda x: x == 1)
    assert next(it) == 2


def test_peeking_next_on_exhausted():
    it = Peekable([])
    with pytest.raises(StopIteration):
        it.peeking_next(lambda x: True)


def test_take_while_leaves_rejected_item():
    it = Peekable([1, 2, 3, 10, 4])
    taker = peeking_take_while(it, lambda x: x < 5)
    assert list(taker) == [1, 2, 3]
    with pytest.raises(StopIteration):
        next(taker)
    assert list(it) == [10, 4]


def test_take_while_with_put_back_n():
    it = put_back_n([1, 2, 3, 10, 4])
    assert list(peeking_take_while(it, lambda x: x < 5)) == [1, 2, 3]
    assert list(it) == [10, 4]


def test_default_peeking_next_uses_peek():
    countdown = _Countdown(3)
    assert list(peeking_take_while(countdown, lambda x: x > 1)) == [3, 2]
    assert list(countdown) == [1]


def test_requires_peeking_next():
    with pytest.raises(TypeError):
        peeking_take_while(iter([1, 2]), bool)


@given(st.lists(st.integers()), st.integers())
def test_take_while_matches_takewhile(xs, limit):
    it = Peekable(xs)
    taken = list(peeking_take_while(it, lambda x: x < limit))
    assert taken == list(itertools.takewhile(lambda x: x < limit, xs))
    assert taken + list(it) == xs