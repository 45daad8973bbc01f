import pytest
from hypothesis import given, strategies as st

from iteradapt.tuples import circular_tuple_windows, tuple_windows, tuples


def test_tuples_doc_example():
    it = tuples(range(5), 3)
    assert next(it) == (0, 1, 2)
    with pytest.raises(StopIteration):
        next(it)
    assert list(it.into_buffer()) == [3, 4]


def test_tuple_buffer_length_shrinks():
    it = tuples(range(5), 3)
    list(it)
    buffer = it.into_buffer()
    assert len(buffer) == 2
    assert next(buffer) == 3
    assert len(buffer) == len([4])


@given(st.lists(st.integers()), st.integers(min_value=1, max_value=12))
def test_tuples_round_trip(data, n):
    it = tuples(data, n)
    groups = list(it)
    assert all(len(g) == n for g in groups)
    leftover = list(it.into_buffer())
    assert len(leftover) < n
    assert [x for g in groups for x in g] + leftover == data


@pytest.mark.parametrize("factory", [tuples, tuple_windows, circular_tuple_windows])
def test_size_must_be_positive(factory):
    with pytest.raises(ValueError):
        factory([1, 2, 3], 0)


@given(st.lists(st.integers(), min_size=1), st.integers(min_value=2, max_value=6))
def test_tuple_windows_invariants(data, n):
    windows = list(tuple_windows(data, n))
    assert len(windows) == max(len(data) - n + 1, 0)
    for a, b in zip(windows, windows[1:]):
        assert a[1:] == b[:-1]
    if windows:
        assert windows[0] == tuple(data[:n])
        assert windows[-1] == tuple(data[-n:])


def test_tuple_windows_of_one():
    data = ["a", "b", "c"]
    windows = list(tuple_windows(data, 1))
    assert [w[0] for w in windows] == data
    assert all(len(w) == 1 for w in windows)


def test_tuple_windows_too_short():
    assert list(tuple_windows([1, 2], 3)) == []
    assert list(tuple_windows([], 2)) == []


def test_circular_windows_wrap_around():
    data = list("abcd")
    windows = list(circular_tuple_windows(data, 2))
    assert len(windows) == len(data)
    assert [w[0] for w in windows] == data
    for i, w in enumerate(windows):
        assert w[1:] == windows[(i + 1) % len(windows)][:-1]


def test_circular_windows_short_and_empty():
    assert list(circular_tuple_windows([7], 3)) == [(7, 7, 7)]
    assert list(circular_tuple_windows([], 3)) == []