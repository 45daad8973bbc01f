import pytest
from hypothesis import given
from hypothesis import strategies as st

from iteradapt.zip_eq import LengthMismatchError, zip_eq


@given(st.lists(st.integers()))
def test_equal_lengths_match_zip(xs):
    ys = [str(x) for x in xs]
    assert list(zip_eq(xs, ys)) == list(zip(xs, ys))


def test_documented_example_neighbours():
    data = [1, 2, 3, 4, 5]
    assert list(zip_eq(data[:-1], data[1:])) == list(zip(data[:-1], data[1:]))


@given(st.lists(st.integers()), st.integers(min_value=1, max_value=5))
def test_mismatch_raises_after_common_prefix(xs, extra):
    longer = xs + [0] * extra
    it = zip_eq(xs, longer)
    for pair in zip(xs, longer):
        assert next(it) == pair
    with pytest.raises(LengthMismatchError):
        next(it)


def test_mismatch_either_side():
    with pytest.raises(LengthMismatchError):
        list(zip_eq([1, 2], [1]))
    with pytest.raises(ValueError):
        list(zip_eq([1], [1, 2]))


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_size_hint_is_minimum(a, b):
    shortest = min(len(a), len(b))
    assert zip_eq(a, b).size_hint() == (shortest, shortest)


def test_size_hint_with_generator_keeps_known_upper():
    low, high = zip_eq((x for x in "ab"), "ab").size_hint()
    assert low == 0
    assert high == len("ab")