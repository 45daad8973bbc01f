from hypothesis import given
from hypothesis import strategies as st

from iteradapt.size_hint import (
    USIZE_MAX,
    add,
    add_scalar,
    max_hint,
    min_hint,
    mul,
    mul_scalar,
    of,
    pow_scalar_base,
    sub_scalar,
)

small = st.integers(min_value=0, max_value=10_000)
hints = st.tuples(small, st.none() | small)


def test_mul_documented_examples():
    assert mul((3, 4), (3, 4)) == (9, 16)
    assert mul((3, 4), (USIZE_MAX, None)) == (USIZE_MAX, None)
    assert mul((3, None), (0, 0)) == (0, 0)


@given(hints, hints)
def test_add_is_commutative(a, b):
    assert add(a, b) == add(b, a)


@given(hints, small)
def test_add_with_unknown_upper_stays_unknown(a, low):
    assert add(a, (low, None))[1] is None


@given(hints, small)
def test_add_scalar_matches_add(sh, x):
    assert add_scalar(sh, x) == add(sh, (x, x))


@given(hints, small)
def test_sub_scalar_undoes_add_scalar(sh, x):
    assert sub_scalar(add_scalar(sh, x), x) == sh


def test_sub_scalar_saturates_at_zero():
    assert sub_scalar((2, 3), 5) == (0, 0)


def test_add_saturates_lower_and_drops_upper():
    assert add((USIZE_MAX, USIZE_MAX), (1, 1)) == (USIZE_MAX, None)


@given(hints, hints)
def test_mul_is_commutative(a, b):
    assert mul(a, b) == mul(b, a)


@given(hints, st.integers(min_value=1, max_value=1000))
def test_mul_scalar_matches_mul(sh, x):
    assert mul_scalar(sh, x) == mul(sh, (x, x))


def test_mul_scalar_overflow_gives_unknown_upper():
    assert mul_scalar((USIZE_MAX, USIZE_MAX), 2) == (USIZE_MAX, None)


@given(st.integers(min_value=0, max_value=63))
def test_pow_of_two(n):
    assert pow_scalar_base(2, (n, n)) == (2**n, 2**n)


def test_pow_overflow():
    assert pow_scalar_base(2, (64, 64)) == (USIZE_MAX, None)
    assert pow_scalar_base(2, (3, None))[1] is None
    assert pow_scalar_base(1, (USIZE_MAX, USIZE_MAX)) == (1, 1)


@given(hints, hints)
def test_max_hint_bounds(a, b):
    low, hi = max_hint(a, b)
    assert low == max(a[0], b[0])
    if a[1] is None or b[1] is None:
        assert hi is None
    else:
        assert hi == max(a[1], b[1])


@given(hints, small)
def test_min_hint_keeps_known_upper(a, upper):
    low, hi = min_hint(a, (0, upper))
    assert low == 0
    if a[1] is None:
        assert hi == upper
    else:
        assert hi == min(a[1], upper)


@given(st.lists(st.integers()))
def test_of_exact_for_lists_and_their_iterators(xs):
    assert of(xs) == (len(xs), len(xs))
    assert of(iter(xs)) == (len(xs), len(xs))


def test_of_generator_is_unknown():
    assert of(x for x in range(3)) == (0, None)


def test_of_uses_size_hint_method():
    class Hinted:
        def size_hint(self):
            return (USIZE_MAX, None)

    assert of(Hinted()) == (USIZE_MAX, None)


def test_of_partially_consumed_iterator():
    it = iter(range(10))
    next(it)
    next(it)
    assert of(it) == (len(range(8)), len(range(8)))