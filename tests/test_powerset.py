from hypothesis import given, strategies as st

from iteradapt.powerset import powerset


def test_small_sets():
    assert list(powerset(range(0))) == [[]]
    assert list(powerset(range(1))) == [[], [0]]
    assert list(powerset(range(2))) == [[], [0], [1], [0, 1]]
    assert list(powerset(range(3))) == [
        [],
        [0], [1], [2],
        [0, 1], [0, 2], [1, 2],
        [0, 1, 2],
    ]


def test_counts():
    assert sum(1 for _ in powerset(range(4))) == 1 << 4
    assert sum(1 for _ in powerset(range(8))) == 1 << 8
    assert sum(1 for _ in powerset(range(16))) == 1 << 16


def test_size_hint_exact_source():
    ps = powerset(range(3))
    assert ps.size_hint() == (8, 8)
    next(ps)
    assert ps.size_hint() == (7, 7)


def test_size_hint_unknown_source():
    ps = powerset(x for x in [1, 2])
    assert ps.size_hint() == (1, None)


def test_stays_exhausted():
    ps = powerset("ab")
    assert list(ps) == [[], ["a"], ["b"], ["a", "b"]]
    assert next(ps, None) is None
    assert ps.size_hint() == (0, 0)


@given(st.lists(st.integers(), max_size=7))
def test_length_and_sizes_non_decreasing(items):
    subsets = list(powerset(items))
    assert len(subsets) == 2 ** len(items)
    sizes = [len(s) for s in subsets]
    assert sizes == sorted(sizes)


@given(st.integers(0, 6))
def test_size_hint_bounds(n):
    total = 2**n
    ps = powerset(range(n))
    for taken in range(total + 1):
        low, high = ps.size_hint()
        assert low <= total - taken
        assert high is None or total - taken <= high
        next(ps, None)