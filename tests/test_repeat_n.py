import pytest

from iteradapt.repeat_n import repeat_n


def test_repeatn():
    s = "α"
    it = repeat_n(s, 3)
    assert len(it) == 3
    assert next(it) == s
    assert next(it) == s
    assert next(it) == s
    assert next(it, None) is None
    assert next(it, None) is None


@pytest.mark.parametrize("n", range(10))
def test_drain_yields_element_n_times(n):
    element = object()
    items = list(repeat_n(element, n))
    assert len(items) == n
    assert all(item is element for item in items)


def test_size_hint_tracks_remaining():
    it = repeat_n("x", 2)
    assert it.size_hint() == (2, 2)
    next(it)
    assert it.size_hint() == (1, 1)
    assert len(it) == 1
    next(it)
    assert it.size_hint() == (0, 0)


def test_negative_count():
    with pytest.raises(ValueError):
        repeat_n("x", -1)