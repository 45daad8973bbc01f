import pytest

from iteradapt.pad_using import pad_using


def _fail(_):
    raise AssertionError("filler must not be called")


def test_pad_empty():
    assert list(pad_using([], 1, lambda _: 1)) == [1]


def test_pad_with_index():
    assert list(pad_using([0, 1, 2], 5, lambda n: n)) == [0, 1, 2, 3, 4]


def test_no_padding_needed():
    assert list(pad_using([0, 1, 2], 1, _fail)) == [0, 1, 2]


def test_exhausted_stays_exhausted():
    it = pad_using([0], 2, lambda n: n)
    assert list(it) == [0, 1]
    assert next(it, None) is None


def test_size_hint():
    it = pad_using([0, 1, 2], 5, lambda n: n)
    assert it.size_hint() == (5, 5)
    for _ in range(4):
        next(it)
    assert it.size_hint() == (1, 1)


def test_negative_minimum():
    with pytest.raises(ValueError):
        pad_using([], -1, lambda n: n)