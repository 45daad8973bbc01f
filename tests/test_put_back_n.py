import pytest

from iteradapt.put_back_n import put_back_n


def test_put_back_n():
    xs = [0, 1, 1, 1, 2, 1, 3, 3]
    pb = put_back_n(xs)
    next(pb)
    next(pb)
    pb.put_back(1)
    pb.put_back(0)
    assert list(pb) == xs


def test_doc_example():
    it = put_back_n(range(1, 5))
    next(it)
    it.put_back(1)
    it.put_back(0)
    assert list(it) == list(range(0, 5))


def test_put_back_after_exhaustion():
    it = put_back_n([])
    it.put_back(3)
    assert list(it) == [3]


def test_peeking_next():
    it = put_back_n([1, 2])
    with pytest.raises(StopIteration):
        it.peeking_next(lambda x: x == 2)
    assert it.peeking_next(lambda x: x == 1) == 1
    assert list(it) == [2]
    with pytest.raises(StopIteration):
        it.peeking_next(lambda x: True)


def test_size_hint():
    it = put_back_n([1, 2, 3])
    assert it.size_hint() == (3, 3)
    it.put_back(0)
    assert it.size_hint() == (4, 4)