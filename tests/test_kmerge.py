import operator

import pytest
from hypothesis import given, strategies as st

from iterheap.kmerge import KMergeBy, kmerge, kmerge_by


class NotLazy(Exception):
    pass


class Panicking:
    def __iter__(self):
        return self

    def __next__(self):
        raise NotLazy("iterator adaptor is not lazy")


small_ints = st.integers(min_value=-(2**15), max_value=2**15 - 1)


def test_doc_example():
    assert list(kmerge([[0, 2, 4], [1, 3, 5], [6, 7]])) == list(range(8))


@given(st.lists(small_ints), st.lists(small_ints), st.lists(small_ints))
def test_equal_kmerge(a, b, c):
    a, b, c = sorted(a), sorted(b), sorted(c)
    merged = sorted(a + b + c)
    assert list(kmerge([a, b, c])) == merged


@given(st.lists(st.lists(small_ints)))
def test_equal_kmerge_2(inputs):
    inputs = [sorted(x) for x in inputs]
    merged = sorted(v for x in inputs for v in x)
    assert list(kmerge(inputs)) == merged


@given(st.lists(st.lists(small_ints)))
def test_equal_kmerge_by_ge(inputs):
    inputs = [sorted(x, reverse=True) for x in inputs]
    merged = sorted((v for x in inputs for v in x), reverse=True)
    assert list(kmerge_by(inputs, operator.ge)) == merged


@given(st.lists(st.lists(small_ints)))
def test_equal_kmerge_by_lt(inputs):
    inputs = [sorted(x) for x in inputs]
    merged = sorted(v for x in inputs for v in x)
    assert list(kmerge_by(inputs, lambda x, y: x < y)) == merged


@given(st.lists(st.lists(small_ints)))
def test_equal_kmerge_by_le(inputs):
    inputs = [sorted(x) for x in inputs]
    merged = sorted(v for x in inputs for v in x)
    assert list(kmerge_by(inputs, lambda x, y: x <= y)) == merged


def test_kmerge_reads_inputs_eagerly():
    with pytest.raises(NotLazy):
        kmerge(Panicking() for _ in range(3))


def test_kmerge_by_reads_inputs_eagerly():
    with pytest.raises(NotLazy):
        kmerge_by((Panicking() for _ in range(3)), lambda _a, _b: True)


def test_outer_iterable_panicking_is_eager():
    with pytest.raises(NotLazy):
        kmerge(Panicking())


def test_empty_inputs():
    assert list(kmerge([])) == []
    assert list(kmerge([[], [], []])) == []


def test_iterator_is_fused_and_self():
    merger = KMergeBy([[1, 3], [2]], operator.lt)
    assert iter(merger) is merger
    assert list(merger) == [1, 2, 3]
    for _ in range(5):
        with pytest.raises(StopIteration):
            next(merger)


def test_merges_lazy_iterators():
    sources = (iter(range(start, 20, 3)) for start in range(3))
    result = list(kmerge(sources))
    assert result == list(range(20))