import pytest
from hypothesis import given
from hypothesis import strategies as st

from topselect import slice as top


def _reverse(a, b):
    return (b > a) - (b < a)


def test_slice_max_manual():
    v = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert top.max(v, 5) == [9, 8, 7, 6, 5]


def test_slice_min_manual():
    v = [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert top.min(v, 5) == [0, 1, 2, 3, 4]


def test_max_rearranges_in_place():
    v = [-5, 4, 1, -3, 2]
    assert top.max(v, 3) == [4, 2, 1]
    assert v == [4, 2, 1, -5, -3]


def test_min_example():
    assert top.min([-5, 4, 1, -3, 2], 3) == [-5, -3, 1]


def test_max_by_reversed():
    assert top.max_by([-5, 4, 1, -3, 2], 3, _reverse) == [-5, -3, 1]


def test_min_by_reversed():
    assert top.min_by([-5, 4, 1, -3, 2], 3, _reverse) == [4, 2, 1]


def test_max_by_key_abs():
    assert top.max_by_key([-5, 4, 1, -3, 2], 3, abs) == [-5, 4, -3]


def test_min_by_key_abs():
    assert top.min_by_key([-5, 4, 1, -3, 2], 3, abs) == [1, 2, -3]


def test_max_by_cached_key_abs():
    assert top.max_by_cached_key([-5, 4, 1, -3, 2], 3, abs) == [-5, 4, -3]


def test_min_by_cached_key_abs():
    assert top.min_by_cached_key([-5, 4, 1, -3, 2], 3, abs) == [1, 2, -3]


def test_cached_key_calls_key_once_per_item():
    calls = []

    def key(x):
        calls.append(x)
        return x

    v = [3, 1, 4, 1, 5, 9, 2, 6]
    assert top.max_by_cached_key(v, 3, key) == [9, 6, 5]
    assert sorted(calls) == sorted([3, 1, 4, 1, 5, 9, 2, 6])


def test_min_by_cached_key_is_stable():
    v = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]
    assert top.min_by_cached_key(v, 3, lambda p: p[0]) == [(0, "b"), (0, "d"), (1, "a")]


def test_zero_n_returns_empty_and_leaves_list():
    v = [3, 1, 2]
    assert top.max(v, 0) == []
    assert v == [3, 1, 2]


def test_n_greater_than_len_rejected():
    with pytest.raises(ValueError):
        top.max([1, 2], 3)
    with pytest.raises(ValueError):
        top.min_by_cached_key([1, 2], 3, abs)


def test_negative_n_rejected():
    with pytest.raises(ValueError):
        top.min([1, 2], -1)


@given(st.data())
def test_max_fuzz(data):
    v = data.draw(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1)))
    n = data.draw(st.integers(min_value=0, max_value=len(v)))
    original = list(v)
    result = top.max(v, n)
    assert result == sorted(original, reverse=True)[:n]
    assert v[:n] == result
    assert sorted(v) == sorted(original)


@given(st.data())
def test_max_by_cached_key_fuzz(data):
    v = data.draw(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1)))
    n = data.draw(st.integers(min_value=0, max_value=len(v)))
    original = list(v)
    result = top.max_by_cached_key(v, n, lambda a: a)
    assert result == sorted(original, reverse=True)[:n]
    assert v[:n] == result
    assert sorted(v) == sorted(original)


@given(st.data())
def test_min_by_cached_key_fuzz(data):
    v = data.draw(st.lists(st.integers()))
    n = data.draw(st.integers(min_value=0, max_value=len(v)))
    original = list(v)
    result = top.min_by_cached_key(v, n, lambda a: -a)
    assert result == sorted(original, reverse=True)[:n]
    assert sorted(v) == sorted(original)