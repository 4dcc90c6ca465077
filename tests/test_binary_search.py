# tests/test_binary_search.py
import random

import pytest

from weighted_autocomplete.core import (
    NOT_FOUND,
    InvalidArgument,
    Term,
    by_prefix_order,
    first_index_of,
    last_index_of,
)


def int_cmp(a, b):
    return (a > b) - (a < b)


def by_tens(a, b):
    # equal when in the same decade
    return int_cmp(a // 10, b // 10)


@pytest.mark.parametrize(
    "seq, key, first, last",
    [
        ([1, 2, 2, 2, 3], 2, 1, 3),
        ([2, 2, 2], 2, 0, 2),
        ([1, 2, 3], 1, 0, 0),
        ([1, 2, 3], 3, 2, 2),
        ([5], 5, 0, 0),
        ([1, 1, 1, 1, 1, 1, 1, 2], 1, 0, 6),
        ([0, 2, 2, 2, 2, 2, 2, 2], 2, 1, 7),
    ],
)
def test_bounds_of_equal_run(seq, key, first, last):
    assert first_index_of(seq, key, int_cmp) == first
    assert last_index_of(seq, key, int_cmp) == last


@pytest.mark.parametrize("key", [0, 4, 10])
def test_missing_key(key):
    seq = [1, 3, 5, 7, 9]
    assert first_index_of(seq, key, int_cmp) == NOT_FOUND
    assert last_index_of(seq, key, int_cmp) == NOT_FOUND


def test_empty_sequence_is_not_found():
    assert first_index_of([], 1, int_cmp) == -1
    assert last_index_of((), 1, int_cmp) == -1


@pytest.mark.parametrize("args", [(None, 1, int_cmp), ([1], None, int_cmp), ([1], 1, None)])
def test_missing_arguments(args):
    with pytest.raises(InvalidArgument):
        first_index_of(*args)
    with pytest.raises(InvalidArgument):
        last_index_of(*args)


def test_uses_comparator_not_natural_order():
    seq = [3, 7, 12, 15, 19, 25]
    assert first_index_of(seq, 10, by_tens) == 2
    assert last_index_of(seq, 10, by_tens) == 4
    assert first_index_of(seq, 40, by_tens) == NOT_FOUND


def test_descending_comparator():
    seq = [9, 7, 7, 7, 1]
    desc = lambda a, b: int_cmp(b, a)  # noqa: E731
    assert first_index_of(seq, 7, desc) == 1
    assert last_index_of(seq, 7, desc) == 3


def test_prefix_ranges_over_terms():
    terms = [Term(w, 0) for w in ["ant", "bat", "bee", "beer", "bell", "cow"]]
    key = Term("be", 0)
    cmp = by_prefix_order(2)
    assert first_index_of(terms, key, cmp) == 2
    assert last_index_of(terms, key, cmp) == 4


def test_randomised_runs_match_linear_scan():
    rng = random.Random(42)
    for _ in range(200):
        seq = sorted(rng.randint(0, 15) for _ in range(rng.randint(0, 40)))
        key = rng.randint(-1, 16)
        hits = [i for i, v in enumerate(seq) if v == key]
        expected_first = hits[0] if hits else -1
        expected_last = hits[-1] if hits else -1
        assert first_index_of(seq, key, int_cmp) == expected_first
        assert last_index_of(seq, key, int_cmp) == expected_last
