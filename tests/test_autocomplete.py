# tests/test_autocomplete.py
import random
import string

import pytest

from weighted_autocomplete.core import (
    Autocomplete,
    InvalidArgument,
    PrefixIndex,
    PrefixIndexProtocol,
    Term,
)


@pytest.fixture
def ac(small_corpus):
    return Autocomplete(small_corpus)


def pairs(terms):
    return [(t.text, t.weight) for t in terms]


def test_matching_ranks_by_weight(ac):
    assert pairs(ac.matching("ca")) == [("car", 10), ("cat", 5), ("cats", 1)]
    assert ac.count_matching("ca") == 3


def test_single_match(ac):
    assert ac.matching("do") == [Term("dog", 7)]
    assert ac.count_matching("do") == 1


def test_no_match(ac):
    assert ac.matching("z") == []
    assert ac.count_matching("z") == 0
    assert ac.matching("cab") == []
    assert ac.count_matching("catz") == 0


def test_full_word_prefix(ac):
    assert pairs(ac.matching("cat")) == [("cat", 5), ("cats", 1)]
    assert pairs(ac.matching("cats")) == [("cats", 1)]


def test_prefix_longer_than_every_term(ac):
    assert ac.matching("catsup") == []


def test_empty_prefix_returns_everything_ranked(ac, small_corpus):
    out = ac.matching("")
    assert pairs(out) == [("car", 10), ("dog", 7), ("cat", 5), ("cats", 1)]
    assert ac.count_matching("") == len(small_corpus)


def test_prefix_is_case_sensitive():
    ac = Autocomplete([Term("Apple", 3), Term("apple", 2)])
    assert pairs(ac.matching("A")) == [("Apple", 3)]
    assert pairs(ac.matching("a")) == [("apple", 2)]


def test_empty_text_term():
    ac = Autocomplete([Term("", 4), Term("a", 1)])
    assert pairs(ac.matching("")) == [("", 4), ("a", 1)]
    assert ac.matching("a") == [Term("a", 1)]


def test_duplicates_are_kept():
    ac = Autocomplete([Term("to", 1), Term("to", 9), Term("top", 3)])
    assert pairs(ac.matching("to")) == [("to", 9), ("top", 3), ("to", 1)]
    assert ac.count_matching("to") == 3


def test_fractional_weights_rank_correctly():
    ac = Autocomplete([Term("aa", 0.3), Term("ab", 0.7), Term("ac", 0.5)])
    assert [t.text for t in ac.matching("a")] == ["ab", "ac", "aa"]


def test_empty_corpus():
    ac = Autocomplete([])
    assert len(ac) == 0
    assert ac.matching("") == []
    assert ac.count_matching("x") == 0


def test_build_alias_and_protocol(small_corpus):
    ac = PrefixIndex.build(small_corpus)
    assert isinstance(ac, Autocomplete)
    assert isinstance(ac, PrefixIndexProtocol)
    assert len(ac) == 4


def test_index_is_sorted_and_corpus_copied(small_corpus):
    ac = Autocomplete(small_corpus)
    assert [t.text for t in ac] == ["car", "cat", "cats", "dog"]
    # caller mutating their list does not affect the index
    small_corpus.append(Term("cab", 100))
    small_corpus.reverse()
    assert ac.count_matching("ca") == 3
    assert [t.text for t in ac.terms] == ["car", "cat", "cats", "dog"]


def test_results_do_not_alias_index(ac):
    out = ac.matching("ca")
    out.clear()
    assert ac.count_matching("ca") == 3
    assert len(ac.matching("ca")) == 3
    assert ac.matching("ca") is not ac.matching("ca")


def test_accepts_generator():
    ac = Autocomplete(Term(w, i) for i, w in enumerate(["b", "a", "c"]))
    assert [t.text for t in ac] == ["a", "b", "c"]


def test_invalid_corpus():
    with pytest.raises(InvalidArgument):
        Autocomplete(None)
    with pytest.raises(InvalidArgument):
        Autocomplete([Term("a", 1), None])
    with pytest.raises(InvalidArgument):
        Autocomplete([("a", 1)])


@pytest.mark.parametrize("prefix", [None, 3, b"ca"])
def test_invalid_prefix(ac, prefix):
    with pytest.raises(InvalidArgument):
        ac.matching(prefix)
    with pytest.raises(InvalidArgument):
        ac.count_matching(prefix)


def _random_corpus(rng, n):
    letters = "abcd"
    return [
        Term("".join(rng.choice(letters) for _ in range(rng.randint(0, 5))), rng.randint(0, 50))
        for _ in range(n)
    ]


def test_properties_against_linear_scan():
    rng = random.Random(7)
    for _ in range(50):
        corpus = _random_corpus(rng, rng.randint(0, 60))
        ac = Autocomplete(corpus)
        for _ in range(10):
            prefix = "".join(rng.choice("abcde") for _ in range(rng.randint(0, 3)))
            out = ac.matching(prefix)
            expected = [t for t in corpus if t.text.startswith(prefix)]

            assert ac.count_matching(prefix) == len(out) == len(expected)
            assert all(t.text.startswith(prefix) for t in out)
            assert sorted(out, key=lambda t: (t.text, t.weight)) == sorted(
                expected, key=lambda t: (t.text, t.weight)
            )
            weights = [t.weight for t in out]
            assert weights == sorted(weights, reverse=True)


def test_large_corpus_smoke():
    rng = random.Random(3)
    words = {
        "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(1, 8)))
        for _ in range(5000)
    }
    ac = Autocomplete(Term(w, rng.random()) for w in words)
    expected = sum(1 for w in words if w.startswith("q"))
    assert ac.count_matching("q") == expected
