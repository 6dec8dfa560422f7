# tests/test_lexicon.py
import threading
import pytest

from wikisearch.lexicon import TermDictionary


def test_ids_start_at_zero_in_first_seen_order():
    d = TermDictionary()
    assert [d.intern_term(t) for t in ["cat", "dog", "fish"]] == [0, 1, 2]
    assert d.size() == 3


def test_interning_twice_returns_same_id():
    d = TermDictionary()
    first = d.intern_term("cat")
    d.intern_term("dog")
    assert d.intern_term("cat") == first
    assert d.size() == 2, "re-interning must not grow the dictionary"


@pytest.mark.parametrize("terms", [
    ["a", "b", "c"],
    ["cat", "Cat", "CAT"],          # identity is exact string equality
    ["x", "x ", " x"],
    ["", "0", "00"],
])
def test_distinct_terms_get_distinct_ids(terms):
    d = TermDictionary()
    ids = [d.intern_term(t) for t in terms]
    assert len(set(ids)) == len(terms)


def test_reverse_lookup():
    d = TermDictionary()
    for t in ["alpha", "beta"]:
        d.intern_term(t)
    assert d.term_for(1) == "beta"
    assert "alpha" in d and "gamma" not in d
    with pytest.raises(KeyError):
        d.term_for(2)
    with pytest.raises(KeyError):
        d.term_for(-1)


def test_concurrent_first_sight_gets_one_id():
    """Many threads interning the same new terms must agree on each id."""
    d = TermDictionary()
    terms = [f"t{i}" for i in range(200)]
    seen = []
    barrier = threading.Barrier(8)

    def work():
        barrier.wait()
        seen.append({t: d.intern_term(t) for t in terms})

    threads = [threading.Thread(target=work) for _ in range(8)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert all(s == seen[0] for s in seen)
    assert d.size() == len(terms)
    assert sorted(seen[0].values()) == list(range(len(terms)))
