# tests/test_trie.py
# unit tests for PrefixTrie insert/search/prefix enumeration

import pytest
from word_search.core.trie import PrefixTrie


@pytest.fixture
def trie():
    t = PrefixTrie()
    for w in ["cat", "car", "card", "dog"]:
        t.insert(w)
    return t


def test_search_exact_words(trie):
    assert trie.search("cat")
    assert trie.search("card")
    assert trie.search("dog")


def test_search_prefix_only_is_not_a_word(trie):
    # "ca" exists as a path but was never inserted
    assert not trie.search("ca")
    assert not trie.search("c")


def test_search_missing_path(trie):
    assert not trie.search("cow")
    assert not trie.search("cards")
    assert not trie.search("")


def test_case_sensitive(trie):
    assert not trie.search("Cat")
    assert trie.prefix_matches("C") == []


def test_insert_is_idempotent(trie):
    before = sorted(trie.prefix_matches(""))
    trie.insert("car")
    assert sorted(trie.prefix_matches("")) == before
    assert len(trie) == 4


def test_empty_string_marks_root():
    t = PrefixTrie()
    assert not t.search("")
    t.insert("")
    assert t.search("")
    assert t.prefix_matches("") == [""]
    assert len(t) == 1


def test_prefix_matches_exact_set(trie):
    assert sorted(trie.prefix_matches("ca")) == ["car", "card", "cat"]
    assert sorted(trie.prefix_matches("car")) == ["car", "card"]
    assert trie.prefix_matches("card") == ["card"]


def test_prefix_matches_missing_prefix(trie):
    assert trie.prefix_matches("x") == []
    assert trie.prefix_matches("cardz") == []


def test_prefix_matches_empty_prefix_lists_everything(trie):
    out = trie.prefix_matches("")
    assert len(out) == len(set(out)) == 4
    assert set(out) == {"cat", "car", "card", "dog"}


def test_prefix_matches_is_repeatable(trie):
    assert sorted(trie.prefix_matches("c")) == sorted(trie.prefix_matches("c"))


def test_prefix_matches_does_not_modify(trie):
    trie.prefix_matches("ca")
    assert not trie.search("ca")
    assert len(trie) == 4


def test_is_prefix_and_contains(trie):
    assert trie.is_prefix("do")
    assert trie.is_prefix("dog")
    assert not trie.is_prefix("dogs")
    assert "dog" in trie
    assert "do" not in trie


def test_deep_word_no_recursion_limit():
    t = PrefixTrie()
    word = "a" * 5000
    t.insert(word)
    assert t.search(word)
    assert t.prefix_matches("a" * 10) == [word]
