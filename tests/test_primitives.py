"""Tests for similarity primitives."""

from itertools import product

import pytest

from plagcluster.similarity.primitives import (
    edit_distance,
    jaccard_similarity,
    lcs,
    longest_common_substring,
    normalized_edit_similarity,
    rabin_karp_hash,
    rabin_karp_search,
    shingles,
)


def test_shingles_windows_in_order():
    assert shingles("the cat sat on mat", 3) == ["the cat sat", "cat sat on", "sat on mat"]


def test_shingles_too_short():
    assert shingles("", 3) == []
    assert shingles("two words", 3) == []
    assert shingles("exactly three words", 3) == ["exactly three words"]


def test_shingles_keeps_duplicates():
    assert shingles("a b a b a b", 2) == ["a b", "b a", "a b", "b a", "a b"]


@pytest.mark.parametrize("text", ["", "one", "one two", "a b c d e f g", "  spaced   out\nwords here  "])
@pytest.mark.parametrize("k", [1, 2, 3, 5])
def test_shingle_count(text, k):
    assert len(shingles(text, k)) == max(0, len(text.split()) - k + 1)


def test_shingles_rejects_bad_k():
    with pytest.raises(ValueError):
        shingles("a b c", 0)


def test_jaccard():
    assert jaccard_similarity(["a", "b"], ["b", "c"]) == pytest.approx(1 / 3)
    assert jaccard_similarity(["a", "a", "b"], ["a", "b"]) == 1.0
    assert jaccard_similarity([], []) == 0.0
    assert jaccard_similarity(["a"], []) == 0.0


def test_rabin_karp_hash():
    assert rabin_karp_hash("") == 0
    assert rabin_karp_hash("a") == 97 % 101
    assert rabin_karp_hash("ab") == (97 * 256 + 98) % 101


def test_rabin_karp_search():
    assert rabin_karp_search("abracadabra", "abra") == [0, 7]
    assert rabin_karp_search("aaaa", "aa") == [0, 1, 2]
    assert rabin_karp_search("abc", "abcd") == []
    assert rabin_karp_search("abc", "xyz") == []
    assert rabin_karp_search("abc", "") == [0, 1, 2, 3]


def test_rabin_karp_matches_naive_search():
    # Modulus 101 collides often; every reported offset must be a real match.
    text = "the quick brown fox jumps over the lazy dog then the fox sleeps"
    for pattern in ["the", "fox", "o", "he ", "zzz", "dog then", text]:
        expected = [i for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i)]
        assert rabin_karp_search(text, pattern) == expected


def test_edit_distance_known_values():
    assert edit_distance("kitten", "sitting") == 3
    assert edit_distance("flaw", "lawn") == 2
    assert edit_distance("abc", "abc") == 0
    assert edit_distance("", "abc") == 3
    assert edit_distance("abc", "") == 3
    assert edit_distance("", "") == 0


def test_edit_distance_symmetric_and_triangle():
    words = ["", "a", "ab", "abc", "acb", "kitten", "sitting", "mitten"]
    for a, b in product(words, repeat=2):
        assert edit_distance(a, b) == edit_distance(b, a)
    for a, b, c in product(words, repeat=3):
        assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


def test_normalized_edit_similarity():
    assert normalized_edit_similarity("", "") == 0.0
    assert normalized_edit_similarity("abc", "abc") == 1.0
    assert normalized_edit_similarity("abcd", "abcx") == pytest.approx(0.75)


def test_longest_common_substring():
    assert longest_common_substring("xabcdy", "zabcdw") == "abcd"
    assert longest_common_substring("abc", "xyz") == ""
    assert longest_common_substring("", "abc") == ""
    assert lcs("same text", "same text") == "same text"


def test_lcs_tie_goes_to_first_match():
    assert longest_common_substring("abXcd", "cdYab") == "ab"


def test_lcs_truncates_inputs():
    assert longest_common_substring("abcdef", "abcdef", 3) == "abc"
    # The shared run lies past the cap, so it is not seen.
    assert longest_common_substring("xxxxxshared", "yyyyyshared", 5) == ""


@pytest.mark.parametrize("a,b,cap", [
    ("the cat sat on the mat", "a cat sat on a hat", 100),
    ("the cat sat on the mat", "a cat sat on a hat", 8),
    ("abcabcabc", "cabcab", 4),
    ("", "", 10),
])
def test_lcs_bounds(a, b, cap):
    result = longest_common_substring(a, b, cap)
    assert len(result) <= min(len(a), len(b), cap)
    assert result in a[:cap]
    assert result in b[:cap]
