import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arraykit.strings import check_inclusion, reverse_words

lower = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", max_size=12)
word = st.text(alphabet="abcdefghij", min_size=1, max_size=6)


@given(lower, lower, lower, st.randoms())
def test_shuffled_substring_is_found(prefix, s1, suffix, rnd):
    letters = list(s1)
    rnd.shuffle(letters)
    s2 = prefix + "".join(letters) + suffix
    if s2:
        assert check_inclusion(s1, s2) is True


@given(lower, lower)
def test_missing_letter_means_no_inclusion(s1, s2):
    s2_clean = s2.replace("z", "")
    assert check_inclusion(s1 + "z", s2_clean) is False


def test_empty_text_never_matches():
    assert check_inclusion("", "") is False
    assert check_inclusion("ab", "") is False


def test_empty_pattern_matches_nonempty_text():
    assert check_inclusion("", "abc") is True


def test_same_string_included():
    rnd = random.Random(3)
    letters = list("permutation")
    rnd.shuffle(letters)
    assert check_inclusion("".join(letters), "xxpermutationyy") is True


@pytest.mark.parametrize("s1, s2", [("Ab", "ab"), ("ab", "a b"), ("a1", "a1")])
def test_non_lowercase_rejected(s1, s2):
    with pytest.raises(ValueError):
        check_inclusion(s1, s2)


def test_reverse_words_basic():
    assert reverse_words("the sky is blue") == "blue is sky the"


def test_reverse_words_collapses_spaces():
    assert reverse_words("  hello   world  ") == "world hello"


@given(st.lists(word, min_size=1, max_size=8))
def test_reverse_words_round_trip(words):
    text = "  ".join(words)
    assert reverse_words(reverse_words(text)) == " ".join(words)


@given(st.lists(word, min_size=1, max_size=8))
def test_reverse_words_order(words):
    assert reverse_words(" ".join(words)).split(" ") == words[::-1]


@pytest.mark.parametrize("text", ["", " ", "    "])
def test_reverse_words_without_words_raises(text):
    with pytest.raises(ValueError):
        reverse_words(text)