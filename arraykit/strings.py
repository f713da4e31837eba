"""String problems: permutation inclusion and word reversal."""

from __future__ import annotations

from collections import Counter
from string import ascii_lowercase

_ALPHABET = frozenset(ascii_lowercase)


def _check_lowercase(name: str, text: str) -> None:
    bad = set(text) - _ALPHABET
    if bad:
        raise ValueError(
            f"{name} must contain only lowercase ASCII letters, got {sorted(bad)!r}"
        )


def check_inclusion(s1: str, s2: str) -> bool:
    """Return True if some permutation of ``s1`` occurs as a substring of ``s2``.

    Both strings must consist of lowercase ASCII letters. Windows are tried
    starting at each position of ``s2``; an empty ``s2`` never matches.
    """
    _check_lowercase("s1", s1)
    _check_lowercase("s2", s2)
    target = Counter(s1)
    width = len(s1)
    return any(
        Counter(s2[start:start + width]) == target for start in range(len(s2))
    )


def reverse_words(s: str) -> str:
    """Return the space-separated words of ``s`` in reverse order.

    Runs of spaces collapse to one and leading or trailing spaces are dropped.
    Raises ValueError if ``s`` holds no words.
    """
    words = [word for word in s.split(" ") if word]
    if not words:
        raise ValueError("string contains no words")
    return " ".join(reversed(words))