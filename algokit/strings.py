"""String problems: anagrams, pangrams, word counts and unique characters."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` uses exactly the same letters as ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def is_pangram(sentence: str) -> bool:
    """Whether every lower-case English letter appears in ``sentence``."""
    return set(string.ascii_lowercase) <= set(sentence)


def most_words_found(sentences: Iterable[str]) -> int:
    """Most space-separated words in any one sentence; 0 for no sentences."""
    return max((sentence.count(" ") + 1 for sentence in sentences), default=0)


def first_unique_char(s: str) -> int:
    """Index of the first character that occurs once, or -1."""
    counts = Counter(s)
    return next((index for index, char in enumerate(s) if counts[char] == 1), -1)