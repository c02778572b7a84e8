"""Signal/noise character classification and word boundary scanning.

This is the whole tokenizer. Letters, digits and ``/ - + :`` are signal,
everything else is noise. A word is a maximal run of signal characters;
grammar rules slice the subject string using the offsets returned here.
"""

from __future__ import annotations

from typing import Tuple

SIGNAL_PUNCTUATION = frozenset("/-+:")


def is_signal(ch: str) -> bool:
    """Return True for characters that can be part of a date word."""
    return ch.isalpha() or ch.isdecimal() or ch in SIGNAL_PUNCTUATION


def find_next_signal(s: str, start: int) -> int:
    """Offset of the first signal character at or after ``start``, else ``len(s)``."""
    for i in range(start, len(s)):
        if is_signal(s[i]):
            return i
    return len(s)


def find_next_noise(s: str, start: int) -> int:
    """Offset of the first noise character at or after ``start``, else ``len(s)``."""
    for i in range(start, len(s)):
        if not is_signal(s[i]):
            return i
    return len(s)


def find_signal_noise(s: str, start: int) -> Tuple[int, int, str]:
    """Locate the next word after ``start``.

    Returns:
        ``(word_start, word_end, lowercased_word)``. At the end of the string
        both offsets are ``len(s)`` and the word is empty.
    """
    word_start = find_next_signal(s, start)
    word_end = find_next_noise(s, word_start)
    return word_start, word_end, s[word_start:word_end].lower()


def is_word_start(s: str, pos: int) -> bool:
    """True if a word begins at ``pos``."""
    if pos >= len(s) or not is_signal(s[pos]):
        return False
    return pos == 0 or not is_signal(s[pos - 1])
