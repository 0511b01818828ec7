"""Keyword normalization shared by the indexer and the CLI.

Both sides must normalize words identically, otherwise a query word would
never match the keyword it was indexed under.
"""

from __future__ import annotations

from collections.abc import Iterable

PUNCTUATION = frozenset(".,?:;!")


def get_keyword(word: str | None, noise_words: frozenset[str] = frozenset()) -> str | None:
    """Lowercase → strip trailing punctuation → require letters only → drop noise words.

    Returns None when the word is not a keyword.
    """
    if not word:
        return None

    word = word.lower()
    end = len(word)
    while end > 0 and word[end - 1] in PUNCTUATION:
        end -= 1
    word = word[:end]

    if not word or not word.isalpha():
        return None
    if word in noise_words:
        return None
    return word


def normalize_noise_words(words: Iterable[str]) -> frozenset[str]:
    return frozenset(w.strip().lower() for w in words if w.strip())
