"""Minimal suffix-stripping stemmer shared by indexing and matching."""

from __future__ import annotations

# Checked in order; at most one suffix is removed
_SUFFIXES = ("ing", "ed", "ly")


def stem_word(word: str) -> str:
    """Reduce a word to a crude normal form.

    Lowercases and trims, then strips a single trailing ``s`` (but not
    ``ss``), ``ing``, ``ed`` or ``ly``. Words of three characters or fewer
    are returned unchanged.

    This is a heuristic, not a linguistic stemmer: it over-strips some
    short words and leaves irregular forms alone.

    Examples:
        >>> stem_word("Hands")
        'hand'
        >>> stem_word("glass")
        'glass'
        >>> stem_word("shining")
        'shin'
        >>> stem_word("bus")
        'bus'
    """
    word = word.lower().strip()
    if len(word) <= 3:
        return word

    if word.endswith("s") and not word.endswith("ss"):
        return word[:-1]

    for suffix in _SUFFIXES:
        if word.endswith(suffix):
            return word[: -len(suffix)]

    return word
