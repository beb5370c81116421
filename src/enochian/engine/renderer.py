"""Phonetic and symbolic rendering of Enochian words."""

from __future__ import annotations

import re
from typing import Sequence

from enochian.lexicon.roots import LetterRoot, RootTable

# "G-AGIOD": a single negation letter joined to a resolved base word
_NEGATION_COMPOUND = re.compile(r"^([A-Za-z])-(.+)$")


def _is_bracketed(word: str) -> bool:
    return word.startswith("[") and word.endswith("]")


class Renderer:
    """Expands Enochian words into letter names or glyphs."""

    def __init__(self, roots: RootTable):
        self.roots = roots

    def to_phonetic(
        self, word: str, roots: Sequence[LetterRoot] | None = None
    ) -> str:
        """Spell ``word`` with Enochian letter names joined by "-".

        Missing words ("[word]") are returned unchanged. When ``roots`` is
        given (root-constructed words) it is used instead of the word's
        letters, even if the word happens to spell a letter name. Otherwise
        words that are themselves letter names are returned unchanged, and
        negation compounds render their base word prefixed with the negation
        letter's name.

        Examples (with i -> Gon, n -> Drun):
            in     -> Gon-Drun
            Gon    -> Gon
            [word] -> [word]
        """
        if _is_bracketed(word):
            return word
        if roots:
            return "-".join(lr.root.name if lr.root else lr.letter for lr in roots)
        if self.roots.find_root_by_name(word) is not None:
            return word

        compound = self._split_compound(word)
        if compound is not None:
            glyph, rest = compound
            return f"{glyph.name}-{self.to_phonetic(rest)}"

        return "-".join(self._phonetic_char(char) for char in word.lower())

    def to_symbols(
        self, word: str, roots: Sequence[LetterRoot] | None = None
    ) -> str:
        """Spell ``word`` with Enochian glyphs, concatenated."""
        if _is_bracketed(word):
            return word
        if roots:
            return "".join(lr.root.symbol if lr.root else lr.letter for lr in roots)
        root = self.roots.find_root_by_name(word)
        if root is not None:
            return root.symbol

        compound = self._split_compound(word)
        if compound is not None:
            glyph, rest = compound
            return f"{glyph.symbol}-{self.to_symbols(rest)}"

        return "".join(self._symbol_char(char) for char in word.lower())

    def _split_compound(self, word: str):
        match = _NEGATION_COMPOUND.match(word)
        if match is None:
            return None
        glyph = self.roots.glyph_for(match.group(1))
        if glyph is None:
            return None
        return glyph, match.group(2)

    def _phonetic_char(self, char: str) -> str:
        glyph = self.roots.glyph_for(char) if char.isalpha() else None
        return glyph.name if glyph else char

    def _symbol_char(self, char: str) -> str:
        glyph = self.roots.glyph_for(char) if char.isalpha() else None
        return glyph.symbol if glyph else char
