"""Lexicon and root table indices."""

from enochian.lexicon.index import (
    LexiconEntry,
    LexiconIndex,
    clean_meaning,
    split_meanings,
)
from enochian.lexicon.roots import LetterGlyph, LetterRoot, RootEntry, RootTable
from enochian.lexicon.stemmer import stem_word

__all__ = [
    "LexiconEntry",
    "LexiconIndex",
    "clean_meaning",
    "split_meanings",
    "LetterGlyph",
    "LetterRoot",
    "RootEntry",
    "RootTable",
    "stem_word",
]
