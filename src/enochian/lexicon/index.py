"""Lexicon index: English meanings to Enochian words.

Built once from the flat word/meaning list and never mutated afterwards.

Provides:
- LexiconEntry: One Enochian word and its English gloss(es)
- LexiconIndex: meaning, stem and phrase lookups over the entries
- clean_meaning / split_meanings: Shared gloss normalization
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from enochian.lexicon.stemmer import stem_word

_LEADING_DASH = re.compile(r"^-\s*")
_PARENTHETICAL = re.compile(r"\(.*?\)")
_MEANING_SEPARATORS = re.compile(r"[,;]")


@dataclass(frozen=True)
class LexiconEntry:
    """A single lexicon record."""

    word: str
    """Enochian word."""

    meaning: str
    """English gloss; may hold several comma/semicolon separated meanings."""

    def to_dict(self) -> dict:
        return {"word": self.word, "meaning": self.meaning}


def clean_meaning(meaning: str) -> str:
    """Normalize a raw gloss for indexing.

    Lowercases, drops a leading dash, removes parenthetical annotations
    and trims surrounding whitespace.

    Examples:
        >>> clean_meaning("- Truth, true (adj.)")
        'truth, true'
        >>> clean_meaning("(A)")
        ''
    """
    text = meaning.lower()
    text = _LEADING_DASH.sub("", text)
    text = _PARENTHETICAL.sub("", text)
    return text.strip()


def split_meanings(meaning: str) -> list[str]:
    """Clean a raw gloss and split it into individual meanings."""
    parts = _MEANING_SEPARATORS.split(clean_meaning(meaning))
    return [part.strip() for part in parts if part.strip()]


class LexiconIndex:
    """Lookup structures derived from the lexicon.

    All maps are insertion-ordered so that "first match wins" and
    tie-breaking behave the same for identically ordered input.
    """

    def __init__(self, entries: Iterable[LexiconEntry]):
        self.entries: list[LexiconEntry] = list(entries)
        self.meaning_to_word: dict[str, str] = {}
        self.word_to_meanings: dict[str, list[str]] = {}
        self.stem_to_words: dict[str, list[str]] = {}
        self.phrase_map: dict[str, str] = {}

        for entry in self.entries:
            if not entry.word or not entry.meaning:
                continue
            for meaning in split_meanings(entry.meaning):
                self._add_meaning(entry.word, meaning)

    def _add_meaning(self, word: str, meaning: str) -> None:
        # Reassigning an existing key keeps its original position
        self.meaning_to_word[meaning] = word
        self.phrase_map[meaning] = word
        self.word_to_meanings.setdefault(word, []).append(meaning)

        stem = stem_word(meaning)
        if stem and stem != meaning:
            self.stem_to_words.setdefault(stem, []).append(word)

        if " " in meaning:
            for part in meaning.split(" "):
                if len(part) > 2:
                    self.stem_to_words.setdefault(stem_word(part), []).append(word)

    def __len__(self) -> int:
        return len(self.meaning_to_word)

    def lookup(self, meaning: str) -> str | None:
        """Exact lookup of a cleaned, lowercase meaning."""
        return self.meaning_to_word.get(meaning)

    def meanings_for(self, word: str) -> list[str]:
        return list(self.word_to_meanings.get(word, []))

    def words_for_stem(self, stem: str) -> list[str]:
        return list(self.stem_to_words.get(stem, []))

    def multi_word_phrases(self) -> list[tuple[str, str]]:
        """(phrase, word) pairs for every phrase key containing a space."""
        return [(p, w) for p, w in self.phrase_map.items() if " " in p]

    def search(self, term: str, limit: int | None = None) -> list[tuple[str, str]]:
        """Find (word, meaning) pairs whose meaning contains ``term``.

        Exact meaning matches are listed first, then containment matches
        in index order.
        """
        needle = term.lower().strip()
        if not needle:
            return []

        exact = [(w, m) for m, w in self.meaning_to_word.items() if m == needle]
        partial = [
            (w, m)
            for m, w in self.meaning_to_word.items()
            if needle in m and m != needle
        ]
        results = exact + partial
        if limit is not None:
            results = results[:limit]
        return results
