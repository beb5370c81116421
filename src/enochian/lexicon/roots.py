"""Root table index: Enochian letters, names, glyphs and root meanings."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class RootEntry:
    """One letter of the Enochian alphabet.

    The numeric value is carried for display only; translation never
    reads it.
    """

    letter: str
    """English letter this root corresponds to."""

    name: str
    """Pronounceable Enochian letter name (e.g. "Gon")."""

    numeric_value: int
    """Numerological value."""

    meaning: str
    """Root meaning description (e.g. "Root of Time: begin, beginning")."""

    symbol: str
    """Glyph used for the symbolic rendering."""

    def to_dict(self) -> dict:
        return {
            "letter": self.letter,
            "name": self.name,
            "numeric_value": self.numeric_value,
            "meaning": self.meaning,
            "symbol": self.symbol,
        }


@dataclass(frozen=True)
class LetterGlyph:
    """Name and glyph for a letter."""

    name: str
    symbol: str


@dataclass(frozen=True)
class LetterRoot:
    """A letter of a word paired with its root entry, if any."""

    letter: str
    root: RootEntry | None = None

    def to_dict(self) -> dict:
        return {
            "letter": self.letter,
            "root": self.root.to_dict() if self.root else None,
        }


class RootTable:
    """Letter and name lookups over the root table.

    Exactly one entry per letter is expected; when duplicates exist the
    first entry wins for every lookup.
    """

    def __init__(self, roots: Iterable[RootEntry]):
        self.roots: list[RootEntry] = list(roots)
        self.letter_map: dict[str, LetterGlyph] = {}
        self._by_letter: dict[str, RootEntry] = {}
        self._by_name: dict[str, RootEntry] = {}

        for root in self.roots:
            letter = root.letter.lower().strip()
            if not letter:
                continue
            if letter not in self._by_letter:
                self._by_letter[letter] = root
                self.letter_map[letter] = LetterGlyph(root.name, root.symbol)
            if root.name and root.name not in self._by_name:
                self._by_name[root.name] = root

    def __len__(self) -> int:
        return len(self.roots)

    def find_root_for_letter(self, letter: str) -> RootEntry | None:
        """Case-insensitive lookup of the root for a letter."""
        return self._by_letter.get(letter.lower())

    def find_root_by_name(self, name: str) -> RootEntry | None:
        """Exact lookup of a root by its Enochian name."""
        return self._by_name.get(name)

    def glyph_for(self, letter: str) -> LetterGlyph | None:
        return self.letter_map.get(letter.lower())

    def analyze_roots(self, word: str) -> list[LetterRoot]:
        """Pair every ASCII letter of ``word`` with its root entry.

        Non-letters are dropped; letters without a root get ``root=None``.
        """
        return [
            LetterRoot(letter=char, root=self._by_letter.get(char))
            for char in word.lower()
            if char in string.ascii_lowercase
        ]
