"""Result schemas for the translation pipeline.

All result objects are built fresh for every call and are JSON-ready
through ``to_dict``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from enochian.engine.matcher import MatchMethod
from enochian.engine.options import TranslationOptions
from enochian.lexicon.roots import LetterRoot


@dataclass
class TranslationStats:
    """Tally of how input tokens were resolved.

    ``direct + partial + constructed + missing == total`` for every
    result; phrase matches count each of their tokens as direct.
    """

    direct: int = 0
    partial: int = 0
    constructed: int = 0
    missing: int = 0
    total: int = 0

    def record(self, method: MatchMethod, count: int = 1) -> None:
        setattr(self, method.value, getattr(self, method.value) + count)

    def to_dict(self) -> dict:
        return {
            "direct": self.direct,
            "partial": self.partial,
            "constructed": self.constructed,
            "missing": self.missing,
            "total": self.total,
        }


@dataclass(frozen=True)
class ConstructionDetail:
    """Why a token or phrase resolved the way it did."""

    original: str
    """Input word or phrase."""

    result: str
    """Enochian output for it."""

    method: MatchMethod
    explanation: str

    def to_dict(self) -> dict:
        return {
            "original": self.original,
            "result": self.result,
            "method": self.method.value,
            "explanation": self.explanation,
        }


@dataclass
class TranslationResult:
    """Complete output of one ``translate`` call."""

    translation_text: str = ""
    """Enochian words, space separated, punctuation preserved."""

    phonetic_text: str = ""
    """Each Enochian word spelled with letter names."""

    symbol_text: str = ""
    """Each Enochian word spelled with glyphs."""

    stats: TranslationStats = field(default_factory=TranslationStats)

    word_analysis: dict[str, list[LetterRoot]] = field(default_factory=dict)
    """Per resolved Enochian word, the root of each letter."""

    construction_details: dict[str, ConstructionDetail] = field(default_factory=dict)
    """Keyed by input word or phrase (outer punctuation removed)."""

    phrase_matches: dict[str, str] = field(default_factory=dict)
    """Input phrase -> Enochian word."""

    def to_dict(self) -> dict:
        return {
            "translation_text": self.translation_text,
            "phonetic_text": self.phonetic_text,
            "symbol_text": self.symbol_text,
            "stats": self.stats.to_dict(),
            "word_analysis": {
                word: [lr.to_dict() for lr in letters]
                for word, letters in self.word_analysis.items()
            },
            "construction_details": {
                key: detail.to_dict()
                for key, detail in self.construction_details.items()
            },
            "phrase_matches": dict(self.phrase_matches),
        }


__all__ = [
    "ConstructionDetail",
    "MatchMethod",
    "TranslationOptions",
    "TranslationResult",
    "TranslationStats",
]
