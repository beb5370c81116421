"""Pydantic models for API."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class OptionsModel(BaseModel):
    """Translation switches; all enabled by default."""

    fuzzy_matching: bool = Field(True, description="Negation, stem and substring matching")
    plural_handling: bool = Field(True, description="Strip a trailing 's' before lookup")
    root_construction: bool = Field(True, description="Build unknown words from letter roots")
    check_phrases: bool = Field(True, description="Detect multi-word lexicon phrases")
    context_aware: bool = Field(True, description="Accepted for compatibility; no effect")


class TranslateRequest(BaseModel):
    """Text to translate."""

    text: str = Field(..., description="English input")
    options: Optional[OptionsModel] = Field(None, description="Translation switches")


class StatsModel(BaseModel):
    """Resolution tallies; direct + partial + constructed + missing == total."""

    direct: int
    partial: int
    constructed: int
    missing: int
    total: int


class RootModel(BaseModel):
    """One Enochian letter root."""

    letter: str = Field(..., description="English letter")
    name: str = Field(..., description="Enochian letter name")
    numeric_value: int = Field(..., description="Numerological value")
    meaning: str = Field(..., description="Root meaning")
    symbol: str = Field(..., description="Glyph")


class LetterRootModel(BaseModel):
    """A letter paired with its root, if it has one."""

    letter: str
    root: Optional[RootModel] = None


class ConstructionDetailModel(BaseModel):
    """How one word or phrase was resolved."""

    original: str = Field(..., description="Input word or phrase")
    result: str = Field(..., description="Enochian output")
    method: str = Field(..., description="direct, partial, constructed or missing")
    explanation: str = Field(..., description="Human-readable reason")


class TranslateResponse(BaseModel):
    """Full translation result."""

    translation_text: str = Field(..., description="Enochian words")
    phonetic_text: str = Field(..., description="Words spelled with letter names")
    symbol_text: str = Field(..., description="Words spelled with glyphs")
    stats: StatsModel
    word_analysis: Dict[str, List[LetterRootModel]] = Field(
        default_factory=dict, description="Letter roots per Enochian word"
    )
    construction_details: Dict[str, ConstructionDetailModel] = Field(
        default_factory=dict, description="Resolution per input word"
    )
    phrase_matches: Dict[str, str] = Field(
        default_factory=dict, description="Input phrase -> Enochian word"
    )


class MeaningAnalysisModel(BaseModel):
    """Source of one word in the root-based reading."""

    english: str
    enochian: str
    source: str = Field(..., description="lexicon, root-analysis or special-case")
    details: Optional[str] = None


class EnhancedTranslateResponse(TranslateResponse):
    """Translation plus root-meaning reading of unresolved words."""

    root_based_translation: str = Field(..., description="Root-based reading")
    combined_translation: str
    meaning_analysis: List[MeaningAnalysisModel] = Field(default_factory=list)


class AnalyzeResponse(BaseModel):
    """Per-letter roots of a word."""

    word: str
    letters: List[LetterRootModel]
    root_reading: Optional[str] = Field(
        None, description="Bracketed chain of primary root meanings"
    )


class LookupResultModel(BaseModel):
    """One lexicon search hit."""

    word: str = Field(..., description="Enochian word")
    meaning: str = Field(..., description="Matching English meaning")


class LookupResponse(BaseModel):
    """Lexicon search results."""

    query: str
    results: List[LookupResultModel]


class HealthModel(BaseModel):
    """Service health."""

    status: str = Field(..., description="ok or degraded")
    version: str
    lexicon_entries: int = 0
    root_entries: int = 0
    error: Optional[str] = None
