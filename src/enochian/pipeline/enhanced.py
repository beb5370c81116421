"""Root-meaning analysis layered over the translator.

Words the lexicon cannot resolve are described through the meanings of
their letters' roots instead of being left bare:

    "bin" with roots B "Root of Choice: duality, ...", I "Root of Energy",
    N "Root of Desire"  ->  [duality-Root of Energy-Root of Desire]
"""

from __future__ import annotations

from dataclasses import dataclass, field

from enochian.engine.matcher import WordResolution
from enochian.lexicon.roots import RootEntry
from enochian.pipeline.schemas import TranslationResult
from enochian.pipeline.translator import EnochianTranslator, OptionsLike

SOURCE_LEXICON = "lexicon"
SOURCE_ROOT_ANALYSIS = "root-analysis"
SOURCE_SPECIAL_CASE = "special-case"


def primary_root_meaning(root: RootEntry) -> str:
    """First listed meaning of a root description.

    Examples:
        "Root of Time: begin, beginning; new"  -> "begin"
        "Conjunction"                          -> "Conjunction"
    """
    meaning = root.meaning
    if ":" in meaning:
        return meaning.split(":", 1)[1].strip().split(",")[0].strip()
    return meaning


@dataclass
class MeaningAnalysis:
    """How one input word was rendered."""

    english: str
    enochian: str
    source: str
    """lexicon, root-analysis or special-case."""

    details: str | None = None

    def to_dict(self) -> dict:
        return {
            "english": self.english,
            "enochian": self.enochian,
            "source": self.source,
            "details": self.details,
        }


@dataclass
class EnhancedTranslationResult:
    """A translation plus a root-based reading of unresolved words."""

    result: TranslationResult
    root_based_translation: str = ""
    meaning_analysis: list[MeaningAnalysis] = field(default_factory=list)

    @property
    def combined_translation(self) -> str:
        return self.root_based_translation

    def to_dict(self) -> dict:
        data = self.result.to_dict()
        data["root_based_translation"] = self.root_based_translation
        data["combined_translation"] = self.combined_translation
        data["meaning_analysis"] = [m.to_dict() for m in self.meaning_analysis]
        return data


class EnhancedTranslator(EnochianTranslator):
    """Translator that also reads missing words through their letter roots."""

    def translate_enhanced(
        self, text: str, options: OptionsLike = None
    ) -> EnhancedTranslationResult:
        resolutions = self.resolve(text, options)
        result = self.assemble(resolutions)

        words: list[str] = []
        analysis: list[MeaningAnalysis] = []
        for res in resolutions:
            if res.is_passthrough:
                words.append(res.text)
                continue
            rendered, entry = self._analyze(res)
            words.append(rendered)
            analysis.append(entry)

        return EnhancedTranslationResult(
            result=result,
            root_based_translation=" ".join(words),
            meaning_analysis=analysis,
        )

    def analyze_word_by_roots(self, word: str) -> str:
        """Bracketed chain of root meanings, or "" if no letter has a root."""
        meanings = [
            primary_root_meaning(lr.root)
            for lr in self.analyze_roots(word)
            if lr.root is not None
        ]
        meanings = [m for m in meanings if m]
        if not meanings:
            return ""
        return f"[{'-'.join(meanings)}]"

    def _analyze(self, res: WordResolution) -> tuple[str, MeaningAnalysis]:
        english = res.original.lower()

        if not res.is_missing:
            if res.strategy == "letter-name":
                entry = MeaningAnalysis(
                    english=english,
                    enochian=res.target,
                    source=SOURCE_SPECIAL_CASE,
                    details="Single letter rendered as its Enochian letter name",
                )
            else:
                entry = MeaningAnalysis(
                    english=english,
                    enochian=res.target,
                    source=SOURCE_LEXICON,
                    details=res.explanation,
                )
            return res.text, entry

        by_roots = self.analyze_word_by_roots(english)
        if not by_roots:
            return res.text, MeaningAnalysis(
                english=english,
                enochian=res.target,
                source=SOURCE_ROOT_ANALYSIS,
                details="No translation available",
            )

        described = ", ".join(
            f"{lr.letter.upper()} ({lr.root.meaning})"
            for lr in self.analyze_roots(english)
            if lr.root is not None
        )
        return res.leading + by_roots + res.trailing, MeaningAnalysis(
            english=english,
            enochian=by_roots,
            source=SOURCE_ROOT_ANALYSIS,
            details=f"Derived from letter roots: {described}",
        )
