"""English to Enochian translation orchestrator.

A single forward pass per call:

    EMPTY -> PHRASE_CHECK -> TOKENIZE -> PHRASE_SCAN -> WORD_RESOLVE -> ASSEMBLE

- EMPTY: blank input returns an empty result
- PHRASE_CHECK: the whole input may match one lexicon phrase
- TOKENIZE: whitespace runs collapse, empty tokens are dropped
- PHRASE_SCAN: greedy multi-word phrase detection
- WORD_RESOLVE: remaining tokens go through the word cascade
- ASSEMBLE: target, phonetic and symbol views plus statistics

The translator holds only indices built at construction, so repeated and
concurrent calls never observe each other.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from enochian.config import Settings
from enochian.engine.matcher import MatchMethod, WordMatcher, WordResolution
from enochian.engine.options import TranslationOptions
from enochian.engine.phrases import PhraseMatcher, PhraseToken, PlainToken, Token
from enochian.engine.renderer import Renderer
from enochian.engine.text import normalize_whitespace, split_punctuation, tokenize
from enochian.lexicon.index import LexiconEntry, LexiconIndex
from enochian.lexicon.roots import LetterRoot, RootEntry, RootTable
from enochian.pipeline.schemas import (
    ConstructionDetail,
    TranslationResult,
    TranslationStats,
)

logger = logging.getLogger(__name__)

OptionsLike = Optional[Union[TranslationOptions, Mapping[str, Any]]]


class EnochianTranslator:
    """Translates English text to Enochian.

    Both tables are consumed fully at construction. Empty tables are
    allowed; nearly everything then resolves as missing.
    """

    def __init__(
        self,
        lexicon: Iterable[LexiconEntry],
        roots: Iterable[RootEntry],
        settings: Settings | None = None,
    ):
        self.settings = settings or Settings()
        self.index = LexiconIndex(lexicon)
        self.root_table = RootTable(roots)
        self.phrases = PhraseMatcher(
            self.index,
            threshold=self.settings.phrase_threshold,
            max_window=self.settings.max_phrase_window,
        )
        self.matcher = WordMatcher(self.index, self.root_table, self.settings)
        self.renderer = Renderer(self.root_table)
        logger.debug(
            f"Translator built: {len(self.index)} meanings, "
            f"{len(self.root_table)} roots"
        )

    def translate(self, text: str, options: OptionsLike = None) -> TranslationResult:
        """Translate English text.

        Args:
            text: English input; any whitespace layout
            options: TranslationOptions, a mapping of option names, or None
                for defaults (everything enabled)

        Returns:
            TranslationResult with all three views, statistics and
            per-word explanations

        Raises:
            ValueError: If ``options`` names an unknown option
        """
        return self.assemble(self.resolve(text, options))

    def resolve(self, text: str, options: OptionsLike = None) -> list[WordResolution]:
        """Resolve input into segments without assembling views."""
        opts = TranslationOptions.from_value(options)

        normalized = normalize_whitespace(text)
        if not normalized:
            return []

        tokens = tokenize(normalized)

        if opts.check_phrases:
            whole = self._resolve_whole_input(normalized, len(tokens))
            if whole is not None:
                return [whole]

        if opts.check_phrases:
            stream: list[Token] = self.phrases.detect(tokens)
        else:
            stream = [PlainToken(token) for token in tokens]

        return [self._resolve_token(token, opts) for token in stream]

    def assemble(self, resolutions: list[WordResolution]) -> TranslationResult:
        """Build the result views and tallies from resolved segments.

        Each segment is rendered in place with its own punctuation, so a
        resolved word can never be rewritten inside another one.
        """
        result = TranslationResult()
        if not resolutions:
            return result

        words: list[str] = []
        phonetic: list[str] = []
        symbols: list[str] = []
        stats = TranslationStats()

        for res in resolutions:
            stats.record(res.method, res.token_count)
            stats.total += res.token_count
            words.append(res.text)

            if res.is_passthrough or res.is_missing:
                phonetic.append(res.text)
                symbols.append(res.text)
            else:
                phonetic.append(
                    res.leading
                    + self.renderer.to_phonetic(res.target, res.roots)
                    + res.trailing
                )
                symbols.append(
                    res.leading
                    + self.renderer.to_symbols(res.target, res.roots)
                    + res.trailing
                )
                result.word_analysis[res.target] = self._analysis_for(res)

            if res.strategy == "phrase":
                result.phrase_matches[res.original] = res.target

            result.construction_details[res.original] = ConstructionDetail(
                original=res.original,
                result=res.target,
                method=res.method,
                explanation=res.explanation,
            )

        result.translation_text = " ".join(words)
        result.phonetic_text = " ".join(phonetic)
        result.symbol_text = " ".join(symbols)
        result.stats = stats
        return result

    def analyze_roots(self, word: str) -> list[LetterRoot]:
        """Root entry for every letter of ``word``."""
        return self.root_table.analyze_roots(word)

    def _analysis_for(self, res: WordResolution) -> list[LetterRoot]:
        if res.roots:
            return list(res.roots)
        return self.root_table.analyze_roots(res.target)

    def _resolve_whole_input(self, text: str, token_count: int) -> WordResolution | None:
        leading, core, trailing = split_punctuation(text)
        core = core.strip()
        if not core:
            return None
        # Several tokens only match as a phrase if the core still spans words
        if token_count > 1 and " " not in core:
            return None
        match = self.phrases.match_whole_input(core)
        if match is None:
            return None

        logger.debug(f"Whole input {core!r} matched phrase -> {match.word}")
        return WordResolution(
            original=core,
            target=match.word,
            method=MatchMethod.DIRECT,
            explanation=match.explanation,
            strategy="phrase",
            leading=leading,
            trailing=trailing,
            token_count=token_count,
        )

    def _resolve_token(self, token: Token, options: TranslationOptions) -> WordResolution:
        if isinstance(token, PhraseToken):
            return WordResolution(
                original=token.text,
                target=token.word,
                method=MatchMethod.DIRECT,
                explanation=token.match.explanation,
                strategy="phrase",
                leading=token.leading,
                trailing=token.trailing,
                token_count=token.token_count,
            )
        return self.matcher.resolve(token.text, options)
