"""Single-word resolution cascade.

Resolves one input token to an Enochian word by trying, in order:

1. Single letter  -> the letter's Enochian name
2. Direct         -> exact lexicon meaning
3. Plural         -> exact lexicon meaning without a trailing "s"
4. Fuzzy          -> negation prefix, stem, then substring containment
5. Construction   -> whole-word second chance, then letter-root construction
6. Missing        -> the core word in [brackets]

The cascade is a plain ordered tuple of strategy methods; the first one
returning a candidate wins.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from enochian.config import Settings
from enochian.engine.options import TranslationOptions
from enochian.engine.text import split_punctuation
from enochian.lexicon.index import LexiconIndex
from enochian.lexicon.roots import LetterRoot, RootTable
from enochian.lexicon.stemmer import stem_word

logger = logging.getLogger(__name__)


class MatchMethod(str, Enum):
    """How a token or phrase was resolved."""

    DIRECT = "direct"
    PARTIAL = "partial"
    CONSTRUCTED = "constructed"
    MISSING = "missing"


@dataclass(frozen=True)
class WordResolution:
    """Outcome of resolving one token (or one phrase).

    ``target`` never carries the token's surrounding punctuation; it is
    kept separately in ``leading`` / ``trailing``.
    """

    original: str
    """Input text with outer punctuation removed, original case."""

    target: str
    """Resolved Enochian word, or "[word]" when missing."""

    method: MatchMethod
    explanation: str
    strategy: str
    """Cascade step that produced the result (e.g. "negation", "stem")."""

    leading: str = ""
    trailing: str = ""
    token_count: int = 1
    roots: Optional[tuple[LetterRoot, ...]] = None
    """Letter roots retained by verbatim root construction."""

    @property
    def text(self) -> str:
        return f"{self.leading}{self.target}{self.trailing}"

    @property
    def is_missing(self) -> bool:
        return self.method is MatchMethod.MISSING

    @property
    def is_passthrough(self) -> bool:
        return self.strategy == "punctuation"


@dataclass(frozen=True)
class _Candidate:
    target: str
    method: MatchMethod
    explanation: str
    strategy: str
    roots: Optional[tuple[LetterRoot, ...]] = None


_Strategy = Callable[[str, TranslationOptions], Optional[_Candidate]]


class WordMatcher:
    """Resolves single tokens against the lexicon and root table."""

    def __init__(
        self,
        index: LexiconIndex,
        roots: RootTable,
        settings: Settings | None = None,
    ):
        self.index = index
        self.roots = roots
        self.settings = settings or Settings()
        self._strategies: tuple[_Strategy, ...] = (
            self._match_single_letter,
            self._match_direct,
            self._match_plural,
            self._match_fuzzy,
            self._match_construction,
        )

    def resolve(
        self, token: str, options: TranslationOptions | None = None
    ) -> WordResolution:
        """Resolve one whitespace-delimited token.

        Punctuation-only tokens pass through unchanged. Otherwise outer
        punctuation is split off, the core is lowercased and run through
        the cascade; the punctuation is re-attached around the result.
        """
        options = options or TranslationOptions()
        leading, core, trailing = split_punctuation(token)

        if not core:
            return WordResolution(
                original=token,
                target=token,
                method=MatchMethod.DIRECT,
                explanation="Punctuation kept as written",
                strategy="punctuation",
            )

        word = core.lower()
        for strategy in self._strategies:
            candidate = strategy(word, options)
            if candidate is not None:
                logger.debug(
                    f"{word!r} -> {candidate.target!r} "
                    f"({candidate.method.value}, {candidate.strategy})"
                )
                return WordResolution(
                    original=core,
                    target=candidate.target,
                    method=candidate.method,
                    explanation=candidate.explanation,
                    strategy=candidate.strategy,
                    leading=leading,
                    trailing=trailing,
                    roots=candidate.roots,
                )

        logger.debug(f"{word!r} -> missing")
        return WordResolution(
            original=core,
            target=f"[{word}]",
            method=MatchMethod.MISSING,
            explanation=f'No lexicon match or root construction for "{word}"',
            strategy="missing",
            leading=leading,
            trailing=trailing,
        )

    # ------------------------------------------------------------------
    # Cascade steps
    # ------------------------------------------------------------------

    def _match_single_letter(
        self, word: str, options: TranslationOptions
    ) -> _Candidate | None:
        if len(word) != 1 or word not in string.ascii_lowercase:
            return None

        root = self.roots.find_root_for_letter(word)
        if root is not None:
            return _Candidate(
                target=root.name,
                method=MatchMethod.DIRECT,
                explanation=(
                    f'Single letter "{word}" rendered as its Enochian '
                    f"letter name {root.name}"
                ),
                strategy="letter-name",
            )

        match = self.index.lookup(word)
        if match is not None:
            return _Candidate(
                target=match,
                method=MatchMethod.DIRECT,
                explanation=f'Direct lexicon match for the letter "{word}"',
                strategy="direct",
            )
        return None

    def _match_direct(
        self, word: str, options: TranslationOptions
    ) -> _Candidate | None:
        match = self.index.lookup(word)
        if match is None:
            return None
        return _Candidate(
            target=match,
            method=MatchMethod.DIRECT,
            explanation=f'Direct lexicon match: "{word}" → {match}',
            strategy="direct",
        )

    def _match_plural(
        self, word: str, options: TranslationOptions
    ) -> _Candidate | None:
        if not options.plural_handling:
            return None
        if not word.endswith("s") or word.endswith("ss"):
            return None

        singular = word[:-1]
        match = self.index.lookup(singular)
        if match is None:
            return None
        return _Candidate(
            target=match,
            method=MatchMethod.DIRECT,
            explanation=f'Plural of "{singular}" → {match}',
            strategy="plural",
        )

    def _match_fuzzy(
        self, word: str, options: TranslationOptions
    ) -> _Candidate | None:
        if not options.fuzzy_matching:
            return None
        # Negation first so that it preempts substring scoring for negated forms
        return (
            self._match_negation(word)
            or self._match_stem(word)
            or self._match_substring(word)
        )

    def _match_negation(self, word: str) -> _Candidate | None:
        for prefix in self.settings.negation_prefixes:
            if not word.startswith(prefix):
                continue
            base = word[len(prefix) :]
            if len(base) < self.settings.min_negation_base:
                continue

            base_target = self._lookup_base(base)
            if base_target is None:
                continue

            marker = self.negation_marker()
            return _Candidate(
                target=f"{marker}-{base_target}",
                method=MatchMethod.PARTIAL,
                explanation=(
                    f'Negation prefix "{prefix}-" on "{base}": '
                    f"{marker}- (negation) + {base_target}"
                ),
                strategy="negation",
            )
        return None

    def _lookup_base(self, base: str) -> str | None:
        match = self.index.lookup(base)
        if match is not None:
            return match
        stemmed = self.index.words_for_stem(stem_word(base))
        return stemmed[0] if stemmed else None

    def negation_marker(self) -> str:
        """Initial of the negation letter's Enochian name (e.g. "G")."""
        letter = self.settings.negation_letter
        root = self.roots.find_root_for_letter(letter)
        if root is not None and root.name:
            return root.name[0].upper()
        return letter.upper()

    def _match_stem(self, word: str) -> _Candidate | None:
        stem = stem_word(word)
        matches = self.index.words_for_stem(stem)
        if not matches:
            return None
        match = matches[0]
        return _Candidate(
            target=match,
            method=MatchMethod.PARTIAL,
            explanation=f'Stem "{stem}" matches lexicon word {match}',
            strategy="stem",
        )

    def _match_substring(self, word: str) -> _Candidate | None:
        best_word: str | None = None
        best_meaning = ""
        best_score = 0.0

        for meaning, candidate in self.index.meaning_to_word.items():
            if self._is_negated_form(word, meaning):
                continue
            if word in meaning:
                score = len(word) / len(meaning)
            elif meaning in word:
                score = len(meaning) / len(word)
            else:
                continue
            if score > best_score:
                best_score = score
                best_word = candidate
                best_meaning = meaning

        if best_word is None or best_score <= self.settings.fuzzy_threshold:
            return None
        return _Candidate(
            target=best_word,
            method=MatchMethod.PARTIAL,
            explanation=(
                f'Partial match: "{word}" ~ "{best_meaning}" → {best_word} '
                f"(similarity {best_score:.2f})"
            ),
            strategy="substring",
        )

    def _is_negated_form(self, word: str, meaning: str) -> bool:
        # "immortal" must never match "mortal" by containment
        return any(word == prefix + meaning for prefix in self.settings.negation_prefixes)

    def _match_construction(
        self, word: str, options: TranslationOptions
    ) -> _Candidate | None:
        if not options.root_construction:
            return None

        # Second chance: the word stands as a whole word inside a meaning
        for meaning, candidate in self.index.meaning_to_word.items():
            if meaning == word or word in meaning.split(" "):
                return _Candidate(
                    target=candidate,
                    method=MatchMethod.DIRECT,
                    explanation=(
                        f'Found "{word}" within lexicon meaning "{meaning}" → '
                        f"{candidate}"
                    ),
                    strategy="whole-word",
                )

        analysis = self.roots.analyze_roots(word)
        if len(analysis) != len(word) or not all(lr.root for lr in analysis):
            return None

        if self.settings.construction_strategy == "initials":
            names = [lr.root.name for lr in analysis]
            return _Candidate(
                target="".join(name[0] for name in names).upper(),
                method=MatchMethod.CONSTRUCTED,
                explanation=(
                    "Constructed from the initials of letter names: "
                    + ", ".join(names)
                ),
                strategy="construction",
            )

        described = ", ".join(
            f"{lr.letter.upper()} ({lr.root.meaning or lr.root.name})"
            for lr in analysis
        )
        return _Candidate(
            target=word.capitalize(),
            method=MatchMethod.CONSTRUCTED,
            explanation=f"Constructed from letter roots: {described}",
            strategy="construction",
            roots=tuple(analysis),
        )
