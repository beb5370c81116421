"""Multi-word phrase detection.

Matches runs of input words against multi-word lexicon meanings, either
exactly or by substring containment above a similarity threshold.

The token stream produced by ``PhraseMatcher.detect`` is a tagged variant:
``PlainToken`` for words still to be resolved, ``PhraseToken`` for a run
already resolved to a single Enochian word.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from enochian.engine.text import is_punctuation, split_punctuation
from enochian.lexicon.index import LexiconIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhraseMatch:
    """A phrase resolved to an Enochian word."""

    query: str
    """Lowercase input text that was matched."""

    phrase: str
    """Lexicon phrase key that matched."""

    word: str
    """Enochian word for the phrase."""

    score: float
    """1.0 for exact matches, containment ratio otherwise."""

    exact: bool

    @property
    def explanation(self) -> str:
        if self.exact:
            return f'Exact phrase match: "{self.phrase}" → {self.word}'
        return (
            f'Phrase match: "{self.query}" ~ "{self.phrase}" → {self.word} '
            f"(similarity {self.score:.2f})"
        )


@dataclass(frozen=True)
class PlainToken:
    """An input token not covered by a phrase match."""

    text: str


@dataclass(frozen=True)
class PhraseToken:
    """A run of input tokens resolved as one phrase."""

    text: str
    """Matched input text, outer punctuation removed, original case."""

    word: str
    """Enochian word the phrase resolved to."""

    span: tuple[int, int]
    """Half-open [start, end) range of input token indices."""

    match: PhraseMatch
    leading: str = ""
    trailing: str = ""

    @property
    def token_count(self) -> int:
        return self.span[1] - self.span[0]


Token = Union[PlainToken, PhraseToken]


class PhraseMatcher:
    """Exact and fuzzy matching of input runs against lexicon phrases."""

    def __init__(
        self,
        index: LexiconIndex,
        threshold: float = 0.7,
        max_window: int = 4,
    ):
        self.index = index
        self.threshold = threshold
        self.max_window = max_window
        self._multi_word = index.multi_word_phrases()

    def match(self, text: str) -> PhraseMatch | None:
        """Match ``text`` against the phrase table.

        Exact (case-insensitive) lookup first. Otherwise every multi-word
        phrase is scored by containment: a phrase inside the input scores
        ``len(phrase) / len(input)``, the input inside a phrase scores
        ``len(input) / len(phrase)``. The best score wins, ties going to
        the phrase seen first, and it must exceed the threshold.
        """
        query = text.lower().strip()
        if not query:
            return None

        word = self.index.phrase_map.get(query)
        if word is not None:
            return PhraseMatch(query, query, word, 1.0, exact=True)

        best: tuple[str, str] | None = None
        best_score = 0.0
        for phrase, candidate in self._multi_word:
            if phrase in query:
                score = len(phrase) / len(query)
            elif query in phrase:
                score = len(query) / len(phrase)
            else:
                continue
            if score > best_score:
                best_score = score
                best = (phrase, candidate)

        if best is not None and best_score > self.threshold:
            return PhraseMatch(query, best[0], best[1], best_score, exact=False)
        return None

    def match_whole_input(self, text: str) -> PhraseMatch | None:
        """Phrase match for a whole input.

        Single letters are never phrase matched; they always resolve
        through the letter-name path.
        """
        query = text.strip()
        if len(query) == 1 and query.isalpha():
            return None
        return self.match(query)

    def detect(self, tokens: list[str]) -> list[Token]:
        """Greedy left-to-right phrase segmentation.

        At each position windows are tried from the longest allowed down to
        two tokens; the first accepted match consumes the window. The scan
        never backtracks, so the segmentation is locally greedy rather than
        globally optimal.
        """
        result: list[Token] = []
        i = 0
        while i < len(tokens):
            found = None
            longest = min(self.max_window, len(tokens) - i)
            for size in range(longest, 1, -1):
                found = self._match_window(tokens, i, size)
                if found is not None:
                    break

            if found is None:
                result.append(PlainToken(tokens[i]))
                i += 1
                continue

            logger.debug(
                f"Phrase {found.text!r} at tokens {found.span} -> {found.word}"
            )
            result.append(found)
            i = found.span[1]

        return result

    def _match_window(
        self, tokens: list[str], start: int, size: int
    ) -> PhraseToken | None:
        window = tokens[start : start + size]
        if any(is_punctuation(token) for token in window):
            return None

        leading, text, trailing = split_punctuation(" ".join(window))

        match = self.match(text)
        if match is None:
            return None

        return PhraseToken(
            text=text,
            word=match.word,
            span=(start, start + size),
            match=match,
            leading=leading,
            trailing=trailing,
        )
